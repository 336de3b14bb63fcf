# pipex

`pipex` runs two commands joined by a pipe. The first command reads from
an input file, and the second command writes to an output file. It works
like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

You can also run `python -m pipex.cli` with the same arguments.

The command takes exactly four arguments, and neither command may be an
empty string. Each run follows these steps in order:

1. The input file is opened for reading.
2. The output file is created with mode `0644`. If it already exists, it
   is truncated.
3. Each command is split on spaces into words. Empty words are dropped.
4. The first word of each command is looked up in the directories of
   `PATH`. A command is found at the first `directory/name` that is
   readable.
5. The two programs are started with the pipe between them, and `pipex`
   waits for both.

Example:

```sh
pipex input.txt "grep hello" "wc -l" count.txt
```

### Errors and exit status

| Problem | Message goes to | Exit status |
| --- | --- | --- |
| Wrong number of arguments | standard error: `number of arguments must be 5` | 1 |
| An empty command | standard error: `no command given` | 1 |
| A file cannot be opened, `PATH` is not set, a command cannot be found or a program cannot be started | standard output: the failing step and the reason, separated by a tab (for example `fd error in` or `cmd check`) | 1 |

In every other case the exit status is 0, even if one of the two
commands itself fails.

### Limitations

- There is no shell quoting. `"grep 'a b'"` becomes the three words
  `grep`, `'a` and `b'`.
- Program names are always joined to each `PATH` directory. A path given
  as the program name is not run as it stands.
- Only two commands are supported, with a single pipe between them.
- There is no here-document or append mode for the output file.

## Library use

You can also run the pipeline from Python:

```python
import os
from pipex.pipeline import run_pipex, PipexError

try:
    status1, status2 = run_pipex("input.txt", "grep hello", "wc -l", "count.txt", os.environ)
except PipexError as err:
    print(err.context, err.detail, err.status)
```

`run_pipex` returns the exit statuses of the two commands. If `env` is
omitted, the current environment is used.

`pipex.pipeline` has these other helpers:

- `find_path(env)` returns the value of `PATH`.
- `find_command(search_path, name)` returns the first readable
  `dir/name`, or `None`.
- `resolve_command(command_line, search_path)` returns a `Command` with
  `path` and `argv`.

The package also has smaller modules:

- `pipex.chars`: ASCII character tests (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`), `to_lower`,
  `to_upper` and `has_non_digit`.
- `pipex.numbers`: `parse_int` is lenient and returns 0 or -1 when the
  value is out of range. `parse_int_checked` raises `OverflowError`
  instead. `int_to_str` converts a 32-bit integer to text.
- `pipex.strings`: `split_words`, `count_words`, `substring`,
  `find_bounded`, `find_char`, `rfind_char`, `compare_bounded`,
  `bounded_copy`, `bounded_concat`, `join`, `trim` and `map_indexed`.
- `pipex.memory`: byte-buffer operations (`mem_find`, `mem_compare`,
  `mem_copy`, `mem_move`, `mem_set`, `zero`, `zeroed`).
- `pipex.llist`: `LinkedList`, a singly linked list made of `Node`
  objects.
- `pipex.output`: `put_char`, `put_str`, `put_endl` and `put_number`,
  which write to a text stream.
- `pipex.printf`: `sprintf` and `printf` for `%c %s %d %i %u %x %X %p %%`.
  It also has `format_number_base` and `format_hex`.
- `pipex.lines`: `LineReader` reads a text or binary stream line by
  line, using a fixed read size.

## Running the tests

```sh
pip install ".[test]"
pytest
```