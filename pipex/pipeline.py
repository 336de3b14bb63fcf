"""Run two commands connected by a pipe, from an input file to an output file."""

from __future__ import annotations

import errno
import os
import subprocess
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import Mapping, Optional

from pipex.strings import split_words

EXIT_FAILURE = 1
_OUT_FLAGS = os.O_CREAT | os.O_RDWR | os.O_TRUNC
_OUT_MODE = 0o644


class PipexError(Exception):
    """A failure that ends the run, with the step that failed and why."""

    def __init__(self, context: str, detail: str, status: int = EXIT_FAILURE) -> None:
        super().__init__(f"{context}\t{detail}")
        self.context = context
        self.detail = detail
        self.status = status


@dataclass(frozen=True)
class Command:
    """A resolved program and the argument list it is started with."""

    path: str
    argv: list[str] = field(default_factory=list)


def find_path(env: Mapping[str, str]) -> str:
    """The search path held in ``PATH``."""
    try:
        return env["PATH"]
    except KeyError:
        raise PipexError("path", "PATH is not set") from None


def find_command(search_path: str, name: str) -> Optional[str]:
    """First ``dir/name`` along ``search_path`` that is readable, or ``None``."""
    for directory in split_words(search_path, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.R_OK):
            return candidate
    return None


def resolve_command(command_line: str, search_path: str) -> Command:
    """Split ``command_line`` on spaces and locate its program."""
    words = split_words(command_line, " ")
    if not words:
        raise PipexError("split", "no command given")
    path = find_command(search_path, words[0])
    if path is None:
        raise PipexError("cmd check", os.strerror(errno.ENOENT))
    return Command(path, words)


def _os_detail(exc: OSError) -> str:
    return exc.strerror or str(exc)


def run_pipex(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> tuple[int, int]:
    """Behave like ``< infile first | second > outfile``.

    The input file is opened first, then the output file is created or
    truncated, then both commands are resolved along ``PATH``. Returns
    the exit statuses of the two commands.
    """
    environment = dict(os.environ if env is None else env)
    with ExitStack() as stack:
        try:
            source = stack.enter_context(open(infile, "rb"))
        except OSError as exc:
            raise PipexError("fd error in", _os_detail(exc)) from exc
        try:
            out_fd = os.open(outfile, _OUT_FLAGS, _OUT_MODE)
        except OSError as exc:
            raise PipexError("fd error out", _os_detail(exc)) from exc
        sink = stack.enter_context(os.fdopen(out_fd, "wb"))

        search_path = find_path(environment)
        cmd1 = resolve_command(first, search_path)
        cmd2 = resolve_command(second, search_path)

        try:
            proc1 = subprocess.Popen(
                cmd1.argv,
                executable=cmd1.path,
                stdin=source,
                stdout=subprocess.PIPE,
                env=environment,
            )
        except OSError as exc:
            raise PipexError("execve", _os_detail(exc)) from exc
        try:
            proc2 = subprocess.Popen(
                cmd2.argv,
                executable=cmd2.path,
                stdin=proc1.stdout,
                stdout=sink,
                env=environment,
            )
        except OSError as exc:
            proc1.kill()
            proc1.wait()
            raise PipexError("execve", _os_detail(exc)) from exc
        finally:
            if proc1.stdout is not None:
                proc1.stdout.close()
        return proc1.wait(), proc2.wait()