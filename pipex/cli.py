"""Command line: ``pipex infile cmd1 cmd2 outfile``."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pipex.output import put_endl, put_str
from pipex.pipeline import EXIT_FAILURE, PipexError, run_pipex


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pipeline described by the arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        put_endl("number of arguments must be 5", sys.stderr)
        return EXIT_FAILURE
    infile, first, second, outfile = args
    if not first or not second:
        put_endl("no command given", sys.stderr)
        return EXIT_FAILURE
    try:
        run_pipex(infile, first, second, outfile)
    except PipexError as exc:
        put_str(exc.context, sys.stdout)
        put_str("\t", sys.stdout)
        put_endl(exc.detail, sys.stdout)
        return exc.status
    return 0


if __name__ == "__main__":
    raise SystemExit(main())