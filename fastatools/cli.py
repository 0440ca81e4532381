"""Command-line front end for the FASTA conversion tool."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TextIO

from fastatools.sequence import to_dna, to_reverse_complement, to_rna

_USAGE = (
    "USAGE\n"
    "\t./FASTAtools option [k]\n"
    "DESCRIPTION\n"
    "\toption 1: read FASTA from the standard input, write the DNA"
    " sequences to the\n"
    "\t\tstandard output\n"
    "\toption 2: read FASTA from the standard input, write the RNA"
    "A sequences to the\n"
    "\t\tstandard output\n"
    "\toption 3: read FASTA from the standard input, write the"
    " reverse complement\n"
    "\t\tto the standard output\n"
)

_RENDERERS: dict[str, Callable[[Iterable[str]], str]] = {
    "1": to_dna,
    "2": to_rna,
    "3": to_reverse_complement,
}
# Options accepted but producing no output.
_RESERVED = frozenset({"4", "5"})


class InvalidArgument(ValueError):
    """Raised when the command line does not name a known option."""


def usage() -> str:
    """Return the help text."""
    return _USAGE


def run_option(option: str, lines: Iterable[str]) -> str:
    """Render the FASTA lines according to the numbered option.

    The lines are only consumed for options that produce output.
    """
    if option in _RESERVED:
        return ""
    renderer = _RENDERERS.get(option)
    if renderer is None:
        raise InvalidArgument(option)
    return renderer(lines)


def _read_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0].startswith("-h"):
        sys.stdout.write(usage())
        return 0
    try:
        if not args or len(args) == 2:
            raise InvalidArgument(" ".join(args))
        sys.stdout.write(run_option(args[0], _read_lines(sys.stdin)))
    except InvalidArgument:
        sys.stdout.write("invalid argument\n")
        return 84
    return 0


if __name__ == "__main__":
    sys.exit(main())