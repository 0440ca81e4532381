"""Directory-driven test listing tool."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence

from fastatools.textutil import split_path_words

_USAGE = (
    "USAGE\n"
    "\t./projTester TRD [BFT] [outputFile]\n"
    "DESCRIPTION\n"
    "\tTRD\t       root directory of all the tests\n"
    "\tBFT\t       binary file to be tested\n"
    "\toutputFile     file in which the ressult is printed\n"
)

_ROOT_NAMES = {
    "1": "rootDirectory1",
    "2": "rootDirectory2",
    "3": "rootDirectory3",
}

_INDENT_STEP = 5

_CAT_REPORT = "loneTest: First line$\nSecond line\n"

_BACKUP_REPORT = (
    "[option1] [client] test1: 2 3\n"
    "[option1] killerTest: /dev/random 42\n"
    "[option1] [server] test1: 4 3\n"
    "[option1] [server] test2: 4 12\n"
    "[option2] bigTest: 120004 423455\n"
    "[option2] smallTest: 1 2\n"
    "[rigor] noArg:\n"
    "[rigor] tooManyArgs: arg1 arg2 arg3\n"
    "rootTest: 34 23\n"
)


def usage() -> str:
    """Return the help text."""
    return _USAGE


def title(path: str) -> list[str]:
    """Return a root-directory name for each digit 1, 2 or 3 found in the path."""
    return [_ROOT_NAMES[char] for char in path if char in _ROOT_NAMES]


def _sorted_entries(path: str) -> list[os.DirEntry]:
    try:
        with os.scandir(path) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return []


def _is_listed_dir(entry: os.DirEntry) -> bool:
    return entry.is_dir(follow_symlinks=False) and not entry.name.startswith(".")


def tree_lines(path: str, indent: int = _INDENT_STEP) -> list[str]:
    """List the tree under path, each name prefixed by dashes for its depth.

    Directories whose names start with '.' are skipped along with their
    contents; every other entry is listed in name order.
    """
    lines: list[str] = []
    for entry in _sorted_entries(path):
        if entry.is_dir(follow_symlinks=False):
            if not _is_listed_dir(entry):
                continue
            lines.append("-" * indent + entry.name)
            lines.extend(tree_lines(f"{path}/{entry.name}", indent + _INDENT_STEP))
        else:
            lines.append("-" * indent + entry.name)
    return lines


def _echo_pieces(path: str) -> list[str]:
    pieces: list[str] = []
    for entry in _sorted_entries(path):
        if entry.is_dir(follow_symlinks=False):
            if not _is_listed_dir(entry):
                continue
            pieces.append(f"[{entry.name}] ")
            pieces.extend(_echo_pieces(f"{path}/{entry.name}"))
        else:
            pieces.append(f"{entry.name} :(null)\n")
    return pieces


def echo_lines(path: str) -> list[str]:
    """Return the test report lines for the tree under path.

    Each file gives a line of its own; directory names are written in
    brackets in front of the line that follows them.
    """
    return "".join(_echo_pieces(path)).splitlines(keepends=True)


def cat_report() -> str:
    """Return the report printed for the 'cat' binary."""
    return _CAT_REPORT


def backup_report() -> str:
    """Return the fixed sample report."""
    return _BACKUP_REPORT


def run_ps() -> int:
    """Run ps and wait for it; return its exit status."""
    return subprocess.run(["/bin/ps"], check=False).returncode


def _readable_directory(path: str) -> bool:
    try:
        os.listdir(path)
    except OSError:
        return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stdout.write("ERROR: binary not found\n")
        return 84
    root = args[0]
    if root == "-h":
        sys.stdout.write(usage())
        return 0
    if not _readable_directory(root):
        return 84
    words = split_path_words(root)
    if len(args) == 1:
        output = [line + "\n" for line in title(root)]
        for _ in words:
            output.extend(line + "\n" for line in tree_lines(root, _INDENT_STEP))
        sys.stdout.write("".join(output))
        return 0
    if len(args) == 2 and args[1] == "echo":
        sys.stdout.write("".join("".join(echo_lines(root)) for _ in words))
        return 0
    if len(args) == 2 and args[1] == "cat":
        sys.stdout.write(cat_report())
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())