"""Rendering of FASTA input as DNA, RNA or reverse-complement sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable

_DROPPED = " RD='"
_DROP_TABLE = str.maketrans("", "", _DROPPED)
_COMPLEMENTS = {"A": "T", "G": "C", "T": "A", "C": "G"}


def _ascii_upper(line: str) -> str:
    return "".join(c.upper() if "a" <= c <= "z" else c for c in line)


def clean_sequence(line: str) -> str:
    """Upper-case ASCII letters and drop spaces, 'R', 'D', '=' and quotes."""
    return _ascii_upper(line).translate(_DROP_TABLE)


def complement(base: str) -> str:
    """Return the complementary DNA base; other characters are unchanged."""
    return _COMPLEMENTS.get(base, base)


def _render(lines: Iterable[str], transform: Callable[[str], str]) -> str:
    """Print headers on their own lines and transformed sequence lines joined.

    The line right after a header is always treated as sequence. A blank
    line separates records when the previous record had sequence data.
    """
    out: list[str] = []
    state = 0
    after_header = False
    for line in lines:
        if not after_header and line.startswith(">"):
            if state == 1:
                out.append("\n")
            out.append(line + "\n")
            state += 1
            after_header = True
            continue
        after_header = False
        if line:
            state = 1
        out.append(transform(line))
    return "".join(out)


def _rna(line: str) -> str:
    return clean_sequence(line).replace("T", "U")


def _reverse_complement(line: str) -> str:
    return "".join(complement(base) for base in reversed(clean_sequence(line)))


def to_dna(lines: Iterable[str]) -> str:
    """Render FASTA lines as cleaned DNA sequences."""
    return _render(lines, clean_sequence)


def to_rna(lines: Iterable[str]) -> str:
    """Render FASTA lines as RNA sequences (T becomes U)."""
    return _render(lines, _rna)


def to_reverse_complement(lines: Iterable[str]) -> str:
    """Render FASTA lines with each sequence line reverse-complemented."""
    return _render(lines, _reverse_complement)