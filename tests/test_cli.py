import io

import pytest

from fastatools.cli import InvalidArgument, main, run_option, usage
from fastatools.sequence import to_dna, to_reverse_complement, to_rna

SAMPLE = [">seq1", "acgt", ">seq2", "ttga"]


class _TrackingLines:
    """Iterable of FASTA lines that records whether it was iterated."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.consumed = False

    def __iter__(self):
        self.consumed = True
        return iter(self._lines)


def test_usage_text():
    text = usage()
    assert text.startswith("USAGE\n\t./FASTAtools option [k]\nDESCRIPTION\n")
    assert "\t\tto the standard output\n" in text
    assert text.endswith("\t\tto the standard output\n")


@pytest.mark.parametrize(
    "option, renderer",
    [("1", to_dna), ("2", to_rna), ("3", to_reverse_complement)],
)
def test_run_option_dispatches(option, renderer):
    assert run_option(option, SAMPLE) == renderer(SAMPLE)


def test_run_option_dna_example():
    assert run_option("1", [">seq", "acgt"]) == ">seq\nACGT"


@pytest.mark.parametrize("option", ["4", "5"])
def test_reserved_options_do_not_consume_lines(option):
    tracker = _TrackingLines([">x"])
    assert run_option(option, tracker) == ""
    assert tracker.consumed is False


def test_tracking_lines_records_consumption():
    tracker = _TrackingLines([">x", "acgt"])
    assert run_option("1", tracker) == ">x\nACGT"
    assert tracker.consumed is True


@pytest.mark.parametrize("option", ["0", "6", "abc", ""])
def test_run_option_rejects_unknown(option):
    with pytest.raises(InvalidArgument):
        run_option(option, SAMPLE)


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == usage()


def test_main_help_takes_precedence_over_argument_count(capsys):
    assert main(["-h", "extra"]) == 0
    assert capsys.readouterr().out == usage()


def test_main_two_arguments_is_invalid(capsys):
    assert main(["1", "3"]) == 84
    assert capsys.readouterr().out == "invalid argument\n"


def test_main_unknown_option(capsys):
    assert main(["9"]) == 84
    assert capsys.readouterr().out == "invalid argument\n"


def test_main_no_arguments(capsys):
    assert main([]) == 84
    assert capsys.readouterr().out == "invalid argument\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(">seq1\nacgt\n>seq2\nttga\n"))
    assert main(["2"]) == 0
    assert capsys.readouterr().out == to_rna(SAMPLE)


def test_main_reserved_option_prints_nothing(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(">seq\nacgt\n"))
    assert main(["4"]) == 0
    assert capsys.readouterr().out == ""