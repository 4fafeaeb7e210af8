import io

import pytest

from cseskit.repetitions import longest_repetition, main


def test_worked_example():
    assert longest_repetition("ATTCGGGA") == 3


@pytest.mark.parametrize("length", [1, 2, 17, 1000])
def test_single_character_run(length):
    assert longest_repetition("G" * length) == length


def test_alternating_characters():
    assert longest_repetition("ACACACAC") == 1


def test_run_at_end_is_counted():
    text = "ACGT" + "T" * 6
    assert longest_repetition(text) == len("T" * 7)


def test_bounded_by_length():
    text = "AAGGTTTCAAAAG"
    assert 1 <= longest_repetition(text) <= len(text)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ATTCGGGA\n"))
    assert main() == 0
    assert capsys.readouterr().out == "3\n"