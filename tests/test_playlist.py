import io

from cseskit.playlist import longest_unique_run, main


def test_worked_example():
    assert longest_unique_run([1, 2, 1, 3, 2, 7, 4, 2]) == 5


def test_all_distinct():
    songs = [10, 20, 30, 40, 50]
    assert longest_unique_run(songs) == len(songs)


def test_all_same():
    assert longest_unique_run([4, 4, 4, 4]) == 1


def test_empty_playlist():
    assert longest_unique_run([]) == len([])


def test_bounded_by_distinct_count():
    songs = [3, 1, 3, 2, 2, 1, 5, 3, 1, 4]
    result = longest_unique_run(songs)
    assert 1 <= result <= len(set(songs))


def test_stale_repeat_does_not_shrink_window():
    songs = [1, 2, 2, 3, 1]
    assert longest_unique_run(songs) == len([2, 3, 1])


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("8\n1 2 1 3 2 7 4 2\n"))
    assert main() == 0
    assert capsys.readouterr().out == "5\n"