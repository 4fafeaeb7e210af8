import io

from cseskit.towers import count_towers, main


def test_worked_example():
    assert count_towers([3, 8, 2, 1, 5]) == 2


def test_strictly_decreasing_is_single_tower():
    assert count_towers([10, 7, 4, 2]) == 1


def test_increasing_needs_tower_per_cube():
    cubes = [1, 2, 3, 4, 5, 6]
    assert count_towers(cubes) == len(cubes)


def test_equal_cubes_cannot_stack():
    cubes = [7] * 5
    assert count_towers(cubes) == len(cubes)


def test_empty_input():
    assert count_towers([]) == len([])


def test_count_bounded_by_cube_count():
    cubes = [5, 1, 9, 3, 3, 8, 2, 7, 6]
    assert 1 <= count_towers(cubes) <= len(cubes)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n3 8 2 1 5\n"))
    assert main() == 0
    assert capsys.readouterr().out == "2\n"