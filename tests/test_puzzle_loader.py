# tests/test_puzzle_loader.py
import pytest

from puzzle_loader import LoaderConfig, PuzzleLoader, load_grid, parse_grid
from sudoku_grid import Grid

TEXT = """\
5 3 . . 7 . . . .
6 . . 1 9 5 . . .
. 9 8 . . . . 6 .
8 . . . 6 . . . 3
4 . . 8 . 3 . . 1
7 . . . 2 . . . 6
. 6 . . . . 2 8 .
. . . 4 1 9 . . 5
. . . . 8 . . 7 9
"""


def test_parse_grid_treats_non_numeric_as_empty(puzzle):
    assert parse_grid(TEXT).to_list() == puzzle


def test_parse_grid_reads_rendered_output(solution):
    grid = Grid(solution)
    assert parse_grid(str(grid)) == grid


def test_parse_grid_ignores_out_of_range_values():
    grid = parse_grid("12 -3 x 4\n")
    assert grid.to_list()[0][:4] == [0, 0, 0, 4]


def test_parse_grid_ignores_extra_rows_and_columns():
    text = "\n".join(" ".join(["1"] * 12) for _ in range(12))
    grid = parse_grid(text)
    assert grid.to_list() == [[1] * 9 for _ in range(9)]


def test_parse_grid_short_input_leaves_cells_empty():
    grid = parse_grid("7\n\n0 0 3")
    assert grid.get((0, 0)) == 7
    assert grid.get((1, 2)) == 3
    assert grid.empty_cells() == 79


def test_load_grid_from_file(tmp_path, puzzle):
    path = tmp_path / "sudoku.txt"
    path.write_text(TEXT, encoding="utf-8")
    assert load_grid(str(path)).to_list() == puzzle


def test_loader_missing_file(tmp_path):
    loader = PuzzleLoader(LoaderConfig(path=str(tmp_path / "nope.txt")))
    with pytest.raises(FileNotFoundError):
        loader.run()


def test_loader_verbose_logs(tmp_path, capsys):
    path = tmp_path / "sudoku.txt"
    path.write_text(TEXT, encoding="utf-8")
    grid = PuzzleLoader(LoaderConfig(path=str(path), verbose=True)).run()
    assert grid.empty_cells() == 51
    assert "51" in capsys.readouterr().out
