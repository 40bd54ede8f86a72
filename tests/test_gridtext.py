import numpy as np
import pytest

from msdf.gridtext import (
    append_meta,
    default_output_name,
    grid_text_lines,
    point_mesh_text_lines,
    split_block_names,
    write_grid_text,
    write_point_mesh_text,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("data.sdf", "data.h5"),
        ("dir/run.0001.sdf", "dir/run.0001.h5"),
        ("noext", "noext.h5"),
    ],
)
def test_default_output_name(name, expected):
    assert default_output_name(name) == expected


def test_grid_text_1d():
    lines = list(grid_text_lines(np.array([1.5, 2.0, -0.25])))
    assert lines == ["0 1.5", "1 2", "2 -0.25"]


def test_grid_text_2d_has_blank_after_each_row():
    grid = np.array([[1.0, 2.0], [3.0, 4.0]])
    lines = list(grid_text_lines(grid))
    assert lines == ["0 0 1", "0 1 2", "", "1 0 3", "1 1 4", ""]


def test_grid_text_3d_line_count_and_order():
    grid = np.arange(24, dtype=float).reshape(2, 3, 4)
    lines = list(grid_text_lines(grid))
    assert len(lines) == 24 + 2
    assert lines[0] == "0 0 0 0"
    assert lines[1] == "0 0 1 1"
    assert lines[12] == ""
    assert lines[13] == "1 0 0 12"
    assert lines[-1] == ""


def test_grid_text_rejects_rank_zero_and_four():
    with pytest.raises(ValueError):
        list(grid_text_lines(np.array(1.0)))
    with pytest.raises(ValueError):
        list(grid_text_lines(np.zeros((1, 1, 1, 1))))


def test_point_mesh_lines():
    xs = np.array([0.5, 1.5])
    ys = np.array([2.0, 3.0])
    assert list(point_mesh_text_lines([xs, ys])) == ["0 0.5 2", "1 1.5 3"]


def test_point_mesh_errors():
    with pytest.raises(ValueError):
        list(point_mesh_text_lines([]))
    with pytest.raises(ValueError):
        list(point_mesh_text_lines([np.zeros(2), np.zeros(3)]))


def test_write_grid_text_round_trip(tmp_path):
    grid = np.array([[1.0, 2.0], [3.0, 4.0]])
    path = tmp_path / "out.dat"
    write_grid_text(grid, path)
    text = path.read_text()
    assert text.splitlines() == list(grid_text_lines(grid))
    assert text.endswith("\n")


def test_write_point_mesh_round_trip(tmp_path):
    coords = [np.array([1.0, 2.0, 3.0])]
    path = tmp_path / "points.dat"
    write_point_mesh_text(coords, path)
    rows = [line.split() for line in path.read_text().splitlines()]
    assert [float(r[1]) for r in rows] == [1.0, 2.0, 3.0]
    assert [int(r[0]) for r in rows] == [0, 1, 2]


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("", []),
        ("Electric Field/Ex", ["Electric Field/Ex"]),
        ("a,b,c", ["a", "b", "c"]),
        ("a,", ["a"]),
        ("a,,b", ["a", "", "b"]),
        (",a", ["", "a"]),
    ],
)
def test_split_block_names(pattern, expected):
    assert split_block_names(pattern) == expected


def test_append_meta_appends(tmp_path):
    meta = tmp_path / "meta.txt"
    append_meta(meta, "a.h5", "ex", 0.5, 2.0)
    append_meta(meta, "b.h5", "ey", -1.0, 3.0)
    assert meta.read_text().splitlines() == ["a.h5 ex 0.5 2", "b.h5 ey -1 3"]