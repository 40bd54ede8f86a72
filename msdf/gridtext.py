"""Plain text output of data grids and point meshes, and related helpers."""

import os
from pathlib import Path
from typing import Iterator, List, Sequence, Union

import numpy as np

PathLike = Union[str, "os.PathLike[str]"]


def default_output_name(input_name: str) -> str:
    """Return ``input_name`` with its extension replaced by ``.h5``."""
    root, _ = os.path.splitext(input_name)
    return root + ".h5"


def _fmt(value: float) -> str:
    return f"{float(value):g}"


def grid_text_lines(grid: np.ndarray) -> Iterator[str]:
    """Yield text lines listing each grid index followed by its value.

    For two and three dimensional grids an empty line follows each block
    of constant first index, so the output suits gnuplot.
    """
    data = np.asarray(grid)
    if data.ndim == 1:
        for i, value in enumerate(data):
            yield f"{i} {_fmt(value)}"
    elif data.ndim == 2:
        for i, row in enumerate(data):
            for j, value in enumerate(row):
                yield f"{i} {j} {_fmt(value)}"
            yield ""
    elif data.ndim == 3:
        for i, plane in enumerate(data):
            for j, row in enumerate(plane):
                for k, value in enumerate(row):
                    yield f"{i} {j} {k} {_fmt(value)}"
            yield ""
    else:
        raise ValueError(f"grids of rank {data.ndim} are not supported")


def point_mesh_text_lines(coords: Sequence[np.ndarray]) -> Iterator[str]:
    """Yield one line per point: its index followed by each coordinate."""
    columns: List[np.ndarray] = [np.asarray(c) for c in coords]
    if not columns:
        raise ValueError("a point mesh needs at least one coordinate")
    count = len(columns[0])
    if any(len(c) != count for c in columns):
        raise ValueError("all coordinates of a point mesh must have the same length")
    for i, point in enumerate(zip(*columns)):
        yield " ".join([str(i), *(_fmt(v) for v in point)])


def _write_lines(lines: Iterator[str], path: PathLike) -> None:
    with Path(path).open("w") as output:
        for line in lines:
            output.write(line + "\n")


def write_grid_text(grid: np.ndarray, path: PathLike) -> None:
    """Write a grid to ``path`` in plain text."""
    _write_lines(grid_text_lines(grid), path)


def write_point_mesh_text(coords: Sequence[np.ndarray], path: PathLike) -> None:
    """Write point mesh coordinates to ``path`` in plain text."""
    _write_lines(point_mesh_text_lines(coords), path)


def split_block_names(pattern: str) -> List[str]:
    """Split a comma separated list of block names.

    A single trailing comma does not add an empty name.
    """
    if not pattern:
        return []
    names = pattern.split(",")
    if names[-1] == "":
        names.pop()
    return names


def append_meta(
    meta_path: PathLike, output_name: str, block_name: str, vmin: float, vmax: float
) -> None:
    """Append a line describing a written block to a meta data file."""
    with Path(meta_path).open("a") as meta:
        meta.write(f"{output_name} {block_name} {_fmt(vmin)} {_fmt(vmax)}\n")