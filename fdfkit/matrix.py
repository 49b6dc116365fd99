"""Height maps: grids of points read from text, with zoom and height scaling."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = [
    "MIN_ZOOM",
    "ZOOM_STEP",
    "MAX_ZOOM",
    "ZOOM_COEFF",
    "MIN_ZSCALE",
    "Bgr",
    "Point",
    "Matrix",
    "read_matrix",
]

MIN_ZOOM = 0.5
ZOOM_STEP = 0.2
MAX_ZOOM = 20.0
ZOOM_COEFF = 0.8
MIN_ZSCALE = 2.0

_LEADING_INT = re.compile(r"[ \t\n\r\v\f]*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _divide(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or nan instead of raising."""
    if denominator:
        return numerator / denominator
    if numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


@dataclass
class Bgr:
    """A colour stored as blue, green and red bytes."""

    blue: int = 0
    green: int = 0
    red: int = 0


@dataclass
class Point:
    """One vertex of the height map."""

    x: int = 0
    y: int = 0
    z: int = 0
    color: Bgr = field(default_factory=Bgr)


@dataclass
class Matrix:
    """A grid of points with the view parameters used to draw it."""

    columns: int
    rows: int
    pixels: list[list[Point]] = field(default_factory=list)
    shift_x: int = 0
    shift_y: int = 0
    rotate_x: float = 0.0
    rotate_y: float = 0.0
    rotate_z: float = 0.0
    zoom: float = 0.0
    zscale: float = 0.0

    def __post_init__(self) -> None:
        if self.columns < 0 or self.rows < 0:
            raise ValueError(f"invalid matrix size {self.columns}x{self.rows}")
        if not self.pixels:
            self.pixels = [
                [Point() for _ in range(self.columns)] for _ in range(self.rows)
            ]

    def set_zoom(self, width: int, height: int, spacing: int) -> None:
        """Fit the grid, laid out with *spacing*, into a width x height area."""
        mat_width = float((self.columns - 1) * spacing)
        mat_height = float((self.rows - 1) * spacing)
        self.zoom = _fmin(_divide(width, mat_width), _divide(height, mat_height))
        self.zoom *= ZOOM_COEFF

    def set_zscale(self, height: int) -> None:
        """Choose a height scale from the largest absolute z value."""
        max_z = max((abs(point.z) for row in self.pixels for point in row), default=0)
        if not max_z:
            self.zscale = MIN_ZSCALE
        else:
            self.zscale = min(MIN_ZSCALE, max(ZOOM_STEP, (height / 4) / max_z))


def _fill_row(line: str, row: list[Point]) -> None:
    rest = line
    for point in row:
        point.z = _atoi(rest)
        rest = rest[len(str(point.z)):].lstrip(" \n")


def read_matrix(lines: Iterable[str], rows: int, columns: int) -> Matrix:
    """Read *rows* lines of *columns* heights each into a new matrix.

    Raises ValueError when the lines run out before all rows are read.
    """
    matrix = Matrix(columns, rows)
    source = iter(lines)
    for index, row in enumerate(matrix.pixels):
        line = next(source, None)
        if line is None:
            raise ValueError(f"expected {rows} rows, got {index}")
        _fill_row(line, row)
    return matrix