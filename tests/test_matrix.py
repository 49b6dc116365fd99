import math

import pytest

from fdfkit.matrix import (
    MIN_ZSCALE,
    ZOOM_STEP,
    Bgr,
    Matrix,
    Point,
    read_matrix,
)


def _heights(matrix):
    return [[point.z for point in row] for row in matrix.pixels]


def test_read_matrix_heights():
    matrix = read_matrix(["0 1 2\n", "3 -4 5\n"], 2, 3)
    assert _heights(matrix) == [[0, 1, 2], [3, -4, 5]]


def test_read_matrix_size():
    matrix = read_matrix(["1 2\n", "3 4\n", "5 6\n"], 3, 2)
    assert (matrix.rows, matrix.columns) == (3, 2)
    assert len(matrix.pixels) == 3
    assert all(len(row) == 2 for row in matrix.pixels)


def test_read_matrix_extra_spaces():
    matrix = read_matrix(["10   20  30\n"], 1, 3)
    assert _heights(matrix) == [[10, 20, 30]]


def test_read_matrix_missing_row():
    with pytest.raises(ValueError):
        read_matrix(["1 2\n"], 2, 2)


def test_new_matrix_is_zeroed():
    matrix = Matrix(2, 2)
    assert matrix.pixels[1][1] == Point(0, 0, 0, Bgr(0, 0, 0))
    assert matrix.pixels[0][0] is not matrix.pixels[1][1]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_zscale_flat_map():
    matrix = read_matrix(["0 0\n", "0 0\n"], 2, 2)
    matrix.set_zscale(400)
    assert matrix.zscale == MIN_ZSCALE


def test_zscale_lower_bound():
    matrix = read_matrix(["0 1000\n", "-5 0\n"], 2, 2)
    matrix.set_zscale(400)
    assert matrix.zscale == ZOOM_STEP


def test_zscale_upper_bound():
    matrix = read_matrix(["0 1\n", "1 0\n"], 2, 2)
    matrix.set_zscale(400)
    assert matrix.zscale == MIN_ZSCALE


def test_zscale_uses_absolute_value():
    positive = read_matrix(["0 100\n"], 1, 2)
    negative = read_matrix(["0 -100\n"], 1, 2)
    positive.set_zscale(400)
    negative.set_zscale(400)
    assert positive.zscale == negative.zscale
    assert ZOOM_STEP <= positive.zscale <= MIN_ZSCALE


def test_zscale_between_bounds():
    matrix = read_matrix(["0 100\n"], 1, 2)
    matrix.set_zscale(400)
    assert matrix.zscale == pytest.approx(1.0)


def test_zoom_limited_by_smaller_side():
    matrix = Matrix(3, 3)
    matrix.set_zoom(200, 100, 10)
    assert matrix.zoom == pytest.approx(4.0)


def test_zoom_symmetric_in_width_and_height():
    wide = Matrix(3, 3)
    tall = Matrix(3, 3)
    wide.set_zoom(200, 100, 10)
    tall.set_zoom(100, 200, 10)
    assert wide.zoom == pytest.approx(tall.zoom)


def test_zoom_single_column_uses_height():
    single = Matrix(1, 3)
    single.set_zoom(5, 100, 10)
    square = Matrix(3, 3)
    square.set_zoom(10_000, 100, 10)
    assert math.isfinite(single.zoom)
    assert single.zoom == pytest.approx(square.zoom)


def test_zoom_grows_with_area():
    small = Matrix(4, 4)
    large = Matrix(4, 4)
    small.set_zoom(300, 300, 10)
    large.set_zoom(600, 600, 10)
    assert large.zoom == pytest.approx(2 * small.zoom)