import numpy as np
import pytest

from imgsig.errors import InvalidDimensions
from imgsig.features.grid import grid_points
from imgsig.io.models import Bounds


def test_points_divide_span_into_equal_cells():
    points = grid_points(Bounds(lower_x=0, upper_x=100, lower_y=10, upper_y=50), 10)

    assert points.shape == (9, 9, 2)
    assert tuple(points[0, 0]) == (10, 14)
    assert tuple(points[8, 8]) == (90, 46)
    # [gy - 1, gx - 1] for gx=6, gy=3
    assert tuple(points[2, 5]) == (60, 22)


def test_rows_share_y_and_columns_share_x():
    points = grid_points(Bounds(lower_x=5, upper_x=65, lower_y=7, upper_y=37), 6)

    assert (points[:, :, 0] == points[0, :, 0]).all()
    assert (points[:, :, 1] == points[:, 0:1, 1]).all()
    assert points[0, :, 0].tolist() == [15, 25, 35, 45, 55]
    assert points[:, 0, 1].tolist() == [12, 17, 22, 27, 32]


def test_narrow_span_collapses_points():
    points = grid_points(Bounds(lower_x=5, upper_x=9, lower_y=5, upper_y=9), 10)

    assert points.shape == (9, 9, 2)
    assert np.all(points == 5)


def test_grid_size_two_has_one_point():
    points = grid_points(Bounds(lower_x=0, upper_x=40, lower_y=0, upper_y=20), 2)
    assert points.tolist() == [[[20, 10]]]


@pytest.mark.parametrize("grid_size", [1, 0, -3])
def test_grid_size_below_two_raises(grid_size):
    with pytest.raises(InvalidDimensions):
        grid_points(Bounds(lower_x=0, upper_x=40, lower_y=0, upper_y=40), grid_size)
