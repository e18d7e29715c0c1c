import numpy as np
import pytest

from hodograph_editor import build_frame


@pytest.mark.parametrize("points", [[], [(5, 5)]])
def test_too_few_points_render_nothing(points) -> None:
    frame = build_frame(points, steps=10)
    assert frame.curve.curve is None
    assert frame.curve.control_polygon is None
    assert frame.hodograph.vectors.shape == (0, 2)
    assert frame.hodograph.curve is None


def test_two_points_have_curve_but_no_hodograph_curve() -> None:
    frame = build_frame([(0, 0), (10, 0)], steps=10)
    assert frame.curve.curve.shape == (11, 2)
    np.testing.assert_array_equal(frame.hodograph.vectors, [[10, 0]])
    assert frame.hodograph.curve is None


def test_three_points_render_every_layer() -> None:
    frame = build_frame([(0, 0), (50, 100), (100, 0)], selected_index=2, steps=20)
    assert frame.curve.selected_index == 2
    np.testing.assert_array_equal(frame.curve.control_polygon, [[0, 0], [50, 100], [100, 0]])
    assert frame.hodograph.curve.shape == (21, 2)
    # The hodograph curve runs between its first and last vectors
    np.testing.assert_array_equal(frame.hodograph.curve[0], [50, 100])
    np.testing.assert_array_equal(frame.hodograph.curve[-1], [50, -100])


@pytest.mark.parametrize("selected", [-1, 2, 7])
def test_out_of_range_selection_is_dropped(selected: int) -> None:
    frame = build_frame([(0, 0), (10, 10)], selected_index=selected, steps=5)
    assert frame.curve.selected_index is None


def test_frames_from_unchanged_points_are_identical() -> None:
    points = [(0, 0), (30, 80), (90, 10), (120, 60)]
    first = build_frame(points, steps=200)
    second = build_frame(points, steps=200)
    np.testing.assert_array_equal(first.curve.curve, second.curve.curve)
    np.testing.assert_array_equal(first.hodograph.curve, second.hodograph.curve)
