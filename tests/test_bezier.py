import numpy as np
import pytest

from scenekit.bezier import BezierCurve

SCENE_POINTS = [
    (-2.0, -1.0, 0.0),
    (-1.0, 2.0, 0.0),
    (1.0, 2.0, 0.0),
    (2.0, -1.0, 0.0),
]


def test_starts_at_first_point():
    np.testing.assert_allclose(BezierCurve().evaluate(SCENE_POINTS, 0.0), SCENE_POINTS[0])


def test_ends_at_last_point():
    np.testing.assert_allclose(BezierCurve().evaluate(SCENE_POINTS, 1.0), SCENE_POINTS[3])


def test_symmetric_curve_is_centred_at_half():
    point = BezierCurve().evaluate(SCENE_POINTS, 0.5)
    assert point[0] == pytest.approx(0.0)
    assert point[2] == pytest.approx(0.0)


def test_symmetric_curve_mirrors():
    curve = BezierCurve()
    left = curve.evaluate(SCENE_POINTS, 0.2)
    right = curve.evaluate(SCENE_POINTS, 0.8)
    assert left[0] == pytest.approx(-right[0])
    assert left[1] == pytest.approx(right[1])


@pytest.mark.parametrize("t", [0.0, 0.1, 0.33, 0.5, 0.9, 1.0])
def test_evenly_spaced_collinear_points_give_linear_motion(t):
    direction = np.array([3.0, -6.0, 1.5])
    points = [direction * i / 3.0 for i in range(4)]
    np.testing.assert_allclose(BezierCurve().evaluate(points, t), direction * t, atol=1e-12)


def test_translation_invariance():
    curve = BezierCurve()
    offset = np.array([5.0, -2.0, 7.0])
    moved = [np.array(p) + offset for p in SCENE_POINTS]
    np.testing.assert_allclose(
        curve.evaluate(moved, 0.37), curve.evaluate(SCENE_POINTS, 0.37) + offset
    )


def test_rejects_wrong_number_of_points():
    with pytest.raises(ValueError):
        BezierCurve().evaluate(SCENE_POINTS[:3], 0.5)