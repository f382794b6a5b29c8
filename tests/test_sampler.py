import math

import numpy as np
import pytest

from dipolefield.sampler import (
    MU0,
    CURVE_POINTS,
    DomainError,
    FieldCurve,
    SampleInput,
    SamplePoint,
    build_curve,
    distance_grid,
    sample,
    sample_array,
    sample_curve,
)


def test_sample_reference_point():
    # r = 0.05 m, m = 0.1 -> B = 1e-7 * 0.1 / 0.05^3 = 8e-5 T
    assert np.isclose(sample(5.0, 1000.0), 8.0e-5, rtol=1e-12)
    assert np.isclose(MU0, 4 * math.pi * 1e-7)


def test_sample_finite_and_positive():
    for d in distance_grid():
        for s in (100.0, 1000.0, 5000.0):
            b = sample(d, s)
            assert math.isfinite(b) and b > 0.0


def test_sample_strictly_decreasing_with_distance():
    b = [sample(d, 1000.0) for d in distance_grid()]
    assert all(b0 > b1 for b0, b1 in zip(b, b[1:]))


def test_sample_linear_in_strength():
    for d in (0.5, 3.0, 12.5, 25.0):
        assert np.isclose(sample(d, 2 * 700.0), 2 * sample(d, 700.0), rtol=1e-12)


def test_sample_inverse_cube():
    for d in (0.5, 1.0, 7.5, 12.5):
        assert np.isclose(sample(d, 1000.0) / sample(2 * d, 1000.0), 8.0, rtol=1e-12)


def test_sample_zero_distance_is_undefined():
    with pytest.raises(ZeroDivisionError):
        sample(0.0, 1000.0)


def test_sample_array_matches_scalar():
    grid = distance_grid()
    arr = sample_array(grid, 2500.0)
    assert arr.shape == (CURVE_POINTS,)
    assert np.allclose(arr, [sample(d, 2500.0) for d in grid], rtol=1e-12)


def test_distance_grid():
    grid = distance_grid()
    assert grid.shape == (50,)
    assert grid[0] == 0.5
    assert grid[-1] == 25.0
    assert np.allclose(np.diff(grid), 0.5)


def test_sample_curve_order_and_length():
    grid = distance_grid()
    points = list(sample_curve(grid, 1000.0))
    assert len(points) == 50
    assert [p.distance_cm for p in points] == list(grid)
    assert all(isinstance(p, SamplePoint) for p in points)


def test_sample_curve_keeps_input_order():
    points = list(sample_curve([10.0, 1.0, 5.0], 1000.0))
    assert [p.distance_cm for p in points] == [10.0, 1.0, 5.0]
    assert np.isclose(points[2].field_strength_tesla, 8.0e-5)


def test_sample_curve_is_restartable():
    # A generator input must not be exhausted after the first pass
    curve = sample_curve((0.5 * (i + 1) for i in range(4)), 300.0)
    first = list(curve)
    second = list(curve)
    assert len(first) == 4
    assert first == second


def test_sample_curve_is_lazy():
    # Nothing is evaluated for a zero distance until it is reached
    it = iter(sample_curve([1.0, 0.0], 1000.0))
    assert next(it).distance_cm == 1.0
    with pytest.raises(ZeroDivisionError):
        next(it)


def test_build_curve_defaults():
    curve = build_curve(1000.0)
    assert isinstance(curve, FieldCurve)
    assert len(curve) == 50
    assert curve.magnet_strength_gauss == 1000.0
    assert curve.distances_cm.shape == (50,)
    assert np.all(np.diff(curve.field_strengths_tesla) < 0)
    x, y = curve.as_xy()[9]
    assert x == 5.0
    assert np.isclose(y, 8.0e-5)


def test_field_curve_is_immutable():
    curve = build_curve(1000.0, [1.0, 2.0])
    with pytest.raises(AttributeError):
        curve.magnet_strength_gauss = 2000.0
    with pytest.raises(AttributeError):
        curve.points[0].field_strength_tesla = 0.0


def test_sample_input_validation():
    inp = SampleInput(magnet_strength_gauss=1000.0, distance_cm=5.0)
    assert np.isclose(inp.field_strength(), 8.0e-5)
    with pytest.raises(DomainError):
        SampleInput(magnet_strength_gauss=1000.0, distance_cm=0.0)
    with pytest.raises(DomainError):
        SampleInput(magnet_strength_gauss=-1.0, distance_cm=5.0)
    with pytest.raises(ValueError):
        SampleInput(magnet_strength_gauss=float("inf"), distance_cm=5.0)
