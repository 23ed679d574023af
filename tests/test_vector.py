import math

import pytest

from relight import Vector3, DegenerateVectorError
from relight.shading.vector import UP


def test_normalize_has_unit_length():
    v = Vector3(3, -4, 12).normalize()
    assert v.magnitude() == pytest.approx(1.0)
    assert v.as_tuple() == pytest.approx((3 / 13, -4 / 13, 12 / 13))


def test_dot():
    assert Vector3(1, 2, 3).dot(Vector3(4, -5, 6)) == 12.0


def test_zero_vector_raises():
    with pytest.raises(DegenerateVectorError):
        Vector3(0, 0, 0).normalize()


def test_normalize_or_returns_fallback_for_zero_vector():
    assert Vector3(0, 0, 0).normalize_or(UP) is UP


def test_vector_is_immutable():
    v = Vector3(1, 0, 0)
    with pytest.raises(AttributeError):
        v.x = 2.0


def test_from_iterable_checks_length():
    assert Vector3.from_iterable([1, 2, 3]) == Vector3(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Vector3.from_iterable([1, 2])


def test_components_are_floats():
    v = Vector3(1, 2, 3)
    assert all(isinstance(c, float) for c in v.as_tuple())
    assert v.as_array().tolist() == [1.0, 2.0, 3.0]
    assert math.isclose(Vector3(0, 0, 2).magnitude(), 2.0)
