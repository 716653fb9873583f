import copy
import logging
import math
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pymeshdecimator.types import Vector3, Vector3d, Vector3i, VectorLike
from pymeshdecimator.utils import to_single


def test_cross_of_unit_axes():
    result = Vector3.cross(Vector3(1, 0, 0), Vector3(0, 1, 0))
    assert result.equals_exact(Vector3(0, 0, 1))


def test_cross_is_anticommutative():
    a = Vector3(1, 2, 3)
    b = Vector3(-4, 0.5, 2)
    assert a.cross(b).equals_exact(-b.cross(a))


@pytest.mark.parametrize("a, b", [
    (Vector3(1, 2, 3), Vector3(-4, 0.5, 2)),
    (Vector3(0.3, -7.5, 1.25), Vector3(2, 2, -9)),
    (Vector3(10, 0, 0), Vector3(0.1, 0.2, 0)),
])
def test_cross_is_perpendicular_to_both_inputs(a, b):
    c = Vector3.cross(a, b)
    assert Vector3.dot(c, a) == pytest.approx(0.0, abs=1e-4)
    assert Vector3.dot(c, b) == pytest.approx(0.0, abs=1e-4)


def test_dot():
    assert Vector3.dot(Vector3(1, 2, 3), Vector3(4, -5, 6)) == 12.0
    assert Vector3(1, 0, 0).dot(Vector3(0, 1, 0)) == 0.0


def test_magnitude():
    v = Vector3(2, 3, 6)
    assert v.magnitude_squared() == 49.0
    assert v.magnitude() == 7.0


@pytest.mark.parametrize("v", [
    Vector3(1, 2, 3),
    Vector3(-0.001, 0.0004, 0.002),
    Vector3(12345, -6789, 42),
    Vector3(1e-9, 0, 0),
])
def test_normalized_has_unit_length(v):
    assert v.normalized().magnitude() == pytest.approx(1.0, rel=1e-6)


def test_normalized_degenerate_is_zero():
    for v in (Vector3(0, 0, 0), Vector3(1e-11, -1e-11, 0), Vector3(math.nan, 0, 0)):
        result = v.normalized()
        assert result.equals_exact(Vector3(0, 0, 0))


def test_normalized_is_pure_and_normalize_mutates():
    v = Vector3(0, 3, 4)
    result = Vector3.normalized(v)
    assert v.equals_exact(Vector3(0, 3, 4))
    assert result.Y == to_single(0.6)
    assert result.Z == to_single(0.8)

    v.normalize()
    assert v.equals_exact(result)


def test_normalized_zero_does_not_return_shared_constant():
    result = Vector3.ZERO.normalized()
    assert result is not Vector3.ZERO
    result.X = 5
    assert Vector3.ZERO.X == 0.0


def test_degenerate_normalization_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="pymeshdecimator.types.vector3"):
        Vector3(0, 0, 0).normalized()
    assert "degenerate" in caplog.text


def test_angle():
    assert Vector3.angle(Vector3(1, 0, 0), Vector3(0, 1, 0)) == pytest.approx(90.0)
    assert Vector3.angle(Vector3(1, 0, 0), Vector3(5, 0, 0)) == 0.0
    assert Vector3.angle(Vector3(1, 0, 0), Vector3(-2, 0, 0)) == pytest.approx(180.0)
    assert Vector3.angle(Vector3(1, 1, 0), Vector3(1, 0, 0)) == pytest.approx(45.0, abs=1e-4)


def test_angle_with_zero_vector_reads_as_right_angle():
    assert Vector3.angle(Vector3(0, 0, 0), Vector3(1, 2, 3)) == pytest.approx(90.0)


def test_ortho_normalize_axis_aligned():
    normal = Vector3(0, 0, 2)
    tangent = Vector3(1, 0, 1)
    Vector3.ortho_normalize(normal, tangent)
    assert normal.equals_exact(Vector3(0, 0, 1))
    assert tangent.equals_exact(Vector3(1, 0, 0))


def test_ortho_normalize_general_inputs():
    normal = Vector3(1, 2, 3)
    tangent = Vector3(-2, 0.5, 4)
    Vector3.ortho_normalize(normal, tangent)
    assert normal.magnitude() == pytest.approx(1.0, rel=1e-6)
    assert tangent.magnitude() == pytest.approx(1.0, rel=1e-6)
    assert Vector3.dot(normal, tangent) == pytest.approx(0.0, abs=1e-5)


def test_ortho_normalize_parallel_tangent_becomes_zero():
    normal = Vector3(3, 0, 0)
    tangent = Vector3(2, 0, 0)
    Vector3.ortho_normalize(normal, tangent)
    assert normal.equals_exact(Vector3(1, 0, 0))
    assert tangent.equals_exact(Vector3(0, 0, 0))


def test_lerp_endpoints_and_extrapolation():
    a = Vector3(0.1, -2.5, 7)
    b = Vector3(0.3, 4, -1.75)
    assert Vector3.lerp(a, b, 0).equals_exact(a)
    assert Vector3.lerp(a, b, 1).equals_exact(b)
    assert Vector3.lerp(Vector3(0, 0, 0), Vector3(2, 4, 8), 0.5).equals_exact(Vector3(1, 2, 4))
    assert Vector3.lerp(Vector3(0, 0, 0), Vector3(2, 4, 8), -1).equals_exact(Vector3(-2, -4, -8))


def test_arithmetic_operators_match_named_methods():
    a = Vector3(1, 2, 3)
    b = Vector3(0.5, -1, 4)
    assert (a + b).equals_exact(a.add(b))
    assert (a + b).equals_exact(Vector3(1.5, 1, 7))
    assert (a - b).equals_exact(a.subtract(b))
    assert (-a).equals_exact(Vector3(-1, -2, -3))
    assert (a * 2).equals_exact(Vector3(2, 4, 6))
    assert (2 * a).equals_exact(a.multiply(2))
    assert (a / 2).equals_exact(Vector3(0.5, 1, 1.5))


def test_divide_by_zero_follows_ieee():
    result = Vector3(1, -1, 0) / 0
    assert result.X == math.inf
    assert result.Y == -math.inf
    assert math.isnan(result.Z)


def test_operators_reject_other_types():
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) + (1, 2, 3)
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) * Vector3(1, 2, 3)


def test_scale_pure_and_in_place():
    a = Vector3(2, 3, 4)
    b = Vector3(0.5, -1, 2)
    result = Vector3.scaled(a, b)
    assert result.equals_exact(Vector3(1, -3, 8))
    assert a.equals_exact(Vector3(2, 3, 4))
    a.scale(b)
    assert a.equals_exact(result)


def test_clamp():
    v = Vector3(-5, 0.5, 9)
    assert v.clamped(0, 1).equals_exact(Vector3(0, 0.5, 1))
    assert v.equals_exact(Vector3(-5, 0.5, 9))
    v.clamp(-1, 2)
    assert v.equals_exact(Vector3(-1, 0.5, 2))


def test_clamp_leaves_nan_alone():
    v = Vector3(math.nan, 3, -3)
    v.clamp(-1, 1)
    assert math.isnan(v.X)
    assert v.Y == 1.0
    assert v.Z == -1.0


def test_index_access():
    v = Vector3(1, 2, 3)
    assert (v[0], v[1], v[2]) == (1.0, 2.0, 3.0)
    v[2] = 0.1
    assert v.Z == to_single(0.1)
    for index in (3, -1):
        with pytest.raises(IndexError):
            v[index]
        with pytest.raises(IndexError):
            v[index] = 1.0


def test_sequence_protocol():
    v = Vector3(1, 2, 3)
    assert len(v) == 3
    assert list(v) == [1.0, 2.0, 3.0]
    x, y, z = v
    assert (x, y, z) == v.to_tuple()


def test_components_are_single_precision():
    v = Vector3(0.1, 1e40, -1e40)
    assert v.X == to_single(0.1)
    assert v.X != 0.1
    assert v.Y == math.inf
    assert v.Z == -math.inf
    v.X = 0.2
    assert v.X == to_single(0.2)


def test_approximate_equality():
    a = Vector3(1, 1, 1)
    assert a == Vector3(1, 1, 1.000001)
    assert a != Vector3(1, 1, 1.001)
    assert not a.approx_equals(Vector3(1, 1, 1.001))
    assert a.approx_equals(Vector3(1, 1, 1.001), epsilon=1e-5)


def test_approximate_equality_is_not_transitive():
    a = Vector3(0, 0, 0)
    b = Vector3(7e-6, 0, 0)
    c = Vector3(1.4e-5, 0, 0)
    assert a == b
    assert b == c
    assert a != c


def test_equality_with_nan_is_neither_equal_nor_unequal():
    v = Vector3(math.nan, 0, 0)
    assert not (v == v)
    assert not (v != v)


def test_equality_with_other_types_is_false():
    v = Vector3(1, 2, 3)
    assert (v == (1.0, 2.0, 3.0)) is False
    assert (v == Vector3d(1, 2, 3)) is False
    assert v.equals_exact("x") is False


def test_hash_matches_for_identical_components():
    assert hash(Vector3(1, 2, 3)) == hash(Vector3(1.0, 2.0, 3.0))
    assert len({Vector3(1, 2, 3), Vector3(1, 2, 3)}) == 1


def test_copy_does_not_alias():
    v = Vector3(1, 2, 3)
    for duplicate in (v.copy(), copy.copy(v)):
        duplicate.X = 9
        assert v.X == 1.0


def test_construction_helpers():
    assert Vector3().equals_exact(Vector3.ZERO)
    assert Vector3.from_scalar(2.5).equals_exact(Vector3(2.5, 2.5, 2.5))
    assert Vector3.from_int(Vector3i(1, -2, 3)).equals_exact(Vector3(1, -2, 3))
    narrowed = Vector3.from_double(Vector3d(0.1, 2, 1e300))
    assert narrowed.X == to_single(0.1)
    assert narrowed.Z == math.inf


def test_double_round_trip_is_exact():
    v = Vector3(0.1, -123.456, 3.3e-20)
    widened = v.to_double()
    assert isinstance(widened, Vector3d)
    assert Vector3.from_double(widened).equals_exact(v)


def test_bytes_round_trip():
    v = Vector3(1.5, -2.25, 0.1)
    data = v.to_bytes()
    assert len(data) == 12
    assert Vector3.from_bytes(b"\x00" + data, offset=1).equals_exact(v)
    with pytest.raises(ValueError):
        Vector3.from_bytes(data[:8])


def test_numpy_interop():
    import numpy as np

    v = Vector3(1, 2, 3)
    array = v.to_array()
    assert array.dtype == np.float32
    assert array.tolist() == [1.0, 2.0, 3.0]
    assert Vector3.from_array(np.array([0.1, 0.2, 0.3])).equals_exact(Vector3(0.1, 0.2, 0.3))
    with pytest.raises(ValueError):
        Vector3.from_array([1, 2])


def test_string_formatting():
    v = Vector3(1, 2.25, -3)
    assert str(v) == "(1.0, 2.3, -3.0)"
    assert v.to_string("F2") == "(1.00, 2.25, -3.00)"
    assert f"{v:.3f}" == "(1.000, 2.250, -3.000)"
    assert f"{v}" == str(v)
    assert repr(Vector3(1, 2, 3)) == "Vector3(X=1.0, Y=2.0, Z=3.0)"
    assert str(Vector3(math.nan, math.inf, -math.inf)) == "(NaN, Infinity, -Infinity)"


def test_satisfies_vector_protocol():
    assert isinstance(Vector3(), VectorLike)


def test_epsilon_constant():
    assert Vector3.EPSILON == pytest.approx(1e-10, rel=1e-6)
    assert Vector3(1e-10, 0, 0).approx_equals(Vector3(0, 0, 0))


def test_numpy_scalar_times_vector_stays_a_vector():
    import numpy as np

    v = Vector3(1, 2, 3)
    for scalar in (np.float32(2), np.float64(2)):
        result = scalar * v
        assert isinstance(result, Vector3)
        assert result.equals_exact(Vector3(2, 4, 6))
    components = v.to_array()
    assert (components[2] * v).equals_exact(Vector3(3, 6, 9))


def test_bool_is_not_an_index():
    v = Vector3(1, 2, 3)
    for index in (True, False):
        with pytest.raises(IndexError):
            v[index]
        with pytest.raises(IndexError):
            v[index] = 0.0
    assert v.equals_exact(Vector3(1, 2, 3))
