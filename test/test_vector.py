from pyso3 import util
from pyso3.vector import as_expr, cross, dot, matrix33, norm, unit, vector3, vector4, vee, wedge
import casadi as ca
import numpy as np
import pytest

eps = 1e-10


def test_as_expr():
    assert as_expr([1, 2, 3]).shape == (3, 1)
    assert as_expr((1, 2, 3)).shape == (3, 1)
    assert as_expr(np.array([1.0, 2.0, 3.0])).shape == (3, 1)
    assert as_expr(ca.DM([[1, 2, 3]]), (3, 1)).shape == (3, 1)
    assert as_expr(2.0).shape == (1, 1)
    x = ca.SX.sym("x")
    assert isinstance(as_expr([x, 1, 2]), ca.SX)
    with pytest.raises(AssertionError):
        as_expr([1, 2], (3, 1))


def test_fixed_size():
    assert vector3(1, 2, 3).shape == (3, 1)
    assert vector3([1, 2, 3]).shape == (3, 1)
    assert vector4(1, 2, 3, 4).shape == (4, 1)
    assert matrix33(np.eye(3)).shape == (3, 3)
    with pytest.raises(ValueError):
        vector3(1, 2)
    with pytest.raises(ValueError):
        vector4(1, 2)
    with pytest.raises(AssertionError):
        matrix33([1, 2, 3])


def test_products():
    a = ca.DM([1, 2, 3])
    b = ca.DM([4, 5, 6])
    assert float(dot(a, b)) == 32
    assert abs(float(norm(ca.DM([3, 4, 0]))) - 5) < eps
    assert ca.norm_2(cross(a, b) - ca.DM([-3, 6, -3])) < eps


def test_wedge_vee():
    v = ca.DM([0.1, 0.2, 0.3])
    b = ca.DM([4, 5, 6])
    assert ca.norm_2(vee(wedge(v)) - v) < eps
    assert ca.norm_2(ca.mtimes(wedge(v), b) - ca.cross(v, b)) < eps
    assert ca.norm_fro(wedge(v) + wedge(v).T) < eps


def test_unit():
    assert ca.norm_2(unit(ca.DM([0, 3, 4])) - ca.DM([0, 0.6, 0.8])) < eps
    assert ca.norm_2(unit(ca.DM([0, 0, 0]))) == 0
    assert ca.norm_2(unit(ca.DM([1e-12, 0, 0]))) == 0


def test_wrap_pi():
    for x, expected in [
        (0, 0),
        (np.pi, np.pi),
        (-np.pi, np.pi),
        (3 * np.pi / 2, -np.pi / 2),
        (-3 * np.pi / 2, np.pi / 2),
        (7.0, 7.0 - 2 * np.pi),
        (0.5, 0.5),
    ]:
        assert abs(float(util.wrap_pi(ca.DM(x))) - expected) < eps


def test_series():
    for x in [0, 1e-9, 1e-3, 0.5, 2.0]:
        if x == 0:
            assert float(util.C1(x)) == 1
            assert float(util.C2(x)) == 0.5
        else:
            assert abs(float(util.C1(x)) - np.sin(x) / x) < 1e-9
            assert abs(float(util.C2(x)) - 2 * np.sin(x / 2) ** 2 / x**2) < 1e-9
