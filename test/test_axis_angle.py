from pyso3.so3 import AxisAngle, Dcm, Euler, Quat
import casadi as ca
import numpy as np
import pytest
from scipy.spatial.transform import Rotation

tol = 1e-6  # tolerance


def random_quats(n, seed=0):
    rng = np.random.default_rng(seed)
    res = []
    for i in range(n):
        q = rng.normal(size=4)
        res.append(Quat(q / np.linalg.norm(q)))
    return res


def err(x, y):
    return float(ca.norm_2(ca.DM(x) - ca.DM(y)))


def same_rotation(p, q):
    return min(err(p.param, q.param), err(p.param, -q.param)) < tol


def test_ctor():
    assert err(AxisAngle().param, [0, 0, 0]) == 0
    assert err(AxisAngle(0, 0, 1).param, [0, 0, 1]) == 0
    assert err(AxisAngle([0, 0, 1], np.pi / 2).param, [0, 0, np.pi / 2]) < tol
    assert err(AxisAngle([0, 0, np.pi / 2]).param, [0, 0, np.pi / 2]) == 0
    aa = AxisAngle(0.1, 0.2, 0.3)
    assert err(AxisAngle(aa).param, aa.param) == 0
    with pytest.raises(ValueError):
        AxisAngle(1, 2, 3, 4)
    with pytest.raises(AssertionError):
        AxisAngle([1, 2])


def test_90_deg_z():
    q = AxisAngle([0, 0, 1], np.pi / 2).to_quat()
    assert err(q.param, [np.cos(np.pi / 4), 0, 0, np.sin(np.pi / 4)]) < tol
    assert err(q.conjugate([1, 0, 0]), [0, 1, 0]) < tol


def test_norm_unit():
    aa = AxisAngle([0, 3, 4], 1)
    assert abs(float(aa.norm()) - 5) < tol
    assert err(aa.unit(), [0, 0.6, 0.8]) < tol
    assert float(aa.angle()) == float(aa.norm())
    assert err(aa.axis(), aa.unit()) == 0


def test_norm_unit_zero():
    aa = AxisAngle()
    assert float(aa.norm()) == 0
    assert err(aa.unit(), [0, 0, 0]) == 0


def test_round_trip():
    for q in random_quats(20, seed=4):
        assert same_rotation(Quat(AxisAngle(q)), q)
        assert same_rotation(AxisAngle.from_quat(q).to_quat(), q)


def test_angle_wrapped():
    for q in random_quats(20, seed=5):
        angle = float(AxisAngle(q).norm())
        assert 0 <= angle <= np.pi + tol


def test_near_zero():
    assert err(AxisAngle(1e-12, 0, 0).to_quat().param, Quat().param) == 0
    assert err(AxisAngle.from_quat(Quat()).param, [0, 0, 0]) == 0
    assert err(AxisAngle(1e-12, 0, 0).to_dcm().param, ca.DM.eye(3)) < tol


def test_scipy():
    for q in random_quats(5, seed=6):
        w, x, y, z = q.numpy()
        rotvec = Rotation.from_quat([x, y, z, w]).as_rotvec()
        assert err(AxisAngle(q).param, rotvec) < tol


def test_conversions():
    q = random_quats(1, seed=7)[0]
    aa = AxisAngle(q)
    assert err(aa.to_dcm().param, q.to_dcm().param) < tol
    assert err(AxisAngle.from_dcm(q.to_dcm()).param, aa.param) < tol
    assert err(AxisAngle.from_euler(q.to_euler()).param, aa.param) < tol
    assert err(AxisAngle(Dcm(q)).param, aa.param) < tol
    assert err(AxisAngle(Euler(q)).param, aa.param) < tol
    assert err(aa.to_axis_angle().param, aa.param) == 0


def test_symbolic():
    aa = AxisAngle(ca.SX.sym("v", 3))
    assert aa.is_symbolic()
    assert isinstance(aa.to_quat().param, ca.SX)
    assert isinstance(aa.to_dcm().param, ca.SX)
