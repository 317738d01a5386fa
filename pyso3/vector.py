"""
Fixed size numeric primitives: 3-vectors, 4-vectors and 3x3 matrices.

All containers are casadi matrices, so the same routines work on numbers
(casadi.DM) and on expression graphs (casadi.SX, casadi.MX). Elementwise
arithmetic is casadi's own.
"""
import casadi as ca

from .util import EPS

CASADI_TYPES = (ca.SX, ca.MX, ca.DM)


def as_expr(value, shape=None):
    """
    Coerce a value into a casadi matrix.
    :param value: number, list, tuple, numpy array or casadi matrix
    :param shape: expected shape, a row vector is transposed to a column
    :return: the casadi matrix
    """
    if isinstance(value, CASADI_TYPES):
        res = value
    elif isinstance(value, (list, tuple)) and any(
        isinstance(v, CASADI_TYPES) for v in value
    ):
        res = ca.vertcat(*value)
    elif isinstance(value, tuple):
        res = ca.DM(list(value))
    else:
        res = ca.DM(value)
    if shape is not None:
        if shape[1] == 1 and res.shape == (1, shape[0]):
            res = res.T
        assert res.shape == shape, "expected shape {:s}, got {:s}".format(
            str(shape), str(res.shape)
        )
    return res


def vector3(*args):
    """
    A 3x1 column from three scalars or a single 3 element value.
    """
    if len(args) == 3:
        return ca.vertcat(*args)
    elif len(args) == 1:
        return as_expr(args[0], (3, 1))
    raise ValueError("vector3 expects 1 or 3 arguments, got {:d}".format(len(args)))


def vector4(*args):
    """
    A 4x1 column from four scalars or a single 4 element value.
    """
    if len(args) == 4:
        return ca.vertcat(*args)
    elif len(args) == 1:
        return as_expr(args[0], (4, 1))
    raise ValueError("vector4 expects 1 or 4 arguments, got {:d}".format(len(args)))


def matrix33(value):
    return as_expr(value, (3, 3))


def dot(a, b):
    return ca.dot(a, b)


def norm(a):
    return ca.norm_2(a)


def cross(a, b):
    return ca.cross(a, b)


def unit(v):
    """
    The direction of v, the zero vector if v is too short to have one.
    """
    n = ca.norm_2(v)
    return ca.if_else(n < EPS, ca.DM.zeros(v.shape[0], 1), v / n)


# noinspection PyPep8Naming
def vee(X):
    """
    Takes a skew symmetric matrix and extracts components
    :param X: skew symmetric matrix
    :return: 3x1 components
    """
    return ca.vertcat(X[2, 1], X[0, 2], X[1, 0])


def wedge(v):
    """
    Take components and builds the skew symmetric matrix, such that
    wedge(a) @ b = cross(a, b).
    :param v: 3x1 components
    :return: skew symmetric matrix
    """
    return ca.vertcat(
        ca.horzcat(0, -v[2], v[1]),
        ca.horzcat(v[2], 0, -v[0]),
        ca.horzcat(-v[1], v[0], 0),
    )
