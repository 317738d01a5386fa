"""
Casadi functions for the conversions and operations of pyso3.so3.

The expressions are built once from symbolic inputs, the resulting
functions evaluate numeric inputs without rebuilding the graph and can be
differentiated or code generated by casadi.
"""
import functools
import logging

import casadi as ca

from .so3 import AxisAngle, Dcm, Euler, Quat

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def functions():
    """
    Build the function table.
    :return: dict of casadi.Function by name
    """
    q = ca.SX.sym("q", 4)
    p = ca.SX.sym("p", 4)
    R = ca.SX.sym("R", 3, 3)
    e = ca.SX.sym("e", 3)
    v = ca.SX.sym("v", 3)
    w = ca.SX.sym("w", 3)

    f_list = [
        ca.Function("quat_from_dcm", [R], [Quat.from_dcm(R).param], ["R"], ["q"]),
        ca.Function("quat_from_euler", [e], [Quat.from_euler(e).param], ["e"], ["q"]),
        ca.Function(
            "quat_from_axis_angle", [v], [Quat.from_axis_angle(v).param], ["v"], ["q"]
        ),
        ca.Function("dcm_from_quat", [q], [Dcm.from_quat(q).param], ["q"], ["R"]),
        ca.Function("euler_from_quat", [q], [Euler.from_quat(q).param], ["q"], ["e"]),
        ca.Function(
            "axis_angle_from_quat", [q], [AxisAngle.from_quat(q).param], ["q"], ["v"]
        ),
        ca.Function(
            "quat_product", [p, q], [(Quat(p) * Quat(q)).param], ["p", "q"], ["r"]
        ),
        ca.Function(
            "quat_conjugate", [q, v], [Quat(q).conjugate(v)], ["q", "v"], ["v_n"]
        ),
        ca.Function(
            "quat_derivative1", [q, w], [Quat(q).derivative1(w)], ["q", "w"], ["q_dot"]
        ),
        ca.Function(
            "quat_derivative2", [q, w], [Quat(q).derivative2(w)], ["q", "w"], ["q_dot"]
        ),
    ]
    res = {}
    for f in f_list:
        logger.debug("built %s", f)
        res[f.name()] = f
    return res


def function(name):
    """
    A single function from the table.
    :param name: name of the function, e.g. 'quat_from_dcm'
    :return: casadi.Function
    """
    f_dict = functions()
    if name not in f_dict:
        raise KeyError(name, "valid functions:", sorted(f_dict.keys()))
    return f_dict[name]
