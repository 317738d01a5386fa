import abc

import casadi as ca
import numpy as np

from .vector import as_expr


class Rotation(abc.ABC):
    """
    This is a generic rotation value. It does NOT inherit from the
    casadi matrix types, it holds its parameters in one, and each
    representation only exposes the operations meaningful for it.

    The parameters may be numeric (casadi.DM) or symbolic
    (casadi.SX/casadi.MX). Operations branch with casadi.if_else, never
    with python control flow on the parameters.
    """

    shape = None  # shape of the parameter matrix

    def __init__(self, param):
        """
        @param param: The parameters, coerced to a casadi matrix of
        shape cls.shape
        """
        self.param = as_expr(param, self.shape)

    def __getitem__(self, key):
        return self.param[key]

    def __repr__(self):
        return "{:s}({:s})".format(type(self).__name__, str(self.param))

    def is_symbolic(self) -> bool:
        return not isinstance(self.param, ca.DM)

    def numpy(self) -> np.ndarray:
        """
        Dense numpy copy of the parameters, column vectors are flattened.
        Only valid for numeric values or constant expressions.
        """
        if isinstance(self.param, ca.DM):
            m = self.param
        else:
            m = ca.evalf(self.param)
        res = np.array(m.full())
        if self.shape[1] == 1:
            res = res.reshape(-1)
        return res

    @abc.abstractmethod
    def to_quat(self):
        ...

    @abc.abstractmethod
    def to_dcm(self):
        ...

    def to_euler(self):
        return self.to_quat().to_euler()

    def to_axis_angle(self):
        return self.to_quat().to_axis_angle()
