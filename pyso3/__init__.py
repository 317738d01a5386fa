"""
This package contains a set of representations for SO(3). The 3D rotation group.

quat: 4 parameters, no singularities
dcm: 9 parameters, no singularities
euler: 3 parameters, singularity at pitch = +/- pi/2
axis angle: 3 parameters, axis undefined at zero rotation
"""
from .so3 import AxisAngle, Dcm, Euler, Quat
from .rotation import Rotation

__all__ = ["AxisAngle", "Dcm", "Euler", "Quat", "Rotation"]
