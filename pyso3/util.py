import casadi as ca

EPS = 1e-10  # near zero rotation angle, below this the axis is undefined

SERIES_EPS = 1e-7  # tolerance for switching to taylor series

GIMBAL_LOCK_TOL = 1e-3  # distance of pitch from +/- pi/2 considered locked

x = ca.SX.sym("x")

# sin(x)/x
C1 = ca.Function(
    "C1",
    [x],
    [ca.if_else(ca.fabs(x) < SERIES_EPS, 1 - x**2 / 6 + x**4 / 120, ca.sin(x) / x)],
)

# (1 - cos(x))/x^2
C2 = ca.Function(
    "C2",
    [x],
    [
        ca.if_else(
            ca.fabs(x) < SERIES_EPS,
            0.5 - x**2 / 24 + x**4 / 720,
            (1 - ca.cos(x)) / x**2,
        )
    ],
)

# delete temp variable used to create functions
del x


def wrap_pi(angle):
    """
    Wrap an angle into (-pi, pi].
    :param angle: angle in radians, numeric or symbolic
    :return: the wrapped angle
    """
    return angle + 2 * ca.pi * ca.floor((ca.pi - angle) / (2 * ca.pi))
