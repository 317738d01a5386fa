"""
Representations of SO(3), the 3D rotation group.

quat: 4 parameters, no singularities
dcm: 9 parameters, no singularities
euler: 3 parameters (B321), singularity at pitch = +/- pi/2
axis angle: 3 parameters, axis undefined at zero rotation

All rotations and axis systems follow the right-hand rule and the Hamilton
quaternion product is used. A rotation q_nb takes a vector in frame b to
frame n:

    v_n = q_nb * [0; v_b] * q_nb^-1 = C_nb * v_b

The product q2 * q1 is an intrinsic rotation, first q1 then q2, such that
Dcm(q2 * q1) = Dcm(q2) * Dcm(q1).
"""
import casadi as ca

from .rotation import Rotation
from .util import C1, C2, EPS, GIMBAL_LOCK_TOL, wrap_pi
from .vector import as_expr, cross, matrix33, unit, vector3, vector4, wedge


class Quat(Rotation):
    """
    A quaternion (Euler parameters), real part first: (w, x, y, z).

    A zero rotation is (1, 0, 0, 0). Only unit quaternions are rotations,
    nothing here normalizes automatically, call normalize after repeated
    products or integration.
    """

    shape = (4, 1)

    def __init__(self, *args):
        if len(args) == 0:
            param = ca.DM([1, 0, 0, 0])
        elif len(args) == 4:
            param = ca.vertcat(*args)
        elif len(args) == 1:
            other = args[0]
            if isinstance(other, Rotation):
                param = other.to_quat().param
            else:
                param = other
        else:
            raise ValueError(
                "Quat expects (), (a, b, c, d), a 4x1 value or a rotation, "
                "got {:d} arguments".format(len(args))
            )
        super().__init__(param)

    def __add__(self, other: "Quat") -> "Quat":
        assert isinstance(other, Quat)
        return Quat(self.param + other.param)

    def __sub__(self, other: "Quat") -> "Quat":
        assert isinstance(other, Quat)
        return Quat(self.param - other.param)

    def __neg__(self) -> "Quat":
        return Quat(-self.param)

    def __mul__(self, other) -> "Quat":
        if isinstance(other, Quat):
            return self.multiply(other)
        return self.scale(other)

    def __rmul__(self, other) -> "Quat":
        return self.scale(other)

    def __imul__(self, other) -> "Quat":
        self.param = (self * other).param
        return self

    def multiply(self, other: "Quat") -> "Quat":
        """
        The product of two quaternions using the hamilton
        convention, so that Dcm(A)*Dcm(B) = Dcm(A*B).
        :param other: The second quaternion, applied first.
        :return: The quaternion product.
        """
        assert isinstance(other, Quat)
        p = self.param
        q = other.param
        return Quat(
            p[0] * q[0] - p[1] * q[1] - p[2] * q[2] - p[3] * q[3],
            p[0] * q[1] + p[1] * q[0] + p[2] * q[3] - p[3] * q[2],
            p[0] * q[2] - p[1] * q[3] + p[2] * q[0] + p[3] * q[1],
            p[0] * q[3] + p[1] * q[2] - p[2] * q[1] + p[3] * q[0],
        )

    def scale(self, scalar) -> "Quat":
        scalar = as_expr(scalar)
        assert scalar.shape == (1, 1)
        return Quat(scalar * self.param)

    def dot(self, other: "Quat"):
        return ca.dot(self.param, other.param)

    def norm(self):
        return ca.norm_2(self.param)

    def imag(self):
        """
        Imaginary components of quaternion
        """
        return self.param[1:]

    def conj(self) -> "Quat":
        p = self.param
        return Quat(p[0], -p[1], -p[2], -p[3])

    def inversed(self) -> "Quat":
        """
        The multiplicative inverse, conj(q)/|q|^2. A zero quaternion
        has no inverse, the division is not guarded.
        :return: The inverse quaternion.
        """
        return Quat(self.conj().param / ca.dot(self.param, self.param))

    def invert(self) -> None:
        """
        Invert quaternion in place
        """
        self.param = self.inversed().param

    def normalized(self) -> "Quat":
        return Quat(self.param / ca.norm_2(self.param))

    def normalize(self) -> None:
        self.param = self.normalized().param

    def canonical(self) -> "Quat":
        """
        The same rotation with a non-negative real part.
        """
        return Quat(ca.if_else(self.param[0] < 0, -self.param, self.param))

    def conjugate(self, vec):
        """
        Rotate a vector from frame b to frame n, v_n = q * [0; v_b] * q^-1.
        :param vec: The vector in frame b.
        :return: The vector in frame n.
        """
        v = vector3(vec)
        res = self * Quat(0, v[0], v[1], v[2]) * self.inversed()
        return res.imag()

    def conjugate_inversed(self, vec):
        """
        Rotate a vector from frame n to frame b, v_b = q^-1 * [0; v_n] * q.
        :param vec: The vector in frame n.
        :return: The vector in frame b.
        """
        v = vector3(vec)
        res = self.inversed() * Quat(0, v[0], v[1], v[2]) * self
        return res.imag()

    def derivative1(self, w):
        """
        The kinematic equation relating the time derivative of q_12 to the
        angular velocity expressed in frame 2 (the body frame):
        d/dt q_12 = 0.5 * q_12 * [0; omega_12_2]
        :param w: The angular velocity in frame 2.
        :return: The 4x1 time derivative of the quaternion.
        """
        w = vector3(w)
        v = Quat(0, w[0], w[1], w[2])
        return (self * v * 0.5).param

    def derivative2(self, w):
        """
        The kinematic equation relating the time derivative of q_12 to the
        angular velocity expressed in frame 1 (the reference frame):
        d/dt q_12 = 0.5 * [0; omega_12_1] * q_12
        :param w: The angular velocity in frame 1.
        :return: The 4x1 time derivative of the quaternion.
        """
        w = vector3(w)
        v = Quat(0, w[0], w[1], w[2])
        return (v * self * 0.5).param

    def rotate(self, vec) -> None:
        """
        Rotate in place by a rotation vector, applied before the current
        rotation: q = q * Quat.from_axis_angle(vec).
        :param vec: rotation vector, the norm is the angle
        """
        self.param = (self * Quat.from_axis_angle(vec)).param

    @classmethod
    def from_axis_angle(cls, vec, angle=None) -> "Quat":
        """
        Rotation quaternion from a rotation vector, or from a unit axis
        and an angle.

        Below an angle of EPS the axis is undefined and the identity
        is returned.
        :param vec: rotation vector, or unit axis if angle is given
        :param angle: angle of rotation about vec
        :return: quaternion representing the rotation
        """
        if angle is None:
            vec = vector3(vec)
            angle = ca.norm_2(vec)
            axis = unit(vec)
        else:
            axis = vector3(vec)
            angle = as_expr(angle)
        magnitude = ca.sin(angle / 2)
        q = ca.vertcat(ca.cos(angle / 2), axis * magnitude)
        return cls(ca.if_else(ca.fabs(angle) < EPS, ca.DM([1, 0, 0, 0]), q))

    def to_axis_angle(self) -> "AxisAngle":
        """
        Rotation vector from quaternion, the direction is the axis of
        rotation and the norm is the angle, wrapped to (-pi, pi].

        The zero vector is returned when the axis is undefined.
        """
        p = self.param
        v = p[1:]
        axis_magnitude = ca.norm_2(v)
        angle = wrap_pi(2 * ca.atan2(axis_magnitude, p[0]))
        vec = v / axis_magnitude * angle
        return AxisAngle(ca.if_else(axis_magnitude < EPS, ca.DM.zeros(3, 1), vec))

    @classmethod
    def from_dcm(cls, R) -> "Quat":
        """
        Converts a direction cosine matrix to a quaternion.

        The branch is chosen on the trace, then on the largest diagonal
        element, so the square root is never taken of a number near zero.
        The comparisons are strict and made in the order R00, R11, R22,
        which fixes the result for degenerate inputs.
        :param R: A direction cosine matrix.
        :return: The quaternion.
        """
        R = R.param if isinstance(R, Dcm) else matrix33(R)
        t = R[0, 0] + R[1, 1] + R[2, 2]

        s1 = ca.sqrt(1 + t)
        q1 = ca.vertcat(
            0.5 * s1,
            (R[2, 1] - R[1, 2]) * 0.5 / s1,
            (R[0, 2] - R[2, 0]) * 0.5 / s1,
            (R[1, 0] - R[0, 1]) * 0.5 / s1,
        )

        s2 = ca.sqrt(1 + R[0, 0] - R[1, 1] - R[2, 2])
        q2 = ca.vertcat(
            (R[2, 1] - R[1, 2]) * 0.5 / s2,
            0.5 * s2,
            (R[1, 0] + R[0, 1]) * 0.5 / s2,
            (R[0, 2] + R[2, 0]) * 0.5 / s2,
        )

        s3 = ca.sqrt(1 - R[0, 0] + R[1, 1] - R[2, 2])
        q3 = ca.vertcat(
            (R[0, 2] - R[2, 0]) * 0.5 / s3,
            (R[1, 0] + R[0, 1]) * 0.5 / s3,
            0.5 * s3,
            (R[2, 1] + R[1, 2]) * 0.5 / s3,
        )

        s4 = ca.sqrt(1 - R[0, 0] - R[1, 1] + R[2, 2])
        q4 = ca.vertcat(
            (R[1, 0] - R[0, 1]) * 0.5 / s4,
            (R[0, 2] + R[2, 0]) * 0.5 / s4,
            (R[2, 1] + R[1, 2]) * 0.5 / s4,
            0.5 * s4,
        )

        q = ca.if_else(
            t > 0,
            q1,
            ca.if_else(
                ca.logic_and(R[0, 0] > R[1, 1], R[0, 0] > R[2, 2]),
                q2,
                ca.if_else(R[1, 1] > R[2, 2], q3, q4),
            ),
        )
        return cls(q)

    @classmethod
    def from_euler(cls, e) -> "Quat":
        """
        Quaternion from B321 Euler angles, the rotation from frame 1 to
        frame 2 being yaw, then pitch, then roll.
        :param e: Euler angles (phi, theta, psi)
        :return: The quaternion.
        """
        e = e.param if isinstance(e, Euler) else vector3(e)
        cosPhi_2 = ca.cos(e[0] / 2)
        cosTheta_2 = ca.cos(e[1] / 2)
        cosPsi_2 = ca.cos(e[2] / 2)
        sinPhi_2 = ca.sin(e[0] / 2)
        sinTheta_2 = ca.sin(e[1] / 2)
        sinPsi_2 = ca.sin(e[2] / 2)
        return cls(
            cosPhi_2 * cosTheta_2 * cosPsi_2 + sinPhi_2 * sinTheta_2 * sinPsi_2,
            sinPhi_2 * cosTheta_2 * cosPsi_2 - cosPhi_2 * sinTheta_2 * sinPsi_2,
            cosPhi_2 * sinTheta_2 * cosPsi_2 + sinPhi_2 * cosTheta_2 * sinPsi_2,
            cosPhi_2 * cosTheta_2 * sinPsi_2 - sinPhi_2 * sinTheta_2 * cosPsi_2,
        )

    def to_euler(self) -> "Euler":
        """
        Converts a unit quaternion to B321 Euler angles.

        At pitch = +/- pi/2 roll and yaw are coupled and only their
        combination is meaningful, see Euler.gimbal_lock.
        :return: The B321 Euler angles (Phi [roll], Theta [pitch], Psi[heading])
        """
        a = self.param[0]
        b = self.param[1]
        c = self.param[2]
        d = self.param[3]
        return Euler(
            ca.atan2(2 * (a * b + c * d), 1 - 2 * (b**2 + c**2)),
            ca.asin(ca.fmin(ca.fmax(2 * (a * c - d * b), -1), 1)),
            ca.atan2(2 * (a * d + b * c), 1 - 2 * (c**2 + d**2)),
        )

    def to_dcm(self) -> "Dcm":
        return Dcm.from_quat(self)

    def to_quat(self) -> "Quat":
        return Quat(self.param)


class Dcm(Rotation):
    """
    A direction cosine matrix, v_n = R * v_b.

    Orthonormal when produced by a conversion, a matrix passed in directly
    is taken as is.
    """

    shape = (3, 3)

    def __init__(self, *args):
        if len(args) == 0:
            param = ca.DM.eye(3)
        elif len(args) == 1:
            other = args[0]
            if isinstance(other, Rotation):
                param = other.to_dcm().param
            else:
                param = other
        else:
            raise ValueError(
                "Dcm expects (), a 3x3 value or a rotation, "
                "got {:d} arguments".format(len(args))
            )
        super().__init__(param)

    def __mul__(self, other):
        return self.multiply(other)

    def multiply(self, other):
        """
        Product with another DCM, or rotation of a vector.
        :param other: A Dcm, or a 3x1 vector in frame b.
        :return: The product Dcm, or the vector in frame n.
        """
        if isinstance(other, Dcm):
            return Dcm(ca.mtimes(self.param, other.param))
        return ca.mtimes(self.param, vector3(other))

    def trace(self):
        return ca.trace(self.param)

    # noinspection PyPep8Naming
    def T(self) -> "Dcm":
        return Dcm(self.param.T)

    def inversed(self) -> "Dcm":
        """
        The inverse of an orthonormal matrix is its transpose.
        """
        return self.T()

    def derivative(self, w):
        """
        The kinematic equation relating the time derivative of the DCM to the
        angular velocity.
        :param w: The angular velocity in the body frame.
        :return: The time derivative of the DCM.
        """
        return ca.mtimes(self.param, wedge(vector3(w)))

    def renormalized(self) -> "Dcm":
        """
        Remove the drift from orthonormality accumulated by integration.

        The orthogonality error of the first two rows is split between them,
        the third row is rebuilt from their cross product and all rows are
        normalized.
        """
        r0 = self.param[0, :].T
        r1 = self.param[1, :].T
        err = ca.dot(r0, r1)
        x = r0 - err / 2 * r1
        y = r1 - err / 2 * r0
        z = cross(x, y)
        return Dcm(
            ca.horzcat(x / ca.norm_2(x), y / ca.norm_2(y), z / ca.norm_2(z)).T
        )

    @classmethod
    def from_quat(cls, q) -> "Dcm":
        """
        Converts a quaternion to a DCM.
        :param q: The quaternion.
        :return: The DCM.
        """
        q = q.param if isinstance(q, Quat) else vector4(q)
        a = q[0]
        b = q[1]
        c = q[2]
        d = q[3]
        aa = a * a
        ab = a * b
        ac = a * c
        ad = a * d
        bb = b * b
        bc = b * c
        bd = b * d
        cc = c * c
        cd = c * d
        dd = d * d
        return cls(
            ca.vertcat(
                ca.horzcat(aa + bb - cc - dd, 2 * (bc - ad), 2 * (bd + ac)),
                ca.horzcat(2 * (bc + ad), aa + cc - bb - dd, 2 * (cd - ab)),
                ca.horzcat(2 * (bd - ac), 2 * (cd + ab), aa + dd - bb - cc),
            )
        )

    @classmethod
    def from_euler(cls, e) -> "Dcm":
        """
        Converts B321 Euler angles to a DCM, Rz(psi) * Ry(theta) * Rx(phi).
        :param e: Euler angles (phi, theta, psi)
        :return: The DCM.
        """
        e = e.param if isinstance(e, Euler) else vector3(e)
        cosPhi = ca.cos(e[0])
        sinPhi = ca.sin(e[0])
        cosThe = ca.cos(e[1])
        sinThe = ca.sin(e[1])
        cosPsi = ca.cos(e[2])
        sinPsi = ca.sin(e[2])
        return cls(
            ca.vertcat(
                ca.horzcat(
                    cosThe * cosPsi,
                    -cosPhi * sinPsi + sinPhi * sinThe * cosPsi,
                    sinPhi * sinPsi + cosPhi * sinThe * cosPsi,
                ),
                ca.horzcat(
                    cosThe * sinPsi,
                    cosPhi * cosPsi + sinPhi * sinThe * sinPsi,
                    -sinPhi * cosPsi + cosPhi * sinThe * sinPsi,
                ),
                ca.horzcat(-sinThe, sinPhi * cosThe, cosPhi * cosThe),
            )
        )

    @classmethod
    def from_axis_angle(cls, vec) -> "Dcm":
        """
        The exponential map from a rotation vector to a DCM (Rodrigues).
        :param vec: rotation vector, the norm is the angle
        :return: The DCM.
        """
        vec = vector3(vec)
        theta = ca.norm_2(vec)
        X = wedge(vec)
        return cls(ca.DM.eye(3) + C1(theta) * X + C2(theta) * ca.mtimes(X, X))

    def to_quat(self) -> Quat:
        return Quat.from_dcm(self)

    def to_dcm(self) -> "Dcm":
        return Dcm(self.param)


class Euler(Rotation):
    """
    Body 321 Euler angles (phi [roll], theta [pitch], psi [yaw]) in radians.

    Singular at theta = +/- pi/2 (gimbal lock), where roll and yaw rotate
    about the same axis and can not be recovered individually. This is not
    reported as an error, use gimbal_lock to check for it.
    """

    shape = (3, 1)

    def __init__(self, *args):
        if len(args) == 0:
            param = ca.DM.zeros(3, 1)
        elif len(args) == 3:
            param = ca.vertcat(*args)
        elif len(args) == 1:
            other = args[0]
            if isinstance(other, Euler):
                param = other.param
            elif isinstance(other, Rotation):
                param = other.to_quat().to_euler().param
            else:
                param = other
        else:
            raise ValueError(
                "Euler expects (), (phi, theta, psi), a 3x1 value or a rotation, "
                "got {:d} arguments".format(len(args))
            )
        super().__init__(param)

    def phi(self):
        return self.param[0]

    def theta(self):
        return self.param[1]

    def psi(self):
        return self.param[2]

    def gimbal_lock(self, tol=GIMBAL_LOCK_TOL):
        """
        True when pitch is within tol of +/- pi/2.
        """
        return ca.fabs(ca.fabs(self.param[1]) - ca.pi / 2) < tol

    def multiply(self, other: "Euler") -> "Euler":
        """
        Composition through the DCM, other is applied first.
        """
        assert isinstance(other, Euler)
        return (self.to_dcm() * other.to_dcm()).to_euler()

    def inversed(self) -> "Euler":
        return self.to_dcm().inversed().to_euler()

    @classmethod
    def from_quat(cls, q) -> "Euler":
        return Quat(q).to_euler()

    @classmethod
    def from_dcm(cls, R) -> "Euler":
        return Quat.from_dcm(R).to_euler()

    def to_quat(self) -> Quat:
        return Quat.from_euler(self)

    def to_dcm(self) -> Dcm:
        return Dcm.from_euler(self)

    def to_euler(self) -> "Euler":
        return Euler(self.param)


class AxisAngle(Rotation):
    """
    Axis and angle packed in one rotation vector: the direction is the
    axis and the norm is the angle. At zero angle the axis is undefined,
    unit() then returns the zero vector.
    """

    shape = (3, 1)

    def __init__(self, *args):
        if len(args) == 0:
            param = ca.DM.zeros(3, 1)
        elif len(args) == 3:
            param = ca.vertcat(*args)
        elif len(args) == 2:
            param = vector3(args[0]) * as_expr(args[1])
        elif len(args) == 1:
            other = args[0]
            if isinstance(other, AxisAngle):
                param = other.param
            elif isinstance(other, Rotation):
                param = other.to_quat().to_axis_angle().param
            else:
                param = other
        else:
            raise ValueError(
                "AxisAngle expects (), (x, y, z), (axis, angle), a 3x1 value or "
                "a rotation, got {:d} arguments".format(len(args))
            )
        super().__init__(param)

    def norm(self):
        return ca.norm_2(self.param)

    def unit(self):
        return unit(self.param)

    def angle(self):
        return self.norm()

    def axis(self):
        return self.unit()

    @classmethod
    def from_quat(cls, q) -> "AxisAngle":
        return Quat(q).to_axis_angle()

    @classmethod
    def from_dcm(cls, R) -> "AxisAngle":
        return Quat.from_dcm(R).to_axis_angle()

    @classmethod
    def from_euler(cls, e) -> "AxisAngle":
        return Quat.from_euler(e).to_axis_angle()

    def to_quat(self) -> Quat:
        return Quat.from_axis_angle(self.param)

    def to_dcm(self) -> Dcm:
        return Dcm.from_axis_angle(self.param)

    def to_axis_angle(self) -> "AxisAngle":
        return AxisAngle(self.param)
