import math
import numpy as np

from .config import (
    EPSILON,
    NORMALIZE_EPSILON,
    QUAT_UNIT_MIN,
    QUAT_UNIT_MAX,
    SLERP_LINEAR_THRESHOLD,
    MATRIX_DTYPE,
    MATRIX_DTYPE_DOUBLE,
)


class Vector3:
    """3-component value vector. Every operation returns a new instance."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_polar(cls, phi, theta):
        # z only depends on phi; consumers rely on this two-angle mapping
        return cls(
            math.sin(phi) * math.cos(theta),
            math.sin(phi) * math.sin(theta),
            math.sin(phi),
        )

    def __repr__(self):
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def copy(self):
        return Vector3(self.x, self.y, self.z)

    def scale(self, factor):
        return self * factor

    def mul(self, other):
        """Componentwise product."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def length(self):
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def length_sq(self):
        return self.x**2 + self.y**2 + self.z**2

    def normalized(self):
        l = self.length()
        if l < NORMALIZE_EPSILON:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / l, self.y / l, self.z / l)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def lerp(self, other, fact):
        return Vector3(
            self.x + fact * (other.x - self.x),
            self.y + fact * (other.y - self.y),
            self.z + fact * (other.z - self.z),
        )

    def to_array(self):
        return [self.x, self.y, self.z]

    def to_numpy(self):
        return np.array([self.x, self.y, self.z])


class Quaternion:
    """Rotation quaternion with vector part (x, y, z) and scalar part w.

    Only the constructors (`from_axis_angle`, `from_euler`, `look_at`)
    guarantee unit length. `+`, scalar `*` and scalar `/` can leave the
    result off the unit sphere; call `normalized()` before relying on it.
    """

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @classmethod
    def from_axis_angle(cls, angle_deg, vx, vy, vz):
        """Rotation of `angle_deg` degrees about an already normalized axis."""
        ang = math.radians(angle_deg)
        s = math.sin(ang / 2.0)
        return cls(vx * s, vy * s, vz * s, math.cos(ang / 2.0))

    @classmethod
    def from_euler(cls, roll, pitch, yaw):
        """Compose degrees as (pitch about X * yaw about Y) * roll about Z."""
        pitchq = cls.from_axis_angle(pitch, 1.0, 0.0, 0.0)
        yawq = cls.from_axis_angle(yaw, 0.0, 1.0, 0.0)
        rollq = cls.from_axis_angle(roll, 0.0, 0.0, 1.0)
        return (pitchq * yawq) * rollq

    @classmethod
    def look_at(cls, position, target):
        """Orientation from the angles between the view direction and each axis."""
        diff = (target - position).normalized()
        xang = math.degrees(math.acos(_clamp_unit(diff.x)))
        yang = math.degrees(math.acos(_clamp_unit(diff.y)))
        zang = math.degrees(math.acos(_clamp_unit(diff.z)))
        return cls.from_euler(xang, yang, zang)

    def __repr__(self):
        return f"Quaternion({self.x}, {self.y}, {self.z}, {self.w})"

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return (
            self.x == other.x
            and self.y == other.y
            and self.z == other.z
            and self.w == other.w
        )

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other):
        return Quaternion(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return self.multiply(other)
        return Quaternion(self.x * other, self.y * other, self.z * other, self.w * other)

    def __rmul__(self, scalar):
        return Quaternion(
            self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar
        )

    def __truediv__(self, scalar):
        return Quaternion(
            self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar
        )

    def copy(self):
        return Quaternion(self.x, self.y, self.z, self.w)

    def multiply(self, other):
        """Hamilton product self * other."""
        return Quaternion(
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y + self.y * other.w + self.z * other.x - self.x * other.z,
            self.w * other.z + self.z * other.w + self.x * other.y - self.y * other.x,
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    def length_sq(self):
        return self.x**2 + self.y**2 + self.z**2 + self.w**2

    def length(self):
        return math.sqrt(self.length_sq())

    def normalized(self):
        val = self.length_sq()
        if QUAT_UNIT_MIN < val < QUAT_UNIT_MAX:
            return self

        val = math.sqrt(val)
        return Quaternion(self.x / val, self.y / val, self.z / val, self.w / val)

    def conjugate(self):
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    # The conjugate is the inverse for unit quaternions
    inverse = conjugate

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def rotate_vector(self, v):
        qv = Quaternion(v.x, v.y, v.z, 0.0)
        result = (self * qv) * self.conjugate()
        return Vector3(result.x, result.y, result.z)

    def to_euler_deg(self):
        """Decompose into degrees.

        Returns a Vector3 whose x is the angle about Z, y the angle about Y
        and z the angle about X, matching `from_axis_angle` inputs for
        single-axis rotations.
        """
        sqw = self.w * self.w
        sqx = self.x * self.x
        sqy = self.y * self.y
        sqz = self.z * self.z

        x = math.atan2(2.0 * (self.x * self.y + self.z * self.w), sqx - sqy - sqz + sqw)
        y = math.asin(_clamp_unit(-2.0 * (self.x * self.z - self.y * self.w)))
        z = math.atan2(2.0 * (self.y * self.z + self.x * self.w), -sqx - sqy + sqz + sqw)

        return Vector3(math.degrees(x), math.degrees(y), math.degrees(z))

    def slerp(self, other, fact, force_long_path=False):
        """Spherical interpolation, not renormalized."""
        flip = False

        ct = self.dot(other)
        if force_long_path and ct < 1.0:
            ct = -ct
            flip = True

        th = math.acos(_clamp_unit(ct))
        sth = math.sin(th)

        if sth > SLERP_LINEAR_THRESHOLD:
            weight_a = math.sin((1.0 - fact) * th) / sth
            weight_b = math.sin(fact * th) / sth
        else:
            # nearly parallel
            weight_a = 1.0 - fact
            weight_b = fact

        if flip:
            weight_b = -weight_b

        return self * weight_a + other * weight_b

    def nlerp(self, other, fact, force_long_path=False):
        """Normalized linear interpolation.

        With `force_long_path` and opposing hemispheres the second term is
        built from `self`, not `other`; existing animation data depends on
        this blend.
        """
        tinv = 1.0 - fact

        if force_long_path and self.dot(other) < 0.0:
            rq = self * tinv + self * -fact
        else:
            rq = self * tinv + other * fact

        return rq.normalized()

    def to_matrix(self, out=None, dtype=MATRIX_DTYPE):
        """Column-major 4x4 rotation matrix as a flat array of 16."""
        x, y, z, w = self.x, self.y, self.z, self.w
        rows = np.array(
            [
                [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w), 0],
                [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w), 0],
                [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y), 0],
                [0, 0, 0, 1],
            ],
            dtype=dtype,
        )
        if out is None:
            return rows.T.reshape(16)
        out[:] = rows.T.reshape(16)
        return out

    def to_matrix_double(self, out=None):
        return self.to_matrix(out, dtype=MATRIX_DTYPE_DOUBLE)


def _clamp_unit(value):
    return max(-1.0, min(1.0, value))


def slerp_quat180(a, b, fact):
    return a.slerp(b, fact, False)


def slerp_quat360(a, b, fact):
    return a.slerp(b, fact, True)


def nlerp_quat180(a, b, fact):
    return a.nlerp(b, fact, False)


def nlerp_quat360(a, b, fact):
    return a.nlerp(b, fact, True)


def lerp_val(a, b, fact):
    return a + fact * (b - a)


def lerp_fract(startt, endt, ct):
    """Fraction of the way from tick `startt` to `endt` at tick `ct`."""
    startf = float(startt) + EPSILON
    endf = float(endt) + EPSILON

    if ct > endt:
        ct = endt

    if endf == startf:
        return 1.0

    cf = float(ct) - startf + EPSILON
    return cf / (endf - startf)
