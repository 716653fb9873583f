import logging
import math
import numbers
import struct
import dataclasses
from typing import Optional

import numpy as np

from ..settings import Settings
from ..utils.formatting import format_components
from ..utils.helpers import (
    RAD_TO_DEG,
    clamp as clamp_scalar,
    component_index,
    ieee_divide,
    lerp as lerp_scalar,
    to_single,
)
from .precision import Vector3d, Vector3i

logger = logging.getLogger(__name__)

EPSILON = Settings.EPSILON


@dataclasses.dataclass(slots=True)
class Vector3:
    """
    A single precision 3D vector with X, Y, and Z components.

    Components are rounded to IEEE-754 binary32 whenever they are assigned,
    so results match what single precision mesh code produces. The type is
    mutable: normalize(), scale(), clamp() and set() work in place, while
    normalized(), scaled(), clamped() and the operators return new vectors.

    Equality is approximate: two vectors are equal when the squared length
    of their difference is below EPSILON. Use equals_exact() for a
    component-by-component comparison.
    """
    X: float = 0.0
    Y: float = 0.0
    Z: float = 0.0

    EPSILON = EPSILON

    # numpy scalars defer to __rmul__ instead of broadcasting over the sequence.
    __array_ufunc__ = None

    def __setattr__(self, name: str, value) -> None:
        object.__setattr__(self, name, to_single(value))

    # --- Construction and conversion ---

    @classmethod
    def from_scalar(cls, value: float) -> "Vector3":
        """Creates a vector with one value for all components."""
        return cls(value, value, value)

    @classmethod
    def from_double(cls, vector: Vector3d) -> "Vector3":
        """
        Narrows a double precision vector to single precision.

        Accepts a Vector3d or anything else exposing X, Y and Z. Components
        outside the single precision range become infinities.
        """
        return cls(vector.X, vector.Y, vector.Z)

    @classmethod
    def from_int(cls, vector: Vector3i) -> "Vector3":
        """Widens an integer vector to single precision."""
        return cls(vector.X, vector.Y, vector.Z)

    @classmethod
    def from_array(cls, values) -> "Vector3":
        """Creates a vector from a sequence or numpy array of three numbers."""
        array = np.asarray(values, dtype=np.float32)
        if array.shape != (3,):
            raise ValueError(f"Vector3 requires exactly 3 components, got shape {array.shape}.")
        return cls(*array.tolist())

    @staticmethod
    def from_bytes(data: bytes, offset: int = 0) -> "Vector3":
        """Unpacks a vector from bytes (12 bytes, 3 floats little-endian)."""
        if len(data) - offset < 12:
            raise ValueError("Not enough bytes to unpack Vector3. Need 12.")
        x, y, z = struct.unpack_from('<fff', data, offset)
        return Vector3(x, y, z)

    def to_bytes(self) -> bytes:
        """Packs the vector into bytes (12 bytes, 3 floats little-endian)."""
        return struct.pack('<fff', self.X, self.Y, self.Z)

    def to_double(self) -> Vector3d:
        """Widens this vector to double precision. The conversion is exact."""
        return Vector3d(self.X, self.Y, self.Z)

    def to_array(self) -> np.ndarray:
        return np.array((self.X, self.Y, self.Z), dtype=np.float32)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.X, self.Y, self.Z)

    def copy(self) -> "Vector3":
        return Vector3(self.X, self.Y, self.Z)

    def set(self, x: float, y: float, z: float) -> None:
        """Sets all three components of this vector."""
        self.X = x
        self.Y = y
        self.Z = z

    # --- Component access ---

    def __len__(self) -> int:
        return 3

    def __iter__(self):
        yield self.X
        yield self.Y
        yield self.Z

    def __getitem__(self, index: int) -> float:
        index = component_index(index, 3, "Vector3")
        if index == 0:
            return self.X
        if index == 1:
            return self.Y
        return self.Z

    def __setitem__(self, index: int, value: float) -> None:
        index = component_index(index, 3, "Vector3")
        if index == 0:
            self.X = value
        elif index == 1:
            self.Y = value
        else:
            self.Z = value

    # --- Arithmetic ---

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.X + other.X, self.Y + other.Y, self.Z + other.Z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.X - other.X, self.Y - other.Y, self.Z - other.Z)

    def negate(self) -> "Vector3":
        return Vector3(-self.X, -self.Y, -self.Z)

    def multiply(self, scalar: float) -> "Vector3":
        """Scales the vector uniformly."""
        d = to_single(scalar)
        return Vector3(self.X * d, self.Y * d, self.Z * d)

    def divide(self, scalar: float) -> "Vector3":
        """
        Divides every component by a scalar.

        There is no zero check: dividing by zero yields infinities, or NaN
        for zero components.
        """
        d = to_single(scalar)
        return Vector3(ieee_divide(self.X, d), ieee_divide(self.Y, d), ieee_divide(self.Z, d))

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def __mul__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.divide(scalar)

    # --- Metrics ---

    def magnitude_squared(self) -> float:
        """Returns the squared magnitude of the vector. Cheaper than magnitude() for comparisons."""
        return to_single(self.X * self.X + self.Y * self.Y + self.Z * self.Z)

    def magnitude(self) -> float:
        """Returns the magnitude (length) of the vector."""
        return to_single(math.sqrt(self.magnitude_squared()))

    def dot(self, other: "Vector3") -> float:
        """
        Dot product of two vectors.
        Callable as lhs.dot(rhs) or Vector3.dot(lhs, rhs).
        """
        return to_single(self.X * other.X + self.Y * other.Y + self.Z * other.Z)

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Cross product lhs x rhs, following the right-hand rule.
        Callable as lhs.cross(rhs) or Vector3.cross(lhs, rhs).
        """
        return Vector3(
            self.Y * other.Z - self.Z * other.Y,
            self.Z * other.X - self.X * other.Z,
            self.X * other.Y - self.Y * other.X,
        )

    def normalized(self) -> "Vector3":
        """
        Returns a new vector of unit length pointing the same way.

        A vector whose magnitude is not above EPSILON (this includes NaN
        magnitudes) normalizes to the zero vector instead of failing.
        """
        mag = self.magnitude()
        if mag > EPSILON:
            return Vector3(self.X / mag, self.Y / mag, self.Z / mag)
        logger.debug("Normalizing degenerate vector %r; result is the zero vector.", self)
        return Vector3(0.0, 0.0, 0.0)

    def normalize(self) -> None:
        """Normalizes this vector in place. See normalized()."""
        result = self.normalized()
        self.set(result.X, result.Y, result.Z)

    @staticmethod
    def scaled(a: "Vector3", b: "Vector3") -> "Vector3":
        """Multiplies two vectors component-wise."""
        return Vector3(a.X * b.X, a.Y * b.Y, a.Z * b.Z)

    def scale(self, other: "Vector3") -> None:
        """Multiplies this vector component-wise with another, in place."""
        result = Vector3.scaled(self, other)
        self.set(result.X, result.Y, result.Z)

    def clamped(self, min_val: float, max_val: float) -> "Vector3":
        """Returns a copy with each component clamped to [min_val, max_val]."""
        lo, hi = to_single(min_val), to_single(max_val)
        return Vector3(
            clamp_scalar(self.X, lo, hi),
            clamp_scalar(self.Y, lo, hi),
            clamp_scalar(self.Z, lo, hi),
        )

    def clamp(self, min_val: float, max_val: float) -> None:
        """Clamps each component of this vector to [min_val, max_val], in place."""
        result = self.clamped(min_val, max_val)
        self.set(result.X, result.Y, result.Z)

    @staticmethod
    def lerp(a: "Vector3", b: "Vector3", t: float) -> "Vector3":
        """
        Linear interpolation from a to b.

        t is not clamped, so values outside [0, 1] extrapolate.
        """
        t = to_single(t)
        return Vector3(
            lerp_scalar(a.X, b.X, t),
            lerp_scalar(a.Y, b.Y, t),
            lerp_scalar(a.Z, b.Z, t),
        )

    @staticmethod
    def angle(from_: "Vector3", to: "Vector3") -> float:
        """
        Angle between two vectors, in degrees.

        The dot product of the normalized inputs is clamped to [-1, 1]
        before acos. A zero input normalizes to zero, which reads as 90
        degrees.
        """
        cos_angle = Vector3.dot(from_.normalized(), to.normalized())
        return to_single(math.acos(clamp_scalar(cos_angle, -1.0, 1.0)) * RAD_TO_DEG)

    @staticmethod
    def ortho_normalize(normal: "Vector3", tangent: "Vector3") -> None:
        """
        Makes normal and tangent unit length and perpendicular, in place.

        The normal is normalized first, then the tangent loses its component
        along the normal and is normalized (one Gram-Schmidt step). If either
        vector degenerates it becomes the zero vector and the pair is not
        perpendicular.
        """
        normal.normalize()
        projection = normal.multiply(Vector3.dot(tangent, normal))
        remainder = tangent.subtract(projection)
        tangent.set(remainder.X, remainder.Y, remainder.Z)
        tangent.normalize()

    # --- Equality ---

    def approx_equals(self, other: "Vector3", epsilon: float = EPSILON) -> bool:
        """True if the squared distance to other is below epsilon."""
        return self.subtract(other).magnitude_squared() < epsilon

    def not_equals(self, other: "Vector3") -> bool:
        """
        True if the squared distance to other is at least EPSILON.

        Not simply the negation of approx_equals(): when the distance is NaN
        both return False.
        """
        return self.subtract(other).magnitude_squared() >= EPSILON

    def equals_exact(self, other) -> bool:
        """Component-by-component comparison with no tolerance."""
        if not isinstance(other, Vector3):
            return False
        return self.X == other.X and self.Y == other.Y and self.Z == other.Z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.approx_equals(other)

    def __ne__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.not_equals(other)

    def __hash__(self) -> int:
        return hash(self.X) ^ hash(self.Y) << 2 ^ hash(self.Z) >> 2

    # --- Text ---

    def to_string(self, fmt: Optional[str] = None) -> str:
        """Formats the components as "(x, y, z)". See utils.formatting for accepted formats."""
        return format_components(self, Settings.DEFAULT_FLOAT_FORMAT if fmt is None else fmt)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec or None)

    def __repr__(self) -> str:
        return f"Vector3(X={self.X}, Y={self.Y}, Z={self.Z})"

Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
