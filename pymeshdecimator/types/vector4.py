import logging
import math
import numbers
import struct
import dataclasses
from typing import Optional

import numpy as np

from ..settings import Settings
from ..utils.formatting import format_components
from ..utils.helpers import clamp as clamp_scalar, component_index, ieee_divide, lerp as lerp_scalar, to_single
from .precision import Vector4d, Vector4i

logger = logging.getLogger(__name__)

EPSILON = Settings.EPSILON


@dataclasses.dataclass(slots=True)
class Vector4:
    """
    A single precision 4D vector with X, Y, Z, and W components.

    Offers the same arithmetic, metric and interpolation operations as
    Vector2 and Vector3. There is no cross product or angle in 4D.
    """
    X: float = 0.0
    Y: float = 0.0
    Z: float = 0.0
    W: float = 0.0

    EPSILON = EPSILON

    # numpy scalars defer to __rmul__ instead of broadcasting over the sequence.
    __array_ufunc__ = None

    def __setattr__(self, name: str, value) -> None:
        object.__setattr__(self, name, to_single(value))

    # --- Construction and conversion ---

    @classmethod
    def from_scalar(cls, value: float) -> "Vector4":
        """Creates a vector with one value for all components."""
        return cls(value, value, value, value)

    @classmethod
    def from_double(cls, vector: Vector4d) -> "Vector4":
        """Narrows a double precision vector (anything with X, Y, Z and W) to single precision."""
        return cls(vector.X, vector.Y, vector.Z, vector.W)

    @classmethod
    def from_int(cls, vector: Vector4i) -> "Vector4":
        """Widens an integer vector to single precision."""
        return cls(vector.X, vector.Y, vector.Z, vector.W)

    @classmethod
    def from_array(cls, values) -> "Vector4":
        """Creates a vector from a sequence or numpy array of four numbers."""
        array = np.asarray(values, dtype=np.float32)
        if array.shape != (4,):
            raise ValueError(f"Vector4 requires exactly 4 components, got shape {array.shape}.")
        return cls(*array.tolist())

    @staticmethod
    def from_bytes(data: bytes, offset: int = 0) -> "Vector4":
        """Unpacks a vector from bytes (16 bytes, 4 floats little-endian)."""
        if len(data) - offset < 16:
            raise ValueError("Not enough bytes to unpack Vector4. Need 16.")
        x, y, z, w = struct.unpack_from('<ffff', data, offset)
        return Vector4(x, y, z, w)

    def to_bytes(self) -> bytes:
        """Packs the vector into bytes (16 bytes, 4 floats little-endian)."""
        return struct.pack('<ffff', self.X, self.Y, self.Z, self.W)

    def to_double(self) -> Vector4d:
        return Vector4d(self.X, self.Y, self.Z, self.W)

    def to_array(self) -> np.ndarray:
        return np.array((self.X, self.Y, self.Z, self.W), dtype=np.float32)

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.X, self.Y, self.Z, self.W)

    def copy(self) -> "Vector4":
        return Vector4(self.X, self.Y, self.Z, self.W)

    def set(self, x: float, y: float, z: float, w: float) -> None:
        """Sets all four components of this vector."""
        self.X = x
        self.Y = y
        self.Z = z
        self.W = w

    # --- Component access ---

    def __len__(self) -> int:
        return 4

    def __iter__(self):
        yield self.X
        yield self.Y
        yield self.Z
        yield self.W

    def __getitem__(self, index: int) -> float:
        index = component_index(index, 4, "Vector4")
        if index == 0:
            return self.X
        if index == 1:
            return self.Y
        if index == 2:
            return self.Z
        return self.W

    def __setitem__(self, index: int, value: float) -> None:
        index = component_index(index, 4, "Vector4")
        if index == 0:
            self.X = value
        elif index == 1:
            self.Y = value
        elif index == 2:
            self.Z = value
        else:
            self.W = value

    # --- Arithmetic ---

    def add(self, other: "Vector4") -> "Vector4":
        return Vector4(self.X + other.X, self.Y + other.Y, self.Z + other.Z, self.W + other.W)

    def subtract(self, other: "Vector4") -> "Vector4":
        return Vector4(self.X - other.X, self.Y - other.Y, self.Z - other.Z, self.W - other.W)

    def negate(self) -> "Vector4":
        return Vector4(-self.X, -self.Y, -self.Z, -self.W)

    def multiply(self, scalar: float) -> "Vector4":
        """Scales the vector uniformly."""
        d = to_single(scalar)
        return Vector4(self.X * d, self.Y * d, self.Z * d, self.W * d)

    def divide(self, scalar: float) -> "Vector4":
        """Divides every component by a scalar. A zero divisor gives infinities or NaN, not an error."""
        d = to_single(scalar)
        return Vector4(
            ieee_divide(self.X, d),
            ieee_divide(self.Y, d),
            ieee_divide(self.Z, d),
            ieee_divide(self.W, d),
        )

    def __add__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vector4":
        return self.negate()

    def __mul__(self, scalar: float) -> "Vector4":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: float) -> "Vector4":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector4":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.divide(scalar)

    # --- Metrics ---

    def magnitude_squared(self) -> float:
        """Returns the squared magnitude of the vector."""
        return to_single(self.X * self.X + self.Y * self.Y + self.Z * self.Z + self.W * self.W)

    def magnitude(self) -> float:
        """Returns the magnitude (length) of the vector."""
        return to_single(math.sqrt(self.magnitude_squared()))

    def dot(self, other: "Vector4") -> float:
        """Dot product of two vectors. Callable as lhs.dot(rhs) or Vector4.dot(lhs, rhs)."""
        return to_single(self.X * other.X + self.Y * other.Y + self.Z * other.Z + self.W * other.W)

    def normalized(self) -> "Vector4":
        """
        Returns a new normalized vector.
        Returns a zero vector if the magnitude is not above EPSILON.
        """
        mag = self.magnitude()
        if mag > EPSILON:
            return Vector4(self.X / mag, self.Y / mag, self.Z / mag, self.W / mag)
        logger.debug("Normalizing degenerate vector %r; result is the zero vector.", self)
        return Vector4(0.0, 0.0, 0.0, 0.0)

    def normalize(self) -> None:
        """Normalizes this vector in place."""
        result = self.normalized()
        self.set(result.X, result.Y, result.Z, result.W)

    @staticmethod
    def scaled(a: "Vector4", b: "Vector4") -> "Vector4":
        """Multiplies two vectors component-wise."""
        return Vector4(a.X * b.X, a.Y * b.Y, a.Z * b.Z, a.W * b.W)

    def scale(self, other: "Vector4") -> None:
        """Multiplies this vector component-wise with another, in place."""
        result = Vector4.scaled(self, other)
        self.set(result.X, result.Y, result.Z, result.W)

    def clamped(self, min_val: float, max_val: float) -> "Vector4":
        lo, hi = to_single(min_val), to_single(max_val)
        return Vector4(
            clamp_scalar(self.X, lo, hi),
            clamp_scalar(self.Y, lo, hi),
            clamp_scalar(self.Z, lo, hi),
            clamp_scalar(self.W, lo, hi),
        )

    def clamp(self, min_val: float, max_val: float) -> None:
        """Clamps each component of this vector to [min_val, max_val], in place."""
        result = self.clamped(min_val, max_val)
        self.set(result.X, result.Y, result.Z, result.W)

    @staticmethod
    def lerp(a: "Vector4", b: "Vector4", t: float) -> "Vector4":
        """Linear interpolation from a to b. t outside [0, 1] extrapolates."""
        t = to_single(t)
        return Vector4(
            lerp_scalar(a.X, b.X, t),
            lerp_scalar(a.Y, b.Y, t),
            lerp_scalar(a.Z, b.Z, t),
            lerp_scalar(a.W, b.W, t),
        )

    # --- Equality ---

    def approx_equals(self, other: "Vector4", epsilon: float = EPSILON) -> bool:
        """True if the squared distance to other is below epsilon."""
        return self.subtract(other).magnitude_squared() < epsilon

    def not_equals(self, other: "Vector4") -> bool:
        """True if the squared distance to other is at least EPSILON."""
        return self.subtract(other).magnitude_squared() >= EPSILON

    def equals_exact(self, other) -> bool:
        if not isinstance(other, Vector4):
            return False
        return self.X == other.X and self.Y == other.Y and self.Z == other.Z and self.W == other.W

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return self.approx_equals(other)

    def __ne__(self, other) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return self.not_equals(other)

    def __hash__(self) -> int:
        return hash(self.X) ^ hash(self.Y) << 2 ^ hash(self.Z) >> 2 ^ hash(self.W) >> 1

    # --- Text ---

    def to_string(self, fmt: Optional[str] = None) -> str:
        return format_components(self, Settings.DEFAULT_FLOAT_FORMAT if fmt is None else fmt)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec or None)

    def __repr__(self) -> str:
        return f"Vector4(X={self.X}, Y={self.Y}, Z={self.Z}, W={self.W})"

Vector4.ZERO = Vector4(0.0, 0.0, 0.0, 0.0)
