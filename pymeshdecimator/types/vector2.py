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
from .precision import Vector2d, Vector2i

logger = logging.getLogger(__name__)

EPSILON = Settings.EPSILON


@dataclasses.dataclass(slots=True)
class Vector2:
    """
    A single precision 2D vector with X and Y components.
    Components are stored rounded to single precision. See Vector3 for the
    conventions shared by all vector types.
    """
    X: float = 0.0
    Y: float = 0.0

    EPSILON = EPSILON

    # numpy scalars defer to __rmul__ instead of broadcasting over the sequence.
    __array_ufunc__ = None

    def __setattr__(self, name: str, value) -> None:
        object.__setattr__(self, name, to_single(value))

    # --- Construction and conversion ---

    @classmethod
    def from_scalar(cls, value: float) -> "Vector2":
        """Creates a vector with one value for both components."""
        return cls(value, value)

    @classmethod
    def from_double(cls, vector: Vector2d) -> "Vector2":
        """Narrows a double precision vector (anything with X and Y) to single precision."""
        return cls(vector.X, vector.Y)

    @classmethod
    def from_int(cls, vector: Vector2i) -> "Vector2":
        return cls(vector.X, vector.Y)

    @classmethod
    def from_array(cls, values) -> "Vector2":
        array = np.asarray(values, dtype=np.float32)
        if array.shape != (2,):
            raise ValueError(f"Vector2 requires exactly 2 components, got shape {array.shape}.")
        return cls(*array.tolist())

    @staticmethod
    def from_bytes(data: bytes, offset: int = 0) -> "Vector2":
        """Unpacks a vector from bytes (8 bytes, 2 floats little-endian)."""
        if len(data) - offset < 8:
            raise ValueError("Not enough bytes to unpack Vector2. Need 8.")
        x, y = struct.unpack_from('<ff', data, offset)
        return Vector2(x, y)

    def to_bytes(self) -> bytes:
        """Packs the vector into bytes (8 bytes, 2 floats little-endian)."""
        return struct.pack('<ff', self.X, self.Y)

    def to_double(self) -> Vector2d:
        return Vector2d(self.X, self.Y)

    def to_array(self) -> np.ndarray:
        return np.array((self.X, self.Y), dtype=np.float32)

    def to_tuple(self) -> tuple[float, float]:
        return (self.X, self.Y)

    def copy(self) -> "Vector2":
        return Vector2(self.X, self.Y)

    def set(self, x: float, y: float) -> None:
        self.X = x
        self.Y = y

    # --- Component access ---

    def __len__(self) -> int:
        return 2

    def __iter__(self):
        yield self.X
        yield self.Y

    def __getitem__(self, index: int) -> float:
        if component_index(index, 2, "Vector2") == 0:
            return self.X
        return self.Y

    def __setitem__(self, index: int, value: float) -> None:
        if component_index(index, 2, "Vector2") == 0:
            self.X = value
        else:
            self.Y = value

    # --- Arithmetic ---

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.X + other.X, self.Y + other.Y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self.X - other.X, self.Y - other.Y)

    def negate(self) -> "Vector2":
        return Vector2(-self.X, -self.Y)

    def multiply(self, scalar: float) -> "Vector2":
        d = to_single(scalar)
        return Vector2(self.X * d, self.Y * d)

    def divide(self, scalar: float) -> "Vector2":
        """Divides both components by a scalar. Zero divisors give infinities or NaN."""
        d = to_single(scalar)
        return Vector2(ieee_divide(self.X, d), ieee_divide(self.Y, d))

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vector2":
        return self.negate()

    def __mul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.divide(scalar)

    # --- Metrics ---

    def magnitude_squared(self) -> float:
        """Returns the squared magnitude of the vector."""
        return to_single(self.X * self.X + self.Y * self.Y)

    def magnitude(self) -> float:
        """Returns the magnitude (length) of the vector."""
        return to_single(math.sqrt(self.magnitude_squared()))

    def dot(self, other: "Vector2") -> float:
        return to_single(self.X * other.X + self.Y * other.Y)

    def normalized(self) -> "Vector2":
        """Returns a new normalized vector, or a zero vector if the magnitude is not above EPSILON."""
        mag = self.magnitude()
        if mag > EPSILON:
            return Vector2(self.X / mag, self.Y / mag)
        logger.debug("Normalizing degenerate vector %r; result is the zero vector.", self)
        return Vector2(0.0, 0.0)

    def normalize(self) -> None:
        result = self.normalized()
        self.set(result.X, result.Y)

    @staticmethod
    def scaled(a: "Vector2", b: "Vector2") -> "Vector2":
        """Multiplies two vectors component-wise."""
        return Vector2(a.X * b.X, a.Y * b.Y)

    def scale(self, other: "Vector2") -> None:
        result = Vector2.scaled(self, other)
        self.set(result.X, result.Y)

    def clamped(self, min_val: float, max_val: float) -> "Vector2":
        lo, hi = to_single(min_val), to_single(max_val)
        return Vector2(clamp_scalar(self.X, lo, hi), clamp_scalar(self.Y, lo, hi))

    def clamp(self, min_val: float, max_val: float) -> None:
        result = self.clamped(min_val, max_val)
        self.set(result.X, result.Y)

    @staticmethod
    def lerp(a: "Vector2", b: "Vector2", t: float) -> "Vector2":
        """Linear interpolation from a to b; t is not clamped."""
        t = to_single(t)
        return Vector2(lerp_scalar(a.X, b.X, t), lerp_scalar(a.Y, b.Y, t))

    # --- Equality ---

    def approx_equals(self, other: "Vector2", epsilon: float = EPSILON) -> bool:
        return self.subtract(other).magnitude_squared() < epsilon

    def not_equals(self, other: "Vector2") -> bool:
        return self.subtract(other).magnitude_squared() >= EPSILON

    def equals_exact(self, other) -> bool:
        if not isinstance(other, Vector2):
            return False
        return self.X == other.X and self.Y == other.Y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.approx_equals(other)

    def __ne__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.not_equals(other)

    def __hash__(self) -> int:
        return hash(self.X) ^ hash(self.Y) << 2

    # --- Text ---

    def to_string(self, fmt: Optional[str] = None) -> str:
        return format_components(self, Settings.DEFAULT_FLOAT_FORMAT if fmt is None else fmt)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec or None)

    def __repr__(self) -> str:
        return f"Vector2(X={self.X}, Y={self.Y})"

Vector2.ZERO = Vector2(0.0, 0.0)
