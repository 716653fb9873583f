"""
Double precision and integer vectors.

These only carry components. They exist so the single precision vectors
have something to convert from and to; arithmetic belongs to Vector2,
Vector3 and Vector4.
"""
import dataclasses


@dataclasses.dataclass(slots=True)
class Vector2d:
    """
    A 2D vector with double precision X and Y components.
    In Python, floats are already double precision (64-bit IEEE 754).
    """
    X: float = 0.0
    Y: float = 0.0

    def __post_init__(self):
        self.X, self.Y = float(self.X), float(self.Y)

    def __str__(self) -> str:
        return f"<{self.X}, {self.Y}>d"


@dataclasses.dataclass(slots=True)
class Vector3d:
    """A 3D vector with double precision X, Y, and Z components."""
    X: float = 0.0
    Y: float = 0.0
    Z: float = 0.0

    def __post_init__(self):
        self.X, self.Y, self.Z = float(self.X), float(self.Y), float(self.Z)

    def __str__(self) -> str:
        return f"<{self.X}, {self.Y}, {self.Z}>d"


@dataclasses.dataclass(slots=True)
class Vector4d:
    """A 4D vector with double precision X, Y, Z, and W components."""
    X: float = 0.0
    Y: float = 0.0
    Z: float = 0.0
    W: float = 0.0

    def __post_init__(self):
        self.X, self.Y, self.Z, self.W = float(self.X), float(self.Y), float(self.Z), float(self.W)

    def __str__(self) -> str:
        return f"<{self.X}, {self.Y}, {self.Z}, {self.W}>d"


@dataclasses.dataclass(slots=True)
class Vector2i:
    """A 2D vector with integer X and Y components."""
    X: int = 0
    Y: int = 0

    def __post_init__(self):
        self.X, self.Y = int(self.X), int(self.Y)

    def __str__(self) -> str:
        return f"<{self.X}, {self.Y}>i"


@dataclasses.dataclass(slots=True)
class Vector3i:
    """A 3D vector with integer X, Y, and Z components."""
    X: int = 0
    Y: int = 0
    Z: int = 0

    def __post_init__(self):
        self.X, self.Y, self.Z = int(self.X), int(self.Y), int(self.Z)

    def __str__(self) -> str:
        return f"<{self.X}, {self.Y}, {self.Z}>i"


@dataclasses.dataclass(slots=True)
class Vector4i:
    """A 4D vector with integer X, Y, Z, and W components."""
    X: int = 0
    Y: int = 0
    Z: int = 0
    W: int = 0

    def __post_init__(self):
        self.X, self.Y, self.Z, self.W = int(self.X), int(self.Y), int(self.Z), int(self.W)

    def __str__(self) -> str:
        return f"<{self.X}, {self.Y}, {self.Z}, {self.W}>i"
