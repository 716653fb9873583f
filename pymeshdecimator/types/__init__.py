# Main __init__.py for the types sub-package

from .vector2 import Vector2
from .vector3 import Vector3
from .vector4 import Vector4
from .precision import Vector2d, Vector3d, Vector4d, Vector2i, Vector3i, Vector4i
from .protocols import VectorLike


__all__ = [
    "Vector2", "Vector3", "Vector4",
    "Vector2d", "Vector3d", "Vector4d",
    "Vector2i", "Vector3i", "Vector4i",
    "VectorLike",
]
