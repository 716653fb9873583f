"""pymeshdecimator: single precision vector math for mesh decimation."""

__version__ = "0.1.0"

from .settings import Settings, configure_logging
from .types import (
    Vector2, Vector3, Vector4,
    Vector2d, Vector3d, Vector4d,
    Vector2i, Vector3i, Vector4i,
    VectorLike,
)

EPSILON = Settings.EPSILON

__all__ = [
    "__version__",
    "EPSILON", "Settings", "configure_logging",
    "Vector2", "Vector3", "Vector4",
    "Vector2d", "Vector3d", "Vector4d",
    "Vector2i", "Vector3i", "Vector4i",
    "VectorLike",
]
