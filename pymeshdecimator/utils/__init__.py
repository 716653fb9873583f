# This file marks pymeshdecimator.utils as a Python package.

from .helpers import (
    PI,
    DEG_TO_RAD,
    RAD_TO_DEG,
    float_to_bytes,
    bytes_to_float,
    to_single,
    ieee_divide,
    component_index,
    clamp,
    lerp,
)
from .formatting import (
    NAN_SYMBOL,
    POSITIVE_INFINITY_SYMBOL,
    NEGATIVE_INFINITY_SYMBOL,
    format_component,
    format_components,
)

__all__ = [
    # Constants
    "PI", "DEG_TO_RAD", "RAD_TO_DEG",
    # Single precision
    "float_to_bytes", "bytes_to_float", "to_single", "ieee_divide",
    # Component indexing
    "component_index",
    # Scalar utilities
    "clamp", "lerp",
    # Formatting
    "NAN_SYMBOL", "POSITIVE_INFINITY_SYMBOL", "NEGATIVE_INFINITY_SYMBOL",
    "format_component", "format_components",
]
