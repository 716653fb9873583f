import math
import operator
import struct

# Constants
PI = math.pi
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# --- Single precision ---

def float_to_bytes(value: float) -> bytes:
    """Converts a single-precision float to 4 bytes (little endian)."""
    return struct.pack('<f', value)

def bytes_to_float(data: bytes, offset: int = 0) -> float:
    """Converts 4 bytes (little endian) to a single-precision float."""
    return struct.unpack_from('<f', data, offset)[0]

def to_single(value) -> float:
    """
    Rounds a number to the nearest IEEE-754 binary32 value.

    Finite values too large for single precision become a signed infinity,
    the same result a (float) cast gives. NaN and infinities pass through.
    """
    value = float(value)
    try:
        return bytes_to_float(float_to_bytes(value))
    except OverflowError:
        return math.copysign(math.inf, value)

def ieee_divide(dividend: float, divisor: float) -> float:
    """
    Divides without raising on a zero divisor.

    x / 0 gives a signed infinity and 0 / 0 (or NaN / 0) gives NaN, the way
    binary floating point hardware does.
    """
    if divisor == 0.0:
        if dividend == 0.0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor

# --- Component indexing ---

def component_index(index, count: int, type_name: str) -> int:
    """
    Validates a component index for a vector of count components.

    Only integers in [0, count) are accepted. bool, negative and
    non-integer indices raise IndexError.
    """
    if not isinstance(index, bool):
        try:
            position = operator.index(index)
        except TypeError:
            position = -1
        if 0 <= position < count:
            return position
    raise IndexError(f"Invalid {type_name} index!")

# --- Scalar utilities ---

def clamp(value, min_val, max_val):
    """Clamps a value to the range [min_val, max_val]. NaN is returned unchanged."""
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value

def lerp(start, end, amount):
    """Linear interpolation between start and end by amount. amount is not clamped."""
    return start + (end - start) * amount
