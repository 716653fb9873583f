"""
Culture-invariant number formatting for vector components.

Accepts the .NET standard numeric format strings that mesh tooling
commonly passes around ("F1", "N3", "E2", "G", "R") as well as plain
Python format specs (".3f", "+.2e"). Output never depends on the process
locale: the decimal separator is always "." and the group separator ",".
"""
import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from .helpers import to_single

NAN_SYMBOL = "NaN"
POSITIVE_INFINITY_SYMBOL = "Infinity"
NEGATIVE_INFINITY_SYMBOL = "-Infinity"

# Default digit counts used by .NET when the precision specifier is omitted.
_DEFAULT_DIGITS = {"F": 2, "N": 2, "E": 6}

_STANDARD_FORMAT = re.compile(r"^([FfNnEeGgRr])(\d{0,2})$")

# Significant digits a single shows under "G" with no precision specifier.
_SINGLE_GENERAL_PRECISION = 9

# Wide enough for every finite double at the largest precision specifier.
_FIXED_POINT_CONTEXT = Context(prec=500)


def _fixed_point(value: float, digits: int, grouped: bool) -> str:
    # Decimal(float) is exact, so ROUND_HALF_UP rounds ties away from zero.
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_POINT_CONTEXT)
    return format(rounded, ",f" if grouped else "f")


def _exponential(value: float, digits: int, letter: str) -> str:
    mantissa, exponent = format(value, f".{digits}E").split("E")
    sign, magnitude = exponent[0], int(exponent[1:])
    return f"{mantissa}{letter}{sign}{magnitude:03d}"


def _shortest_digits(value: float) -> int:
    """Smallest number of significant digits that parses back to the same single."""
    for digits in range(1, 10):
        if to_single(float(format(value, f".{digits}g"))) == value:
            return digits
    return 9


def _general(value: float, digits: Optional[int], letter: str) -> str:
    if digits:
        return format(value, f".{digits}g").replace("e", letter)

    # Shortest round-trip digits, laid out the way a single prints with the
    # default precision: scientific only for exponents below -4 or from 9 up.
    digits = _shortest_digits(value)
    scientific = format(value, f".{digits - 1}e")
    exponent = int(scientific.split("e")[1])
    if exponent < -4 or exponent >= _SINGLE_GENERAL_PRECISION:
        return scientific.replace("e", letter)
    return format(value, f".{max(digits - 1 - exponent, 0)}f")


def format_component(value: float, fmt: Optional[str] = None) -> str:
    """
    Formats a single float.

    Args:
        value: The number to format.
        fmt: A .NET style standard format ("F1", "N2", "E3", "G", "R") or a
            Python format spec. None means "F1"; an empty string means "G".

    Returns:
        The formatted text. Non-finite values render as "NaN", "Infinity"
        and "-Infinity" regardless of the format.
    """
    if math.isnan(value):
        return NAN_SYMBOL
    if math.isinf(value):
        return POSITIVE_INFINITY_SYMBOL if value > 0 else NEGATIVE_INFINITY_SYMBOL

    if fmt is None:
        fmt = "F1"
    elif fmt == "":
        fmt = "G"

    match = _STANDARD_FORMAT.match(fmt)
    if match is None:
        return format(value, fmt)

    specifier, digits_text = match.group(1), match.group(2)
    kind = specifier.upper()
    digits = int(digits_text) if digits_text else None

    if kind in ("F", "N"):
        if digits is None:
            digits = _DEFAULT_DIGITS[kind]
        return _fixed_point(value, digits, grouped=(kind == "N"))
    if kind == "E":
        if digits is None:
            digits = _DEFAULT_DIGITS[kind]
        return _exponential(value, digits, specifier)
    if kind == "R":
        return _general(value, None, "E")
    return _general(value, digits, "E" if specifier == "G" else "e")


def format_components(values: Iterable[float], fmt: Optional[str] = None) -> str:
    """Formats a sequence of components as "(a, b, ...)"."""
    return "({})".format(", ".join(format_component(v, fmt) for v in values))
