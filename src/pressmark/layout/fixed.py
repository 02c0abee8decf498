"""26.6 fixed-point conversion.

FreeType reports kerning as signed 26.6 fixed-point integers: 26 integer
bits and 6 fractional bits in two's complement.
"""

from __future__ import annotations

FRACTION_BITS = 6
FRACTION_MASK = (1 << FRACTION_BITS) - 1  # 0x3F
ONE = 1 << FRACTION_BITS  # 64


def fixed_26_6_to_float(value: int) -> float:
    """Convert a 26.6 fixed-point integer to a float.

    ``>>`` on Python ints is an arithmetic shift, so the integer part of a
    negative value rounds toward negative infinity and the masked remainder
    is always a non-negative fraction to add back.

    Examples:
        >>> fixed_26_6_to_float(0)
        0.0
        >>> fixed_26_6_to_float(-96)
        -1.5
        >>> fixed_26_6_to_float(80)
        1.25
    """
    return (value >> FRACTION_BITS) + (value & FRACTION_MASK) / ONE


def float_to_fixed_26_6(value: float) -> int:
    """Convert a float to the nearest 26.6 fixed-point integer.

    Examples:
        >>> float_to_fixed_26_6(12)
        768
    """
    return round(value * ONE)
