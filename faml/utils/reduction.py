# faml/utils/reduction.py
"""
Range reduction of angles modulo a multiple of pi.

Small arguments are folded with a single ``np.mod`` against the rounded
period. That loses phase in proportion to |x|, so arguments at or above
``EXACT_REDUCTION_THRESHOLD`` are reduced exactly instead: every finite
float is a dyadic rational, and folding it against pi carried to
``PI_FRACTION_BITS`` fraction bits in integer arithmetic leaves an error far
below float64 resolution for every finite double.
"""

from functools import lru_cache

import numpy as np
from numpy.typing import ArrayLike

from ..faml_types import FloatArray
from .constants import EXACT_REDUCTION_THRESHOLD, PI, PI_FRACTION_BITS


_GUARD_BITS = 32


def _arctan_inverse(n: int, one: int) -> int:
    # atan(1/n) * one, by the alternating Taylor series in fixed point
    power = one // n
    total = power
    n_squared = n * n
    divisor = 1
    sign = 1
    while power:
        power //= n_squared
        divisor += 2
        sign = -sign
        total += sign * (power // divisor)
    return total


@lru_cache(maxsize=None)
def scaled_pi(fraction_bits: int = PI_FRACTION_BITS) -> int:
    """
    floor(pi * 2**fraction_bits), to within one unit in the last place.

    Machin's formula ``pi = 16 atan(1/5) - 4 atan(1/239)`` evaluated with
    guard bits that absorb the truncation of every series term.
    """
    one = 1 << (fraction_bits + _GUARD_BITS)
    pi = 4 * (4 * _arctan_inverse(5, one) - _arctan_inverse(239, one))
    return pi >> _GUARD_BITS


def _exact_fold(value: float, multiple: int) -> float:
    numerator, denominator = value.as_integer_ratio()
    # denominator is a power of two well below 2**PI_FRACTION_BITS here
    scaled = (numerator << PI_FRACTION_BITS) // denominator
    period = multiple * scaled_pi()
    turns = (2 * scaled + period) // (2 * period)
    return (scaled - turns * period) / (1 << PI_FRACTION_BITS)


def reduce_angle(x: ArrayLike, multiple: int) -> FloatArray:
    """
    Fold angles into [-multiple*pi/2, multiple*pi/2) modulo ``multiple * pi``.

    Args:
        x: Angle(s), read as float64
        multiple: Period as a whole multiple of pi (2 for sine, 1 for tangent)

    Returns:
        Folded angle(s) as a float64 ndarray (0-d for scalar input).
        Non-finite input folds to NaN.
    """
    xd = np.asarray(x, dtype=np.float64)
    period = multiple * PI
    with np.errstate(invalid="ignore"):
        folded = np.mod(xd + period / 2.0, period) - period / 2.0
    folded = np.array(folded, dtype=np.float64, order="C")

    large = (np.isfinite(xd) & (np.abs(xd) >= EXACT_REDUCTION_THRESHOLD)).reshape(-1)
    if np.any(large):
        # folded is a fresh C-ordered array, so its flat view writes through
        flat = folded.reshape(-1)
        flat[large] = [_exact_fold(float(value), multiple) for value in xd.reshape(-1)[large]]
    return folded
