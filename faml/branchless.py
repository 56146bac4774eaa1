"""
Branchless integer arithmetic over fixed-width two's-complement integers.

All operations are exact within their documented range and are computed with
shifts, masks and adds only. Boundary values where the bit trick gives a
mathematically wrong answer (``abs_int(INT32_MIN)``, ``is_power_of_2(0)``,
``next_power_of_2_*(0)`` and ``(1)``) are part of the contract and are
reproduced exactly; callers that need them handled must check themselves.
"""

import numpy as np
from numpy.typing import ArrayLike

from .faml_types import BoolResult, Int32Result, Int64Result, UInt32Result, UInt64Result
from .utils.bitcast import scalar_or_array
from .utils.constants import LOG2_MASKS, LOG2_SHIFTS, SMEAR_SHIFTS_32, SMEAR_SHIFTS_64


def opposite_signs(x: ArrayLike, y: ArrayLike) -> BoolResult:
    """
    PRECISE: Test whether two int32 values have opposite signs.

    The XOR of two integers has its sign bit set exactly when their sign bits
    differ, so a single signed comparison answers the question.

    Args:
        x: First int32 value(s)
        y: Second int32 value(s)

    Returns:
        True where the signs differ. Zero counts as non-negative.

    Examples:
        >>> opposite_signs(-4, 7)
        np.True_
        >>> opposite_signs(-4, -7)
        np.False_
    """
    xi = np.asarray(x, dtype=np.int32)
    yi = np.asarray(y, dtype=np.int32)
    return scalar_or_array(np.asarray((xi ^ yi) < 0))


def abs_int(x: ArrayLike) -> Int32Result:
    """
    PRECISE: Absolute value of an int32 without branching.

    ``mask`` is all ones for negative input and all zeros otherwise, so
    ``(x + mask) ^ mask`` is the two's-complement negation for negatives and
    the identity for everything else.

    ``abs_int(INT32_MIN)`` returns ``INT32_MIN``: the true result does not fit
    in 32 bits and wraps, exactly as fixed-width negation does.

    Args:
        x: int32 value(s)

    Returns:
        Absolute value(s) as int32
    """
    xi = np.asarray(x, dtype=np.int32)
    with np.errstate(over="ignore"):
        mask = xi >> np.int32(31)
        result = (xi + mask) ^ mask
    return scalar_or_array(np.asarray(result, dtype=np.int32))


def compare_ints(x: ArrayLike, y: ArrayLike) -> Int32Result:
    """
    PRECISE: Three-way comparison of two int32 values.

    The arithmetic shift of ``x - y`` yields -1 for a negative difference and
    the logical shift of ``-(x - y)`` yields 1 for a positive one; OR-ing the
    two gives the sign. When ``x - y`` overflows int32 the wrapped difference
    is compared instead and the answer is wrong.

    Args:
        x: Left operand(s)
        y: Right operand(s)

    Returns:
        -1 if x < y, 0 if x == y, 1 if x > y

    Examples:
        >>> compare_ints(3, 5)
        np.int32(-1)
        >>> compare_ints(5, 5)
        np.int32(0)
    """
    xi = np.asarray(x, dtype=np.int32)
    yi = np.asarray(y, dtype=np.int32)
    with np.errstate(over="ignore"):
        diff = np.asarray(xi - yi, dtype=np.int32)
        negated = np.asarray(-diff, dtype=np.int32)
    negative_part = diff >> np.int32(31)
    positive_part = (negated.astype(np.uint32) >> np.uint32(31)).astype(np.int32)
    return scalar_or_array(np.asarray(negative_part | positive_part, dtype=np.int32))


def is_power_of_2(x: ArrayLike) -> BoolResult:
    """
    PRECISE: Test whether an unsigned integer has exactly one bit set.

    Evaluated as uint64, so any 32-bit or 64-bit unsigned value is accepted.

    ``is_power_of_2(0)`` is True. Zero has no bits set, which satisfies
    ``x & (x - 1) == 0`` vacuously; callers relying on the cheap test get this
    answer and callers who care must exclude zero themselves.

    Args:
        x: Unsigned value(s)

    Returns:
        True for powers of two and for zero
    """
    xu = np.asarray(x, dtype=np.uint64)
    with np.errstate(over="ignore"):
        result = (xu & (xu - np.uint64(1))) == np.uint64(0)
    return scalar_or_array(np.asarray(result))


def _next_power_of_2(x: ArrayLike, dtype: type[np.integer], shifts: tuple[int, ...]):
    # Smear the highest set bit of x - 1 into every lower bit, then carry out
    value = np.asarray(x, dtype=dtype)
    one = dtype(1)
    with np.errstate(over="ignore"):
        value = value - one
        for shift in shifts:
            value = value | (value >> dtype(shift))
        value = value + one
    return scalar_or_array(np.asarray(value, dtype=dtype))


def next_power_of_2_int(x: ArrayLike) -> Int32Result:
    """
    PRECISE: Smallest power of two >= x, for int32.

    Exact for x in [2, 2**30]. ``next_power_of_2_int(0)`` returns 0 and
    ``next_power_of_2_int(1)`` returns 1; above 2**30 the result wraps to
    ``INT32_MIN``. No check is made for any of these.

    Examples:
        >>> next_power_of_2_int(17)
        np.int32(32)
        >>> next_power_of_2_int(64)
        np.int32(64)
    """
    return _next_power_of_2(x, np.int32, SMEAR_SHIFTS_32)


def next_power_of_2_uint(x: ArrayLike) -> UInt32Result:
    """PRECISE: Smallest power of two >= x, for uint32. Exact for x in [2, 2**31]; 0 -> 0, 1 -> 1."""
    return _next_power_of_2(x, np.uint32, SMEAR_SHIFTS_32)


def next_power_of_2_long(x: ArrayLike) -> Int64Result:
    """PRECISE: Smallest power of two >= x, for int64. Exact for x in [2, 2**62]; 0 -> 0, 1 -> 1."""
    return _next_power_of_2(x, np.int64, SMEAR_SHIFTS_64)


def next_power_of_2_ulong(x: ArrayLike) -> UInt64Result:
    """PRECISE: Smallest power of two >= x, for uint64. Exact for x in [2, 2**63]; 0 -> 0, 1 -> 1."""
    return _next_power_of_2(x, np.uint64, SMEAR_SHIFTS_64)


def fast_log2_int(x: ArrayLike) -> Int32Result:
    """
    PRECISE: floor(log2(x)) for a positive int32 using the log2 lookup table.

    A binary search over bit positions: each table mask covers the upper half
    of the bits still in play, and whenever it hits, the value is shifted down
    and the shift is accumulated into the result. The hit test is turned into
    a multiplier rather than a branch so arrays are handled in one pass.

    Meaningless for x <= 0.

    Args:
        x: Positive int32 value(s) in [1, 2**31 - 1]

    Returns:
        Integer base-2 logarithm(s) as int32

    Examples:
        >>> fast_log2_int(1)
        np.int32(0)
        >>> fast_log2_int(1000)
        np.int32(9)
    """
    value = np.asarray(x, dtype=np.int32).astype(np.uint32)
    result = np.zeros_like(value)
    for mask, shift in zip(LOG2_MASKS[::-1], LOG2_SHIFTS[::-1]):
        step = ((value & mask) != 0).astype(np.uint32) * shift
        value = value >> step
        result = result | step
    return scalar_or_array(np.asarray(result).astype(np.int32))
