"""
Float approximations built on bit reinterpretation.

A positive float's bit pattern read as an integer is close to a scaled and
offset base-2 logarithm of the value: roughly ``2**23 * (log2(x) + 127)`` for
float32 and ``2**52 * (log2(x) + 1023)`` for float64. Affine arithmetic on
that integer is therefore arithmetic in log space, and reading the result back
as a float undoes the logarithm. Every approximation below is one such
transform; the exact helpers (``clamp0``, ``abs_float``, ``abs_double``) just
mask the sign bit.

The 64-bit exponential family works on the high 32 bits of the double only
(``hi = 2**20 / ln(2) * x + bias``), leaving the low word zero.

Operations never validate their input. Outside the documented domain the
result is a meaningless float, not an error.
"""

import numpy as np
from numpy.typing import ArrayLike

from .faml_types import Float32Result, Float64Result, FloatArray, Int64Array
from .utils.bitcast import (
    bits_to_double,
    bits_to_float,
    double_to_bits,
    double_to_ubits,
    float_to_bits,
    float_to_ubits,
    scalar_or_array,
)
from .utils.constants import (
    EXP_BIAS,
    EXP_SCALE,
    FLOAT32_SIGN_CLEAR_MASK,
    FLOAT64_SIGN_CLEAR_MASK,
    INV_SQRT_DOUBLE_MAGIC,
    INV_SQRT_FLOAT_MAGIC,
    INVERSE_FLOAT_MAGIC,
    NEWTON_HALF,
    NEWTON_THREE_HALVES,
    POW_DOUBLE_BIAS,
    POW_FLOAT_BIAS,
    SQRT_FLOAT_BIAS,
)


# ============================================================================
# EXACT SIGN-BIT OPERATIONS
# ============================================================================


def clamp0(x: ArrayLike) -> Float32Result:
    """
    PRECISE: Clamp a float32 to zero from below.

    The arithmetic shift of the bit pattern is all ones for negative input;
    its complement masks the whole pattern away. Negative zero becomes +0.0.

    Examples:
        >>> clamp0(-3.5)
        np.float32(0.0)
        >>> clamp0(2.25)
        np.float32(2.25)
    """
    bits = float_to_bits(x)
    keep = ~(bits >> np.int32(31))
    return scalar_or_array(bits_to_float(bits & keep))


def abs_float(x: ArrayLike) -> Float32Result:
    """PRECISE: Absolute value of a float32 by clearing bit 31."""
    bits = float_to_ubits(x) & np.uint32(FLOAT32_SIGN_CLEAR_MASK)
    return scalar_or_array(bits_to_float(bits))


def abs_double(x: ArrayLike) -> Float64Result:
    """PRECISE: Absolute value of a float64 by clearing bit 63."""
    bits = double_to_ubits(x) & np.uint64(FLOAT64_SIGN_CLEAR_MASK)
    return scalar_or_array(bits_to_double(bits))


# ============================================================================
# RECIPROCAL AND ROOTS
# ============================================================================


def inverse_float(x: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: 1/x for a positive float32.

    Negating a value in log space is a reflection of the bit pattern about
    ``0x7F000000``. Exact at powers of two, at most 12.5% high in between.
    Only meaningful for positive x away from zero and from float32 max.
    """
    with np.errstate(over="ignore"):
        bits = np.uint32(INVERSE_FLOAT_MAGIC) - float_to_ubits(x)
    return scalar_or_array(bits_to_float(bits))


def inv_sqrt_float(x: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: 1/sqrt(x) for a positive float32 (fast inverse square root).

    The seed ``magic - (bits >> 1)`` halves and negates the logarithm, then a
    single Newton step for ``f(y) = 1/y**2 - x`` refines it. Only one step is
    taken. Relative error stays well under 1% for normal positive x and grows
    as x approaches zero and the subnormal range.

    Args:
        x: Positive float32 value(s)

    Returns:
        Approximate reciprocal square root(s) as float32
    """
    xf = np.asarray(x, dtype=np.float32)
    with np.errstate(over="ignore"):
        seed_bits = np.int32(INV_SQRT_FLOAT_MAGIC) - (float_to_bits(xf) >> np.int32(1))
    y = bits_to_float(seed_bits)
    with np.errstate(over="ignore", invalid="ignore"):
        refined = y * (np.float32(NEWTON_THREE_HALVES) - np.float32(NEWTON_HALF) * xf * y * y)
    return scalar_or_array(np.asarray(refined, dtype=np.float32))


def inv_sqrt_double(x: ArrayLike) -> Float64Result:
    """APPROXIMATION: 1/sqrt(x) for a positive float64, one Newton step from the 64-bit seed."""
    xd = np.asarray(x, dtype=np.float64)
    with np.errstate(over="ignore"):
        seed_bits = np.int64(INV_SQRT_DOUBLE_MAGIC) - (double_to_bits(xd) >> np.int64(1))
    y = bits_to_double(seed_bits)
    with np.errstate(over="ignore", invalid="ignore"):
        refined = y * (NEWTON_THREE_HALVES - NEWTON_HALF * xd * y * y)
    return scalar_or_array(np.asarray(refined, dtype=np.float64))


def sqrt_float(x: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: sqrt(x) for a non-negative float32.

    Halves the logarithm around the pattern of 1.0. No refinement step:
    average error around 5%, worst case about 6% mid-octave, and worse
    again approaching zero.
    """
    with np.errstate(over="ignore"):
        bits = (float_to_ubits(x) + np.uint32(SQRT_FLOAT_BIAS)) >> np.uint32(1)
    return scalar_or_array(bits_to_float(bits))


# ============================================================================
# POWER, EXPONENTIAL AND LOGARITHM
# ============================================================================


def pow_float(x: ArrayLike, y: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: x**y for positive float32 x.

    Scales the log-space pattern of x by y around a bias rescaled to the
    23-bit float32 mantissa. Exact for y == 1 and around 4% average error
    otherwise, growing with |y|.

    Args:
        x: Positive base(s)
        y: Exponent(s)

    Returns:
        Approximate power(s) as float32
    """
    bits = float_to_bits(x).astype(np.float64)
    exponent = np.asarray(y, dtype=np.float64) * (bits - POW_FLOAT_BIAS) + POW_FLOAT_BIAS
    with np.errstate(invalid="ignore"):
        result_bits = np.asarray(exponent).astype(np.int32)
    return scalar_or_array(bits_to_float(result_bits))


def pow_double(x: ArrayLike, y: ArrayLike) -> Float64Result:
    """
    APPROXIMATION: x**y for positive float64 x.

    Works on the high 32-bit word of the double: ``y * (hi - bias) + bias``
    truncated to int32 becomes the high word of the result, the low word is
    zero. Around 4% average error, growing with |y|.
    """
    high_word = (double_to_bits(x) >> np.int64(32)).astype(np.float64)
    exponent = np.asarray(y, dtype=np.float64) * (high_word - POW_DOUBLE_BIAS) + POW_DOUBLE_BIAS
    with np.errstate(invalid="ignore"):
        result_high = np.asarray(exponent).astype(np.int32)
    return scalar_or_array(bits_to_double(_high_word_to_bits(result_high)))


def _high_word_to_bits(high_word: ArrayLike) -> Int64Array:
    # Place a 32-bit word in the upper half of a 64-bit pattern
    return np.asarray(high_word).astype(np.int64) << np.int64(32)


def _exp_bits(x: ArrayLike) -> Int64Array:
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = np.rint(EXP_SCALE * np.asarray(x, dtype=np.float64) + EXP_BIAS)
        return _high_word_to_bits(np.asarray(scaled).astype(np.int64))


def exp_double(x: ArrayLike) -> Float64Result:
    """
    APPROXIMATION: e**x for float64.

    ``round(1512775 * x + 1072632447)`` is the high word of the result; the
    scale is ``2**20 / ln(2)`` and the bias is the exponent bias less a
    correction that centres the error. Relative error stays within about 4%.

    Recommended domain is x >= 0 up to the point where the result overflows
    float64 (about 709). Negative inputs are not corrected for.

    Examples:
        >>> exp_double(0.0)  # within 3% of 1.0
        np.float64(0.9710...)
    """
    return scalar_or_array(bits_to_double(_exp_bits(x)))


def exp_float(x: ArrayLike) -> Float32Result:
    """APPROXIMATION: e**x evaluated through the float64 transform and narrowed to float32."""
    wide = bits_to_double(_exp_bits(x))
    with np.errstate(over="ignore"):
        return scalar_or_array(np.asarray(wide).astype(np.float32))


def _ln_wide(x: ArrayLike) -> FloatArray:
    high_word = double_to_bits(x) >> np.int64(32)
    return np.asarray((high_word - EXP_BIAS) / EXP_SCALE, dtype=np.float64)


def ln_double(x: ArrayLike) -> Float64Result:
    """
    APPROXIMATION: ln(x) for positive float64.

    The inverse of the ``exp_double`` transform: subtract the bias from the
    high word and divide by the scale. Absolute error under 0.05 for normal
    positive x. ``ln_double(exp_double(x))`` recovers x to within the
    rounding of the high word.
    """
    return scalar_or_array(_ln_wide(x))


def ln_float(x: ArrayLike) -> Float32Result:
    """APPROXIMATION: ln(x) evaluated through the float64 transform and narrowed to float32."""
    return scalar_or_array(_ln_wide(x).astype(np.float32))
