"""
Polynomial and rational approximations of sine, cosine and tangent.

Each plain variant is only accurate on its recommended domain and diverges
without bound outside it. The ``_normalized`` variants first fold the input
into that domain, which makes them valid for any finite input. Moderate
arguments cost one extra ``mod``; arguments of 2**20 and above are reduced
exactly against a long pi, so the phase stays correct up to the largest
finite double. float32 variants fold in float64.

Recommended domains:
    sin:                [-pi, pi]         absolute error <= 0.06
    cos:                [-3pi/2, pi/2]    absolute error <= 0.06
    tan:                [-1, 1]           relative error <= 5%
    tan (hp):           [-pi/2, pi/2]     relative error < 1% away from the poles
"""

import numpy as np
from numpy.typing import ArrayLike

from .faml_types import Float32Result, Float64Result, FloatArray
from .utils.bitcast import scalar_or_array
from .utils.reduction import reduce_angle
from .utils.constants import (
    HALF_PI,
    SIN_LINEAR_COEFF,
    SIN_QUADRATIC_COEFF,
    TAN_C3,
    TAN_C5,
    TAN_C7,
    TAN_HP_P3,
    TAN_HP_Q2,
    TAN_HP_Q4,
)


def _fold_sine(x: ArrayLike) -> FloatArray:
    return reduce_angle(x, 2)


def _fold_cosine(x: ArrayLike) -> FloatArray:
    # Shift after folding; adding pi/2 to a huge x would round the shift away
    return reduce_angle(reduce_angle(x, 2) + HALF_PI, 2)


def _fold_tangent(x: ArrayLike) -> FloatArray:
    return reduce_angle(x, 1)


def _parabola(x: ArrayLike, dtype: type[np.floating]):
    # 4/pi * x - 4/pi**2 * x * |x|: the quadratic term flips sign with x
    xv = np.asarray(x, dtype=dtype)
    with np.errstate(over="ignore", invalid="ignore"):
        return xv * (dtype(SIN_LINEAR_COEFF) - dtype(SIN_QUADRATIC_COEFF) * np.abs(xv))


def _taylor_tan(x: ArrayLike, dtype: type[np.floating]):
    xv = np.asarray(x, dtype=dtype)
    with np.errstate(over="ignore", invalid="ignore"):
        y = xv * xv
        return xv * (dtype(1.0) + y * (dtype(TAN_C3) + y * (dtype(TAN_C5) + y * dtype(TAN_C7))))


def _rational_tan(x: ArrayLike, dtype: type[np.floating]):
    xv = np.asarray(x, dtype=dtype)
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        y = xv * xv
        numerator = xv - dtype(TAN_HP_P3) * xv * y
        denominator = dtype(1.0) - dtype(TAN_HP_Q2) * y + dtype(TAN_HP_Q4) * y * y
        return numerator / denominator


def _finish(result, dtype: type[np.floating]):
    return scalar_or_array(np.asarray(result, dtype=dtype))


# ============================================================================
# SINE AND COSINE
# ============================================================================


def sin_float(x: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: sin(x) for float32 on [-pi, pi].

    The parabola through the zeros at 0 and +-pi with the right peak height:
    ``x * (1.2732395 - 0.4052847 * |x|)``. Maximum absolute error about 0.056.

    Examples:
        >>> sin_float(0.0)
        np.float32(0.0)
    """
    return _finish(_parabola(x, np.float32), np.float32)


def sin_double(x: ArrayLike) -> Float64Result:
    """APPROXIMATION: sin(x) for float64 on [-pi, pi]."""
    return _finish(_parabola(x, np.float64), np.float64)


def cos_float(x: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: cos(x) for float32 as ``sin(x + pi/2)``.

    The shift moves the recommended domain to [-3pi/2, pi/2].
    """
    shifted = np.asarray(x, dtype=np.float32) + np.float32(HALF_PI)
    return _finish(_parabola(shifted, np.float32), np.float32)


def cos_double(x: ArrayLike) -> Float64Result:
    """APPROXIMATION: cos(x) for float64 as ``sin(x + pi/2)``, domain [-3pi/2, pi/2]."""
    shifted = np.asarray(x, dtype=np.float64) + HALF_PI
    return _finish(_parabola(shifted, np.float64), np.float64)


def sin_float_normalized(x: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: sin(x) for any finite float32.

    Folds x into [-pi, pi) first, so the error bound of ``sin_float`` holds
    for every finite x up to float32 max; it is largest where the folded value sits near +-pi/6 and
    +-5pi/6.
    """
    return _finish(_parabola(_fold_sine(x).astype(np.float32), np.float32), np.float32)


def sin_double_normalized(x: ArrayLike) -> Float64Result:
    """APPROXIMATION: sin(x) for any finite float64, folded into [-pi, pi) first."""
    return _finish(_parabola(_fold_sine(x), np.float64), np.float64)


def cos_float_normalized(x: ArrayLike) -> Float32Result:
    """APPROXIMATION: cos(x) for any finite float32, via the sine of folded x + pi/2."""
    return _finish(_parabola(_fold_cosine(x).astype(np.float32), np.float32), np.float32)


def cos_double_normalized(x: ArrayLike) -> Float64Result:
    """APPROXIMATION: cos(x) for any finite float64, via the sine of folded x + pi/2."""
    return _finish(_parabola(_fold_cosine(x), np.float64), np.float64)


# ============================================================================
# TANGENT
# ============================================================================


def tan_float(x: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: tan(x) for float32 on [-1, 1].

    Taylor series through x**7: ``x * (1 + y/3 + 2y**2/15 + 17y**3/315)`` with
    ``y = x**2``. Relative error grows towards the ends of the domain, about
    2.4% at +-1.
    """
    return _finish(_taylor_tan(x, np.float32), np.float32)


def tan_double(x: ArrayLike) -> Float64Result:
    """APPROXIMATION: tan(x) for float64 on [-1, 1]."""
    return _finish(_taylor_tan(x, np.float64), np.float64)


def tan_float_hp(x: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: higher precision tan(x) for float32 on [-pi/2, pi/2].

    Rational fit ``(x - 0.0958x**3) / (1 - 0.4291x**2 + 0.0097x**4)``. Under
    1% relative error except in the last few hundredths before the poles,
    where the denominator root sits just outside pi/2.
    """
    return _finish(_rational_tan(x, np.float32), np.float32)


def tan_double_hp(x: ArrayLike) -> Float64Result:
    """APPROXIMATION: higher precision tan(x) for float64 on [-pi/2, pi/2]."""
    return _finish(_rational_tan(x, np.float64), np.float64)


def tan_float_normalized(x: ArrayLike) -> Float32Result:
    """
    APPROXIMATION: tan(x) for any finite float32, folded into [-pi/2, pi/2).

    The Taylor polynomial is still only accurate on [-1, 1] after folding;
    use ``tan_float_hp_normalized`` when the folded value can come near the
    poles.
    """
    return _finish(_taylor_tan(_fold_tangent(x).astype(np.float32), np.float32), np.float32)


def tan_double_normalized(x: ArrayLike) -> Float64Result:
    """APPROXIMATION: tan(x) for any finite float64, folded into [-pi/2, pi/2)."""
    return _finish(_taylor_tan(_fold_tangent(x), np.float64), np.float64)


def tan_float_hp_normalized(x: ArrayLike) -> Float32Result:
    """APPROXIMATION: higher precision tan(x) for any finite float32, folded into [-pi/2, pi/2)."""
    return _finish(_rational_tan(_fold_tangent(x).astype(np.float32), np.float32), np.float32)


def tan_double_hp_normalized(x: ArrayLike) -> Float64Result:
    """APPROXIMATION: higher precision tan(x) for any finite float64, folded into [-pi/2, pi/2)."""
    return _finish(_rational_tan(_fold_tangent(x), np.float64), np.float64)
