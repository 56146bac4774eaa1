import math
from typing import Final, TypeAlias

import numpy as np


_Tolerance: TypeAlias = float
_BitPattern: TypeAlias = int

# Two's-complement limits
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT32_MAX: Final[int] = 2**32 - 1
UINT64_MAX: Final[int] = 2**64 - 1

# IEEE 754 layout masks
FLOAT32_SIGN_CLEAR_MASK: Final[_BitPattern] = 0x7FFFFFFF
FLOAT64_SIGN_CLEAR_MASK: Final[_BitPattern] = 0x7FFFFFFFFFFFFFFF

# Log2 lookup table - masks probed from the widest down, paired with shifts.
# Read-only for the process lifetime.
LOG2_MASKS = np.array([0x2, 0xC, 0xF0, 0xFF00, 0xFFFF0000], dtype=np.uint32)
LOG2_SHIFTS = np.array([1, 2, 4, 8, 16], dtype=np.uint32)
LOG2_MASKS.flags.writeable = False
LOG2_SHIFTS.flags.writeable = False

# Shift ladders that smear the highest set bit into every lower position
SMEAR_SHIFTS_32: Final[tuple[int, ...]] = (1, 2, 4, 8, 16)
SMEAR_SHIFTS_64: Final[tuple[int, ...]] = (1, 2, 4, 8, 16, 32)

# Reciprocal: reflection point of the float32 bit pattern in log space
INVERSE_FLOAT_MAGIC: Final[_BitPattern] = 0x7F000000

# Fast inverse square root seeds
INV_SQRT_FLOAT_MAGIC: Final[_BitPattern] = 0x5F3759D5
INV_SQRT_DOUBLE_MAGIC: Final[_BitPattern] = 0x5FE6EC85E7DE30DA
NEWTON_THREE_HALVES: Final[float] = 1.5
NEWTON_HALF: Final[float] = 0.5

# Square root: bit pattern of 1.0f
SQRT_FLOAT_BIAS: Final[_BitPattern] = 1065353216

# Exponential family on the high 32 bits of a double:
# hi = EXP_SCALE * x + EXP_BIAS, EXP_SCALE = 2**20 / ln(2)
EXP_SCALE: Final[int] = 1512775
EXP_BIAS: Final[_BitPattern] = 1072632447
POW_DOUBLE_BIAS: Final[_BitPattern] = EXP_BIAS
# Same offset below 1.0 rescaled from the 20-bit high-word mantissa to the
# 23-bit float32 mantissa: 0x3F800000 - 8 * (0x3FF00000 - EXP_BIAS) = 1064866808
POW_FLOAT_BIAS: Final[_BitPattern] = 0x3F800000 - 8 * (0x3FF00000 - EXP_BIAS)

# Parabolic sine: 4/pi and 4/pi**2
SIN_LINEAR_COEFF: Final[float] = 1.2732395
SIN_QUADRATIC_COEFF: Final[float] = 0.4052847

# Tangent Taylor coefficients (x**3, x**5, x**7 terms)
TAN_C3: Final[float] = 1.0 / 3.0
TAN_C5: Final[float] = 2.0 / 15.0
TAN_C7: Final[float] = 17.0 / 315.0

# Tangent rational fit: (x - P3 x**3) / (1 - Q2 x**2 + Q4 x**4)
TAN_HP_P3: Final[float] = 0.0958
TAN_HP_Q2: Final[float] = 0.4291
TAN_HP_Q4: Final[float] = 0.0097

PI: Final[float] = math.pi
HALF_PI: Final[float] = math.pi / 2.0
TWO_PI: Final[float] = 2.0 * math.pi

# Range reduction: np.mod against the rounded period is accurate below this
# magnitude; larger arguments are reduced exactly against a long pi
EXACT_REDUCTION_THRESHOLD: Final[float] = 2.0**20
PI_FRACTION_BITS: Final[int] = 1100

# Accuracy tooling defaults
DEFAULT_PROFILE_SAMPLES: int = 2001
MINIMUM_PROFILE_SAMPLES: int = 2
DEFAULT_RELATIVE_FLOOR: _Tolerance = 1e-12
"""References smaller than this are excluded from relative error statistics."""

# Plotting constants (aesthetic, no numerical impact)
DEFAULT_FIGURE_SIZE: tuple[float, float] = (10.0, 7.0)
DEFAULT_GRID_ALPHA: float = 0.3
