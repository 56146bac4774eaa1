# faml/__init__.py
"""
FAML: Fast Approximate Math Library

Exact and approximate elementary math over fixed-width integers and IEEE 754
floats. Exact operations are bit-identical to plain fixed-width arithmetic;
approximations trade accuracy for fewer instructions by working on the bit
patterns of floats and two's-complement integers.

Every operation is a pure function. It accepts Python scalars, numpy scalars
or arrays, and returns a numpy scalar or array of its declared type:

    suffix   dtype         suffix   dtype
    int      int32         uint     uint32
    long     int64         ulong    uint64
    float    float32       double   float64

Operations never raise and never validate. Outside the documented domain the
answer is silently wrong, and a few boundary values are wrong on purpose
(``is_power_of_2(0)``, ``next_power_of_2_int(0)``, ``abs_int(INT32_MIN)``).
Always benchmark against numpy on the target hardware before adopting an
approximation.

Quick Start:
    >>> import faml
    >>> faml.inv_sqrt_float(4.0)
    np.float32(0.49915...)
    >>> faml.fast_log2_int([1, 2, 1000])
    array([0, 1, 9], dtype=int32)
    >>> faml.get_contract("sin_float").check()
    True

    Error plots (matplotlib) are drawn from a contract, or with
    ``faml.plot.plot_error_profile``::

        faml.get_contract("exp_double").plot()

Logging:
By default, FAML produces no output. To enable logging::

    import logging
    logging.getLogger('faml').setLevel(logging.INFO)  # Profiling summaries
    logging.getLogger('faml').setLevel(logging.DEBUG)  # Detailed debugging
"""

import logging

# FAML-specific exceptions for user access
from faml.exceptions import ConfigurationError, DataIntegrityError, FAMLBaseError

# Branchless integer arithmetic
from faml.branchless import (
    abs_int,
    compare_ints,
    fast_log2_int,
    is_power_of_2,
    next_power_of_2_int,
    next_power_of_2_long,
    next_power_of_2_uint,
    next_power_of_2_ulong,
    opposite_signs,
)

# Bit-reinterpretation float approximations
from faml.bithacks import (
    abs_double,
    abs_float,
    clamp0,
    exp_double,
    exp_float,
    inv_sqrt_double,
    inv_sqrt_float,
    inverse_float,
    ln_double,
    ln_float,
    pow_double,
    pow_float,
    sqrt_float,
)

# Exact powers
from faml.powers import (
    cube_double,
    cube_float,
    cube_int,
    cube_long,
    cube_uint,
    cube_ulong,
    square_double,
    square_float,
    square_int,
    square_long,
    square_uint,
    square_ulong,
)

# Polynomial trigonometric approximations
from faml.trig import (
    cos_double,
    cos_double_normalized,
    cos_float,
    cos_float_normalized,
    sin_double,
    sin_double_normalized,
    sin_float,
    sin_float_normalized,
    tan_double,
    tan_double_hp,
    tan_double_hp_normalized,
    tan_double_normalized,
    tan_float,
    tan_float_hp,
    tan_float_hp_normalized,
    tan_float_normalized,
)

# Accuracy tooling
from faml.accuracy import ErrorProfile, profile_approximation, profile_contract, profiles_to_dataframe
from faml.contracts import CONTRACTS, ApproximationContract, get_contract


__all__ = [
    "CONTRACTS",
    "ApproximationContract",
    "ConfigurationError",
    "DataIntegrityError",
    "ErrorProfile",
    "FAMLBaseError",
    "abs_double",
    "abs_float",
    "abs_int",
    "clamp0",
    "compare_ints",
    "cos_double",
    "cos_double_normalized",
    "cos_float",
    "cos_float_normalized",
    "cube_double",
    "cube_float",
    "cube_int",
    "cube_long",
    "cube_uint",
    "cube_ulong",
    "exp_double",
    "exp_float",
    "fast_log2_int",
    "get_contract",
    "inv_sqrt_double",
    "inv_sqrt_float",
    "inverse_float",
    "is_power_of_2",
    "ln_double",
    "ln_float",
    "next_power_of_2_int",
    "next_power_of_2_long",
    "next_power_of_2_uint",
    "next_power_of_2_ulong",
    "opposite_signs",
    "pow_double",
    "pow_float",
    "profile_approximation",
    "profile_contract",
    "profiles_to_dataframe",
    "sin_double",
    "sin_double_normalized",
    "sin_float",
    "sin_float_normalized",
    "sqrt_float",
    "square_double",
    "square_float",
    "square_int",
    "square_long",
    "square_uint",
    "square_ulong",
    "tan_double",
    "tan_double_hp",
    "tan_double_hp_normalized",
    "tan_double_normalized",
    "tan_float",
    "tan_float_hp",
    "tan_float_hp_normalized",
    "tan_float_normalized",
]

__version__ = "0.1.0"


# Silent by default, user controls everything
logging.getLogger(__name__).addHandler(logging.NullHandler())
