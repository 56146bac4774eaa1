"""
Exact squares and cubes in a declared fixed-width type.

The multiplication happens in the declared dtype, so results are bit-identical
to writing ``x * x`` (or ``x * x * x``) in a language with fixed-width
arithmetic: floats round once per multiply and integers wrap on overflow.
"""

import numpy as np
from numpy.typing import ArrayLike

from .faml_types import (
    Float32Result,
    Float64Result,
    Int32Result,
    Int64Result,
    UInt32Result,
    UInt64Result,
)
from .utils.bitcast import scalar_or_array


def _square(x: ArrayLike, dtype: type[np.number]):
    value = np.asarray(x, dtype=dtype)
    with np.errstate(over="ignore"):
        result = value * value
    return scalar_or_array(np.asarray(result, dtype=dtype))


def _cube(x: ArrayLike, dtype: type[np.number]):
    value = np.asarray(x, dtype=dtype)
    with np.errstate(over="ignore"):
        result = value * value * value
    return scalar_or_array(np.asarray(result, dtype=dtype))


def square_float(x: ArrayLike) -> Float32Result:
    """PRECISE: x**2 as float32."""
    return _square(x, np.float32)


def square_double(x: ArrayLike) -> Float64Result:
    """PRECISE: x**2 as float64."""
    return _square(x, np.float64)


def square_int(x: ArrayLike) -> Int32Result:
    """PRECISE: x**2 as int32, wrapping on overflow."""
    return _square(x, np.int32)


def square_uint(x: ArrayLike) -> UInt32Result:
    """PRECISE: x**2 as uint32, modulo 2**32."""
    return _square(x, np.uint32)


def square_long(x: ArrayLike) -> Int64Result:
    """PRECISE: x**2 as int64, wrapping on overflow."""
    return _square(x, np.int64)


def square_ulong(x: ArrayLike) -> UInt64Result:
    """PRECISE: x**2 as uint64, modulo 2**64."""
    return _square(x, np.uint64)


def cube_float(x: ArrayLike) -> Float32Result:
    """PRECISE: x**3 as float32, evaluated left to right."""
    return _cube(x, np.float32)


def cube_double(x: ArrayLike) -> Float64Result:
    """PRECISE: x**3 as float64, evaluated left to right."""
    return _cube(x, np.float64)


def cube_int(x: ArrayLike) -> Int32Result:
    """PRECISE: x**3 as int32, wrapping on overflow."""
    return _cube(x, np.int32)


def cube_uint(x: ArrayLike) -> UInt32Result:
    """PRECISE: x**3 as uint32, modulo 2**32."""
    return _cube(x, np.uint32)


def cube_long(x: ArrayLike) -> Int64Result:
    """PRECISE: x**3 as int64, wrapping on overflow."""
    return _cube(x, np.int64)


def cube_ulong(x: ArrayLike) -> UInt64Result:
    """PRECISE: x**3 as uint64, modulo 2**64."""
    return _cube(x, np.uint64)
