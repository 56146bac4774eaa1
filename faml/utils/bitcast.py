# faml/utils/bitcast.py
"""
Bit reinterpretation between equal-width IEEE 754 and integer representations.

Every cast here is an ``ndarray.view``: the bytes are untouched, only the dtype
they are read as changes. Inputs are coerced with ``numpy.asarray`` so Python
scalars, numpy scalars and arrays all work; results are always ndarrays
(0-d for scalar input) and callers finish with ``scalar_or_array``.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..faml_types import Float32Array, FloatArray, Int32Array, Int64Array, UInt32Array, UInt64Array


def float_to_bits(x: ArrayLike) -> Int32Array:
    """Read float32 values as signed 32-bit integers."""
    return np.asarray(x, dtype=np.float32).view(np.int32)


def float_to_ubits(x: ArrayLike) -> UInt32Array:
    """Read float32 values as unsigned 32-bit integers."""
    return np.asarray(x, dtype=np.float32).view(np.uint32)


def double_to_bits(x: ArrayLike) -> Int64Array:
    """Read float64 values as signed 64-bit integers."""
    return np.asarray(x, dtype=np.float64).view(np.int64)


def double_to_ubits(x: ArrayLike) -> UInt64Array:
    """Read float64 values as unsigned 64-bit integers."""
    return np.asarray(x, dtype=np.float64).view(np.uint64)


def bits_to_float(bits: ArrayLike) -> Float32Array:
    """
    Read 32-bit integer patterns as float32 values.

    Signed and unsigned patterns are both accepted; wider integer input is
    truncated to its low 32 bits first, which is the two's-complement
    narrowing the approximations rely on.
    """
    return np.asarray(bits).astype(np.uint32, copy=False).view(np.float32)


def bits_to_double(bits: ArrayLike) -> FloatArray:
    """Read 64-bit integer patterns as float64 values."""
    return np.asarray(bits).astype(np.uint64, copy=False).view(np.float64)


def scalar_or_array(result: NDArray[Any] | np.generic) -> Any:
    """Unwrap 0-d arrays to numpy scalars, pass n-d arrays through unchanged."""
    if isinstance(result, np.ndarray) and result.ndim == 0:
        return result[()]
    return result
