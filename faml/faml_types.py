# faml/faml_types.py
"""
Core type definitions for the FAML fixed-width numeric primitives.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal, TypeAlias

import numpy as np
from numpy.typing import NDArray


# --- FIXED-WIDTH ARRAY TYPES ---
Int32Array: TypeAlias = NDArray[np.int32]
UInt32Array: TypeAlias = NDArray[np.uint32]
Int64Array: TypeAlias = NDArray[np.int64]
UInt64Array: TypeAlias = NDArray[np.uint64]
Float32Array: TypeAlias = NDArray[np.float32]
FloatArray: TypeAlias = NDArray[np.float64]
BoolArray: TypeAlias = NDArray[np.bool_]

# --- USER API TYPES ---
# Operations take numpy ArrayLike input; scalar input yields a numpy scalar,
# array input an ndarray of the same shape.
Int32Result: TypeAlias = np.int32 | Int32Array
UInt32Result: TypeAlias = np.uint32 | UInt32Array
Int64Result: TypeAlias = np.int64 | Int64Array
UInt64Result: TypeAlias = np.uint64 | UInt64Array
Float32Result: TypeAlias = np.float32 | Float32Array
Float64Result: TypeAlias = np.float64 | FloatArray
BoolResult: TypeAlias = np.bool_ | BoolArray

Domain: TypeAlias = tuple[float, float]
"""Closed interval (low, high) over which an approximation's error bound holds."""

ErrorKind: TypeAlias = Literal["relative", "absolute"]

ScalarFunction: TypeAlias = Callable[[Any], Any]
"""Single-argument numeric function evaluated elementwise over an array."""
