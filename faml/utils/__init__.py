# faml/utils/__init__.py
"""
Shared bit-cast, range-reduction primitives and constants for FAML.
"""

from .bitcast import (
    bits_to_double,
    bits_to_float,
    double_to_bits,
    double_to_ubits,
    float_to_bits,
    float_to_ubits,
    scalar_or_array,
)
from .reduction import reduce_angle


__all__ = [
    "bits_to_double",
    "bits_to_float",
    "double_to_bits",
    "double_to_ubits",
    "float_to_bits",
    "float_to_ubits",
    "reduce_angle",
    "scalar_or_array",
]
