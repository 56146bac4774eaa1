import math
from typing import Any, get_args

import numpy as np

from .exceptions import ConfigurationError, DataIntegrityError
from .faml_types import Domain, ErrorKind, FloatArray


# ============================================================================
# CORE VALIDATION PRIMITIVES - tooling layer only, operations never validate
# ============================================================================


def validate_positive_integer(value: Any, name: str, min_value: int = 1) -> None:
    """Single source for positive integer validation."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be integer, got {type(value)}")
    if value < min_value:
        raise ConfigurationError(f"{name} must be >= {min_value}, got {value}")


def validate_positive_number(value: Any, name: str) -> None:
    """Single source for positive number validation."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ConfigurationError(f"{name} must be numeric, got {type(value)}")
    if math.isnan(value) or math.isinf(value):
        raise ConfigurationError(f"{name} cannot be NaN or infinite, got {value}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")


def validate_callable(value: Any, name: str) -> None:
    """Single source for function argument validation."""
    if not callable(value):
        raise ConfigurationError(f"{name} must be callable, got {type(value)}")


def validate_domain(domain: Any, name: str = "domain") -> Domain:
    """Validate a (low, high) sampling interval and return it as floats."""
    if not isinstance(domain, tuple | list) or len(domain) != 2:
        raise ConfigurationError(f"{name} must be a (low, high) pair, got {domain!r}")

    low, high = domain
    for i, bound in enumerate((low, high)):
        if isinstance(bound, bool) or not isinstance(bound, int | float):
            raise ConfigurationError(f"{name} bound {i} must be numeric, got {type(bound)}")
        if math.isnan(bound) or math.isinf(bound):
            raise ConfigurationError(f"{name} bound {i} cannot be NaN/infinite: {bound}")

    if low >= high:
        raise ConfigurationError(f"{name} lower bound ({low}) must be < upper bound ({high})")
    return float(low), float(high)


def validate_error_kind(value: Any) -> ErrorKind:
    """Validate an error kind label."""
    allowed = get_args(ErrorKind)
    if value not in allowed:
        raise ConfigurationError(f"error kind must be one of {allowed}, got {value!r}")
    return value


def validate_array_numerical_integrity(
    array: FloatArray, name: str, context: str = "validation"
) -> None:
    """Single source for NaN/Inf validation."""
    if np.any(np.isnan(array)) or np.any(np.isinf(array)):
        raise DataIntegrityError(
            f"{name} contains NaN or Inf values", f"Numerical corruption in {context}"
        )


def validate_array_shape(
    array: FloatArray, expected_shape: tuple[int, ...], name: str, context: str = "validation"
) -> None:
    """Single source for shape validation."""
    if array.shape != expected_shape:
        raise DataIntegrityError(
            f"{name} has shape {array.shape}, expected {expected_shape}",
            f"Shape mismatch in {context}",
        )
