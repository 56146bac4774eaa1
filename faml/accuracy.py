"""
Error profiling of approximations against a reference implementation.

The operations in FAML document their accuracy as part of their contract.
This module measures it: sample a domain, evaluate approximation and
reference side by side, and summarise absolute and relative error. Benchmark
the target hardware separately; a profile says nothing about speed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from .faml_types import Domain, ErrorKind, FloatArray, ScalarFunction
from .input_validation import (
    validate_array_numerical_integrity,
    validate_array_shape,
    validate_callable,
    validate_domain,
    validate_error_kind,
    validate_positive_integer,
    validate_positive_number,
)
from .utils.constants import (
    DEFAULT_PROFILE_SAMPLES,
    DEFAULT_RELATIVE_FLOOR,
    MINIMUM_PROFILE_SAMPLES,
)


if TYPE_CHECKING:
    from .contracts import ApproximationContract


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorProfile:
    """Summary of how far an approximation strays from its reference on a domain."""

    name: str
    domain: Domain
    num_samples: int
    max_abs_error: float
    mean_abs_error: float
    max_rel_error: float
    mean_rel_error: float
    worst_abs_input: float
    worst_rel_input: float

    def observed(self, error_kind: ErrorKind) -> float:
        """Maximum observed error of the given kind."""
        if validate_error_kind(error_kind) == "relative":
            return self.max_rel_error
        return self.max_abs_error

    def within(self, bound: float, error_kind: ErrorKind) -> bool:
        """
        Check the maximum observed error against a ceiling.

        NaN errors (an approximation that produced NaN somewhere) never pass.
        """
        return bool(self.observed(error_kind) <= bound)


def sample_domain(
    domain: Domain, num_samples: int, input_dtype: type[np.floating] = np.float64
) -> FloatArray:
    """
    Evenly spaced sample points over a closed domain.

    Points are rounded to ``input_dtype`` and widened back, so a reference
    evaluated on them sees exactly the inputs a float32 approximation sees.
    """
    low, high = validate_domain(domain)
    validate_positive_integer(num_samples, "num_samples", MINIMUM_PROFILE_SAMPLES)
    samples = np.linspace(low, high, num_samples, dtype=np.float64)
    return samples.astype(input_dtype).astype(np.float64)


def _evaluate(function: ScalarFunction, samples: FloatArray, name: str, context: str) -> FloatArray:
    values = np.asarray(function(samples), dtype=np.float64)
    validate_array_shape(values, samples.shape, name, context)
    return values


def profile_approximation(
    approx: ScalarFunction,
    reference: ScalarFunction,
    domain: Domain,
    num_samples: int = DEFAULT_PROFILE_SAMPLES,
    name: str | None = None,
    relative_floor: float = DEFAULT_RELATIVE_FLOOR,
    input_dtype: type[np.floating] = np.float64,
) -> ErrorProfile:
    """
    Measure the error of an approximation over a sampled domain.

    Args:
        approx: Approximation under test, evaluated elementwise on an array
        reference: Trusted implementation of the same function
        domain: Closed (low, high) interval to sample
        num_samples: Number of evenly spaced sample points (>= 2)
        name: Label for the profile, defaults to the approximation's name
        relative_floor: Reference magnitudes below this are left out of the
            relative error statistics
        input_dtype: dtype the sample points are rounded to before evaluation

    Returns:
        ErrorProfile with absolute and relative error statistics

    Raises:
        ConfigurationError: If any parameter is invalid
        DataIntegrityError: If the reference yields NaN/Inf or either function
            returns the wrong shape

    Examples:
        >>> from faml import exp_double
        >>> profile = profile_approximation(exp_double, np.exp, (0.0, 20.0))
        >>> profile.max_rel_error < 0.05
        True
    """
    validate_callable(approx, "approx")
    validate_callable(reference, "reference")
    validate_positive_number(relative_floor, "relative_floor")
    label = name or getattr(approx, "__name__", repr(approx))
    context = f"profiling {label}"

    samples = sample_domain(domain, num_samples, input_dtype)
    expected = _evaluate(reference, samples, "reference output", context)
    validate_array_numerical_integrity(expected, "reference output", context)
    actual = _evaluate(approx, samples, "approximation output", context)

    abs_error = np.abs(actual - expected)
    eligible = np.abs(expected) >= relative_floor
    rel_error = abs_error[eligible] / np.abs(expected[eligible])

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s: %d samples, %d eligible for relative error, %d non-finite outputs",
            label,
            samples.size,
            int(np.count_nonzero(eligible)),
            int(np.count_nonzero(~np.isfinite(actual))),
        )

    profile = ErrorProfile(
        name=label,
        domain=(float(samples[0]), float(samples[-1])),
        num_samples=int(samples.size),
        max_abs_error=_nan_safe_max(abs_error),
        mean_abs_error=_nan_safe_mean(abs_error),
        max_rel_error=_nan_safe_max(rel_error),
        mean_rel_error=_nan_safe_mean(rel_error),
        worst_abs_input=_worst_input(samples, abs_error),
        worst_rel_input=_worst_input(samples[eligible], rel_error),
    )
    logger.info(
        "Profiled %s on [%g, %g]: max abs %.3e, max rel %.3e",
        label,
        profile.domain[0],
        profile.domain[1],
        profile.max_abs_error,
        profile.max_rel_error,
    )
    return profile


def profile_contract(
    contract: ApproximationContract, num_samples: int = DEFAULT_PROFILE_SAMPLES
) -> ErrorProfile:
    """Profile an approximation over the recommended domain recorded in its contract."""
    return profile_approximation(
        contract.function,
        contract.reference,
        contract.domain,
        num_samples=num_samples,
        name=contract.name,
        input_dtype=contract.input_dtype,
    )


def profiles_to_dataframe(profiles: Iterable[ErrorProfile]) -> pd.DataFrame:
    """
    Tabulate error profiles, one row per profile indexed by name.

    The domain tuple is split into ``domain_low`` and ``domain_high`` columns.
    """
    rows = []
    for profile in profiles:
        row = asdict(profile)
        row["domain_low"], row["domain_high"] = row.pop("domain")
        rows.append(row)

    columns = [
        "name",
        "domain_low",
        "domain_high",
        "num_samples",
        "max_abs_error",
        "mean_abs_error",
        "max_rel_error",
        "mean_rel_error",
        "worst_abs_input",
        "worst_rel_input",
    ]
    return pd.DataFrame(rows, columns=columns).set_index("name")


def _nan_safe_max(errors: FloatArray) -> float:
    # NaN anywhere means the approximation broke down; report it, don't hide it
    if errors.size == 0:
        return float("nan")
    return float(np.max(errors))


def _nan_safe_mean(errors: FloatArray) -> float:
    if errors.size == 0:
        return float("nan")
    return float(np.mean(errors))


def _worst_input(samples: FloatArray, errors: FloatArray) -> float:
    if errors.size == 0:
        return float("nan")
    broken = np.flatnonzero(np.isnan(errors))
    if broken.size:
        return float(samples[broken[0]])
    return float(samples[int(np.argmax(errors))])
