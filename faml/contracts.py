"""
Documented accuracy contracts of the approximate operations.

Each approximation's contract is its recommended domain plus the error
ceiling that holds on it. The catalog below is the single source of truth for
those numbers: docs, tests and ``plot_error_profile`` all read from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from types import MappingProxyType

import numpy as np

from . import bithacks, trig
from .exceptions import ConfigurationError
from .faml_types import Domain, ErrorKind, ScalarFunction
from .input_validation import (
    validate_callable,
    validate_domain,
    validate_error_kind,
    validate_positive_number,
)
from .utils.constants import (
    DEFAULT_FIGURE_SIZE,
    DEFAULT_PROFILE_SAMPLES,
    HALF_PI,
    PI,
    TWO_PI,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApproximationContract:
    """
    Recommended domain and error ceiling of one approximate operation.

    Args:
        name: Public name of the operation
        function: The approximation
        reference: Trusted implementation it is measured against
        domain: Closed interval on which ``error_bound`` holds
        error_kind: Whether ``error_bound`` is a relative or absolute ceiling
        error_bound: Error ceiling that holds on ``domain``
        input_dtype: dtype the operation reads its input as
        notes: How the error behaves outside the domain
    """

    name: str
    function: ScalarFunction = field(repr=False)
    reference: ScalarFunction = field(repr=False)
    domain: Domain
    error_kind: ErrorKind
    error_bound: float
    input_dtype: type[np.floating] = np.float64
    notes: str = ""

    def __post_init__(self) -> None:
        validate_callable(self.function, f"{self.name} function")
        validate_callable(self.reference, f"{self.name} reference")
        object.__setattr__(self, "domain", validate_domain(self.domain, f"{self.name} domain"))
        validate_error_kind(self.error_kind)
        validate_positive_number(self.error_bound, f"{self.name} error_bound")

    def check(self, num_samples: int = DEFAULT_PROFILE_SAMPLES) -> bool:
        """Profile the operation on its domain and report whether the ceiling holds."""
        from .accuracy import profile_contract

        profile = profile_contract(self, num_samples)
        observed = profile.observed(self.error_kind)
        holds = profile.within(self.error_bound, self.error_kind)
        if not holds:
            logger.warning(
                "%s exceeds its %s error ceiling %.3g on [%g, %g]: observed %.3g",
                self.name,
                self.error_kind,
                self.error_bound,
                self.domain[0],
                self.domain[1],
                observed,
            )
        return holds

    def plot(
        self,
        num_samples: int = DEFAULT_PROFILE_SAMPLES,
        figsize: tuple[float, float] = DEFAULT_FIGURE_SIZE,
        show: bool = True,
    ):
        """
        Plot the approximation against its reference with the error underneath.

        Returns:
            matplotlib Figure
        """
        from .plot import plot_error_profile

        return plot_error_profile(self, num_samples=num_samples, figsize=figsize, show=show)


def _reciprocal(x):
    return 1.0 / x


def _reciprocal_sqrt(x):
    return 1.0 / np.sqrt(x)


# pow is catalogued at one fixed exponent; its error grows with |y|
_POW_EXPONENT = 2.0


def _power(x):
    return np.power(x, _POW_EXPONENT)


_CATALOG: tuple[ApproximationContract, ...] = (
    # --- Bit-reinterpretation approximations ---
    ApproximationContract(
        "inverse_float", bithacks.inverse_float, _reciprocal, (0.01, 100.0), "relative", 0.13,
        np.float32, "Exact at powers of two; invalid for x <= 0 and near float32 max.",
    ),
    ApproximationContract(
        "inv_sqrt_float", bithacks.inv_sqrt_float, _reciprocal_sqrt, (0.01, 100.0), "relative", 0.05,
        np.float32, "Error grows as x approaches zero; invalid for x <= 0.",
    ),
    ApproximationContract(
        "inv_sqrt_double", bithacks.inv_sqrt_double, _reciprocal_sqrt, (0.01, 100.0), "relative", 0.05,
        np.float64, "Error grows as x approaches zero; invalid for x <= 0.",
    ),
    ApproximationContract(
        "sqrt_float", bithacks.sqrt_float, np.sqrt, (0.01, 100.0), "relative", 0.07,
        np.float32, "Error grows approaching zero; invalid for x < 0.",
    ),
    ApproximationContract(
        "exp_double", bithacks.exp_double, np.exp, (0.0, 20.0), "relative", 0.05,
        np.float64, "Negative x is not corrected for; overflows past x ~ 709.",
    ),
    ApproximationContract(
        "exp_float", bithacks.exp_float, np.exp, (0.0, 20.0), "relative", 0.05,
        np.float32, "Negative x is not corrected for; overflows float32 past x ~ 88.",
    ),
    ApproximationContract(
        "ln_double", bithacks.ln_double, np.log, (0.01, 1000.0), "absolute", 0.05,
        np.float64, "Meaningless for x <= 0 and for subnormal x.",
    ),
    ApproximationContract(
        "ln_float", bithacks.ln_float, np.log, (0.01, 1000.0), "absolute", 0.05,
        np.float32, "Meaningless for x <= 0 and for subnormal x.",
    ),
    ApproximationContract(
        "pow_float", partial(bithacks.pow_float, y=_POW_EXPONENT), _power, (0.5, 8.0),
        "relative", 0.15,
        np.float32, "Profiled at y = 2; exact at y = 1, error grows with |y|. Invalid for x <= 0.",
    ),
    ApproximationContract(
        "pow_double", partial(bithacks.pow_double, y=_POW_EXPONENT), _power, (0.5, 8.0),
        "relative", 0.15,
        np.float64, "Profiled at y = 2; exact to the high word at y = 1, error grows with |y|.",
    ),
    # --- Polynomial trigonometric approximations ---
    ApproximationContract(
        "sin_float", trig.sin_float, np.sin, (-PI, PI), "absolute", 0.06,
        np.float32, "Diverges quadratically outside [-pi, pi].",
    ),
    ApproximationContract(
        "sin_double", trig.sin_double, np.sin, (-PI, PI), "absolute", 0.06,
        np.float64, "Diverges quadratically outside [-pi, pi].",
    ),
    ApproximationContract(
        "cos_float", trig.cos_float, np.cos, (-PI - HALF_PI, HALF_PI), "absolute", 0.06,
        np.float32, "Diverges quadratically outside [-3pi/2, pi/2].",
    ),
    ApproximationContract(
        "cos_double", trig.cos_double, np.cos, (-PI - HALF_PI, HALF_PI), "absolute", 0.06,
        np.float64, "Diverges quadratically outside [-3pi/2, pi/2].",
    ),
    ApproximationContract(
        "sin_float_normalized", trig.sin_float_normalized, np.sin, (-1.0e5, 1.0e5), "absolute", 0.06,
        np.float32, "Valid for any finite x.",
    ),
    ApproximationContract(
        "sin_double_normalized", trig.sin_double_normalized, np.sin, (-1.0e5, 1.0e5), "absolute", 0.06,
        np.float64, "Valid for any finite x.",
    ),
    ApproximationContract(
        "cos_float_normalized", trig.cos_float_normalized, np.cos, (-1.0e5, 1.0e5), "absolute", 0.06,
        np.float32, "Valid for any finite x.",
    ),
    ApproximationContract(
        "cos_double_normalized", trig.cos_double_normalized, np.cos, (-1.0e5, 1.0e5), "absolute", 0.06,
        np.float64, "Valid for any finite x.",
    ),
    ApproximationContract(
        "tan_float", trig.tan_float, np.tan, (-1.0, 1.0), "relative", 0.05,
        np.float32, "Falls away from tan(x) quickly beyond |x| = 1.",
    ),
    ApproximationContract(
        "tan_double", trig.tan_double, np.tan, (-1.0, 1.0), "relative", 0.05,
        np.float64, "Falls away from tan(x) quickly beyond |x| = 1.",
    ),
    ApproximationContract(
        "tan_float_hp", trig.tan_float_hp, np.tan, (-1.5, 1.5), "relative", 0.01,
        np.float32, "Degrades in the last few hundredths before +-pi/2.",
    ),
    ApproximationContract(
        "tan_double_hp", trig.tan_double_hp, np.tan, (-1.5, 1.5), "relative", 0.01,
        np.float64, "Degrades in the last few hundredths before +-pi/2.",
    ),
    ApproximationContract(
        "tan_float_normalized", trig.tan_float_normalized, np.tan, (PI - 1.0, PI + 1.0), "relative", 0.05,
        np.float32, "Accurate where x folds into [-1, 1].",
    ),
    ApproximationContract(
        "tan_double_normalized", trig.tan_double_normalized, np.tan, (PI - 1.0, PI + 1.0), "relative", 0.05,
        np.float64, "Accurate where x folds into [-1, 1].",
    ),
    ApproximationContract(
        "tan_float_hp_normalized", trig.tan_float_hp_normalized, np.tan, (TWO_PI - 1.5, TWO_PI + 1.5),
        "relative", 0.01, np.float32, "Accurate where x folds into [-1.5, 1.5].",
    ),
    ApproximationContract(
        "tan_double_hp_normalized", trig.tan_double_hp_normalized, np.tan, (TWO_PI - 1.5, TWO_PI + 1.5),
        "relative", 0.01, np.float64, "Accurate where x folds into [-1.5, 1.5].",
    ),
)

CONTRACTS = MappingProxyType({contract.name: contract for contract in _CATALOG})
"""Read-only mapping of operation name to its accuracy contract."""


def get_contract(name: str) -> ApproximationContract:
    """
    Look up the accuracy contract of an approximate operation by name.

    Raises:
        ConfigurationError: If no approximation of that name is catalogued
    """
    try:
        return CONTRACTS[name]
    except KeyError:
        raise ConfigurationError(
            f"No accuracy contract for '{name}'", f"known: {', '.join(sorted(CONTRACTS))}"
        ) from None
