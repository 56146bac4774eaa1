"""
Plotting of approximation error over a contract's recommended domain.
"""

import logging

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure as MplFigure

from .accuracy import sample_domain
from .contracts import ApproximationContract, get_contract
from .utils.constants import DEFAULT_FIGURE_SIZE, DEFAULT_GRID_ALPHA, DEFAULT_PROFILE_SAMPLES


logger = logging.getLogger(__name__)


def plot_error_profile(
    contract: ApproximationContract | str,
    num_samples: int = DEFAULT_PROFILE_SAMPLES,
    figsize: tuple[float, float] = DEFAULT_FIGURE_SIZE,
    show: bool = True,
) -> MplFigure:
    """
    Plot an approximation against its reference, with the error underneath.

    The lower axes show the error of the contract's kind (relative or
    absolute) with the documented ceiling drawn as dashed lines.

    Args:
        contract: Contract object or catalogued operation name
        num_samples: Number of sample points across the domain
        figsize: Figure size in inches
        show: Whether to call ``plt.show()`` before returning

    Returns:
        The matplotlib Figure

    Examples:
        >>> plot_error_profile("sin_float")
        >>> plot_error_profile(get_contract("exp_double"), show=False).savefig("exp.png")
    """
    if isinstance(contract, str):
        contract = get_contract(contract)

    samples = sample_domain(contract.domain, num_samples, contract.input_dtype)
    expected = np.asarray(contract.reference(samples), dtype=np.float64)
    actual = np.asarray(contract.function(samples), dtype=np.float64)

    error = actual - expected
    if contract.error_kind == "relative":
        with np.errstate(divide="ignore", invalid="ignore"):
            error = np.where(expected != 0.0, error / np.abs(expected), np.nan)

    fig, (value_ax, error_ax) = plt.subplots(2, 1, sharex=True, figsize=figsize)

    value_ax.plot(samples, expected, color="black", linewidth=1.0, label="reference")
    value_ax.plot(samples, actual, color="tab:blue", linestyle="--", linewidth=1.0, label=contract.name)
    value_ax.set_ylabel("value")
    value_ax.legend(loc="best")
    value_ax.grid(True, alpha=DEFAULT_GRID_ALPHA)

    error_ax.plot(samples, error, color="tab:red", linewidth=1.0)
    for bound in (contract.error_bound, -contract.error_bound):
        error_ax.axhline(bound, color="gray", linestyle="--", linewidth=0.8)
    error_ax.set_ylabel(f"{contract.error_kind} error")
    error_ax.set_xlabel("x")
    error_ax.grid(True, alpha=DEFAULT_GRID_ALPHA)

    fig.suptitle(
        f"{contract.name} on [{contract.domain[0]:g}, {contract.domain[1]:g}] "
        f"(ceiling {contract.error_bound:g})"
    )
    fig.tight_layout()
    logger.debug("Created error plot for %s with %d samples", contract.name, samples.size)

    if show:
        plt.show()
    return fig
