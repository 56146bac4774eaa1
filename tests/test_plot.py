import matplotlib


matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from faml import ConfigurationError, get_contract
from faml.plot import plot_error_profile


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_plot_by_name():
    fig = plot_error_profile("sin_double", num_samples=101, show=False)

    value_ax, error_ax = fig.axes
    assert len(value_ax.lines) == 2
    assert error_ax.get_ylabel() == "absolute error"
    assert "sin_double" in fig._suptitle.get_text()


def test_plot_relative_contract_draws_ceiling():
    contract = get_contract("exp_double")
    fig = plot_error_profile(contract, num_samples=51, show=False)

    error_ax = fig.axes[1]
    ceilings = sorted(line.get_ydata()[0] for line in error_ax.lines[1:])
    assert ceilings == [-contract.error_bound, contract.error_bound]
    assert error_ax.get_ylabel() == "relative error"


def test_unknown_name():
    with pytest.raises(ConfigurationError):
        plot_error_profile("erf_float", show=False)


def test_contract_draws_its_own_profile():
    fig = get_contract("pow_double").plot(num_samples=41, show=False)

    assert len(fig.axes) == 2
    assert "pow_double" in fig._suptitle.get_text()
