import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from faml import (
    CONTRACTS,
    ApproximationContract,
    ConfigurationError,
    DataIntegrityError,
    FAMLBaseError,
    get_contract,
    pow_double,
    pow_float,
    profile_approximation,
    profile_contract,
    profiles_to_dataframe,
    sin_double,
)
from faml.accuracy import sample_domain
from faml.utils.constants import PI


class TestContractCatalog:
    @pytest.mark.parametrize("name", sorted(CONTRACTS))
    def test_every_contract_holds_on_its_domain(self, name):
        contract = get_contract(name)
        profile = profile_contract(contract)

        observed = profile.observed(contract.error_kind)
        assert profile.within(contract.error_bound, contract.error_kind), (
            f"{name}: observed {contract.error_kind} error {observed:.4g} "
            f"exceeds ceiling {contract.error_bound}"
        )
        assert contract.check(num_samples=501)

    def test_catalog_covers_every_approximation(self):
        expected = {
            "inverse_float",
            "inv_sqrt_float",
            "inv_sqrt_double",
            "sqrt_float",
            "exp_double",
            "exp_float",
            "ln_double",
            "ln_float",
            "pow_float",
            "pow_double",
        }
        for base in ("sin", "cos"):
            for width in ("float", "double"):
                expected |= {f"{base}_{width}", f"{base}_{width}_normalized"}
        for width in ("float", "double"):
            expected |= {
                f"tan_{width}",
                f"tan_{width}_hp",
                f"tan_{width}_normalized",
                f"tan_{width}_hp_normalized",
            }

        assert set(CONTRACTS) == expected

    @pytest.mark.parametrize(
        "name, function", [("pow_float", pow_float), ("pow_double", pow_double)]
    )
    def test_pow_contracts_fix_the_exponent(self, name, function):
        contract = get_contract(name)
        x = np.linspace(0.5, 8.0, 31)

        assert contract.domain == (0.5, 8.0)
        assert contract.error_kind == "relative"
        assert_array_equal(contract.function(x), function(x, 2.0))
        assert_allclose(contract.reference(x), x * x)

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            CONTRACTS["sin_float"] = None

    def test_unknown_contract(self):
        with pytest.raises(ConfigurationError, match="No accuracy contract for 'sinh_float'"):
            get_contract("sinh_float")

    def test_failing_contract_logs_warning(self, caplog):
        strict = ApproximationContract("strict_sin", sin_double, np.sin, (-PI, PI), "absolute", 1e-6)

        with caplog.at_level(logging.WARNING, logger="faml.contracts"):
            assert not strict.check(num_samples=101)

        assert any("exceeds" in record.getMessage() for record in caplog.records)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"domain": (1.0, -1.0)},
            {"domain": (0.0, float("inf"))},
            {"error_kind": "median"},
            {"error_bound": 0.0},
            {"function": "sin"},
        ],
    )
    def test_invalid_contract_is_rejected(self, overrides):
        arguments = {
            "name": "custom",
            "function": sin_double,
            "reference": np.sin,
            "domain": (-1.0, 1.0),
            "error_kind": "absolute",
            "error_bound": 0.1,
        }
        arguments.update(overrides)
        with pytest.raises(ConfigurationError):
            ApproximationContract(**arguments)

    def test_domain_is_normalised_to_floats(self):
        contract = ApproximationContract("custom", sin_double, np.sin, [-1, 1], "absolute", 0.1)
        assert contract.domain == (-1.0, 1.0)
        assert isinstance(contract.domain[0], float)


class TestProfileApproximation:
    def test_identity_has_zero_error(self):
        profile = profile_approximation(np.sin, np.sin, (0.0, 1.0), num_samples=11)

        assert profile.name == "sin"
        assert profile.num_samples == 11
        assert profile.domain == (0.0, 1.0)
        assert profile.max_abs_error == 0.0
        assert profile.max_rel_error == 0.0
        assert profile.within(0.0, "absolute")

    def test_statistics_and_worst_input(self):
        profile = profile_approximation(
            lambda x: x + 0.01 * x**2, lambda x: x, (1.0, 3.0), num_samples=21, name="bent"
        )

        assert profile.name == "bent"
        assert profile.max_abs_error == pytest.approx(0.09)
        assert profile.worst_abs_input == 3.0
        assert profile.max_rel_error == pytest.approx(0.03)
        assert profile.worst_rel_input == 3.0
        assert profile.mean_abs_error < profile.max_abs_error

    def test_relative_floor_excludes_zero_reference(self):
        profile = profile_approximation(lambda x: x + 1e-3, lambda x: x, (-1.0, 1.0), num_samples=3)

        assert profile.max_abs_error == pytest.approx(1e-3)
        assert profile.max_rel_error == pytest.approx(1e-3)
        assert np.isfinite(profile.mean_rel_error)

    def test_nan_output_never_passes(self):
        profile = profile_approximation(
            lambda x: np.where(x > 0.5, np.nan, x), lambda x: x, (0.0, 1.0), num_samples=11
        )

        assert np.isnan(profile.max_abs_error)
        assert profile.worst_abs_input == pytest.approx(0.6)
        assert not profile.within(1.0, "absolute")
        assert not profile.within(1.0, "relative")

    def test_input_dtype_rounds_samples(self):
        samples = sample_domain((0.0, 1.0), 11, np.float32)

        assert samples.dtype == np.float64
        assert samples[1] == float(np.float32(0.1))
        assert samples[1] != 0.1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"domain": (1.0, 1.0)},
            {"domain": (0.0,)},
            {"num_samples": 1},
            {"num_samples": 2.5},
            {"num_samples": True},
            {"relative_floor": 0.0},
            {"approx": "not callable"},
        ],
    )
    def test_invalid_parameters(self, kwargs):
        arguments = {"approx": np.sin, "reference": np.sin, "domain": (0.0, 1.0)}
        arguments.update(kwargs)
        with pytest.raises(ConfigurationError):
            profile_approximation(**arguments)

    def test_unusable_reference(self):
        with pytest.raises(DataIntegrityError, match="NaN or Inf"):
            profile_approximation(np.sin, lambda x: np.full_like(x, np.inf), (0.0, 1.0))

    def test_wrong_output_shape(self):
        with pytest.raises(DataIntegrityError, match="shape"):
            profile_approximation(lambda x: x[:-1], np.sin, (0.0, 1.0), num_samples=5)

    def test_invalid_error_kind(self):
        profile = profile_approximation(np.sin, np.sin, (0.0, 1.0), num_samples=5)
        with pytest.raises(ConfigurationError):
            profile.observed("median")


class TestProfilesToDataFrame:
    def test_one_row_per_profile(self):
        profiles = [profile_contract(get_contract(name), 201) for name in ("sin_float", "exp_double")]

        frame = profiles_to_dataframe(profiles)

        assert frame.shape == (2, 9)
        assert list(frame.index) == ["sin_float", "exp_double"]
        assert frame.loc["exp_double", "domain_high"] == 20.0
        assert frame.loc["sin_float", "max_abs_error"] < 0.06

    def test_empty(self):
        frame = profiles_to_dataframe([])
        assert frame.empty
        assert "max_rel_error" in frame.columns


class TestExceptions:
    def test_message_with_context(self):
        error = ConfigurationError("bad value", "while profiling")
        assert str(error) == "bad value (Context: while profiling)"
        assert error.message == "bad value"
        assert error.context == "while profiling"

    def test_message_without_context(self):
        assert str(DataIntegrityError("broken")) == "broken"

    def test_hierarchy(self):
        assert issubclass(ConfigurationError, FAMLBaseError)
        assert issubclass(DataIntegrityError, FAMLBaseError)
        with pytest.raises(FAMLBaseError):
            get_contract("missing")
