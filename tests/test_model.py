"""Tests for the intercept-only model and the posterior draws table."""

from __future__ import annotations

import arviz as az
import numpy as np
import pandas as pd
import pytest

from age_posterior.config import PriorConfig
from age_posterior.model import (
    INTERCEPT,
    define_intercept_model,
    posterior_draws,
    posterior_interval,
    summarize_posterior,
)


# ---------------------------------------------------------------------------
# Model construction


def test_define_intercept_model_variables(sample: pd.DataFrame) -> None:
    model = define_intercept_model(sample)
    assert {"intercept", "sigma", "age", "age_observed"}.issubset(model.named_vars)
    assert [rv.name for rv in model.free_RVs] == ["intercept", "sigma"]
    assert list(model.coords["person"]) == list(sample["person_id"])


def test_define_intercept_model_without_person_ids() -> None:
    model = define_intercept_model(pd.DataFrame({"age": [10, 30, 50]}))
    assert list(model.coords["person"]) == [0, 1, 2]


@pytest.mark.parametrize(
    "ages",
    [
        [42],
        [30, np.nan, 50],
        [25, 25, 25],
    ],
)
def test_define_intercept_model_rejects_bad_ages(ages: list) -> None:
    with pytest.raises(ValueError):
        define_intercept_model(pd.DataFrame({"age": ages}))


def test_define_intercept_model_validates_priors(sample: pd.DataFrame) -> None:
    with pytest.raises(ValueError):
        define_intercept_model(sample, PriorConfig(intercept_scale=0.0))


# ---------------------------------------------------------------------------
# Draws from hand-built InferenceData


def _idata(chains: int = 2, draws: int = 5) -> az.InferenceData:
    intercept = np.arange(chains * draws, dtype=float).reshape(chains, draws)
    return az.from_dict(posterior={"intercept": intercept, "sigma": intercept + 100.0})


def test_posterior_draws_stacks_chains() -> None:
    draws = posterior_draws(_idata())
    assert list(draws.columns) == [INTERCEPT, "sigma"]
    assert draws.shape == (10, 2)
    assert list(draws[INTERCEPT]) == list(np.arange(10.0))
    assert np.allclose(draws["sigma"] - draws[INTERCEPT], 100.0)


def test_posterior_draws_requires_variables() -> None:
    idata = az.from_dict(posterior={"intercept": np.zeros((1, 3))})
    with pytest.raises(RuntimeError, match="sigma"):
        posterior_draws(idata)


def test_posterior_draws_requires_posterior_group() -> None:
    with pytest.raises(RuntimeError):
        posterior_draws(az.InferenceData())


def test_posterior_interval_equal_tailed() -> None:
    draws = pd.DataFrame({INTERCEPT: np.arange(101.0)})
    lower, upper = posterior_interval(draws, prob=0.9)
    assert lower == pytest.approx(5.0)
    assert upper == pytest.approx(95.0)


def test_posterior_interval_errors() -> None:
    draws = pd.DataFrame({INTERCEPT: np.arange(10.0)})
    with pytest.raises(ValueError):
        posterior_interval(draws, prob=1.5)
    with pytest.raises(KeyError):
        posterior_interval(draws, column="slope")


# ---------------------------------------------------------------------------
# Fitted model


@pytest.mark.filterwarnings("ignore::UserWarning")
def test_fitted_draws_table_shape(fitted) -> None:
    _, idata = fitted
    draws = posterior_draws(idata)
    assert draws.shape == (2 * 200, 2)
    assert (draws["sigma"] > 0).all()


@pytest.mark.filterwarnings("ignore::UserWarning")
def test_fitted_intercept_tracks_sample_mean(fitted, sample: pd.DataFrame) -> None:
    _, idata = fitted
    draws = posterior_draws(idata)
    assert abs(draws[INTERCEPT].mean() - sample["age"].mean()) < 2.0
    lower, upper = posterior_interval(draws)
    assert lower < sample["age"].mean() < upper


@pytest.mark.filterwarnings("ignore::UserWarning")
def test_summarize_posterior_rows(fitted) -> None:
    _, idata = fitted
    summary = summarize_posterior(idata)
    assert list(summary.index) == [INTERCEPT, "sigma"]
    assert "mean" in summary.columns
