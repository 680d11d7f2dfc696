"""Intercept-only Gaussian model of age, ``age ~ 1``, fitted with PyMC."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import arviz as az
import numpy as np
import pandas as pd
import pymc as pm
from arviz import InferenceData

from .config import HDI_PROB, PriorConfig, SamplerConfig

logger = logging.getLogger(__name__)

INTERCEPT = "(Intercept)"
TERMS = {"intercept": INTERCEPT, "sigma": "sigma"}


def _person_labels(sample: pd.DataFrame) -> np.ndarray:
    if "person_id" in sample:
        return sample["person_id"].to_numpy()
    return np.arange(len(sample))


def define_intercept_model(
    sample: pd.DataFrame, priors: Optional[PriorConfig] = None
) -> pm.Model:
    """Build the PyMC model for ``age ~ 1`` with priors scaled to the sample."""
    priors = priors or PriorConfig()
    priors.validate()

    ages = np.asarray(sample["age"], dtype=float)
    if ages.size < 2:
        raise ValueError("At least two observations are needed to fit the model.")
    if not np.all(np.isfinite(ages)):
        raise ValueError("Ages contain missing or non-finite entries.")

    location = ages.mean()
    spread = ages.std(ddof=1)
    if spread <= 0:
        raise ValueError("Ages have no spread; the residual scale is not identified.")
    logger.debug(
        "Priors: intercept ~ Normal(%.2f, %.2f), sigma ~ Exponential(1/%.2f)",
        location,
        priors.intercept_scale * spread,
        priors.sigma_scale * spread,
    )

    coords = {"person": _person_labels(sample)}
    with pm.Model(coords=coords) as model:
        pm.Data("age_observed", ages, dims="person")
        intercept = pm.Normal(
            "intercept", mu=location, sigma=priors.intercept_scale * spread
        )
        sigma = pm.Exponential("sigma", lam=1.0 / (priors.sigma_scale * spread))
        pm.Normal(
            "age",
            mu=intercept,
            sigma=sigma,
            observed=model["age_observed"],
            dims="person",
        )
    return model


def fit_intercept_model(
    sample: pd.DataFrame,
    priors: Optional[PriorConfig] = None,
    sampler: Optional[SamplerConfig] = None,
) -> Tuple[pm.Model, InferenceData]:
    sampler = sampler or SamplerConfig()
    sampler.validate()
    model = define_intercept_model(sample, priors)

    logger.info(
        "Sampling %d chains x %d draws with %s on %d observations",
        sampler.chains,
        sampler.draws,
        sampler.nuts_sampler,
        len(sample),
    )
    idata = pm.sample(
        model=model,
        draws=sampler.draws,
        tune=sampler.tune,
        chains=sampler.chains,
        cores=sampler.cores,
        target_accept=sampler.target_accept,
        random_seed=sampler.random_seed,
        nuts_sampler=sampler.nuts_sampler,
        return_inferencedata=True,
        progressbar=False,
    )
    logger.info("Sampling finished")
    return model, idata


def _require_posterior(idata: InferenceData):
    posterior = getattr(idata, "posterior", None)
    if posterior is None:
        raise RuntimeError("InferenceData has no posterior group; fit the model first.")
    missing = [name for name in TERMS if name not in posterior]
    if missing:
        raise RuntimeError(f"Posterior is missing variables: {', '.join(missing)}")
    return posterior


def posterior_draws(idata: InferenceData) -> pd.DataFrame:
    """One row per draw (chains stacked), one column per estimated term."""
    posterior = _require_posterior(idata)
    draws = posterior[list(TERMS)].to_dataframe().reset_index(drop=True)
    return draws[list(TERMS)].rename(columns=TERMS)


def summarize_posterior(idata: InferenceData, hdi_prob: float = HDI_PROB) -> pd.DataFrame:
    _require_posterior(idata)
    summary = az.summary(idata, var_names=list(TERMS), hdi_prob=hdi_prob)
    return summary.rename(index=TERMS)


def posterior_interval(
    draws: pd.DataFrame, column: str = INTERCEPT, prob: float = 0.95
) -> Tuple[float, float]:
    """Equal-tailed credible interval for one column of the draws table."""
    if not 0 < prob < 1:
        raise ValueError("prob must fall within (0, 1).")
    if column not in draws:
        raise KeyError(f"No column {column!r} in posterior draws.")
    tail = (1 - prob) / 2
    lower, upper = np.quantile(draws[column].to_numpy(), [tail, 1 - tail])
    return float(lower), float(upper)
