"""Estimating an average age, and predicting individual ages, with PyMC."""

from .config import PriorConfig, SamplerConfig
from .data import describe_ages, load_population, sample_people
from .model import (
    define_intercept_model,
    fit_intercept_model,
    posterior_draws,
    posterior_interval,
    summarize_posterior,
)
from .predictive import (
    posterior_predict,
    predict_new_people,
    probability_total_exceeds,
    row_totals,
)

__all__ = [
    "PriorConfig",
    "SamplerConfig",
    "define_intercept_model",
    "describe_ages",
    "fit_intercept_model",
    "load_population",
    "posterior_draws",
    "posterior_interval",
    "posterior_predict",
    "predict_new_people",
    "probability_total_exceeds",
    "row_totals",
    "sample_people",
    "summarize_posterior",
]
