"""Shared fixtures: a small sample and one cheap fit reused across tests."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from age_posterior.config import SamplerConfig
from age_posterior.data import load_population, sample_people
from age_posterior.model import fit_intercept_model

FAST_SAMPLER = SamplerConfig(
    draws=200,
    tune=200,
    chains=2,
    cores=1,
    random_seed=123,
    nuts_sampler="pymc",
)


@pytest.fixture(scope="session")
def population():
    return load_population()


@pytest.fixture(scope="session")
def sample(population):
    return sample_people(population, n=30, random_seed=3)


@pytest.fixture(scope="session")
def fitted(sample):
    """(model, idata) for ``sample``, sampled once per test session."""
    return fit_intercept_model(sample, sampler=FAST_SAMPLER)
