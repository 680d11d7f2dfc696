"""Bundled population table and the random sample drawn from it."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np
import pandas as pd

from .config import POPULATION_SEED, POPULATION_SIZE, SAMPLE_SIZE

logger = logging.getLogger(__name__)

MAX_AGE = 80

RACES = ["White", "Black", "Hispanic", "Mexican", "Other"]
RACE_WEIGHTS = [0.62, 0.12, 0.07, 0.10, 0.09]

EDUCATION = ["8th Grade", "9 - 11th Grade", "High School", "Some College", "College Grad"]
EDUCATION_WEIGHTS = [0.06, 0.11, 0.22, 0.31, 0.30]


def _age_weights() -> np.ndarray:
    # flat through middle age, thinning past 60, with a top-coded bump at MAX_AGE
    ages = np.arange(MAX_AGE + 1)
    weights = np.where(ages < 60, 1.0, np.exp(-(ages - 60) / 12.0))
    weights[MAX_AGE] += 2.0
    return weights / weights.sum()


def _heights(rng: np.random.Generator, age: np.ndarray, male: np.ndarray) -> np.ndarray:
    adult = np.where(male, 176.0, 162.0)
    growth = np.clip(age / 18.0, 0.0, 1.0)
    mean = 50.0 + (adult - 50.0) * np.sqrt(growth)
    return np.round(rng.normal(mean, 3.0 + 4.0 * growth), 1)


def load_population(
    size: int = POPULATION_SIZE,
    random_seed: int = POPULATION_SEED,
) -> pd.DataFrame:
    """Return the bundled population table, one row per person.

    The table is generated from a fixed seed, so repeated calls with the same
    arguments return identical frames.
    """
    if size <= 0:
        raise ValueError("Population size must be positive.")

    rng = np.random.default_rng(random_seed)
    age = rng.choice(MAX_AGE + 1, size=size, p=_age_weights())
    male = rng.random(size) < 0.49
    height = _heights(rng, age, male)
    bmi = rng.normal(np.where(age < 18, 18.0, 28.0), 4.0).clip(min=12.0)
    weight = np.round(bmi * (height / 100.0) ** 2, 1)

    education = rng.choice(EDUCATION, size=size, p=EDUCATION_WEIGHTS).astype(object)
    education[age < 20] = None

    population = pd.DataFrame(
        {
            "person_id": np.arange(1, size + 1),
            "sex": np.where(male, "Male", "Female"),
            "age": age.astype(int),
            "race": rng.choice(RACES, size=size, p=RACE_WEIGHTS),
            "education": education,
            "height": height,
            "weight": weight,
        }
    )
    logger.debug("Generated population of %d people (seed=%d)", size, random_seed)
    return population


def sample_people(
    population: pd.DataFrame,
    n: int = SAMPLE_SIZE,
    random_seed: Optional[int] = None,
) -> pd.DataFrame:
    """Draw ``n`` people uniformly at random, without replacement."""
    if "age" not in population:
        raise KeyError("Population table has no 'age' column.")
    if n <= 0:
        raise ValueError("Sample size must be positive.")
    if n > len(population):
        raise ValueError(
            f"Cannot sample {n} people from a population of {len(population)}."
        )

    sample = population.sample(n=n, replace=False, random_state=random_seed)
    logger.info("Sampled %d of %d people", n, len(population))
    return sample.reset_index(drop=True)


def describe_ages(sample: pd.DataFrame) -> Dict[str, float]:
    ages = sample["age"]
    return {
        "count": int(ages.count()),
        "mean": float(ages.mean()),
        "sd": float(ages.std()),
        "min": float(ages.min()),
        "max": float(ages.max()),
    }
