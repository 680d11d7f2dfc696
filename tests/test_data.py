"""Tests for the bundled population and the random sample drawn from it."""

from __future__ import annotations

import pandas as pd
import pytest

from age_posterior.config import POPULATION_SIZE, SAMPLE_SIZE
from age_posterior.data import MAX_AGE, describe_ages, load_population, sample_people


def test_population_shape_and_columns(population: pd.DataFrame) -> None:
    assert len(population) == POPULATION_SIZE
    assert list(population.columns) == [
        "person_id",
        "sex",
        "age",
        "race",
        "education",
        "height",
        "weight",
    ]
    assert population["person_id"].is_unique
    assert population["age"].between(0, MAX_AGE).all()


def test_population_is_deterministic() -> None:
    pd.testing.assert_frame_equal(load_population(500), load_population(500))


def test_population_changes_with_seed() -> None:
    first = load_population(500, random_seed=1)
    second = load_population(500, random_seed=2)
    assert not first["age"].equals(second["age"])


def test_minors_have_no_education(population: pd.DataFrame) -> None:
    assert population.loc[population["age"] < 20, "education"].isna().all()


def test_population_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        load_population(0)


def test_sample_people_default_size(population: pd.DataFrame) -> None:
    sample = sample_people(population, random_seed=0)
    assert len(sample) == SAMPLE_SIZE
    assert list(sample.index) == list(range(SAMPLE_SIZE))


def test_sample_people_draws_without_replacement(population: pd.DataFrame) -> None:
    sample = sample_people(population, n=200, random_seed=7)
    assert sample["person_id"].is_unique
    assert sample["person_id"].isin(population["person_id"]).all()


def test_sample_people_reproducible_with_seed(population: pd.DataFrame) -> None:
    pd.testing.assert_frame_equal(
        sample_people(population, n=20, random_seed=5),
        sample_people(population, n=20, random_seed=5),
    )


@pytest.mark.parametrize("n", [0, -3, POPULATION_SIZE + 1])
def test_sample_people_rejects_bad_sizes(population: pd.DataFrame, n: int) -> None:
    with pytest.raises(ValueError):
        sample_people(population, n=n)


def test_sample_people_requires_age_column() -> None:
    with pytest.raises(KeyError):
        sample_people(pd.DataFrame({"height": [150.0, 160.0]}), n=1)


def test_describe_ages() -> None:
    stats = describe_ages(pd.DataFrame({"age": [20, 30, 40]}))
    assert stats == {"count": 3, "mean": 30.0, "sd": 10.0, "min": 20.0, "max": 40.0}
