"""Posterior-predictive tables and the probabilities read off them."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
import pandas as pd
import pymc as pm
import xarray as xr
from arviz import InferenceData
from pymc.model.fgraph import clone_model

from .config import AGE_THRESHOLD, PREDICTIVE_COLUMNS

logger = logging.getLogger(__name__)


def _draws_by_person(predicted: xr.DataArray) -> pd.DataFrame:
    stacked = predicted.stack(sample=("chain", "draw")).transpose("sample", "person")
    columns = pd.Index(predicted["person"].values, name="person")
    return pd.DataFrame(stacked.values, columns=columns)


def posterior_predict(
    model: pm.Model, idata: InferenceData, random_seed: Optional[int] = None
) -> pd.DataFrame:
    """Simulated ages for every sampled person: rows are draws, columns people."""
    with model:
        predictive = pm.sample_posterior_predictive(
            idata,
            var_names=["age"],
            random_seed=random_seed,
            progressbar=False,
        )
    table = _draws_by_person(predictive.posterior_predictive["age"])
    logger.info("Posterior predictive table: %d draws x %d people", *table.shape)
    return table


def predict_new_people(
    model: pm.Model,
    idata: InferenceData,
    n_people: int,
    random_seed: Optional[int] = None,
) -> pd.DataFrame:
    """Simulated ages for ``n_people`` people who were not in the sample."""
    if n_people <= 0:
        raise ValueError("n_people must be positive.")
    people = np.arange(n_people)
    with clone_model(model):
        pm.set_data(
            {"age_observed": np.zeros(n_people)},
            coords={"person": people},
        )
        predictions = pm.sample_posterior_predictive(
            idata,
            var_names=["age"],
            predictions=True,
            random_seed=random_seed,
            progressbar=False,
        )
    return _draws_by_person(predictions.predictions["age"])


def _select(predictions: pd.DataFrame, columns: Optional[Sequence]) -> pd.DataFrame:
    if columns is None:
        if predictions.shape[1] < PREDICTIVE_COLUMNS:
            raise ValueError(
                f"Need at least {PREDICTIVE_COLUMNS} columns, got {predictions.shape[1]}."
            )
        return predictions.iloc[:, :PREDICTIVE_COLUMNS]
    columns = list(columns)
    if not columns:
        raise ValueError("At least one column must be selected.")
    unknown = [column for column in columns if column not in predictions.columns]
    if unknown:
        raise KeyError(f"Unknown columns: {unknown}")
    return predictions[columns]


def row_totals(predictions: pd.DataFrame, columns: Optional[Sequence] = None) -> pd.Series:
    return _select(predictions, columns).sum(axis=1)


def probability_total_exceeds(
    predictions: pd.DataFrame,
    threshold: float = AGE_THRESHOLD,
    columns: Optional[Sequence] = None,
) -> float:
    """Share of draws whose total over ``columns`` is strictly above ``threshold``.

    With ``columns=None`` the first three people in the table are used.
    """
    totals = row_totals(predictions, columns)
    return float((totals > threshold).mean())
