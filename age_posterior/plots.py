"""Plotting helpers for the age notebook."""

from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import scipy.stats as st
from matplotlib.axes import Axes

from .model import INTERCEPT


def format_probability(ax: Axes) -> Axes:
    ax.yaxis.set_major_formatter(plt.FuncFormatter(lambda y, _: f"{y:.0%}"))
    return ax


def _probability_histogram(ax: Axes, values: np.ndarray, bins: int, color: str):
    weights = np.full(values.shape, 1.0 / values.size)
    return ax.hist(values, bins=bins, weights=weights, color=color, alpha=0.8)


def plot_sample_ages(sample: pd.DataFrame, ax: Optional[Axes] = None, color="C0") -> Axes:
    if ax is None:
        _, ax = plt.subplots()
    ax.hist(sample["age"], bins=range(0, 85, 5), color=color, edgecolor="white")
    ax.set_xlabel("Age")
    ax.set_ylabel("People")
    ax.set_title(f"Ages of {len(sample)} sampled people")
    return ax


def plot_posterior_histogram(
    draws: pd.DataFrame,
    column: str = INTERCEPT,
    ax: Optional[Axes] = None,
    bins: int = 50,
    color="C0",
) -> Axes:
    """Histogram of one draws column, scaled to probability per bin."""
    if ax is None:
        _, ax = plt.subplots()
    values = draws[column].to_numpy()
    _, edges, _ = _probability_histogram(ax, values, bins, color)

    # normal approximation, rescaled from density to probability per bin
    grid = np.linspace(edges[0], edges[-1], 200)
    width = edges[1] - edges[0]
    approx = st.norm(values.mean(), values.std())
    ax.plot(grid, approx.pdf(grid) * width, color="C1", label="Normal approximation")

    ax.set_xlabel("Average age" if column == INTERCEPT else column)
    ax.set_ylabel("Probability")
    ax.set_title(f"Posterior distribution of {column}")
    ax.legend()
    format_probability(ax)
    return ax


def plot_predictive_totals(
    totals: pd.Series,
    threshold: float,
    ax: Optional[Axes] = None,
    bins: int = 50,
    color="C2",
) -> Axes:
    if ax is None:
        _, ax = plt.subplots()
    values = np.asarray(totals, dtype=float)
    _probability_histogram(ax, values, bins, color)
    ax.axvline(threshold, color="C3", linestyle="--", label=f"Threshold: {threshold:g}")
    ax.set_xlabel("Total age")
    ax.set_ylabel("Probability")
    ax.set_title(f"P(total > {threshold:g}) = {(values > threshold).mean():.1%}")
    ax.legend()
    format_probability(ax)
    return ax
