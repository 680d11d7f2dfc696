"""Constants and prior/sampler settings for the age model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

POPULATION_SIZE = 10_000
POPULATION_SEED = 2024
SAMPLE_SIZE = 50

# PyMC defaults give 4 chains x 1000 draws = 4000 draws per term
DRAWS = 1000
TUNE = 1000
CHAINS = 4

AGE_THRESHOLD = 150
PREDICTIVE_COLUMNS = 3
HDI_PROB = 0.94


@dataclass(frozen=True)
class PriorConfig:
    """Weakly informative priors, scaled by the sample's own spread."""

    intercept_scale: float = 2.5
    sigma_scale: float = 1.0

    def validate(self) -> None:
        if self.intercept_scale <= 0 or self.sigma_scale <= 0:
            raise ValueError("Prior scales must be strictly positive.")


@dataclass(frozen=True)
class SamplerConfig:
    draws: int = DRAWS
    tune: int = TUNE
    chains: int = CHAINS
    cores: Optional[int] = None
    target_accept: float = 0.9
    random_seed: Optional[int] = None
    nuts_sampler: str = "nutpie"

    @property
    def total_draws(self) -> int:
        return self.draws * self.chains

    def validate(self) -> None:
        if self.draws <= 0 or self.chains <= 0:
            raise ValueError("draws and chains must be positive.")
        if self.tune < 0:
            raise ValueError("tune must be non-negative.")
        if not 0 < self.target_accept < 1:
            raise ValueError("target_accept must fall within (0, 1).")
