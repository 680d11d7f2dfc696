"""Run the age lesson headlessly: sample, fit, predict, summarise."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import AGE_THRESHOLD, CHAINS, DRAWS, SAMPLE_SIZE, TUNE, SamplerConfig
from .data import describe_ages, load_population, sample_people
from .model import fit_intercept_model, posterior_draws, posterior_interval, summarize_posterior
from .predictive import posterior_predict, probability_total_exceeds

logger = logging.getLogger("age_posterior")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate average age with PyMC.")
    parser.add_argument("--sample-size", type=int, default=SAMPLE_SIZE, help="People to sample.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for sampling and MCMC.")
    parser.add_argument(
        "--threshold",
        type=float,
        default=AGE_THRESHOLD,
        help="Total age of three people to compare against.",
    )
    parser.add_argument("--draws", type=int, default=DRAWS)
    parser.add_argument("--tune", type=int, default=TUNE)
    parser.add_argument("--chains", type=int, default=CHAINS)
    parser.add_argument("--cores", type=int, default=None, help="Processes used to run chains.")
    parser.add_argument("--sampler", default="nutpie", choices=["nutpie", "pymc"])
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    sample = sample_people(load_population(), n=args.sample_size, random_seed=args.seed)
    stats = describe_ages(sample)
    print(f"Sample: {stats['count']} people, mean age {stats['mean']:.1f} (sd {stats['sd']:.1f})")

    sampler = SamplerConfig(
        draws=args.draws,
        tune=args.tune,
        chains=args.chains,
        cores=args.cores,
        random_seed=args.seed,
        nuts_sampler=args.sampler,
    )
    try:
        model, idata = fit_intercept_model(sample, sampler=sampler)
    except Exception:
        logger.exception("Model fit failed")
        raise

    draws = posterior_draws(idata)
    print(summarize_posterior(idata).to_string())
    lower, upper = posterior_interval(draws)
    print(f"95% interval for the average age: {lower:.1f} to {upper:.1f}")

    predictions = posterior_predict(model, idata, random_seed=args.seed)
    probability = probability_total_exceeds(predictions, threshold=args.threshold)
    print(f"P(total age of three people > {args.threshold:g}) = {probability:.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
