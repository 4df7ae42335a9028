from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..config import RWPEConfig
from ..oracles.analytic import SimulatedPhaseOracle
from ..pe.random_walk import RandomWalkPhaseEstimator


@dataclass(frozen=True)
class TrialSummary:
    """Error statistics of repeated estimates of a known phase."""

    n_trials: int
    mean_error: float
    mean_abs_error: float
    rmse: float
    median_abs_error: float
    max_abs_error: float
    failure_rate: float
    mean_samples_used: float | None
    estimates: tuple[float, ...]


def summarize_errors(
    estimates: Sequence[float] | np.ndarray,
    phase: float,
    *,
    samples_used: Sequence[int] | None = None,
    tolerance: float | None = None,
) -> TrialSummary:
    """Summarize estimate errors against the true `phase`.

    failure_rate is the fraction of |error| > tolerance (0.0 if tolerance is None).
    """
    x = np.asarray(estimates, dtype=float)
    if x.size == 0:
        raise ValueError("estimates must be non-empty.")

    err = x - float(phase)
    abs_err = np.abs(err)
    failure_rate = 0.0 if tolerance is None else float(np.mean(abs_err > float(tolerance)))
    mean_samples = None if samples_used is None else float(np.mean(samples_used))

    return TrialSummary(
        n_trials=int(x.size),
        mean_error=float(np.mean(err)),
        mean_abs_error=float(np.mean(abs_err)),
        rmse=float(np.sqrt(np.mean(err**2))),
        median_abs_error=float(np.median(abs_err)),
        max_abs_error=float(np.max(abs_err)),
        failure_rate=failure_rate,
        mean_samples_used=mean_samples,
        estimates=tuple(float(v) for v in x),
    )


def run_trials(
    phase: float,
    *,
    n_trials: int,
    config: RWPEConfig | None = None,
    seed: int | None = None,
    tolerance: float | None = None,
) -> TrialSummary:
    """Run the estimator `n_trials` times against independent simulated oracles.

    Oracle seeds are spawned from one SeedSequence, so a fixed `seed` reproduces
    the whole batch. The default tolerance is 3x the prior std dev.
    """
    if int(n_trials) <= 0:
        raise ValueError("n_trials must be positive")

    cfg = config or RWPEConfig()
    tol = 3.0 * float(cfg.prior.initial_std_dev) if tolerance is None else tolerance

    runner = RandomWalkPhaseEstimator()
    children = np.random.SeedSequence(seed).spawn(int(n_trials))

    estimates: list[float] = []
    samples: list[int] = []
    for child in children:
        oracle = SimulatedPhaseOracle(phase, rng=np.random.default_rng(child))
        res = runner.run(oracle, prior=cfg.prior, budget=cfg.budget)
        estimates.append(res.estimate)
        samples.append(res.samples_used)

    return summarize_errors(estimates, phase, samples_used=samples, tolerance=tol)
