from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..types import Outcome, PhaseOracle


def outcome_probability(phase: float, offset: float, scale: float) -> float:
    """P(ONE) for a phase-kickback experiment.

    P(ZERO) = (1 + cos(scale * (phase - offset))) / 2, so a probe placed exactly
    at the phase (offset == phase) always returns ZERO.
    """
    return 0.5 * (1.0 - math.cos(scale * (phase - offset)))


class SimulatedPhaseOracle:
    """Numerically sampled oracle for a known hidden phase.

    Either pass `rng` (a numpy Generator) or a `seed` to make draws reproducible.
    """

    def __init__(
        self,
        phase: float,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.phase = float(phase)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def __call__(self, offset: float, scale: float) -> Outcome:
        p_one = outcome_probability(self.phase, offset, scale)
        return Outcome.ONE if self.rng.random() < p_one else Outcome.ZERO

    def __repr__(self) -> str:
        return f"{type(self).__name__}(phase={self.phase!r})"


@dataclass
class CountingOracle:
    """Instrumentation wrapper: counts calls and records every query."""

    inner: PhaseOracle
    calls: int = 0
    queries: list[tuple[float, float, Outcome]] = field(default_factory=list)

    def __call__(self, offset: float, scale: float) -> Outcome:
        outcome = Outcome.coerce(self.inner(offset, scale))
        self.calls += 1
        self.queries.append((float(offset), float(scale), outcome))
        return outcome

    def summary(self) -> dict[str, Any]:
        ones = sum(1 for _, _, o in self.queries if o is Outcome.ONE)
        return {"calls": self.calls, "ones": ones, "zeros": self.calls - ones}
