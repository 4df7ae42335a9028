from __future__ import annotations

import math
from dataclasses import dataclass

from ..types import Outcome

# Random-walk model constants: per-step decay of the spread and the step size
# (in units of the current spread) applied to the mean.
PREFACTOR = 0.79506009762065011
INV_SQRT_E = 0.60653065971263342


@dataclass(frozen=True)
class BeliefState:
    """Current (mean, spread) summary of knowledge about the phase.

    Updates never mutate; `updated` and `reverted` return new snapshots and are
    exact inverses of one another (up to floating-point rounding).
    """

    mean: float
    spread: float

    def sampling_point(self) -> tuple[float, float]:
        """(offset, scale) for the next random-walk sample."""
        return (self.mean - math.pi * self.spread / 2.0, 1.0 / self.spread)

    def validation_point(self) -> tuple[float, float]:
        """(offset, scale) for the consistency check at the current mean."""
        return (self.mean, 1.0 / self.spread)

    def updated(self, outcome: Outcome) -> "BeliefState":
        step = self.spread * INV_SQRT_E
        mean = self.mean - step if outcome is Outcome.ZERO else self.mean + step
        return BeliefState(mean=mean, spread=self.spread * PREFACTOR)

    def reverted(self, outcome: Outcome) -> "BeliefState":
        spread = self.spread / PREFACTOR
        step = spread * INV_SQRT_E
        mean = self.mean + step if outcome is Outcome.ZERO else self.mean - step
        return BeliefState(mean=mean, spread=spread)
