from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..config import BudgetConfig, PriorConfig
from ..types import Outcome, PhaseOracle
from ..utils.validation import validate_estimator_inputs
from .belief import BeliefState
from .history import UpdateHistory
from .results import PEResult

_LOGGER = logging.getLogger(__name__)


class EstimatorState(Enum):
    SAMPLING = "sampling"
    VALIDATING = "validating"
    ROLLING_BACK = "rolling_back"
    DONE = "done"


@dataclass
class RandomWalkPhaseEstimator:
    """Random-walk phase estimation with consistency checks and bounded rollback.

    Each accepted step:
      - samples the oracle at (mean - pi*spread/2, 1/spread) and moves the mean
        by spread*INV_SQRT_E towards the observed outcome, shrinking the spread
        by PREFACTOR;
      - re-probes the oracle at (mean, 1/spread). A ONE there is inconsistent
        with the current belief, so up to `unwind_depth` of the latest updates
        are undone and the probe is repeated until it returns ZERO.

    Every oracle call (sampling, validation, re-validation) consumes one unit of
    BudgetConfig.max_measurements, and the budget is checked before each call,
    so the cap is never exceeded. Exhausting it is a normal termination: the
    current mean is returned as a best-effort estimate.

    Oracle exceptions propagate unchanged; nothing is retried here.
    """

    record_trace: bool = False

    def run(
        self,
        oracle: PhaseOracle,
        *,
        prior: PriorConfig,
        budget: BudgetConfig,
    ) -> PEResult:
        """Estimate the phase behind `oracle`.

        Parameters
        ----------
        oracle:
            Callable (offset, scale) -> Outcome | bool | 0/1 int.
        prior:
            Initial mean and standard deviation of the belief.
        budget:
            Acceptance target, total oracle-call cap and rollback depth.

        Raises
        ------
        InvalidConfigurationError
            If any prior/budget value is out of range. Raised before the oracle
            is called.
        """
        validate_estimator_inputs(
            initial_mean=prior.initial_mean,
            initial_std_dev=prior.initial_std_dev,
            n_measurements=budget.n_measurements,
            max_measurements=budget.max_measurements,
            unwind_depth=budget.unwind_depth,
            history_depth=budget.history_depth,
        )
        n_target = int(budget.n_measurements)
        max_samples = int(budget.max_measurements)
        unwind_depth = int(budget.unwind_depth)

        belief = BeliefState(
            mean=float(prior.initial_mean), spread=float(prior.initial_std_dev)
        )
        history = UpdateHistory(budget.history_depth)

        samples = 0
        accepted = 0
        rollback_passes = 0
        entries_unwound = 0
        terminated_by = "target_reached"
        trace: list[dict[str, Any]] = []

        state = EstimatorState.SAMPLING
        while state is not EstimatorState.DONE:
            if state is EstimatorState.SAMPLING:
                if accepted >= n_target:
                    state = EstimatorState.DONE
                    continue
                if samples >= max_samples:
                    terminated_by = "budget_exhausted"
                    state = EstimatorState.DONE
                    continue

                offset, scale = belief.sampling_point()
                outcome = Outcome.coerce(oracle(offset, scale))
                samples += 1

                belief = belief.updated(outcome)
                history.push(outcome)
                _LOGGER.debug(
                    "Sample %d at offset=%.6f scale=%.6f -> %s; mean=%.6f spread=%.6g",
                    samples,
                    offset,
                    scale,
                    outcome.name,
                    belief.mean,
                    belief.spread,
                )
                if self.record_trace:
                    trace.append(
                        {
                            "kind": "sample",
                            "offset": float(offset),
                            "scale": float(scale),
                            "outcome": int(outcome),
                            "mean": belief.mean,
                            "spread": belief.spread,
                        }
                    )
                state = EstimatorState.VALIDATING

            elif state is EstimatorState.VALIDATING:
                if samples >= max_samples:
                    terminated_by = "budget_exhausted"
                    state = EstimatorState.DONE
                    continue

                offset, scale = belief.validation_point()
                check = Outcome.coerce(oracle(offset, scale))
                samples += 1

                _LOGGER.debug(
                    "Validation %d at mean=%.6f spread=%.6g -> %s",
                    samples,
                    belief.mean,
                    belief.spread,
                    check.name,
                )
                if self.record_trace:
                    trace.append(
                        {
                            "kind": "validate",
                            "offset": float(offset),
                            "scale": float(scale),
                            "outcome": int(check),
                        }
                    )

                if check is Outcome.ZERO:
                    accepted += 1
                    state = EstimatorState.SAMPLING
                else:
                    state = EstimatorState.ROLLING_BACK

            else:
                undone = 0
                while undone < unwind_depth:
                    entry = history.pop()
                    if entry is None:
                        break
                    belief = belief.reverted(entry)
                    undone += 1

                rollback_passes += 1
                entries_unwound += undone
                _LOGGER.debug(
                    "Rollback pass %d undid %d update(s); mean=%.6f spread=%.6g "
                    "(%d left in history)",
                    rollback_passes,
                    undone,
                    belief.mean,
                    belief.spread,
                    len(history),
                )
                if self.record_trace:
                    trace.append(
                        {
                            "kind": "rollback",
                            "undone": undone,
                            "mean": belief.mean,
                            "spread": belief.spread,
                        }
                    )
                state = EstimatorState.VALIDATING

        _LOGGER.info(
            "Random-walk estimation finished (%s): estimate=%.6f after %d/%d samples, "
            "%d accepted update(s), %d rollback pass(es).",
            terminated_by,
            belief.mean,
            samples,
            max_samples,
            accepted,
            rollback_passes,
        )

        diagnostics: dict[str, Any] = {
            "budget": {
                "n_measurements": n_target,
                "max_measurements": max_samples,
                "unwind_depth": unwind_depth,
                "history_depth": budget.history_depth,
            },
            "prior": {
                "initial_mean": float(prior.initial_mean),
                "initial_std_dev": float(prior.initial_std_dev),
            },
            "history_remaining": len(history),
        }
        if self.record_trace:
            diagnostics["trace"] = trace

        return PEResult(
            estimate=float(belief.mean),
            std_dev=float(belief.spread),
            samples_used=int(samples),
            accepted_updates=int(accepted),
            rollback_passes=int(rollback_passes),
            entries_unwound=int(entries_unwound),
            terminated_by=terminated_by,
            diagnostics=diagnostics,
        )


def estimate(
    oracle: PhaseOracle,
    initial_mean: float,
    initial_std_dev: float,
    n_measurements: int,
    max_measurements: int,
    unwind_depth: int,
) -> float:
    """Return the random-walk phase estimate for `oracle` (see RandomWalkPhaseEstimator)."""
    result = RandomWalkPhaseEstimator().run(
        oracle,
        prior=PriorConfig(initial_mean=initial_mean, initial_std_dev=initial_std_dev),
        budget=BudgetConfig(
            n_measurements=n_measurements,
            max_measurements=max_measurements,
            unwind_depth=unwind_depth,
        ),
    )
    return result.estimate
