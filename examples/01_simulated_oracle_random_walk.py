"""Example 01: random-walk phase estimation against a simulated oracle.

What this demonstrates
- the plain `estimate(...)` entry point on a numpy-sampled oracle
- the config-driven `estimate_phase` with diagnostics and a step trace
- repeated-trial accuracy for a few unwind depths
"""

from __future__ import annotations

import logging

from rwpe import (
    BudgetConfig,
    DiagnosticsConfig,
    OracleConfig,
    PriorConfig,
    RWPEConfig,
    estimate,
    estimate_phase,
)
from rwpe.metrics import run_trials
from rwpe.oracles import CountingOracle, SimulatedPhaseOracle


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    true_phase = 0.5871

    # --- simplest form ---
    oracle = CountingOracle(SimulatedPhaseOracle(true_phase, seed=1))
    phi = estimate(oracle, 0.0, 1.0, n_measurements=80, max_measurements=400, unwind_depth=1)
    print("=== estimate(...) ===")
    print("estimate:", phi, " error:", abs(phi - true_phase))
    print("oracle:", oracle.summary())
    print()

    # --- config-driven, with trace ---
    cfg = RWPEConfig(
        prior=PriorConfig(initial_mean=0.0, initial_std_dev=1.0),
        budget=BudgetConfig(n_measurements=80, max_measurements=400, unwind_depth=2),
        oracle=OracleConfig(method="analytic", phase=true_phase, seed=2),
        diagnostics=DiagnosticsConfig(return_trace=True),
    )
    res = estimate_phase(config=cfg)
    print("=== estimate_phase(...) ===")
    print("estimate:", res.estimate, " std_dev:", res.std_dev)
    print("samples used:", res.samples_used, " accepted:", res.accepted_updates)
    print("rollback passes:", res.rollback_passes, " entries unwound:", res.entries_unwound)
    print("terminated by:", res.terminated_by)
    print("first steps:", res.diagnostics["trace"][:4])
    print()

    # --- accuracy vs unwind depth ---
    print("=== repeated trials (100 each) ===")
    for depth in (1, 2, 4):
        trial_cfg = RWPEConfig(
            budget=BudgetConfig(n_measurements=80, max_measurements=400, unwind_depth=depth)
        )
        s = run_trials(true_phase, n_trials=100, config=trial_cfg, seed=depth, tolerance=0.05)
        print(
            f"unwind_depth={depth}: median |err|={s.median_abs_error:.2e} "
            f"rmse={s.rmse:.2e} failure_rate={s.failure_rate:.2f} "
            f"mean samples={s.mean_samples_used:.1f}"
        )

    # --- sanity checks ---
    assert oracle.calls <= 400
    assert res.samples_used <= cfg.budget.max_measurements


if __name__ == "__main__":
    main()
