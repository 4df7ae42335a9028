"""Example 02: random-walk phase estimation on a Qiskit sampler.

Each oracle call runs one shot of the phase-kickback circuit. Requires the
quantum extras: pip install 'rwpe[aer]' (or 'rwpe[quantum]' with
provider="statevector").
"""

from __future__ import annotations

import logging

from rwpe import BackendConfig, BudgetConfig, OracleConfig, RWPEConfig, estimate_phase
from rwpe.oracles import build_phase_oracle_circuit


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    true_phase = -0.3127

    print("=== Oracle circuit ===")
    print(build_phase_oracle_circuit().draw(output="text"))
    print()

    cfg = RWPEConfig(
        budget=BudgetConfig(n_measurements=40, max_measurements=200, unwind_depth=1),
        oracle=OracleConfig(method="sampler", phase=true_phase),
        backend=BackendConfig(provider="aer", seed=123),
    )
    res = estimate_phase(config=cfg)

    print("=== Sampler run ===")
    print("estimate:", res.estimate, " true:", true_phase)
    print("abs error:", abs(res.estimate - true_phase))
    print("std_dev:", res.std_dev)
    print("samples used:", res.samples_used, " accepted:", res.accepted_updates)
    print("rollback passes:", res.rollback_passes)
    print("terminated by:", res.terminated_by)

    assert res.samples_used <= cfg.budget.max_measurements


if __name__ == "__main__":
    main()
