from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PriorConfig:
    """Initial belief (mean, std dev) over the unknown phase."""

    initial_mean: float = 0.0
    initial_std_dev: float = 1.0


@dataclass(frozen=True)
class BudgetConfig:
    """Measurement-budget controls for the random-walk loop.

    n_measurements:
        Target count of accepted (validated) updates.
    max_measurements:
        Hard cap on oracle calls, validation and re-validation included.
    unwind_depth:
        History entries undone per rollback pass.
    history_depth:
        Optional cap on remembered updates; None => bounded only by the budget.
    """

    n_measurements: int = 100
    max_measurements: int = 400
    unwind_depth: int = 1
    history_depth: int | None = None


@dataclass(frozen=True)
class OracleConfig:
    """Oracle selection when `estimate_phase` is not handed a callable.

    method:
      - "analytic": numpy-sampled phase-kickback likelihood (SimulatedPhaseOracle)
      - "sampler": one-shot circuit runs on a SamplerV2 primitive (SamplerPhaseOracle)
    """

    method: str = "analytic"
    phase: float | None = None  # hidden phase; required for both simulated methods
    seed: int | None = None


@dataclass(frozen=True)
class BackendConfig:
    """Backend selection for the sampler oracle."""

    provider: str = "aer"  # or "statevector"
    seed: int | None = None
    transpile_optimization_level: int = 0


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Controls for returning optional diagnostics."""

    return_trace: bool = False


@dataclass(frozen=True)
class RWPEConfig:
    """Top-level configuration container."""

    prior: PriorConfig = PriorConfig()
    budget: BudgetConfig = BudgetConfig()
    oracle: OracleConfig = OracleConfig()
    backend: BackendConfig = BackendConfig()
    diagnostics: DiagnosticsConfig = DiagnosticsConfig()
