"""rwpe

Random-walk phase estimation: estimate an unknown phase from one-bit
measurements of a probabilistic oracle, with periodic consistency checks and
bounded rollback of recent updates.

- core: BeliefState update rules + RandomWalkPhaseEstimator (numpy only)
- oracles: analytic simulation, and a phase-kickback circuit run through
  Qiskit Sampler primitives (Qiskit optional)
- metrics: repeated-trial accuracy summaries against a known phase
"""

from .config import (
    BackendConfig,
    BudgetConfig,
    DiagnosticsConfig,
    OracleConfig,
    PriorConfig,
    RWPEConfig,
)
from .types import BackendHandle, Outcome, PhaseOracle
from .utils.validation import InvalidConfigurationError
from .pe import (
    INV_SQRT_E,
    PREFACTOR,
    BeliefState,
    PEResult,
    RandomWalkPhaseEstimator,
    estimate,
)

# Public API (importable without Qiskit; circuit execution requires quantum extras)
from .api import estimate_phase

__all__ = [
    "Outcome",
    "PhaseOracle",
    "BackendHandle",
    "PriorConfig",
    "BudgetConfig",
    "OracleConfig",
    "BackendConfig",
    "DiagnosticsConfig",
    "RWPEConfig",
    "InvalidConfigurationError",
    "PREFACTOR",
    "INV_SQRT_E",
    "BeliefState",
    "PEResult",
    "RandomWalkPhaseEstimator",
    "estimate",
    "estimate_phase",
]
