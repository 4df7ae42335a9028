"""Public, user-facing API.

Importing this module does **not** require Qiskit. Circuit execution only
happens when a sampler-backed oracle is requested and the quantum extras are
installed.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from .backends.factory import get_backend
from .config import RWPEConfig
from .oracles.analytic import SimulatedPhaseOracle
from .oracles.sampler import SamplerPhaseOracle
from .pe.random_walk import RandomWalkPhaseEstimator
from .pe.results import PEResult
from .types import BackendHandle, PhaseOracle
from .utils.validation import InvalidConfigurationError

_LOGGER = logging.getLogger(__name__)


def estimate_phase(
    oracle: PhaseOracle | None = None,
    *,
    config: RWPEConfig | None = None,
    backend: BackendHandle | None = None,
) -> PEResult:
    """Estimate a phase with the random-walk estimator under `config`.

    With no `oracle`, one is built from `config.oracle` around the known
    `config.oracle.phase` (simulation/benchmarking use).
    """
    cfg = config or RWPEConfig()
    orc = oracle if oracle is not None else _get_oracle(cfg, backend)

    runner = RandomWalkPhaseEstimator(record_trace=bool(cfg.diagnostics.return_trace))
    res = runner.run(orc, prior=cfg.prior, budget=cfg.budget)

    diagnostics = dict(res.diagnostics or {})
    diagnostics["oracle"] = repr(orc) if oracle is not None else cfg.oracle.method
    diagnostics["config_frozen"] = _freeze_config(cfg)
    return PEResult(
        estimate=res.estimate,
        std_dev=res.std_dev,
        samples_used=res.samples_used,
        accepted_updates=res.accepted_updates,
        rollback_passes=res.rollback_passes,
        entries_unwound=res.entries_unwound,
        terminated_by=res.terminated_by,
        diagnostics=diagnostics,
    )


def _get_oracle(cfg: RWPEConfig, backend: BackendHandle | None) -> PhaseOracle:
    method = cfg.oracle.method
    if method not in ("analytic", "sampler"):
        raise ValueError(f"Unknown oracle method: {method}")

    if cfg.oracle.phase is None:
        raise InvalidConfigurationError(
            "OracleConfig.phase is required when no oracle callable is given."
        )

    if method == "analytic":
        _LOGGER.info("Using analytic simulated oracle (seed=%r).", cfg.oracle.seed)
        return SimulatedPhaseOracle(cfg.oracle.phase, seed=cfg.oracle.seed)

    bh = backend or get_backend(cfg.backend)
    return SamplerPhaseOracle(
        cfg.oracle.phase,
        bh,
        transpile_optimization_level=cfg.backend.transpile_optimization_level,
    )


def _freeze_config(cfg: RWPEConfig) -> dict[str, Any]:
    return {
        "prior": asdict(cfg.prior),
        "budget": asdict(cfg.budget),
        "oracle": asdict(cfg.oracle),
        "backend": asdict(cfg.backend),
        "diagnostics": asdict(cfg.diagnostics),
    }
