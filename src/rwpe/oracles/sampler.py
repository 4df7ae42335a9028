from __future__ import annotations

import logging
from typing import Any

from ..types import BackendHandle, Outcome
from .circuits import (
    MEASUREMENT_REGISTER,
    build_phase_oracle_circuit,
    oracle_parameter_values,
)

_LOGGER = logging.getLogger(__name__)


def _require_quantum_runtime() -> None:
    try:
        import qiskit  # noqa: F401
    except Exception as exc:  # pragma: no cover
        raise ImportError(
            "Sampler-backed oracles require Qiskit. Install with: "
            "pip install 'rwpe[quantum]'"
        ) from exc


def _compile_for_backend(qc, backend_handle: BackendHandle, *, opt_level: int = 0):
    from qiskit import transpile

    target = getattr(backend_handle, "backend", None)
    if target is not None:
        return transpile(qc, backend=target, optimization_level=opt_level)

    return transpile(
        qc, basis_gates=["rz", "sx", "x", "cx"], optimization_level=opt_level
    )


class SamplerPhaseOracle:
    """Oracle that runs one shot of the phase-kickback circuit per call.

    The parameterized circuit is transpiled once per instance; every call only
    binds (evolution, inversion) and submits a single pub with shots=1.
    """

    def __init__(
        self,
        phase: float,
        backend: BackendHandle,
        *,
        transpile_optimization_level: int = 0,
    ):
        _require_quantum_runtime()
        if backend.sampler is None:
            raise ValueError(
                "BackendHandle.sampler is required for execution. "
                "Use rwpe.backends.get_backend(...) or provide a BackendHandle."
            )
        self.phase = float(phase)
        self.backend = backend
        self.transpile_optimization_level = int(transpile_optimization_level)
        self.calls = 0
        self._compiled: Any | None = None

    def compiled_circuit(self):
        if self._compiled is None:
            qc = build_phase_oracle_circuit()
            self._compiled = _compile_for_backend(
                qc, self.backend, opt_level=self.transpile_optimization_level
            )
            _LOGGER.info(
                "Compiled phase oracle circuit for %s (depth %d).",
                self.backend.provider or "sampler",
                self._compiled.depth(),
            )
        return self._compiled

    def __call__(self, offset: float, scale: float) -> Outcome:
        qc = self.compiled_circuit()
        values = oracle_parameter_values(
            qc, phase=self.phase, offset=offset, scale=scale
        )
        job = self.backend.sampler.run([(qc, values)], shots=1)
        counts = _get_counts(job.result()[0])
        self.calls += 1

        if int(counts.get("1", 0)) > 0:
            return Outcome.ONE
        if int(counts.get("0", 0)) > 0:
            return Outcome.ZERO
        raise RuntimeError(f"Sampler returned no shots for the oracle circuit: {counts!r}")


def _get_counts(pub_result: Any) -> dict[str, int]:
    """Extract counts from a SamplerV2 pub result across implementations."""
    data = getattr(pub_result, "data", None)
    reg = getattr(data, MEASUREMENT_REGISTER, None) if data is not None else None
    if reg is not None and hasattr(reg, "get_counts"):
        return {str(k): int(v) for k, v in reg.get_counts().items()}

    if hasattr(pub_result, "join_data"):
        return {str(k): int(v) for k, v in pub_result.join_data().get_counts().items()}

    if hasattr(pub_result, "get_counts"):
        return {str(k): int(v) for k, v in pub_result.get_counts().items()}

    raise TypeError(
        "Unable to extract counts from sampler result. "
        "This provider may use an unsupported result format."
    )
