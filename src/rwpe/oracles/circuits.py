from __future__ import annotations

from typing import Any

MEASUREMENT_REGISTER = "meas"


def _require_qiskit() -> None:
    try:
        import qiskit  # noqa: F401
    except Exception as exc:  # pragma: no cover
        raise ImportError(
            "Qiskit is required for oracle circuit construction. Install with: "
            "pip install 'rwpe[quantum]'"
        ) from exc


def build_phase_oracle_circuit(name: str = "rwpe_phase_oracle"):
    """Build the parameterized single-ancilla phase-kickback experiment.

    Layout:
      - qubit 0: ancilla, measured into the 1-bit register "meas"
      - qubit 1: target, prepared in |1>, the eigenstate of the phase gate

    Parameters
    ----------
    evolution:
        scale * phase, the controlled phase picked up by the ancilla.
    inversion:
        -scale * offset, the classical phase correction applied before readout.

    The ancilla reads 0 with probability (1 + cos(evolution + inversion)) / 2,
    i.e. (1 + cos(scale * (phase - offset))) / 2.
    """
    _require_qiskit()
    from qiskit.circuit import (
        ClassicalRegister,
        Parameter,
        QuantumCircuit,
        QuantumRegister,
    )

    evolution = Parameter("evolution")
    inversion = Parameter("inversion")

    ancilla = QuantumRegister(1, "ancilla")
    target = QuantumRegister(1, "target")
    meas = ClassicalRegister(1, MEASUREMENT_REGISTER)
    qc = QuantumCircuit(ancilla, target, meas, name=name)

    qc.x(target[0])
    qc.h(ancilla[0])
    qc.cp(evolution, ancilla[0], target[0])
    qc.p(inversion, ancilla[0])
    qc.h(ancilla[0])
    qc.measure(ancilla[0], meas[0])
    return qc


def oracle_parameter_values(
    qc: Any, *, phase: float, offset: float, scale: float
) -> list[float]:
    """Parameter values for `qc` in `qc.parameters` order (the SamplerV2 pub layout)."""
    by_name = {
        "evolution": float(scale) * float(phase),
        "inversion": -float(scale) * float(offset),
    }
    values: list[float] = []
    for param in qc.parameters:
        if param.name not in by_name:
            raise ValueError(f"Unexpected parameter {param.name!r} in oracle circuit.")
        values.append(by_name[param.name])
    return values
