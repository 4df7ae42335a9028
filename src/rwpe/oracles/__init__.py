"""Oracles: callables (offset, scale) -> Outcome consumed by the estimator.

The analytic oracles need only numpy. Circuit construction and the sampler
oracle import Qiskit lazily and raise ImportError with an install hint when it
is missing:
    pip install 'rwpe[quantum]'
"""

from .analytic import CountingOracle, SimulatedPhaseOracle, outcome_probability
from .circuits import build_phase_oracle_circuit, oracle_parameter_values
from .sampler import SamplerPhaseOracle

__all__ = [
    "outcome_probability",
    "SimulatedPhaseOracle",
    "CountingOracle",
    "build_phase_oracle_circuit",
    "oracle_parameter_values",
    "SamplerPhaseOracle",
]
