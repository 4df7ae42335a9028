"""Random-walk phase estimation core."""

from .belief import INV_SQRT_E, PREFACTOR, BeliefState
from .history import UpdateHistory
from .random_walk import EstimatorState, RandomWalkPhaseEstimator, estimate
from .results import PEResult

__all__ = [
    "PREFACTOR",
    "INV_SQRT_E",
    "BeliefState",
    "UpdateHistory",
    "EstimatorState",
    "RandomWalkPhaseEstimator",
    "PEResult",
    "estimate",
]
