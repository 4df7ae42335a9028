from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping, Protocol, Union

import numpy as np


class Outcome(IntEnum):
    """A single binary measurement result."""

    ZERO = 0
    ONE = 1

    @classmethod
    def coerce(cls, value: Any) -> "Outcome":
        """Normalize an oracle return value (Outcome, bool or 0/1 int)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (bool, np.bool_)):
            return cls.ONE if value else cls.ZERO
        if isinstance(value, (int, np.integer)):
            if int(value) in (0, 1):
                return cls(int(value))
            raise ValueError(f"Oracle outcome must be 0 or 1, got {value!r}.")
        raise TypeError(
            "Oracle must return an Outcome, bool or 0/1 int; "
            f"got {type(value).__name__}."
        )


OracleOutput = Union[Outcome, bool, int]


class PhaseOracle(Protocol):
    """Opaque binary sampler parameterized by an offset and a scale.

    Each call is one probabilistic draw whose distribution depends on the hidden
    phase; the estimator never sees the probability itself.
    """

    def __call__(self, offset: float, scale: float) -> OracleOutput: ...


@dataclass(frozen=True)
class BackendHandle:
    """Container for a Sampler primitive and its backend metadata.

    Loosely typed so it can carry Qiskit Aer primitives, the Qiskit reference
    StatevectorSampler, or any other SamplerV2-compatible provider.
    """

    sampler: Any | None = None
    backend: Any | None = None
    metadata: Mapping[str, Any] = None  # type: ignore[assignment]
    provider: str | None = None
