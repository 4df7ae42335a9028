from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class PEResult:
    """Result from a random-walk phase-estimation run."""

    estimate: float
    std_dev: float
    samples_used: int
    accepted_updates: int
    rollback_passes: int
    entries_unwound: int
    terminated_by: str
    diagnostics: Mapping[str, Any] = None  # type: ignore[assignment]
