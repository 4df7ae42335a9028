from __future__ import annotations

from collections import deque

from ..types import Outcome


class UpdateHistory:
    """LIFO record of the outcomes that drove accepted random-walk updates.

    With `max_depth` set, pushing onto a full history drops the oldest entry,
    so a rollback can never reach further back than `max_depth` updates.
    """

    def __init__(self, max_depth: int | None = None):
        self.max_depth = max_depth
        self._entries: deque[Outcome] = deque(maxlen=max_depth)

    def push(self, outcome: Outcome) -> None:
        self._entries.append(outcome)

    def pop(self) -> Outcome | None:
        """Remove and return the most recent outcome, or None when empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
