import sys
from pathlib import Path

import pytest

# Allow running tests without installing the package (src-layout convenience).
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class ScriptedOracle:
    """Replays a fixed outcome sequence, then repeats `default` forever."""

    def __init__(self, outcomes=(), default=0):
        self.outcomes = list(outcomes)
        self.default = default
        self.calls = []

    def __call__(self, offset, scale):
        self.calls.append((offset, scale))
        idx = len(self.calls) - 1
        return self.outcomes[idx] if idx < len(self.outcomes) else self.default


@pytest.fixture
def scripted_oracle():
    return ScriptedOracle
