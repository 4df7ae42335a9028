"""Backend adapters.

The estimator itself is backend-agnostic; these adapters only feed the
sampler-backed oracle and may require additional dependencies.
"""

from ..config import BackendConfig
from ..types import BackendHandle

from .factory import get_backend

__all__ = ["BackendConfig", "BackendHandle", "get_backend"]
