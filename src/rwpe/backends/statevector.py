from __future__ import annotations

from ..config import BackendConfig
from ..types import BackendHandle


def get_statevector_backend(cfg: BackendConfig, **kwargs) -> BackendHandle:
    """Return a handle around Qiskit's reference StatevectorSampler.

    No transpile target is attached; circuits are lowered to a generic basis.
    """
    try:
        from qiskit.primitives import StatevectorSampler  # type: ignore
    except Exception as exc:  # pragma: no cover
        raise ImportError(
            "Qiskit is not installed. Install with: pip install 'rwpe[quantum]'"
        ) from exc

    sampler = StatevectorSampler(seed=cfg.seed)
    return BackendHandle(
        sampler=sampler,
        backend=None,
        metadata={"provider": "statevector", "seed": cfg.seed},
        provider="statevector",
    )
