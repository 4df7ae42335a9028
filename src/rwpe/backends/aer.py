from __future__ import annotations

from ..config import BackendConfig
from ..types import BackendHandle


def get_aer_backend(cfg: BackendConfig, **kwargs) -> BackendHandle:
    """Return a Qiskit Aer SamplerV2 handle, seeded from `cfg.seed`."""
    try:
        from qiskit_aer import AerSimulator  # type: ignore
        from qiskit_aer.primitives import SamplerV2  # type: ignore
    except Exception as exc:  # pragma: no cover
        raise ImportError(
            "Qiskit Aer is not installed. Install with: pip install 'rwpe[aer]'"
        ) from exc

    backend = AerSimulator(seed_simulator=cfg.seed)
    sampler = SamplerV2(seed=cfg.seed)
    return BackendHandle(
        sampler=sampler,
        backend=backend,
        metadata={
            "provider": "aer",
            "backend_name": getattr(backend, "name", None),
            "seed": cfg.seed,
        },
        provider="aer",
    )
