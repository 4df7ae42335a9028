from __future__ import annotations

import logging

from ..config import BackendConfig
from ..types import BackendHandle

_LOGGER = logging.getLogger(__name__)


def get_backend(cfg: BackendConfig, **kwargs) -> BackendHandle:
    """Create a BackendHandle based on configuration.

    Parameters
    ----------
    cfg:
        BackendConfig selecting the provider and its seed.

    Returns
    -------
    BackendHandle
        Minimal handle carrying a SamplerV2 primitive (and a transpile target
        where the provider has one).
    """
    provider = (cfg.provider or "").lower()
    _LOGGER.info("Creating %r sampler backend (seed=%r).", provider, cfg.seed)

    if provider == "aer":
        from .aer import get_aer_backend

        return get_aer_backend(cfg, **kwargs)

    if provider == "statevector":
        from .statevector import get_statevector_backend

        return get_statevector_backend(cfg, **kwargs)

    raise ValueError(f"Unknown backend provider: {cfg.provider!r}")
