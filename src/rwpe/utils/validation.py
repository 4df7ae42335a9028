from __future__ import annotations

import math
from numbers import Integral, Real


class InvalidConfigurationError(ValueError):
    pass


def _require_positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidConfigurationError(
            f"`{name}` must be a positive integer, got {value!r}."
        )
    if int(value) <= 0:
        raise InvalidConfigurationError(f"`{name}` must be positive, got {value!r}.")
    return int(value)


def _require_finite(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidConfigurationError(f"`{name}` must be a real number, got {value!r}.")
    if not math.isfinite(float(value)):
        raise InvalidConfigurationError(f"`{name}` must be finite, got {value!r}.")
    return float(value)


def validate_estimator_inputs(
    *,
    initial_mean: float,
    initial_std_dev: float,
    n_measurements: int,
    max_measurements: int,
    unwind_depth: int,
    history_depth: int | None = None,
) -> None:
    """Reject invalid estimator settings before any oracle call is made.

    `max_measurements < n_measurements` is allowed: the loop then stops on budget.
    """
    _require_finite("initial_mean", initial_mean)
    std = _require_finite("initial_std_dev", initial_std_dev)
    if std <= 0:
        raise InvalidConfigurationError(
            f"`initial_std_dev` must be > 0, got {initial_std_dev!r}."
        )
    _require_positive_int("n_measurements", n_measurements)
    _require_positive_int("max_measurements", max_measurements)
    _require_positive_int("unwind_depth", unwind_depth)
    if history_depth is not None:
        _require_positive_int("history_depth", history_depth)
