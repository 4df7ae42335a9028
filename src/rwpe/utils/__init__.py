from .validation import InvalidConfigurationError, validate_estimator_inputs

__all__ = ["InvalidConfigurationError", "validate_estimator_inputs"]
