"""Validator registry: the lookup table from validator name to its function.

A registry is an explicit object handed to ``validate``. Populate it once,
then share it freely between validation runs.
"""

import threading

from swagger_model.model.errors import ConfigurationError, ConfigurationErrorKind
from swagger_model.validation.rules import BUILTIN_VALIDATORS, SWAGGER_VALIDATORS
from swagger_model.validation.values import ValidatorFunction


class ValidatorRegistry:
    """Named validator functions, with ``nonzero`` built in by default."""

    def __init__(self, builtins: bool = True):
        self._lock = threading.Lock()
        self._validators: dict[str, ValidatorFunction] = dict(BUILTIN_VALIDATORS) if builtins else {}

    def register(self, name: str, fn: ValidatorFunction) -> None:
        """Add a validator, replacing any previous one with the same name."""
        if not isinstance(name, str) or not name:
            raise ConfigurationError(ConfigurationErrorKind.INVALID_NAME, str(name))
        if not callable(fn):
            raise ConfigurationError(ConfigurationErrorKind.INVALID_FUNCTION, name)

        with self._lock:
            # Swap in a new table so lookups never see a half-updated dict.
            validators = dict(self._validators)
            validators[name] = fn
            self._validators = validators

    def get(self, name: str) -> ValidatorFunction:
        fn = self._validators.get(name)
        if fn is None:
            raise ConfigurationError(ConfigurationErrorKind.UNKNOWN_VALIDATOR, name)
        return fn

    def names(self) -> list[str]:
        return list(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators


def default_registry() -> ValidatorRegistry:
    """A registry holding every validator the Swagger model declares."""
    registry = ValidatorRegistry()
    for name, fn in SWAGGER_VALIDATORS.items():
        registry.register(name, fn)
    return registry
