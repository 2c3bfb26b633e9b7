"""Validation engine — applies declared field validators across a document tree.

Usage:
    document = decode(raw_bytes)
    result = validate(document, default_registry())
    if not result.valid:
        for violation in result.violations:
            ...

The walk is depth-first and follows field declaration order. Every
violation is collected; only a validator missing from the registry stops
the run, by raising ConfigurationError.
"""

import time
from collections import Counter
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from swagger_model.logs import get_logger
from swagger_model.model.base import Rules
from swagger_model.validation.registry import ValidatorRegistry, default_registry
from swagger_model.validation.values import as_field_value

logger = get_logger(__name__)


class FieldViolation(BaseModel):
    """A single failure of one named validator against one field."""

    path: str  # Info.Title, Paths[0][/pets].Operations[get].Parameters[0].In
    validator: str
    message: str


class ValidationResult(BaseModel):
    violations: list[FieldViolation] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.violations

    def by_validator(self) -> dict[str, int]:
        """Count of violations per validator name."""
        return dict(Counter(v.validator for v in self.violations))


@dataclass(frozen=True)
class FieldBinding:
    attribute: str
    segment: str
    validators: tuple[str, ...]


@lru_cache(maxsize=None)
def binding_table(model_cls: type[BaseModel]) -> tuple[FieldBinding, ...]:
    """Fields of a record type with the validators declared on each, in declaration order."""
    bindings = []
    for attribute, info in model_cls.model_fields.items():
        names = tuple(name for meta in info.metadata if isinstance(meta, Rules) for name in meta.names)
        bindings.append(FieldBinding(attribute, _segment(info.alias or to_camel(attribute)), names))
    return tuple(bindings)


def _segment(wire_name: str) -> str:
    name = wire_name.lstrip("$")
    return name[:1].upper() + name[1:]


def validate(record: BaseModel, registry: ValidatorRegistry | None = None) -> ValidationResult:
    """Validate a Document, or any record reachable from one.

    Paths in the result are relative to ``record``. Raises ConfigurationError
    if a declared validator is not in ``registry``.
    """
    if registry is None:
        registry = default_registry()

    start_time = time.perf_counter()
    violations: list[FieldViolation] = []
    _walk_record(record, "", registry, violations)
    result = ValidationResult(violations=violations)

    logger.info(
        "validation_complete",
        record=type(record).__name__,
        valid=result.valid,
        violations=len(violations),
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
    return result


def _walk_record(record: BaseModel, path: str, registry: ValidatorRegistry, violations: list[FieldViolation]) -> None:
    for binding in binding_table(type(record)):
        value = getattr(record, binding.attribute)
        field_path = f"{path}.{binding.segment}" if path else binding.segment

        if binding.validators:
            field_value = as_field_value(value)
            for name in binding.validators:
                check = registry.get(name)
                try:
                    check(field_value)
                except ValueError as e:
                    violations.append(FieldViolation(path=field_path, validator=name, message=str(e)))

        _descend(value, field_path, registry, violations)


def _descend(value: Any, path: str, registry: ValidatorRegistry, violations: list[FieldViolation]) -> None:
    if isinstance(value, BaseModel):
        _walk_record(value, path, registry, violations)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _descend(item, f"{path}[{index}]", registry, violations)
    elif isinstance(value, dict):
        for key, item in value.items():
            _descend(item, f"{path}[{key}]", registry, violations)
