"""Field values handed to validator functions.

The engine decides up front whether a field holds one value or a sequence
of values, so validators never inspect runtime types to tell the two apart.
"""

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class ScalarValue:
    value: Any


@dataclass(frozen=True)
class SequenceValue:
    values: tuple


FieldValue = ScalarValue | SequenceValue

# A validator returns None when the value passes and raises ValueError otherwise.
ValidatorFunction = Callable[[FieldValue], None]


def as_field_value(value: Any) -> FieldValue:
    if isinstance(value, (list, tuple)):
        return SequenceValue(tuple(value))
    return ScalarValue(value)
