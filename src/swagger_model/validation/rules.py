"""Field validators for Swagger 2.0 documents.

Each validator receives a FieldValue and raises ValueError with a
human-readable message when the value is not acceptable.
"""

from swagger_model.validation.values import FieldValue, ScalarValue, SequenceValue, ValidatorFunction

VALID_SCHEMES = ("http", "https", "ws", "wss")

VALID_FORMATS = (
    "int32",
    "int64",
    "float",
    "double",
    "string",
    "byte",
    "boolean",
    "date",
    "date-time",
)

VALID_TYPES = ("string", "number", "integer", "boolean", "array", "file")

_ZERO_TYPES = (str, bool, int, float, list, tuple, dict)


def nonzero(value: FieldValue) -> None:
    """Reject the zero value of the field's type: None, "", False, 0, empty containers."""
    if isinstance(value, SequenceValue):
        empty = not value.values
    else:
        empty = value.value is None or (isinstance(value.value, _ZERO_TYPES) and not value.value)
    if empty:
        raise ValueError("zero value")


def valid_scheme(value: FieldValue) -> None:
    """Accept a single scheme or a list of schemes; a list reports every bad entry."""
    if isinstance(value, SequenceValue):
        bad_schemes = [str(v) for v in value.values if v not in VALID_SCHEMES]
        if bad_schemes:
            raise ValueError(f"Invalid schemes: [{','.join(bad_schemes)}]")
        return
    if value.value not in VALID_SCHEMES:
        raise ValueError(f"Invalid url scheme: '{value.value}'")


def valid_format(value: FieldValue) -> None:
    if not isinstance(value, ScalarValue):
        raise ValueError("validFormat only validates strings")
    if value.value and value.value not in VALID_FORMATS:
        raise ValueError(f"Invalid type format: '{value.value}'")


def valid_type(value: FieldValue) -> None:
    if not isinstance(value, ScalarValue):
        raise ValueError("validType only validates strings")
    if value.value not in VALID_TYPES:
        raise ValueError(f"Invalid parameter type: '{value.value}'")


BUILTIN_VALIDATORS: dict[str, ValidatorFunction] = {
    "nonzero": nonzero,
}

SWAGGER_VALIDATORS: dict[str, ValidatorFunction] = {
    "validScheme": valid_scheme,
    "validFormat": valid_format,
    "validType": valid_type,
}
