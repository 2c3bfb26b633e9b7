"""Error types raised while decoding or validating a Swagger document.

Field violations are not exceptions: they are collected into a
ValidationResult. The exceptions here are terminal for the call that
raised them.
"""

from enum import Enum


class SwaggerModelError(Exception):
    """Base class for all swagger_model errors."""


class DecodeErrorKind(str, Enum):
    SYNTAX_ERROR = "syntax_error"
    TYPE_MISMATCH = "type_mismatch"


class DecodeError(SwaggerModelError):
    """The input could not be turned into a Document.

    SYNTAX_ERROR carries the byte offset of the failure, TYPE_MISMATCH the
    dotted wire path of the offending field.
    """

    def __init__(
        self,
        kind: DecodeErrorKind,
        message: str,
        offset: int | None = None,
        field: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.offset = offset
        self.field = field

    def __str__(self) -> str:
        if self.kind == DecodeErrorKind.SYNTAX_ERROR:
            return f"{self.message} (offset {self.offset})"
        return f"{self.message} (field {self.field})"


class ConfigurationErrorKind(str, Enum):
    UNKNOWN_VALIDATOR = "unknown_validator"
    INVALID_NAME = "invalid_name"
    INVALID_FUNCTION = "invalid_function"


class ConfigurationError(SwaggerModelError):
    """A validator registry was set up or consulted incorrectly."""

    def __init__(self, kind: ConfigurationErrorKind, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.value}: {name!r}")
