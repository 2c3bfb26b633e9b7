"""Swagger 2.0 JSON decoder.

Turns raw JSON bytes into a Document. Decoding only checks the shape of
the tree; field constraints are left to the validation engine so that
every problem can be reported in a single pass.
"""

import json
from typing import Any

from pydantic import ValidationError

from swagger_model.logs import get_logger
from swagger_model.model.base import Document
from swagger_model.model.errors import DecodeError, DecodeErrorKind

logger = get_logger(__name__)

ROOT = "<root>"


def decode(data: bytes | str) -> Document:
    """Decode a JSON Swagger document.

    Raises DecodeError (SYNTAX_ERROR with a byte offset, or TYPE_MISMATCH
    with the offending wire path). A partial Document is never returned.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug("document_decode_failed", kind=DecodeErrorKind.SYNTAX_ERROR.value, offset=e.start)
            raise DecodeError(
                DecodeErrorKind.SYNTAX_ERROR, f"Invalid UTF-8: {e.reason}", offset=e.start
            ) from e
    else:
        text = data

    try:
        tree = json.loads(text)
    except json.JSONDecodeError as e:
        # JSONDecodeError.pos counts characters, callers get bytes.
        offset = len(text[: e.pos].encode("utf-8"))
        logger.debug("document_decode_failed", kind=DecodeErrorKind.SYNTAX_ERROR.value, offset=offset)
        raise DecodeError(DecodeErrorKind.SYNTAX_ERROR, e.msg, offset=offset) from e
    except RecursionError as e:
        raise _too_deep() from e

    return build_document(tree)


def build_document(tree: Any) -> Document:
    """Build a Document from an already decoded JSON/YAML tree."""
    try:
        document = Document.model_validate(tree)
    except ValidationError as e:
        error = e.errors()[0]
        field = _field_path(error["loc"])
        logger.debug("document_decode_failed", kind=DecodeErrorKind.TYPE_MISMATCH.value, field=field)
        raise DecodeError(DecodeErrorKind.TYPE_MISMATCH, error["msg"], field=field) from e
    except RecursionError as e:
        raise _too_deep() from e

    logger.debug(
        "document_decoded",
        paths=sum(len(mapping) for mapping in document.paths),
        definitions=sum(len(mapping) for mapping in document.definitions),
    )
    return document


def _too_deep() -> DecodeError:
    logger.debug("document_decode_failed", kind=DecodeErrorKind.TYPE_MISMATCH.value, field=ROOT)
    return DecodeError(DecodeErrorKind.TYPE_MISMATCH, "Document is nested too deeply", field=ROOT)


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or ROOT
