"""Load a Swagger document from disk, in JSON or YAML form."""

from pathlib import Path

import yaml

from swagger_model.model.base import Document
from swagger_model.model.errors import DecodeError, DecodeErrorKind
from swagger_model.parser.swagger import ROOT, build_document, decode

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def detect_format(file_path: Path) -> str:
    """Detect the serialization of a Swagger file.

    Returns: 'json' or 'yaml'.
    """
    suffix = file_path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"

    # No telling extension: JSON documents start with an object
    text = file_path.read_text(encoding="utf-8")
    if text.lstrip().startswith("{"):
        return "json"
    return "yaml"


def load_document(file_path: Path, fmt: str = "auto") -> Document:
    """Read and decode a Swagger document file."""
    if fmt == "auto":
        fmt = detect_format(file_path)

    data = file_path.read_bytes()
    if fmt == "json":
        return decode(data)
    return decode_yaml(data)


def decode_yaml(data: bytes | str) -> Document:
    """Decode a YAML Swagger document; errors mirror those of ``decode``."""
    try:
        tree = yaml.safe_load(data)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        offset = mark.index if mark is not None else 0
        raise DecodeError(DecodeErrorKind.SYNTAX_ERROR, f"YAMLError: {e}", offset=offset) from e
    except RecursionError as e:
        raise DecodeError(DecodeErrorKind.TYPE_MISMATCH, "Document is nested too deeply", field=ROOT) from e
    return build_document(tree)
