"""CLI entry point for swagger-model."""

from pathlib import Path

import click

from swagger_model.config import get_settings
from swagger_model.logs import configure_logging
from swagger_model.model.base import Document
from swagger_model.model.errors import DecodeError
from swagger_model.parser.detect import load_document
from swagger_model.validation.engine import validate as validate_document
from swagger_model.validation.registry import default_registry

FORMATS = ["auto", "json", "yaml"]


def _load(doc_path: Path, fmt: str) -> Document:
    """Load a document, turning decode failures into exit code 2."""
    try:
        return load_document(doc_path, fmt)
    except DecodeError as e:
        click.echo(f"Cannot decode {doc_path}: {e}", err=True)
        raise SystemExit(2)


@click.group()
def main():
    """swagger-model — decode and validate Swagger 2.0 documents."""
    configure_logging(get_settings())


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "fmt", default="auto", type=click.Choice(FORMATS), help="Document serialization.")
def validate(doc_path: Path, fmt: str):
    """Validate a Swagger document and list every violation."""
    document = _load(doc_path, fmt)
    result = validate_document(document, default_registry())

    if result.valid:
        click.echo(f"{doc_path}: valid")
        return

    for violation in result.violations:
        click.echo(f"{violation.path}  [{violation.validator}]  {violation.message}")
    click.echo(f"{doc_path}: {len(result.violations)} violation(s)")
    raise SystemExit(1)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "fmt", default="auto", type=click.Choice(FORMATS), help="Document serialization.")
def inspect(doc_path: Path, fmt: str):
    """Summarize a Swagger document: info, schemes and operations per path."""
    document = _load(doc_path, fmt)

    if document.info is not None:
        click.echo(f"{document.info.title} {document.info.version}")
    click.echo(f"Schemes: {', '.join(document.schemes) or '-'}")

    for mapping in document.paths:
        for path, item in mapping.items():
            verbs = ", ".join(verb.upper() for verb in item.operations)
            click.echo(f"  {path}: {len(item.operations)} operation(s) [{verbs}]")
    click.echo(f"Found {len(document.operations())} operations.")
