"""Typed Swagger 2.0 document model.

Every record is frozen once decoded. Wire names are the camelCase forms of
the attribute names unless a field carries an explicit alias. Field
validators are declared with ``Annotated[..., Rules(...)]`` and applied by
the validation engine, never during decoding.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

HTTP_VERBS = ("get", "put", "post", "delete", "options", "head", "patch")


class Rules:
    """Names of the validators bound to a model field, in the order they run."""

    __slots__ = ("names",)

    def __init__(self, *names: str):
        self.names = names

    def __repr__(self) -> str:
        return f"Rules({', '.join(map(repr, self.names))})"


class SwaggerRecord(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
    )


class Contact(SwaggerRecord):
    name: str = ""
    url: str = ""
    email: str = ""


class License(SwaggerRecord):
    name: Annotated[str, Rules("nonzero")] = ""
    url: str = ""


class Info(SwaggerRecord):
    title: Annotated[str, Rules("nonzero")] = ""
    description: str = ""
    terms_of_service: str = ""
    contact: Contact | None = None
    license: License | None = None
    version: Annotated[str, Rules("nonzero")] = ""


class ExternalDocumentation(SwaggerRecord):
    description: str = ""
    url: Annotated[str, Rules("nonzero")] = ""


class Xml(SwaggerRecord):
    name: str = ""
    namespace: str = ""
    prefix: str = ""
    attribute: bool = False
    wrapped: bool = False


class Schema(SwaggerRecord):
    """A (subset of a) JSON Schema object as used by Swagger 2.0."""

    ref: Annotated[str, Field(alias="$ref")] = ""
    format: Annotated[str, Rules("validFormat")] = ""
    title: str = ""
    description: str = ""
    default: Any = None
    discriminator: str = ""
    read_only: bool = False
    xml: Xml | None = None
    type: str = ""
    items: "Schema | None" = None
    properties: dict[str, "Schema"] = {}
    required: tuple[str, ...] = ()


class Items(SwaggerRecord):
    """Element type of an array parameter that is not in the body."""

    type: Annotated[str, Rules("validType")] = ""
    format: Annotated[str, Rules("validFormat")] = ""
    items: "Items | None" = None
    collection_format: str = ""
    default: Any = None


class Parameter(SwaggerRecord):
    name: Annotated[str, Rules("nonzero")] = ""
    location: Annotated[str, Field(alias="in"), Rules("nonzero")] = ""  # query / header / path / body / formData
    description: str = ""
    required: bool = False
    body_schema: Annotated[Schema | None, Field(alias="schema")] = None  # only when in == "body"
    type: Annotated[str, Rules("validType")] = ""
    format: Annotated[str, Rules("validFormat")] = ""
    items: Items | None = None
    collection_format: str = ""
    default: Any = None


class Response(SwaggerRecord):
    description: Annotated[str, Rules("nonzero")] = ""
    body_schema: Annotated[Schema | None, Field(alias="schema")] = None


class Operation(SwaggerRecord):
    tags: tuple[str, ...] = ()
    summary: str = ""
    description: str = ""
    external_docs: ExternalDocumentation | None = None
    operation_id: str = ""
    consumes: tuple[str, ...] = ()
    produces: tuple[str, ...] = ()
    schemes: Annotated[tuple[str, ...], Rules("validScheme")] = ()
    parameters: tuple[Parameter, ...] = ()
    responses: dict[str, Response] = {}
    deprecated: bool = False

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes_as_text(cls, value: Any) -> Any:
        # YAML reads unquoted status codes as integers.
        if isinstance(value, dict):
            return {str(code): response for code, response in value.items()}
        return value


class PathItem(SwaggerRecord):
    """One entry of ``paths``: an optional reference plus its operations by verb."""

    ref: Annotated[str, Field(alias="$ref")] = ""
    operations: dict[str, Operation] = {}
    parameters: tuple[Parameter, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _collect_operations(cls, data: Any) -> Any:
        # On the wire the verbs sit beside $ref and parameters; a literal
        # "operations" key is not part of the wire format.
        if not isinstance(data, dict):
            return data
        fields = {k: v for k, v in data.items() if k not in HTTP_VERBS and k != "operations"}
        fields["operations"] = {k: v for k, v in data.items() if k in HTTP_VERBS}
        return fields


class Document(SwaggerRecord):
    """Root of a Swagger 2.0 document."""

    swagger: Annotated[str, Rules("nonzero")] = ""
    info: Annotated[Info | None, Rules("nonzero")] = None
    host: str = ""
    base_path: str = ""
    schemes: Annotated[tuple[str, ...], Rules("validScheme")] = ()
    consumes: tuple[str, ...] = ()
    produces: tuple[str, ...] = ()
    paths: Annotated[tuple[dict[str, PathItem], ...], Rules("nonzero")] = ()
    definitions: tuple[dict[str, Schema], ...] = ()
    external_docs: ExternalDocumentation | None = None

    @field_validator("paths", "definitions", mode="before")
    @classmethod
    def _wrap_mapping(cls, value: Any) -> Any:
        """Accept the standard object form as a one-element sequence; empty mappings are dropped."""
        if isinstance(value, dict):
            value = [value]
        if isinstance(value, list):
            return [m for m in value if not (isinstance(m, dict) and not m)]
        return value

    def operations(self) -> list[tuple[str, str, Operation]]:
        """All operations as (path, verb, operation), in document order."""
        result = []
        for mapping in self.paths:
            for path, item in mapping.items():
                for verb, operation in item.operations.items():
                    result.append((path, verb, operation))
        return result
