from pathlib import Path

import pytest

from swagger_model.model.errors import DecodeError, DecodeErrorKind
from swagger_model.parser.swagger import build_document, decode

FIXTURES = Path(__file__).parent / "fixtures"


class TestDecode:
    def test_decode_petstore(self):
        doc = decode((FIXTURES / "petstore.json").read_bytes())
        assert doc.swagger == "2.0"
        assert doc.info.title == "Swagger Petstore"
        assert doc.info.contact.email == "apiteam@swagger.io"
        assert doc.base_path == "/api"
        assert doc.schemes == ("https", "http")
        assert len(doc.operations()) == 3

    def test_decode_parameters_in_order(self):
        doc = decode((FIXTURES / "petstore.json").read_bytes())
        get_pets = doc.paths[0]["/pets"].operations["get"]
        assert [p.name for p in get_pets.parameters] == ["tags", "limit"]
        assert get_pets.parameters[0].items.type == "string"
        assert get_pets.responses["200"].body_schema.items.ref == "#/definitions/Pet"

    def test_decode_definitions(self):
        doc = decode((FIXTURES / "petstore.json").read_bytes())
        pet = doc.definitions[0]["Pet"]
        assert pet.required == ("id", "name")
        assert pet.properties["name"].xml.attribute is True

    def test_decode_accepts_text(self):
        doc = decode('{"swagger": "2.0"}')
        assert doc.swagger == "2.0"


class TestDecodeErrors:
    def test_truncated_json(self):
        data = (FIXTURES / "petstore.json").read_bytes()[:200]
        with pytest.raises(DecodeError) as exc_info:
            decode(data)
        assert exc_info.value.kind == DecodeErrorKind.SYNTAX_ERROR
        assert exc_info.value.offset >= 0

    def test_empty_input(self):
        with pytest.raises(DecodeError) as exc_info:
            decode(b"")
        assert exc_info.value.kind == DecodeErrorKind.SYNTAX_ERROR
        assert exc_info.value.offset == 0

    def test_offset_counts_bytes(self):
        # "é" is two bytes, one character
        with pytest.raises(DecodeError) as exc_info:
            decode('{"title": "é", oops}'.encode("utf-8"))
        assert exc_info.value.offset == 16

    def test_invalid_utf8(self):
        with pytest.raises(DecodeError) as exc_info:
            decode(b'{"swagger": "\xff"}')
        assert exc_info.value.kind == DecodeErrorKind.SYNTAX_ERROR
        assert exc_info.value.offset == 13

    def test_scalar_paths(self):
        with pytest.raises(DecodeError) as exc_info:
            decode(b'{"swagger": "2.0", "paths": "nope"}')
        assert exc_info.value.kind == DecodeErrorKind.TYPE_MISMATCH
        assert exc_info.value.field == "paths"

    def test_nested_mismatch_path(self):
        data = b'{"paths": {"/pets": {"get": {"parameters": [{"name": 5}]}}}}'
        with pytest.raises(DecodeError) as exc_info:
            decode(data)
        assert exc_info.value.kind == DecodeErrorKind.TYPE_MISMATCH
        assert exc_info.value.field == "paths.0./pets.operations.get.parameters.0.name"

    def test_root_not_an_object(self):
        with pytest.raises(DecodeError) as exc_info:
            decode(b"[1, 2]")
        assert exc_info.value.kind == DecodeErrorKind.TYPE_MISMATCH
        assert exc_info.value.field == "<root>"

    def test_build_document_from_tree(self):
        doc = build_document({"swagger": "2.0", "info": {"title": "t", "version": "1"}})
        assert doc.info.version == "1"

    def test_deeply_nested_json(self):
        data = b'{"x":' + b"[" * 100000 + b"]" * 100000 + b"}"
        with pytest.raises(DecodeError) as exc_info:
            decode(data)
        assert exc_info.value.kind == DecodeErrorKind.TYPE_MISMATCH
        assert exc_info.value.field == "<root>"

    def test_deeply_nested_tree(self):
        schema: dict = {"type": "string"}
        for _ in range(5000):
            schema = {"type": "array", "items": schema}
        with pytest.raises(DecodeError) as exc_info:
            build_document({"definitions": {"Deep": schema}})
        assert exc_info.value.kind == DecodeErrorKind.TYPE_MISMATCH
