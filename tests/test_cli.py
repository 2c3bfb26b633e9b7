import json
from pathlib import Path

from click.testing import CliRunner

from swagger_model.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliValidate:
    def test_valid_document(self):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(FIXTURES / "petstore.json")])

        assert result.exit_code == 0
        assert "valid" in result.output

    def test_valid_yaml_document(self):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(FIXTURES / "petstore.yaml"), "--format", "yaml"])

        assert result.exit_code == 0

    def test_violations_listed(self):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(FIXTURES / "broken.json")])

        assert result.exit_code == 1
        assert "Info.Title  [nonzero]  zero value" in result.output
        assert "Schemes  [validScheme]  Invalid schemes: [ftp,carrierpigeon]" in result.output
        assert "7 violation(s)" in result.output

    def test_decode_error(self, tmp_path):
        doc = tmp_path / "truncated.json"
        doc.write_text('{"swagger": "2.0", "info": {')
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(doc)])

        assert result.exit_code == 2
        assert "Cannot decode" in result.output

    def test_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(tmp_path / "nope.json")])

        assert result.exit_code != 0


class TestCliInspect:
    def test_summary(self):
        runner = CliRunner()
        result = runner.invoke(main, ["inspect", str(FIXTURES / "petstore.json")])

        assert result.exit_code == 0
        assert "Swagger Petstore 1.0.0" in result.output
        assert "Schemes: https, http" in result.output
        assert "/pets: 2 operation(s) [GET, POST]" in result.output
        assert "Found 3 operations." in result.output

    def test_json_logging(self, tmp_path, monkeypatch):
        from swagger_model.config import get_settings

        monkeypatch.setenv("SWAGGER_MODEL_LOG_LEVEL", "debug")
        monkeypatch.setenv("SWAGGER_MODEL_LOG_FORMAT", "json")
        get_settings.cache_clear()
        try:
            doc = tmp_path / "doc.json"
            doc.write_text(json.dumps({"swagger": "2.0", "paths": {"/a": {"get": {}}}}))
            runner = CliRunner()
            result = runner.invoke(main, ["inspect", str(doc)])
        finally:
            get_settings.cache_clear()

        assert result.exit_code == 0
        assert '"event": "document_decoded"' in result.output
