"""Unit tests for render.py module.

Tests the OutputFormatter class for output rendering including table,
JSON and YAML formatting, format detection, and document output.
"""

import json
import yaml
import pytest

from rich.console import Console

from shepherdpress.render import ENV_OUTPUT_FORMAT, OutputFormatter
from shepherdpress.exceptions import ValidationError


class TestOutputFormatter:
    """Test cases for the OutputFormatter class."""

    @pytest.fixture
    def console(self):
        return Console(record=True, width=200, force_terminal=False)

    @pytest.fixture
    def formatter(self, console):
        """Create an OutputFormatter instance."""
        return OutputFormatter(console)

    @pytest.fixture
    def sample_data(self):
        """Sample settings rows for testing."""
        return [
            {"setting": "footer_text_telephone", "value": "252.442.1134", "stored": False},
            {"setting": "custom_fp_slider_shortcode", "value": "[metaslider id=14]", "stored": True},
        ]

    def test_determine_format_override(self, formatter):
        assert formatter.determine_format("YAML") == "yaml"

    def test_determine_format_from_environment(self, formatter, monkeypatch):
        monkeypatch.setenv(ENV_OUTPUT_FORMAT, "yaml")

        assert formatter.determine_format() == "yaml"

    def test_determine_format_piped_output_is_json(self, formatter, monkeypatch):
        monkeypatch.delenv(ENV_OUTPUT_FORMAT, raising=False)
        monkeypatch.setattr("sys.stdout.isatty", lambda: False)

        assert formatter.determine_format() == "json"

    def test_render_json(self, formatter, sample_data, capsys):
        formatter.render(sample_data, format="json")

        assert json.loads(capsys.readouterr().out) == sample_data

    def test_render_json_fields(self, formatter, sample_data, capsys):
        formatter.render_json(sample_data, fields=["setting"])

        assert json.loads(capsys.readouterr().out) == [
            {"setting": "footer_text_telephone"},
            {"setting": "custom_fp_slider_shortcode"},
        ]

    def test_render_json_empty(self, formatter, capsys):
        formatter.render_json([])

        assert capsys.readouterr().out.strip() == "[]"

    def test_render_yaml_keeps_key_order(self, formatter, capsys):
        formatter.render({"setting": "footer_text_1", "value": "©"}, format="yaml")
        output = capsys.readouterr().out

        assert yaml.safe_load(output) == {"setting": "footer_text_1", "value": "©"}
        assert output.index("setting") < output.index("value")

    def test_render_table_shows_values_literally(self, formatter, console, sample_data):
        """Bracketed values are not swallowed as console markup."""
        formatter.render(sample_data, format="table", title="Theme Settings")
        output = console.export_text()

        assert "Theme Settings" in output
        assert "[metaslider id=14]" in output
        assert "252.442.1134" in output
        assert "✓" in output and "✗" in output

    def test_render_table_empty(self, formatter, console):
        formatter.render_table([])

        assert "No data to display" in console.export_text()

    def test_unknown_format_raises(self, formatter, sample_data):
        with pytest.raises(ValidationError):
            formatter.render(sample_data, format="xml")

    def test_write_document_to_file(self, formatter, tmp_path):
        target = tmp_path / "site" / "index.html"

        formatter.write_document("<!doctype html>\n", target)

        assert target.read_text() == "<!doctype html>\n"

    def test_write_document_to_stdout(self, formatter, capsys):
        formatter.write_document("<html></html>")

        assert capsys.readouterr().out == "<html></html>"
