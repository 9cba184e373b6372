"""Unit tests for render.py module.

Tests the OutputFormatter class for table, JSON and YAML output,
format detection, and file export.
"""

import json
import yaml
import pytest
from io import StringIO
from unittest.mock import patch

from rich.console import Console
from rich import box

from blogfixtures.render import OutputFormatter
from blogfixtures.exceptions import ValidationError, ExportError


class TestOutputFormatter:
    """Test cases for the OutputFormatter class."""

    @pytest.fixture
    def console(self):
        """Console writing to an in-memory buffer."""
        return Console(file=StringIO(), width=200)

    @pytest.fixture
    def formatter(self, console):
        """Create an OutputFormatter instance."""
        return OutputFormatter(console=console)

    @pytest.fixture
    def sample_data(self):
        """Sample data for testing."""
        return [
            {"title": "Hello World", "permalink_id": "hello-world"},
            {"title": "PHP UK Conference 2015", "permalink_id": "php-uk-conference-2015", "tags": ["php-uk", "hhvm"]},
        ]

    def test_formatter_initialization_default(self):
        """Test OutputFormatter initialization with default console."""
        formatter = OutputFormatter()
        assert isinstance(formatter.console, Console)
        assert formatter.theme == "default"
        assert formatter.colors is True

    def test_determine_format_explicit_override(self, formatter):
        """Test format determination with explicit override."""
        assert formatter.determine_format("json") == "json"
        assert formatter.determine_format("YAML") == "yaml"

    def test_determine_format_default_format(self, console):
        """Test configured default format wins over the environment."""
        formatter = OutputFormatter(console=console, default_format="yaml")
        with patch.dict("os.environ", {"BLOGFIXTURES_OUTPUT_FORMAT": "json"}):
            assert formatter.determine_format() == "yaml"

    @patch.dict("os.environ", {"BLOGFIXTURES_OUTPUT_FORMAT": "yaml"})
    def test_determine_format_ignores_environment(self, formatter):
        """Test the formatter leaves environment overrides to the config layer."""
        with patch("sys.stdout.isatty", return_value=False):
            assert formatter.determine_format() == "json"

    @patch.dict("os.environ", {}, clear=True)
    def test_determine_format_auto_detect_tty(self, formatter):
        """Test format auto-detection for TTY."""
        with patch("sys.stdout.isatty", return_value=True):
            assert formatter.determine_format() == "table"

    @patch.dict("os.environ", {}, clear=True)
    def test_determine_format_auto_detect_non_tty(self, formatter):
        """Test format auto-detection for non-TTY."""
        with patch("sys.stdout.isatty", return_value=False):
            assert formatter.determine_format() == "json"

    def test_render_dispatches_table(self, formatter, sample_data):
        """Test rendering with table format passes table options through."""
        with patch.object(formatter, "render_table") as mock_render:
            formatter.render(sample_data, format="table", title="Posts")
            mock_render.assert_called_once_with(sample_data, title="Posts")

    def test_render_dispatches_json(self, formatter, sample_data):
        """Test rendering with JSON format."""
        with patch.object(formatter, "render_json") as mock_render:
            formatter.render(sample_data, format="json", title="Posts")
            mock_render.assert_called_once_with(sample_data)

    def test_render_unknown_format(self, formatter, sample_data):
        """Test rendering with unknown format."""
        with pytest.raises(ValidationError, match="Unknown output format: xml"):
            formatter.render(sample_data, format="xml")

    def test_render_table_output(self, formatter, console, sample_data):
        """Test table output contains titles, headers and joined tags."""
        formatter.render_table(sample_data, columns=["title", "permalink_id", "tags"], title="Posts")
        output = console.file.getvalue()

        assert "Posts" in output
        assert "Permalink Id" in output
        assert "hello-world" in output
        assert "php-uk, hhvm" in output

    def test_render_table_empty(self, formatter, console):
        """Test empty data prints a placeholder."""
        formatter.render_table([])
        assert "No data to display" in console.file.getvalue()

    def test_render_table_single_dict(self, formatter, console):
        """Test a single record renders as one row."""
        formatter.render_table({"title": "Hello World", "permalink_id": "hello-world"})
        output = console.file.getvalue()
        assert "Hello World" in output
        assert "Title" in output

    def test_render_json_output(self, formatter, sample_data):
        """Test JSON output parses back to the input."""
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            formatter.render_json(sample_data)

        assert json.loads(mock_stdout.getvalue()) == sample_data

    def test_render_yaml_output(self, formatter, sample_data):
        """Test YAML output keeps key order and parses back to the input."""
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            formatter.render_yaml(sample_data)

        output = mock_stdout.getvalue()
        assert yaml.safe_load(output) == sample_data
        assert output.index("title") < output.index("permalink_id")

    def test_format_json_unserializable(self, formatter):
        """Test circular data raises ValidationError."""
        circular = {}
        circular["self"] = circular
        with pytest.raises(ValidationError, match="Failed to serialize data to JSON"):
            formatter.format_json(circular)

    def test_render_to_file_json(self, formatter, sample_data, tmp_path):
        """Test exporting to a .json file."""
        target = tmp_path / "posts.json"
        written = formatter.render_to_file(sample_data, target)

        assert written == target
        assert json.loads(target.read_text(encoding="utf-8")) == sample_data

    def test_render_to_file_yaml_extension(self, formatter, sample_data, tmp_path):
        """Test exporting picks YAML from a .yml extension."""
        target = tmp_path / "posts.yml"
        formatter.render_to_file(sample_data, target)

        assert yaml.safe_load(target.read_text(encoding="utf-8")) == sample_data

    def test_render_to_file_explicit_format(self, formatter, sample_data, tmp_path):
        """Test an explicit format overrides the extension."""
        target = tmp_path / "posts.txt"
        formatter.render_to_file(sample_data, target, format="yaml")

        assert yaml.safe_load(target.read_text(encoding="utf-8")) == sample_data

    def test_render_to_file_table_rejected(self, formatter, sample_data, tmp_path):
        """Test table output cannot be exported."""
        with pytest.raises(ValidationError, match="Cannot export to format: table"):
            formatter.render_to_file(sample_data, tmp_path / "posts.txt", format="table")

    def test_render_to_file_unwritable(self, formatter, sample_data, tmp_path):
        """Test a missing directory raises ExportError."""
        target = tmp_path / "missing" / "posts.json"
        with pytest.raises(ExportError) as exc_info:
            formatter.render_to_file(sample_data, target)

        assert exc_info.value.file_path == str(target)

    def test_strip_ansi(self, formatter):
        """Test ANSI escape codes are removed."""
        assert formatter._strip_ansi("\x1b[31mred\x1b[0m") == "red"

    def test_build_table_default_theme(self, formatter, sample_data):
        """Test the default theme uses rounded borders."""
        table = formatter._build_table(sample_data)
        assert table.box is box.ROUNDED

    def test_build_table_simple_theme(self, console, sample_data):
        """Test the simple theme uses simple borders."""
        formatter = OutputFormatter(console=console, theme="simple")
        table = formatter._build_table(sample_data, columns=["title", "permalink_id", "tags"], title="Posts")

        assert table.box is box.SIMPLE
        assert table.title == "Posts"
        assert [column.header for column in table.columns] == ["Title", "Permalink Id", "Tags"]

    def test_render_table_missing_values_blank(self, formatter, console, sample_data):
        """Test missing values render as empty cells."""
        formatter.render_table(sample_data, columns=["title", "permalink_id", "tags"])
        assert "—" not in console.file.getvalue()

    def test_render_table_colors_on_terminal(self, sample_data):
        """Test colored output keeps styling on a terminal console."""
        console = Console(file=StringIO(), width=200, force_terminal=True)
        formatter = OutputFormatter(console=console, colors=True)

        formatter.render_table(sample_data, title="Posts")

        assert "\x1b[" in console.file.getvalue()

    def test_render_table_without_colors(self, sample_data, capsys):
        """Test colors=False prints plain text to stdout."""
        console = Console(file=StringIO(), width=200, force_terminal=True)
        formatter = OutputFormatter(console=console, colors=False)

        formatter.render_table(sample_data, title="Posts")

        output = capsys.readouterr().out
        assert "hello-world" in output
        assert "Posts" in output
        assert "\x1b[" not in output
        assert console.file.getvalue() == ""
