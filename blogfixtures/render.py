"""Output rendering and formatting utilities.

This module provides the formatter used by the CLI to display fixture
records as a table, JSON, or YAML, and to export them to files.
"""

import sys
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from rich.console import Console
from rich.table import Table
from rich import box

from .exceptions import ValidationError, ExportError


FORMATS = ("table", "json", "yaml")


class OutputFormatter:
    """Main output formatter that handles multiple output formats."""

    def __init__(
        self,
        console: Optional[Console] = None,
        default_format: Optional[str] = None,
        theme: str = "default",
        colors: bool = True,
    ) -> None:
        """Initialize output formatter.

        Args:
            console: Rich console instance. If None, creates a new one.
            default_format: Format used when no override is given
            theme: Table theme (default, simple)
            colors: Whether tables are printed with colors
        """
        self.console = console or Console()
        self.default_format = default_format
        self.theme = theme
        self.colors = colors

    def determine_format(self, format_override: Optional[str] = None) -> str:
        """Determine the output format to use.

        Args:
            format_override: Explicit format override

        Returns:
            Format name (table, json, yaml)
        """
        if format_override:
            return format_override.lower()

        if self.default_format:
            return self.default_format.lower()

        # Auto-detect based on terminal
        if sys.stdout.isatty():
            return "table"
        return "json"

    def render(
        self,
        data: Any,
        format: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Render data in the specified format.

        Args:
            data: Data to render
            format: Output format (table, json, yaml)
            **kwargs: Additional formatting options
        """
        format_name = self.determine_format(format)

        if format_name == "table":
            self.render_table(data, **kwargs)
        elif format_name == "json":
            self.render_json(data)
        elif format_name == "yaml":
            self.render_yaml(data)
        else:
            raise ValidationError(f"Unknown output format: {format_name}")

    def render_table(
        self,
        data: Union[List[Dict[str, Any]], Dict[str, Any]],
        columns: Optional[List[str]] = None,
        title: Optional[str] = None,
        show_header: bool = True,
        **kwargs: Any,
    ) -> None:
        """Render data as a table using Rich.

        Args:
            data: Data to render
            columns: Column names to display, in order
            title: Table title
            show_header: Whether to show column headers
            **kwargs: Additional arguments
        """
        if not data:
            self.console.print("[dim]No data to display[/dim]")
            return

        table = self._build_table(data, columns=columns, title=title, show_header=show_header)

        if self.colors:
            self.console.print(table)
        else:
            with self.console.capture() as capture:
                self.console.print(table)
            print(self._strip_ansi(capture.get()))

    def _build_table(
        self,
        data: Union[List[Dict[str, Any]], Dict[str, Any]],
        columns: Optional[List[str]] = None,
        title: Optional[str] = None,
        show_header: bool = True,
    ) -> Table:
        """Build a Rich table for the configured theme."""
        if isinstance(data, dict):
            data = [data]

        if not columns:
            # First-seen key order
            columns = []
            for item in data:
                for key in item:
                    if key not in columns:
                        columns.append(key)

        table = Table(
            title=title,
            show_header=show_header,
            box=box.SIMPLE if self.theme == "simple" else box.ROUNDED,
        )

        for col in columns:
            table.add_column(col.replace("_", " ").title(), overflow="fold")

        for item in data:
            row = []
            for col in columns:
                value = item.get(col)
                if value is None:
                    value = ""
                elif isinstance(value, (list, tuple)):
                    value = ", ".join(str(v) for v in value)
                row.append(str(value))
            table.add_row(*row)

        return table

    def render_json(self, data: Any) -> None:
        """Render data as JSON."""
        print(self.format_json(data))

    def render_yaml(self, data: Any) -> None:
        """Render data as YAML."""
        print(self.format_yaml(data), end="")

    def format_json(self, data: Any, indent: int = 2) -> str:
        """Serialize data to a JSON string.

        Raises:
            ValidationError: If the data cannot be serialized
        """
        try:
            return json.dumps(data, indent=indent, ensure_ascii=False, default=str)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Failed to serialize data to JSON: {e}")

    def format_yaml(self, data: Any) -> str:
        """Serialize data to a YAML string.

        Raises:
            ValidationError: If the data cannot be serialized
        """
        try:
            return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
        except yaml.YAMLError as e:
            raise ValidationError(f"Failed to serialize data to YAML: {e}")

    def render_to_file(
        self,
        data: Any,
        file_path: Union[str, Path],
        format: Optional[str] = None,
    ) -> Path:
        """Render data to a file.

        Args:
            data: Data to render
            file_path: Path to output file
            format: Output format (auto-detected from file extension if not provided)

        Returns:
            The path written to

        Raises:
            ValidationError: If the format is not json or yaml
            ExportError: If the file cannot be written
        """
        file_path = Path(file_path)

        if not format:
            ext = file_path.suffix.lower()
            if ext in [".yaml", ".yml"]:
                format = "yaml"
            else:
                format = "json"

        format = format.lower()
        if format == "json":
            content = self.format_json(data) + "\n"
        elif format == "yaml":
            content = self.format_yaml(data)
        else:
            raise ValidationError(f"Cannot export to format: {format}")

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise ExportError(f"Failed to write {file_path}: {e}", file_path=file_path)

        return file_path

    def _strip_ansi(self, text: str) -> str:
        """Strip ANSI escape sequences from text."""
        import re
        ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
        return ansi_escape.sub("", text)
