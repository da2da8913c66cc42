"""Command output for ShepherdPress.

Settings, profiles and content types are listed as rich tables on a
terminal and as JSON or YAML for scripts. Rendered HTML documents bypass
the formatter's table path and are written verbatim.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .exceptions import ShepherdPressError, ValidationError

ENV_OUTPUT_FORMAT = "SHEPHERDPRESS_OUTPUT_FORMAT"

Rows = Union[List[Dict[str, Any]], Dict[str, Any]]


class OutputFormatter:
    """Prints command results as table, JSON or YAML."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def determine_format(self, format_override: Optional[str] = None) -> str:
        """Pick the output format.

        ``--output`` wins, then ``SHEPHERDPRESS_OUTPUT_FORMAT``. Without
        either, a terminal gets a table and a pipe gets JSON.
        """
        chosen = format_override or os.environ.get(ENV_OUTPUT_FORMAT)
        if chosen:
            return chosen.lower()
        return "table" if sys.stdout.isatty() else "json"

    def render(self, data: Any, format: Optional[str] = None, **kwargs: Any) -> None:
        """Print command results.

        Args:
            data: A list of row mappings, or one mapping
            format: Format name; detected when omitted
            **kwargs: Passed through to the format's renderer

        Raises:
            ValidationError: If the format is not table, json or yaml
        """
        name = self.determine_format(format)
        renderers = {
            "table": self.render_table,
            "json": self.render_json,
            "yaml": self.render_yaml,
        }
        renderer = renderers.get(name)
        if renderer is None:
            raise ValidationError(f"Unknown output format: {name}")
        renderer(data, **kwargs)

    def render_table(
        self,
        data: Rows,
        columns: Optional[List[str]] = None,
        title: Optional[str] = None,
        show_header: bool = True,
        show_lines: bool = False,
        **kwargs: Any,
    ) -> None:
        """Print rows as a rich table.

        Columns default to every key seen, in first-seen order. Booleans
        print as check marks.
        """
        if not data:
            self.console.print("[dim]No data to display[/dim]")
            return

        rows = [data] if isinstance(data, dict) else list(data)
        if not columns:
            columns = []
            for row in rows:
                columns.extend(key for key in row if key not in columns)

        table = Table(title=title, show_header=show_header, show_lines=show_lines, box=box.ROUNDED)
        for column in columns:
            table.add_column(column.replace("_", " ").title(), overflow="fold")

        for row in rows:
            cells = []
            for column in columns:
                value = row.get(column)
                if isinstance(value, bool):
                    value = "✓" if value else "✗"
                # Text cells so shortcode values like "[metaslider id=14]" print as-is
                cells.append(Text("" if value is None else str(value)))
            table.add_row(*cells)

        self.console.print(table)

    def render_json(
        self,
        data: Any,
        fields: Optional[List[str]] = None,
        pretty: bool = True,
        indent: int = 2,
        **kwargs: Any,
    ) -> None:
        if not data:
            print("[]")
            return

        if fields:
            data = self._filter_fields(data, fields)

        try:
            print(json.dumps(data, indent=indent if pretty else None, ensure_ascii=False, default=str))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Failed to serialize data to JSON: {e}")

    def render_yaml(self, data: Any, **kwargs: Any) -> None:
        if not data:
            print("[]")
            return

        try:
            print(yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False))
        except yaml.YAMLError as e:
            raise ValidationError(f"Failed to serialize data to YAML: {e}")

    def write_document(self, markup: str, file_path: Optional[Union[str, Path]] = None) -> None:
        """Write a rendered HTML document to a file, or stdout without one.

        Raises:
            ShepherdPressError: If the file cannot be written
        """
        if file_path is None:
            sys.stdout.write(markup)
            return

        file_path = Path(file_path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(markup, encoding="utf-8")
        except OSError as e:
            raise ShepherdPressError(f"Failed to write {file_path}: {e}")

    def _filter_fields(self, data: Any, fields: List[str]) -> Any:
        if isinstance(data, dict):
            return {field: data[field] for field in fields if field in data}
        return [
            {field: item[field] for field in fields if field in item} if isinstance(item, dict) else item
            for item in data
        ]
