"""Base classes and utilities for CLI commands."""

from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from ...core.codec import to_jsonable


class CLIError(Exception):
    """Base exception for CLI-related errors."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class OutputFormatter:
    """Utility class for formatting command output."""

    @staticmethod
    def format_json(data: Dict[str, Any], indent: int = 2) -> str:
        """Format data as JSON."""
        return json.dumps(data, indent=indent, default=to_jsonable)

    @staticmethod
    def format_yaml(data: Dict[str, Any]) -> str:
        """Format data as YAML."""
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    @staticmethod
    def format_table(headers: list[str], rows: list[list[str]]) -> str:
        """Format data as a table."""
        if not headers:
            return ""

        col_widths = [len(header) for header in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(col_widths):
                    col_widths[i] = max(col_widths[i], len(str(cell)))

        lines = []
        separator = "-+-".join("-" * width for width in col_widths)
        header_line = " | ".join(header.ljust(width) for header, width in zip(headers, col_widths))

        lines.append(header_line)
        lines.append(separator)

        for row in rows:
            row_line = " | ".join(str(cell).ljust(width) for cell, width in zip(row, col_widths))
            lines.append(row_line.rstrip())

        return "\n".join(lines)
