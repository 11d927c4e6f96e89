"""
Format result model.

This module defines the FormatResult class, which bundles the formatted
text of a format pass with the diagnostics collected along the way.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from sql_formatter.utils.warnings import VALID_LEVELS, FormatWarning


@dataclass
class FormatResult:
    """Result of formatting one SQL string.

    Attributes:
        output: Formatted (and possibly highlighted) SQL text.
        sql: Original SQL string.
        warnings: Problems found in the input, such as unbalanced
            parentheses. Their annotations are also part of ``output``.

    Example:
        >>> formatter = SqlFormatter()
        >>> result = formatter.format_result("SELECT (1")
        >>> result.success
        True
        >>> [w.level for w in result.warnings]
        ['WARNING']
    """

    output: str
    sql: str
    warnings: list[FormatWarning] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when no error-level warning was recorded."""
        return not self.has_errors()

    def has_errors(self) -> bool:
        return any(warning.level == "ERROR" for warning in self.warnings)

    def get_summary(self) -> dict[str, int]:
        """Get a count of warnings per level."""
        summary: dict[str, int] = {level: 0 for level in VALID_LEVELS}
        for warning in self.warnings:
            summary[warning.level] += 1
        return summary

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            "output": self.output,
            "sql": self.sql,
            "success": self.success,
            "warnings": [warning.to_dict() for warning in self.warnings],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __str__(self) -> str:
        return self.output
