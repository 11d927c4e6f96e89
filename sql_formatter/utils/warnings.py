"""
Warning system for SQL formatting.

This module defines the diagnostics collected while formatting. Problems in
the input SQL never abort a format pass; they are recorded here and also
annotated inside the formatted output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

VALID_LEVELS = ("INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class FormatWarning:
    """Warning or error message produced by a format pass.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Warning or error message text.
        context: Optional context information (e.g. the character offset of
            the offending token).

    Example:
        >>> warning = FormatWarning(
        ...     level="ERROR",
        ...     message="Unmatched closing parenthesis",
        ...     context="offset 17",
        ... )
        >>> warning.level
        'ERROR'
    """

    level: str
    message: str
    context: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        if self.level not in VALID_LEVELS:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {list(VALID_LEVELS)}"
            )

    def to_dict(self) -> dict[str, Optional[str]]:
        return {"level": self.level, "message": self.message, "context": self.context}


class WarningCollector:
    """Collects warnings and errors during a format pass.

    Attributes:
        warnings: List of FormatWarning objects in the order they were added.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add_unclosed_scopes(2)
        >>> collector.add_unmatched_close(12)
        >>> [w.level for w in collector.get_all()]
        ['WARNING', 'ERROR']
    """

    def __init__(self) -> None:
        """Initialize an empty WarningCollector."""
        self.warnings: list[FormatWarning] = []

    def add(
        self, level: str, message: str, context: Optional[str] = None
    ) -> None:
        """Add a warning or error message.

        Args:
            level: Severity level ("INFO", "WARNING", "ERROR").
            message: Warning or error message text.
            context: Optional context information.
        """
        self.warnings.append(
            FormatWarning(level=level, message=message, context=context)
        )

    def get_all(self) -> list[FormatWarning]:
        """Get a copy of all collected warnings, in insertion order."""
        return self.warnings.copy()

    def add_unmatched_close(self, offset: int) -> None:
        """Record a closing parenthesis with no open block to close.

        Args:
            offset: Character offset of the parenthesis in the input.
        """
        self.add(
            "ERROR",
            "Unmatched closing parenthesis",
            f"offset {offset}",
        )

    def add_unclosed_scopes(self, count: int) -> None:
        """Record blocks still open when the input ended.

        Args:
            count: Number of open block scopes.
        """
        self.add(
            "WARNING",
            f"{count} unclosed parentheses or section(s) at end of input",
        )

    def add_tokenizer_error(self, offset: int, remainder: str) -> None:
        """Record input the tokenizer could not classify.

        Args:
            offset: Character offset where tokenizing stopped.
            remainder: Unconsumed text, shortened for the message.
        """
        preview = remainder if len(remainder) <= 20 else remainder[:20] + "..."
        self.add(
            "ERROR",
            f"Could not tokenize input: {preview!r}",
            f"offset {offset}",
        )

