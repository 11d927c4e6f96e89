"""
Custom exception classes for the SQL formatter.

Malformed SQL never raises: unbalanced parentheses, unterminated strings and
similar problems are reported inside the formatted output and through
FormatResult warnings. The exceptions below are reserved for misuse of the
library itself, such as an invalid configuration.
"""

from typing import Any, Optional


class SqlFormatterError(Exception):
    """Base exception class for all formatter errors.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a SqlFormatterError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class ConfigurationError(SqlFormatterError):
    """Exception raised when a configuration value is out of range.

    Attributes:
        message: Error message describing the problem.
        field_name: Name of the offending configuration field.
        value: The rejected value.
    """

    def __init__(
        self, message: str, field_name: str, value: Optional[Any] = None
    ) -> None:
        """Initialize a ConfigurationError.

        Args:
            message: Error message describing the problem.
            field_name: Name of the offending configuration field.
            value: Optional rejected value, kept for error reporting.
        """
        super().__init__(message)
        self.field_name = field_name
        self.value = value
