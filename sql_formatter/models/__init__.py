"""
Data models for the SQL formatter.

This package contains the token value types, the formatter configuration
and the result of a format pass.
"""

from sql_formatter.models.config import FormatterConfig
from sql_formatter.models.result import FormatResult
from sql_formatter.models.token import Token, TokenType

__all__ = [
    "FormatResult",
    "FormatterConfig",
    "Token",
    "TokenType",
]
