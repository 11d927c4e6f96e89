"""
SQL Formatter v1.0

Tokenizes SQL and re-renders it as indented text, highlighted text, a
compressed single line, or with comments removed. SQL is never parsed or
validated: malformed input is formatted on a best-effort basis.

Example:
    >>> from sql_formatter import SqlFormatter, HtmlHighlighter
    >>> formatter = SqlFormatter()
    >>> print(formatter.format("SELECT * FROM t WHERE id = 1"))
    SELECT
      *
    FROM
      t
    WHERE
      id = 1
    >>> SqlFormatter(HtmlHighlighter()).highlight("SELECT 1")
    '<pre ...><span style="font-weight:bold;">SELECT</span> <span style="color: green;">1</span></pre>'
"""

from sql_formatter.version import __version__, __version_info__

__author__ = "SQL Formatter Contributors"

from sql_formatter.api import (
    compress,
    format_result,
    format_sql,
    highlight,
    remove_comments,
    split_query,
    tokenize,
)
from sql_formatter.exceptions import ConfigurationError, SqlFormatterError
from sql_formatter.formatter.sql_formatter import SqlFormatter
from sql_formatter.highlighter.base import Highlighter, HighlightKey
from sql_formatter.highlighter.cli import CliHighlighter
from sql_formatter.highlighter.html import HtmlHighlighter
from sql_formatter.highlighter.null import NullHighlighter
from sql_formatter.models.config import FormatterConfig
from sql_formatter.models.result import FormatResult
from sql_formatter.models.token import Token, TokenType
from sql_formatter.tokenizer.cursor import Cursor
from sql_formatter.tokenizer.tokenizer import Tokenizer
from sql_formatter.utils.warnings import FormatWarning, WarningCollector

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Core
    "SqlFormatter",
    "Tokenizer",
    "Cursor",
    # Convenience functions
    "tokenize",
    "format_sql",
    "format_result",
    "highlight",
    "compress",
    "remove_comments",
    "split_query",
    # Configuration
    "FormatterConfig",
    # Results
    "FormatResult",
    "FormatWarning",
    "WarningCollector",
    # Data models
    "Token",
    "TokenType",
    # Highlighters
    "Highlighter",
    "HighlightKey",
    "NullHighlighter",
    "CliHighlighter",
    "HtmlHighlighter",
    # Exceptions
    "SqlFormatterError",
    "ConfigurationError",
]
