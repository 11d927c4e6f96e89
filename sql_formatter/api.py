"""
Module-level convenience functions.

These wrap a shared plain-text SqlFormatter for callers that do not need a
custom highlighter or configuration.

Example:
    >>> from sql_formatter import compress, format_sql
    >>> print(format_sql("select count(*) from t"))
    select
      count(*)
    from
      t
    >>> compress("SELECT 1 -- one")
    'SELECT 1'
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from sql_formatter.formatter.sql_formatter import SqlFormatter
from sql_formatter.models.result import FormatResult
from sql_formatter.models.token import Token


@lru_cache(maxsize=1)
def default_formatter() -> SqlFormatter:
    """Return the shared plain-text formatter, built on first use."""
    return SqlFormatter()


def tokenize(sql: str) -> list[Token]:
    """Split SQL into tokens; their values concatenate back to ``sql``."""
    return list(default_formatter().tokenizer.tokenize(sql).tokens)


def format_sql(sql: str, indent: Optional[str] = None) -> str:
    """Re-indent SQL as plain text.

    Args:
        sql: SQL text.
        indent: Optional indent unit, two spaces by default.

    Returns:
        Formatted SQL.
    """
    return default_formatter().format(sql, indent)


def format_result(sql: str, indent: Optional[str] = None) -> FormatResult:
    return default_formatter().format_result(sql, indent)


def highlight(sql: str) -> str:
    return default_formatter().highlight(sql)


def compress(sql: str) -> str:
    return default_formatter().compress(sql)


def remove_comments(sql: str) -> str:
    return default_formatter().remove_comments(sql)


def split_query(sql: str) -> list[str]:
    return default_formatter().split_query(sql)
