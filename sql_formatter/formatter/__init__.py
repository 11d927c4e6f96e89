"""
Formatter package.

This package contains SqlFormatter and the indentation machinery it uses.
"""

from sql_formatter.formatter.indent import IndentScope, IndentStack, ScopeKind
from sql_formatter.formatter.sql_formatter import UNCLOSED_MESSAGE, SqlFormatter

__all__ = [
    "IndentScope",
    "IndentStack",
    "ScopeKind",
    "SqlFormatter",
    "UNCLOSED_MESSAGE",
]
