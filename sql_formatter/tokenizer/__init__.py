"""
SQL tokenizer package.

This package contains the Tokenizer, which turns SQL text into tokens, the
Cursor used to walk the resulting token sequence, and the keyword tables
both rely on.
"""

from sql_formatter.tokenizer.cursor import Cursor
from sql_formatter.tokenizer.tokenizer import Tokenizer

__all__ = [
    "Cursor",
    "Tokenizer",
]
