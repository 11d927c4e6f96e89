"""
Highlighters.

This package contains the Highlighter interface the formatter renders
through, and its three standard implementations: plain text, ANSI terminal
colors and HTML.
"""

from sql_formatter.highlighter.base import Highlighter, HighlightKey
from sql_formatter.highlighter.cli import CliHighlighter
from sql_formatter.highlighter.html import HtmlHighlighter
from sql_formatter.highlighter.null import NullHighlighter

__all__ = [
    "CliHighlighter",
    "Highlighter",
    "HighlightKey",
    "HtmlHighlighter",
    "NullHighlighter",
]
