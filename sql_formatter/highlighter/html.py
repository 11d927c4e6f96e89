"""
HTML highlighter.

This module defines the HtmlHighlighter class, which escapes every token
for HTML and wraps it in a ``<span>`` carrying configurable attributes.
"""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Optional, Union

from sql_formatter.highlighter.base import (
    Highlighter,
    HighlightKey,
    highlight_key,
    is_parenthesis,
)
from sql_formatter.models.token import TokenType

DEFAULT_HTML_ATTRIBUTES: dict[HighlightKey, str] = {
    HighlightKey.QUOTE: 'style="color: blue;"',
    HighlightKey.BACKTICK_QUOTE: 'style="color: purple;"',
    HighlightKey.RESERVED: 'style="font-weight:bold;"',
    HighlightKey.BOUNDARY: "",
    HighlightKey.NUMBER: 'style="color: green;"',
    HighlightKey.WORD: 'style="color: #333;"',
    HighlightKey.ERROR: 'style="background-color: red;"',
    HighlightKey.COMMENT: 'style="color: #aaa;"',
    HighlightKey.VARIABLE: 'style="color: orange;"',
    HighlightKey.PRE: 'style="color: black; background-color: white;"',
}


def escape_html(value: str) -> str:
    """Escape ``&``, ``<``, ``>`` and double quotes; single quotes are kept."""
    return html.escape(value, quote=False).replace('"', "&quot;")


class HtmlHighlighter(Highlighter):
    """Highlighter producing HTML markup.

    Attributes:
        html_attributes: Attribute string per presentation class. A class
            with an empty attribute string is not wrapped in a span.
        use_pre: Whether ``output`` encloses the result in a ``<pre>`` tag.

    Example:
        >>> highlighter = HtmlHighlighter(use_pre=False)
        >>> SqlFormatter(highlighter).highlight("test")
        '<span style="color: #333;">test</span>'
        >>> HtmlHighlighter({"word": 'class="word"'}).highlight_token(
        ...     TokenType.WORD, "a<b"
        ... )
        '<span class="word">a&lt;b</span>'
    """

    def __init__(
        self,
        html_attributes: Optional[Mapping[Union[HighlightKey, str], str]] = None,
        use_pre: bool = True,
    ) -> None:
        """Initialize an HtmlHighlighter.

        Args:
            html_attributes: Optional overrides for DEFAULT_HTML_ATTRIBUTES,
                keyed by HighlightKey or its string value.
            use_pre: Whether to wrap the output in ``<pre>``.
        """
        self.html_attributes = dict(DEFAULT_HTML_ATTRIBUTES)
        for key, attributes in (html_attributes or {}).items():
            self.html_attributes[HighlightKey(key)] = attributes
        self.use_pre = use_pre

    def attributes(self, token_type: TokenType) -> Optional[str]:
        """Return the attribute string for a token type, if it has one."""
        key = highlight_key(token_type)
        if key is None:
            return None
        return self.html_attributes.get(key) or None

    def highlight_token(self, token_type: TokenType, value: str) -> str:
        value = escape_html(value)

        if is_parenthesis(token_type, value):
            return value

        attributes = self.attributes(token_type)
        if attributes is None:
            return value

        return f"<span {attributes}>{value}</span>"

    def highlight_error(self, value: str) -> str:
        return "\n<span {}>{}</span>".format(
            self.html_attributes[HighlightKey.ERROR], escape_html(value)
        )

    def highlight_error_message(self, value: str) -> str:
        return self.highlight_error(value)

    def output(self, text: str) -> str:
        text = text.strip()
        if not self.use_pre:
            return text

        return f"<pre {self.html_attributes[HighlightKey.PRE]}>{text}</pre>"
