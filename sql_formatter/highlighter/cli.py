"""
Terminal highlighter.

This module defines the CliHighlighter class, which decorates tokens with
ANSI escape sequences built from colorama's color constants.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional, Union

from colorama import Fore, Style
from colorama.ansi import code_to_chars

from sql_formatter.highlighter.base import (
    Highlighter,
    HighlightKey,
    highlight_key,
    is_parenthesis,
)
from sql_formatter.models.token import TokenType

REVERSE_VIDEO = code_to_chars(7)

DEFAULT_CLI_STYLES: dict[HighlightKey, str] = {
    HighlightKey.WORD: "",
    HighlightKey.QUOTE: Fore.BLUE + Style.BRIGHT,
    HighlightKey.BACKTICK_QUOTE: Fore.MAGENTA + Style.BRIGHT,
    HighlightKey.RESERVED: Fore.WHITE,
    HighlightKey.BOUNDARY: "",
    HighlightKey.NUMBER: Fore.GREEN + Style.BRIGHT,
    HighlightKey.ERROR: Fore.RED + Style.BRIGHT + REVERSE_VIDEO,
    HighlightKey.COMMENT: Fore.BLACK + Style.BRIGHT,
    HighlightKey.VARIABLE: Fore.CYAN + Style.BRIGHT,
}


class CliHighlighter(Highlighter):
    """Highlighter for ANSI-capable terminals.

    Every decorated token is followed by a reset sequence. Parentheses and
    token classes with an empty style are emitted undecorated.

    Attributes:
        styles: Escape sequence prefix per presentation class.

    Example:
        >>> highlighter = CliHighlighter()
        >>> highlighter.highlight_token(TokenType.NUMBER, "42")
        '\\x1b[32m\\x1b[1m42\\x1b[0m'
        >>> highlighter.highlight_token(TokenType.WORD, "name")
        'name'
    """

    def __init__(
        self, styles: Optional[Mapping[Union[HighlightKey, str], str]] = None
    ) -> None:
        """Initialize a CliHighlighter.

        Args:
            styles: Optional overrides for DEFAULT_CLI_STYLES, keyed by
                HighlightKey or its string value.
        """
        self.styles = dict(DEFAULT_CLI_STYLES)
        for key, style in (styles or {}).items():
            self.styles[HighlightKey(key)] = style

    def highlight_token(self, token_type: TokenType, value: str) -> str:
        if is_parenthesis(token_type, value):
            return value

        key = highlight_key(token_type)
        prefix = self.styles.get(key, "") if key is not None else ""
        if not prefix:
            return value

        return prefix + value + Style.RESET_ALL

    def highlight_error(self, value: str) -> str:
        return "\n" + self.styles[HighlightKey.ERROR] + value + Style.RESET_ALL

    def highlight_error_message(self, value: str) -> str:
        return self.highlight_error(value)

    def output(self, text: str) -> str:
        return text + "\n"
