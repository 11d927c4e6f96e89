"""
Abstract highlighter interface.

This module defines the Highlighter abstract base class. The formatter asks
a highlighter to decorate every token it emits and to render its error
annotations; the highlighter decides what the decoration looks like
(nothing, terminal escape sequences, HTML, ...).
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from sql_formatter.models.token import TokenType


class HighlightKey(str, Enum):
    """Presentation classes shared by the concrete highlighters.

    Several token types share one presentation class: the three keyword
    types are all rendered as RESERVED, both comment types as COMMENT.
    PRE is the wrapper around the whole output.
    """

    QUOTE = "quote"
    BACKTICK_QUOTE = "backtick_quote"
    RESERVED = "reserved"
    BOUNDARY = "boundary"
    NUMBER = "number"
    WORD = "word"
    ERROR = "error"
    COMMENT = "comment"
    VARIABLE = "variable"
    PRE = "pre"


TOKEN_TYPE_TO_HIGHLIGHT: dict[TokenType, HighlightKey] = {
    TokenType.BOUNDARY: HighlightKey.BOUNDARY,
    TokenType.WORD: HighlightKey.WORD,
    TokenType.BACKTICK_QUOTE: HighlightKey.BACKTICK_QUOTE,
    TokenType.QUOTE: HighlightKey.QUOTE,
    TokenType.RESERVED: HighlightKey.RESERVED,
    TokenType.RESERVED_TOPLEVEL: HighlightKey.RESERVED,
    TokenType.RESERVED_NEWLINE: HighlightKey.RESERVED,
    TokenType.NUMBER: HighlightKey.NUMBER,
    TokenType.VARIABLE: HighlightKey.VARIABLE,
    TokenType.COMMENT: HighlightKey.COMMENT,
    TokenType.BLOCK_COMMENT: HighlightKey.COMMENT,
}


def highlight_key(token_type: TokenType) -> Optional[HighlightKey]:
    """Return the presentation class of a token type.

    Args:
        token_type: Type of the token being rendered.

    Returns:
        The matching HighlightKey, or None for types that are never
        decorated (whitespace and tokenizer errors).
    """
    return TOKEN_TYPE_TO_HIGHLIGHT.get(token_type)


def is_parenthesis(token_type: TokenType, value: str) -> bool:
    return token_type is TokenType.BOUNDARY and value in ("(", ")")


class Highlighter(ABC):
    """Abstract interface for token highlighters.

    Highlighter defines the contract every presentation adapter must
    implement. The formatter depends only on this interface and receives a
    concrete highlighter at construction time.

    Example:
        >>> class UpperHighlighter(Highlighter):
        ...     def highlight_token(self, token_type, value):
        ...         return value.upper()
        ...     def highlight_error(self, value):
        ...         return "!" + value
        ...     def highlight_error_message(self, value):
        ...         return " !" + value
        ...     def output(self, text):
        ...         return text
        >>> SqlFormatter(UpperHighlighter()).highlight("select 1")
        'SELECT 1'
    """

    @abstractmethod
    def highlight_token(self, token_type: TokenType, value: str) -> str:
        """Render one token.

        Args:
            token_type: Type of the token.
            value: Raw text of the token.

        Returns:
            Decorated text for the token.
        """

    @abstractmethod
    def highlight_error(self, value: str) -> str:
        """Render a token that is in error, such as an unmatched ``)``.

        Args:
            value: Raw text of the offending token.

        Returns:
            Decorated text, inserted in place of the token.
        """

    @abstractmethod
    def highlight_error_message(self, value: str) -> str:
        """Render a diagnostic message appended to the output.

        Args:
            value: Message text.

        Returns:
            Decorated message, including any separator it needs.
        """

    @abstractmethod
    def output(self, text: str) -> str:
        """Finalize the complete output.

        Args:
            text: Formatted or highlighted SQL.

        Returns:
            The text to hand back to the caller.
        """
