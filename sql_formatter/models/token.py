"""
Token model.

This module defines the TokenType enum and the immutable Token value that
the tokenizer produces. Concatenating the values of all tokens produced for
a string gives back that string unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Lexical classes recognised by the tokenizer.

    Attributes:
        WHITESPACE: A run of whitespace characters.
        WORD: Any bareword that is not a keyword or builtin function.
        QUOTE: A single- or double-quoted string literal.
        BACKTICK_QUOTE: A backtick- or bracket-quoted identifier.
        RESERVED: A reserved word or builtin function name.
        RESERVED_TOPLEVEL: A clause keyword (SELECT, FROM, ORDER BY, ...)
            that is placed on its own line and indents what follows.
        RESERVED_NEWLINE: A keyword (AND, OR, the JOIN family, ...) that
            starts a new line without changing the indentation.
        BOUNDARY: Punctuation or an operator character.
        COMMENT: A line comment (``--`` or ``#``).
        BLOCK_COMMENT: A ``/* ... */`` comment.
        NUMBER: A decimal, hexadecimal or binary literal.
        ERROR: Input the tokenizer could not make progress on.
        VARIABLE: A user variable or bind parameter (``@name``, ``:name``).
    """

    WHITESPACE = "whitespace"
    WORD = "word"
    QUOTE = "quote"
    BACKTICK_QUOTE = "backtick_quote"
    RESERVED = "reserved"
    RESERVED_TOPLEVEL = "reserved_toplevel"
    RESERVED_NEWLINE = "reserved_newline"
    BOUNDARY = "boundary"
    COMMENT = "comment"
    BLOCK_COMMENT = "block_comment"
    NUMBER = "number"
    ERROR = "error"
    VARIABLE = "variable"

    def is_reserved(self) -> bool:
        """Check if this type is one of the three keyword types.

        Returns:
            True for RESERVED, RESERVED_TOPLEVEL and RESERVED_NEWLINE.
        """
        return self in (
            TokenType.RESERVED,
            TokenType.RESERVED_TOPLEVEL,
            TokenType.RESERVED_NEWLINE,
        )

    def is_comment(self) -> bool:
        """Check if this type is a line or block comment."""
        return self in (TokenType.COMMENT, TokenType.BLOCK_COMMENT)


@dataclass(frozen=True)
class Token:
    """A single lexical unit of SQL text.

    Tokens are immutable. Operations that need a different value, such as
    collapsing the whitespace inside ``GROUP   BY``, build a new Token with
    ``with_value`` and leave the original untouched.

    Attributes:
        type: Lexical class of the token.
        value: Raw text of the token, exactly as it appeared in the input.

    Example:
        >>> token = Token(TokenType.RESERVED_TOPLEVEL, "GROUP\\n  BY")
        >>> token.with_value("GROUP BY").value
        'GROUP BY'
        >>> token.value
        'GROUP\\n  BY'
    """

    type: TokenType
    value: str

    def __post_init__(self) -> None:
        """Validate field types."""
        if not isinstance(self.type, TokenType):
            raise TypeError("type must be a TokenType instance")
        if not isinstance(self.value, str):
            raise TypeError("value must be a string")

    def is_of_type(self, *types: TokenType) -> bool:
        """Check if the token has any of the given types.

        Args:
            *types: Token types to compare against.

        Returns:
            True if the token's type is one of ``types``.
        """
        return self.type in types

    def is_whitespace(self) -> bool:
        return self.type is TokenType.WHITESPACE

    def is_comment(self) -> bool:
        return self.type.is_comment()

    def is_reserved(self) -> bool:
        return self.type.is_reserved()

    def with_value(self, value: str) -> Token:
        """Return a copy of this token carrying a different value.

        Args:
            value: Replacement text.

        Returns:
            A new Token with the same type and the given value.
        """
        return Token(self.type, value)

    def __str__(self) -> str:
        return self.value
