"""
Cursor over a token sequence.

This module defines the Cursor class, a bidirectional view over the tokens
produced by the tokenizer. The formatter walks the main cursor once and
uses forks for lookahead and lookbehind.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import accumulate
from typing import Optional

from sql_formatter.models.token import Token, TokenType


class Cursor:
    """Position-tracking view over an immutable token sequence.

    The cursor starts before the first token. ``next`` and ``previous`` move
    it one token at a time, optionally skipping tokens of one type; stepping
    past either end returns None instead of raising.

    Forks share the token tuple with their parent and start at the parent's
    position. Moving a fork never moves the parent.

    Attributes:
        position: Index of the current token, -1 before the first one.

    Example:
        >>> cursor = Tokenizer().tokenize("SELECT 1")
        >>> cursor.next().value
        'SELECT'
        >>> cursor.fork().next(TokenType.WHITESPACE).value
        '1'
        >>> cursor.next().value
        ' '
    """

    def __init__(
        self,
        tokens: Sequence[Token],
        _offsets: Optional[tuple[int, ...]] = None,
    ) -> None:
        """Initialize a Cursor positioned before the first token.

        Args:
            tokens: Tokens to traverse, in input order.
        """
        self._tokens: tuple[Token, ...] = tuple(tokens)
        if _offsets is None:
            _offsets = tuple(
                accumulate((len(token.value) for token in self._tokens), initial=0)
            )
        self._offsets = _offsets
        self.position = -1

    @property
    def tokens(self) -> tuple[Token, ...]:
        """All tokens, independent of the current position."""
        return self._tokens

    def current(self) -> Optional[Token]:
        """Return the token at the current position, if any."""
        if 0 <= self.position < len(self._tokens):
            return self._tokens[self.position]
        return None

    def next(self, skip_type: Optional[TokenType] = None) -> Optional[Token]:
        """Advance to the next token.

        Args:
            skip_type: Optional token type to step over.

        Returns:
            The next token not of ``skip_type``, or None at the end.
        """
        while self.position < len(self._tokens):
            self.position += 1
            token = self.current()
            if token is None:
                return None
            if skip_type is not None and token.type is skip_type:
                continue
            return token
        return None

    def previous(self, skip_type: Optional[TokenType] = None) -> Optional[Token]:
        """Step back to the previous token.

        Args:
            skip_type: Optional token type to step over.

        Returns:
            The previous token not of ``skip_type``, or None at the start.
        """
        while self.position >= 0:
            self.position -= 1
            token = self.current()
            if token is None:
                return None
            if skip_type is not None and token.type is skip_type:
                continue
            return token
        return None

    def fork(self) -> Cursor:
        """Create an independent cursor at the current position."""
        cursor = Cursor(self._tokens, self._offsets)
        cursor.position = self.position
        return cursor

    def offset(self) -> int:
        """Character offset of the current token in the original input."""
        index = min(max(self.position, 0), len(self._tokens))
        return self._offsets[index]

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)
