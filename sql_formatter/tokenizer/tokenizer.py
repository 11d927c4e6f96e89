"""
SQL tokenizer.

This module defines the Tokenizer class, which splits a SQL string into a
lossless sequence of typed tokens. It does not parse SQL: it only classifies
substrings (whitespace, comments, quoted strings, variables, numbers,
punctuation, keywords, function names and barewords) using longest-match
regular expressions.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Optional

from sql_formatter.models.token import Token, TokenType
from sql_formatter.tokenizer.cursor import Cursor
from sql_formatter.tokenizer.keywords import (
    BOUNDARIES,
    FUNCTIONS,
    RESERVED,
    RESERVED_NEWLINE,
    RESERVED_TOPLEVEL,
)

QUOTE_CHARACTERS = "\"'`"


def _sort_longest_first(words: Iterable[str]) -> list[str]:
    return sorted(words, key=len, reverse=True)


def _alternation(words: Iterable[str]) -> str:
    """Build a regex alternation, letting spaces match any whitespace run."""
    escaped = (re.escape(word).replace(r"\ ", r"\s+") for word in words)
    return "(?:" + "|".join(escaped) + ")"


class Tokenizer:
    """Longest-match SQL tokenizer.

    All regular expressions are compiled once in the constructor and are
    never modified afterwards, so one Tokenizer can be shared between
    formatters and threads.

    Scanning order at each position:
        1. whitespace
        2. line and block comments
        3. quoted strings and quoted identifiers
        4. user variables (``@name``, ``:name``, ``@"quoted"``)
        5. numbers followed by a separator
        6. boundary punctuation
        7. keywords, unless the previous token was ``.``
        8. builtin functions directly followed by ``(``
        9. barewords

    Unterminated strings and comments run to the end of the input. If no
    rule consumes anything, the rest of the input becomes one ERROR token.

    Example:
        >>> tokens = Tokenizer().tokenize("select a.from").tokens
        >>> [(t.type.name, t.value) for t in tokens]
        [('RESERVED_TOPLEVEL', 'select'), ('WHITESPACE', ' '), ('WORD', 'a'), ('BOUNDARY', '.'), ('WORD', 'from')]
    """

    def __init__(self) -> None:
        """Compile the matchers from the keyword tables."""
        boundaries = "(?:" + "|".join(re.escape(b) for b in BOUNDARIES) + ")"
        separator = rf"(?=\Z|\s|{boundaries})"
        boundary_chars = "".join(
            re.escape(b) for b in sorted({c for b in BOUNDARIES for c in b})
        )

        self._whitespace = re.compile(r"\s+")
        self._boundary = re.compile(boundaries)
        self._number = re.compile(
            r"(?:[0-9]+(?:\.[0-9]+)?|0x[0-9a-fA-F]+|0b[01]+)"
            rf"(?=\Z|\s|[{QUOTE_CHARACTERS}]|{boundaries})"
        )
        self._quoted = re.compile(
            r"(?:`[^`]*(?:`|\Z))+"
            r"|\[[^\]]*(?:\]|\Z)(?:\][^\]]*(?:\]|\Z))*"
            r'|(?:"[^"\\]*(?:\\(?:.|\Z)[^"\\]*)*(?:"|\Z))+'
            r"|(?:'[^'\\]*(?:\\(?:.|\Z)[^'\\]*)*(?:'|\Z))+",
            re.DOTALL,
        )
        self._variable_name = re.compile(r"[@:][a-zA-Z0-9._$]+")
        self._reserved_toplevel = re.compile(
            _alternation(_sort_longest_first(RESERVED_TOPLEVEL)) + separator,
            re.IGNORECASE,
        )
        self._reserved_newline = re.compile(
            _alternation(_sort_longest_first(RESERVED_NEWLINE)) + separator,
            re.IGNORECASE,
        )
        self._reserved = re.compile(
            _alternation(_sort_longest_first(RESERVED)) + separator,
            re.IGNORECASE,
        )
        self._function = re.compile(
            _alternation(_sort_longest_first(FUNCTIONS)) + r"(?=\()",
            re.IGNORECASE,
        )
        self._word = re.compile(rf"[^\s{QUOTE_CHARACTERS}{boundary_chars}]*")

    def tokenize(self, sql: str) -> Cursor:
        """Split a SQL string into tokens.

        Args:
            sql: SQL text. Any string is accepted, including malformed SQL.

        Returns:
            A Cursor over the tokens, positioned before the first one.

        Raises:
            TypeError: If ``sql`` is not a string.
        """
        if not isinstance(sql, str):
            raise TypeError(f"sql must be a string, not {type(sql).__name__}")

        tokens: list[Token] = []
        previous: Optional[Token] = None
        position = 0
        length = len(sql)

        while position < length:
            token = self._next_token(sql, position, previous)

            # The input must shrink on every step
            if not token.value:
                tokens.append(Token(TokenType.ERROR, sql[position:]))
                break

            tokens.append(token)
            position += len(token.value)
            if not token.is_whitespace():
                previous = token

        return Cursor(tokens)

    def _next_token(
        self, sql: str, position: int, previous: Optional[Token]
    ) -> Token:
        """Classify the token starting at ``position``.

        Args:
            sql: Complete SQL string.
            position: Offset of the first unconsumed character.
            previous: Last non-whitespace token, if any.

        Returns:
            The next token. An empty value means no rule matched.
        """
        match = self._whitespace.match(sql, position)
        if match:
            return Token(TokenType.WHITESPACE, match.group())

        comment = self._comment(sql, position)
        if comment is not None:
            return comment

        char = sql[position]
        if char in "\"'`[":
            token_type = (
                TokenType.BACKTICK_QUOTE if char in "`[" else TokenType.QUOTE
            )
            return Token(token_type, self._quoted_string(sql, position))

        if char in "@:" and position + 1 < len(sql):
            variable = self._variable(sql, position)
            if variable is not None:
                return Token(TokenType.VARIABLE, variable)

        match = self._number.match(sql, position)
        if match:
            return Token(TokenType.NUMBER, match.group())

        match = self._boundary.match(sql, position)
        if match:
            return Token(TokenType.BOUNDARY, match.group())

        # In "mytable.from", "from" is a column name, not a keyword
        if previous is None or previous.value != ".":
            for pattern, token_type in (
                (self._reserved_toplevel, TokenType.RESERVED_TOPLEVEL),
                (self._reserved_newline, TokenType.RESERVED_NEWLINE),
                (self._reserved, TokenType.RESERVED),
            ):
                match = pattern.match(sql, position)
                if match:
                    return Token(token_type, match.group())

        # "count(" is a function, "count" alone is just a word
        match = self._function.match(sql, position)
        if match:
            return Token(TokenType.RESERVED, match.group())

        match = self._word.match(sql, position)
        return Token(TokenType.WORD, match.group() if match else "")

    def _comment(self, sql: str, position: int) -> Optional[Token]:
        if sql.startswith(("#", "--"), position):
            end = sql.find("\n", position)
            token_type = TokenType.COMMENT
        elif sql.startswith("/*", position):
            end = sql.find("*/", position + 2)
            if end != -1:
                end += 2
            token_type = TokenType.BLOCK_COMMENT
        else:
            return None

        if end == -1:
            end = len(sql)
        return Token(token_type, sql[position:end])

    def _quoted_string(self, sql: str, position: int) -> str:
        """Return the quoted string starting at ``position``.

        Handles backtick identifiers (```` `` ```` escapes), bracket
        identifiers (``]]`` escapes) and single or double quoted strings
        (backslash or doubled-quote escapes). An unterminated string runs
        to the end of the input.
        """
        match = self._quoted.match(sql, position)
        return match.group() if match else ""

    def _variable(self, sql: str, position: int) -> Optional[str]:
        if sql[position + 1] in "\"'`":
            quoted = self._quoted_string(sql, position + 1)
            return sql[position] + quoted if quoted else None

        match = self._variable_name.match(sql, position)
        return match.group() if match else None
