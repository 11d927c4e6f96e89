"""
SQL formatter.

This module defines the SqlFormatter class, which re-renders tokenized SQL
as indented text, as highlighted text, as a compressed single line, with
comments removed, or split into statements.

Formatting is a single pass over the non-whitespace tokens. The layout is
inferred from token types and local context only (parenthesis nesting,
clause keywords, commas, comments); nothing is parsed, so unbalanced or
otherwise malformed input is formatted on a best-effort basis and its
problems are annotated in the output.
"""

from __future__ import annotations

import re
from typing import Optional

from sql_formatter.formatter.indent import IndentScope, IndentStack
from sql_formatter.formatter.output import OutputBuffer
from sql_formatter.highlighter.base import Highlighter
from sql_formatter.highlighter.null import NullHighlighter
from sql_formatter.models.config import FormatterConfig
from sql_formatter.models.result import FormatResult
from sql_formatter.models.token import Token, TokenType
from sql_formatter.tokenizer.cursor import Cursor
from sql_formatter.tokenizer.tokenizer import Tokenizer
from sql_formatter.utils.warnings import WarningCollector

UNCLOSED_MESSAGE = "WARNING: unclosed parentheses or section"

WHITESPACE_RUN = re.compile(r"\s+")

# Words after BEGIN that make it a transaction statement, not a block
TRANSACTION_WORDS = frozenset({"TRAN", "TRANSACTION", "WORK"})

# Keywords that start a new line directly inside a CASE block
CASE_BRANCH_WORDS = frozenset({"WHEN", "ELSE"})

# Left-hand tokens after which "-" is a subtraction, not a sign
OPERAND_TYPES = (
    TokenType.QUOTE,
    TokenType.BACKTICK_QUOTE,
    TokenType.WORD,
    TokenType.NUMBER,
)


def _require_sql(sql: object) -> None:
    if not isinstance(sql, str):
        raise TypeError(f"sql must be a string, not {type(sql).__name__}")


def _collapse_whitespace(token: Token) -> Token:
    """Normalize the whitespace inside a multi-word keyword."""
    if not WHITESPACE_RUN.search(token.value):
        return token
    return token.with_value(WHITESPACE_RUN.sub(" ", token.value))


class SqlFormatter:
    """Formats, highlights and compresses SQL text.

    A SqlFormatter only holds its collaborators, all of which are immutable
    after construction, so one instance can be shared freely.

    Attributes:
        highlighter: Decorates each emitted token. Defaults to a
            NullHighlighter (plain text).
        tokenizer: Splits SQL into tokens.
        config: Layout settings.

    Example:
        >>> formatter = SqlFormatter()
        >>> print(formatter.format("SELECT a, b FROM t WHERE a = 1"))
        SELECT
          a,
          b
        FROM
          t
        WHERE
          a = 1
        >>> formatter.compress("SELECT  a,\\n  b -- note\\nFROM t")
        'SELECT a, b FROM t'
    """

    def __init__(
        self,
        highlighter: Optional[Highlighter] = None,
        tokenizer: Optional[Tokenizer] = None,
        config: Optional[FormatterConfig] = None,
    ) -> None:
        """Initialize a SqlFormatter.

        Args:
            highlighter: Optional highlighter; plain text when omitted.
            tokenizer: Optional tokenizer to reuse its compiled matchers.
            config: Optional layout settings; defaults are used when omitted.
        """
        self.highlighter = highlighter if highlighter is not None else NullHighlighter()
        self.tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self.config = config if config is not None else FormatterConfig()

    def format(self, sql: str, indent: Optional[str] = None) -> str:
        """Re-indent a SQL string.

        Args:
            sql: SQL text, possibly malformed.
            indent: Indent unit; ``config.indent`` when omitted.

        Returns:
            Formatted SQL, decorated by the highlighter. Unbalanced
            parentheses are annotated in the text.
        """
        return self.format_result(sql, indent).output

    def format_result(self, sql: str, indent: Optional[str] = None) -> FormatResult:
        """Re-indent a SQL string and report the problems found on the way.

        Args:
            sql: SQL text, possibly malformed.
            indent: Indent unit; ``config.indent`` when omitted.

        Returns:
            FormatResult holding the same text ``format`` returns and the
            collected warnings.
        """
        _require_sql(sql)
        indent_unit = self.config.indent if indent is None else indent
        collector = WarningCollector()
        cursor = self.tokenizer.tokenize(sql)
        text = self._format_tokens(cursor, indent_unit, collector).strip()
        return FormatResult(
            output=self.highlighter.output(text),
            sql=sql,
            warnings=collector.get_all(),
        )

    def _format_tokens(
        self, cursor: Cursor, indent: str, collector: WarningCollector
    ) -> str:
        highlighter = self.highlighter
        config = self.config
        out = OutputBuffer(indent)
        stack = IndentStack()

        newline = False
        added_newline = False
        increase_special_indent = False
        pending_block: Optional[IndentScope] = None
        inline_parentheses = False
        inline_indented = False
        inline_count = 0
        clause_limit = False

        while True:
            token = cursor.next(TokenType.WHITESPACE)
            if token is None:
                break

            if token.type is TokenType.ERROR:
                collector.add_tokenizer_error(cursor.offset(), token.value)
            if token.is_of_type(
                TokenType.RESERVED_TOPLEVEL, TokenType.RESERVED_NEWLINE
            ):
                token = _collapse_whitespace(token)

            value = token.value
            upper = value.upper()
            highlighted = highlighter.highlight_token(token.type, value)

            if increase_special_indent:
                stack.push(IndentScope.special())
                increase_special_indent = False
            if pending_block is not None:
                stack.push(pending_block)
                pending_block = None

            if newline:
                out.newline(stack.depth)
                newline = False
                added_newline = True
            else:
                added_newline = False

            # Comments stay where they were written
            if token.is_comment():
                if token.type is TokenType.BLOCK_COMMENT:
                    if not added_newline:
                        out.newline(stack.depth)
                    highlighted = highlighted.replace("\n", "\n" + indent * stack.depth)
                out.append(highlighted)
                newline = True
                continue

            if inline_parentheses:
                if value == ")":
                    out.rstrip(" ")
                    if inline_indented:
                        stack.pop()
                        out.newline(stack.depth)
                    inline_parentheses = False
                    out.append(highlighted + " ")
                    continue

                if value == "," and inline_count >= config.inline_max_length:
                    inline_count = 0
                    newline = True

                inline_count += len(value)

            if value == "(":
                length = self._inline_group_length(cursor)
                if length is not None:
                    inline_parentheses = True
                    inline_count = 0
                    inline_indented = False
                    if length > config.inline_max_length:
                        pending_block = IndentScope.parenthesis()
                        inline_indented = True
                        newline = True
                else:
                    pending_block = IndentScope.parenthesis()
                    newline = True

                if not self._follows_whitespace(cursor):
                    out.rstrip(" ")

            elif value == ")":
                out.rstrip(" ")
                if not stack.close_parenthesis():
                    collector.add_unmatched_close(cursor.offset())
                    error = highlighter.highlight_error(value)
                    # The error brings its own line break
                    if error.startswith("\n"):
                        out.discard_empty_line()
                    out.append(error + " ")
                    continue
                self._break_before(out, stack.depth, added_newline)

            elif value == ";":
                stack.pop_specials()
                clause_limit = False
                newline = True

            elif self._opens_keyword_block(token, cursor):
                pending_block = IndentScope.keyword_block(
                    upper, config.block_keywords[upper]
                )
                newline = True

            elif token.is_reserved() and stack.can_close_keyword_block(upper):
                out.rstrip(" ")
                stack.close_keyword_block(upper)
                self._break_before(out, stack.depth, added_newline)

            elif token.type is TokenType.RESERVED_TOPLEVEL:
                # Sibling clauses share one indentation level
                increase_special_indent = True
                stack.collapse_special()
                newline = True
                self._break_before(out, stack.depth, added_newline)

                clause_limit = upper == "LIMIT" and not inline_parentheses

            elif clause_limit and value != "," and token.type is not TokenType.NUMBER:
                clause_limit = False

            elif value == "," and not inline_parentheses:
                if clause_limit:
                    # "LIMIT 5, 10" stays on one line
                    clause_limit = False
                else:
                    newline = True

            elif token.type is TokenType.RESERVED_NEWLINE:
                if not added_newline:
                    out.newline(stack.depth)

            elif upper in CASE_BRANCH_WORDS and token.is_reserved():
                top = stack.peek()
                if top is not None and top.opener == "CASE" and not added_newline:
                    out.newline(stack.depth)

            elif token.type is TokenType.BOUNDARY:
                # "> =" stays apart only if the source had a space there
                previous = cursor.fork().previous(TokenType.WHITESPACE)
                if (
                    previous is not None
                    and previous.type is TokenType.BOUNDARY
                    and not self._follows_whitespace(cursor)
                ):
                    out.rstrip(" ")

            if value in (".", ",", ";"):
                out.rstrip(" ")

            out.append(highlighted + " ")

            if value in ("(", "."):
                out.rstrip(" ")

            if value == "-" and self._is_sign(cursor):
                out.rstrip(" ")

        # A "(" at the very end still counts as open
        if pending_block is not None:
            stack.push(pending_block)

        open_blocks = stack.open_blocks()
        if open_blocks:
            collector.add_unclosed_scopes(open_blocks)
            out.rstrip(" ")
            out.append(highlighter.highlight_error_message(UNCLOSED_MESSAGE))

        return out.getvalue()

    def _inline_group_length(self, cursor: Cursor) -> Optional[int]:
        """Measure the group opened by the ``(`` under the cursor.

        Short, simple groups such as ``COUNT(*)``, ``int(10)`` or
        ``DECIMAL(7,2)`` are rendered on one line.

        Returns:
            Combined length of the tokens up to the matching ``)``, or None
            if the group cannot be inlined: the ``)`` is not found within
            the lookahead limit, or a ``;``, a nested ``(``, a clause or
            newline keyword, a block keyword or a comment comes first.
        """
        lookahead = cursor.fork()
        length = 0
        for _ in range(self.config.inline_lookahead_limit):
            token = lookahead.next(TokenType.WHITESPACE)
            if token is None:
                return None
            if token.value == ")":
                return length
            if token.value in (";", "("):
                return None
            if token.is_of_type(
                TokenType.RESERVED_TOPLEVEL,
                TokenType.RESERVED_NEWLINE,
                TokenType.COMMENT,
                TokenType.BLOCK_COMMENT,
            ):
                return None
            block_keywords = self.config.block_keywords
            if token.is_reserved() and token.value.upper() in block_keywords:
                return None
            length += len(token.value)
        return None

    def _opens_keyword_block(self, token: Token, cursor: Cursor) -> bool:
        """Check if ``token`` opens a keyword block such as ``CASE ... END``.

        ``BEGIN`` followed by ``;``, the end of the input or a transaction
        word is a statement of its own and opens nothing.
        """
        if not token.is_reserved():
            return False
        if token.value.upper() not in self.config.block_keywords:
            return False

        following = cursor.fork().next(TokenType.WHITESPACE)
        if following is None or following.value == ";":
            return False
        if token.value.upper() == "BEGIN":
            return following.value.upper() not in TRANSACTION_WORDS
        return True

    @staticmethod
    def _follows_whitespace(cursor: Cursor) -> bool:
        """Check if the source had whitespace right before the current token."""
        previous = cursor.fork().previous()
        return previous is None or previous.is_whitespace()

    @staticmethod
    def _is_sign(cursor: Cursor) -> bool:
        """Check if the ``-`` under the cursor is the sign of a number."""
        following = cursor.fork().next(TokenType.WHITESPACE)
        if following is None or following.type is not TokenType.NUMBER:
            return False

        previous = cursor.fork().previous(TokenType.WHITESPACE)
        if previous is None:
            return False
        return not previous.is_of_type(*OPERAND_TYPES)

    @staticmethod
    def _break_before(out: OutputBuffer, depth: int, added_newline: bool) -> None:
        if added_newline:
            out.reindent(depth)
        else:
            out.newline(depth)

    def highlight(self, sql: str) -> str:
        """Highlight a SQL string without changing its layout.

        Every token, whitespace included, is rendered by the highlighter in
        input order, so with a NullHighlighter the input comes back
        unchanged.

        Args:
            sql: SQL text.

        Returns:
            Highlighted SQL, finalized by the highlighter's ``output``.
        """
        _require_sql(sql)
        cursor = self.tokenizer.tokenize(sql)
        return self.highlighter.output(
            "".join(
                self.highlighter.highlight_token(token.type, token.value)
                for token in cursor
            )
        )

    def compress(self, sql: str) -> str:
        """Collapse a SQL string onto one line.

        Comments are dropped, every whitespace run becomes a single space
        and the whitespace inside multi-word keywords is normalized. A
        removed comment counts as whitespace, so the tokens around it stay
        apart. No highlighting is applied.

        Args:
            sql: SQL text.

        Returns:
            Single-line SQL without leading or trailing whitespace.
        """
        _require_sql(sql)
        parts: list[str] = []
        whitespace = True

        for token in self.tokenizer.tokenize(sql):
            if token.is_whitespace() or token.is_comment():
                if not whitespace:
                    parts.append(" ")
                    whitespace = True
                continue

            if token.is_reserved():
                token = _collapse_whitespace(token)

            parts.append(token.value)
            whitespace = False

        return "".join(parts).rstrip()

    def remove_comments(self, sql: str) -> str:
        """Strip all comments from a SQL string and format the rest.

        Args:
            sql: SQL text.

        Returns:
            Formatted plain-text SQL without comments.
        """
        _require_sql(sql)
        stripped = "".join(
            " " if token.is_comment() else token.value
            for token in self.tokenizer.tokenize(sql)
        )
        plain = SqlFormatter(NullHighlighter(), self.tokenizer, self.config)
        return plain.format(stripped)

    def split_query(self, sql: str) -> list[str]:
        """Split a SQL script into statements on ``;``.

        Semicolons inside strings, quoted identifiers and comments do not
        split. Statements consisting only of whitespace and comments are
        dropped.

        Args:
            sql: SQL script.

        Returns:
            Statements in order, stripped, each keeping its terminating
            ``;`` (the last one only if the script had it).
        """
        _require_sql(sql)
        queries: list[str] = []
        current: list[str] = []
        empty = True

        for token in self.tokenizer.tokenize(sql):
            if token.type is TokenType.BOUNDARY and token.value == ";":
                if not empty:
                    queries.append("".join(current).strip() + ";")
                current = []
                empty = True
                continue

            if not (token.is_whitespace() or token.is_comment()):
                empty = False
            current.append(token.value)

        if not empty:
            queries.append("".join(current).strip())

        return queries
