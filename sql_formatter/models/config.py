"""
Configuration model for the formatter.

This module defines the FormatterConfig class, which holds the layout
settings used by SqlFormatter: the indent unit and the heuristics that
decide whether a parenthesized group is kept on one line.
"""

from dataclasses import dataclass, field

from sql_formatter.exceptions import ConfigurationError

# Number of non-whitespace tokens scanned after "(" when looking for its ")"
DEFAULT_INLINE_LOOKAHEAD_LIMIT = 250

# Parenthesized groups longer than this are wrapped onto their own lines
DEFAULT_INLINE_MAX_LENGTH = 30

DEFAULT_INDENT = "  "


def _default_block_keywords() -> dict[str, str]:
    return {"BEGIN": "END", "CASE": "END"}


@dataclass
class FormatterConfig:
    """Configuration settings for SQL formatting.

    The two inline heuristics are part of the observable layout: changing
    them changes which parenthesized groups stay on a single line.

    Attributes:
        indent: String used for one level of indentation. Defaults to two
            spaces.
        inline_lookahead_limit: Maximum number of tokens examined after an
            opening parenthesis when deciding whether the group can be
            rendered inline. Defaults to 250.
        inline_max_length: Character budget for an inline group. Longer
            groups are moved onto an indented block of their own, and
            inside them a comma starts a new line once this many characters
            have accumulated. Defaults to 30.
        block_keywords: Keywords that open an indented block, mapped to the
            keyword that closes it. Keys and values are upper case.

    Example:
        >>> config = FormatterConfig(indent="    ")
        >>> config.inline_max_length
        30
        >>> FormatterConfig(inline_max_length=0)
        Traceback (most recent call last):
        ...
        sql_formatter.exceptions.ConfigurationError: inline_max_length must be positive
    """

    indent: str = DEFAULT_INDENT
    inline_lookahead_limit: int = DEFAULT_INLINE_LOOKAHEAD_LIMIT
    inline_max_length: int = DEFAULT_INLINE_MAX_LENGTH
    block_keywords: dict[str, str] = field(default_factory=_default_block_keywords)

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.indent, str):
            raise TypeError("indent must be a string")
        if not isinstance(self.inline_lookahead_limit, int) or isinstance(
            self.inline_lookahead_limit, bool
        ):
            raise TypeError("inline_lookahead_limit must be an integer")
        if not isinstance(self.inline_max_length, int) or isinstance(
            self.inline_max_length, bool
        ):
            raise TypeError("inline_max_length must be an integer")
        if not isinstance(self.block_keywords, dict):
            raise TypeError("block_keywords must be a dict")

        if self.inline_lookahead_limit <= 0:
            raise ConfigurationError(
                "inline_lookahead_limit must be positive",
                "inline_lookahead_limit",
                self.inline_lookahead_limit,
            )
        if self.inline_max_length <= 0:
            raise ConfigurationError(
                "inline_max_length must be positive",
                "inline_max_length",
                self.inline_max_length,
            )
        if self.indent.strip():
            raise ConfigurationError(
                "indent must only contain whitespace", "indent", self.indent
            )

        self.block_keywords = {
            opener.upper(): closer.upper()
            for opener, closer in self.block_keywords.items()
        }
