"""Pass-through highlighter."""

from sql_formatter.highlighter.base import Highlighter
from sql_formatter.models.token import TokenType


class NullHighlighter(Highlighter):
    """Highlighter that leaves every token unchanged.

    Used for plain-text output. Error messages are separated from the
    preceding text by a single space.
    """

    def highlight_token(self, token_type: TokenType, value: str) -> str:
        return value

    def highlight_error(self, value: str) -> str:
        return value

    def highlight_error_message(self, value: str) -> str:
        return " " + value

    def output(self, text: str) -> str:
        return text
