"""Output accumulator for the formatter."""

from __future__ import annotations

from typing import Union


class OutputBuffer:
    """Append-only text buffer that can trim its own tail.

    Indentation is recorded as a depth marker after each line break and only
    rendered with the indent unit in ``getvalue``. Trimming never removes a
    marker, and tab characters inside tokens are never mistaken for
    indentation.

    Attributes:
        indent: String written once per indentation level.
    """

    def __init__(self, indent: str) -> None:
        self.indent = indent
        self._parts: list[Union[str, int]] = []

    def append(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def rstrip(self, chars: str) -> None:
        """Remove trailing characters in ``chars``, stopping at indentation."""
        while self._parts:
            last = self._parts[-1]
            if isinstance(last, int):
                return
            stripped = last.rstrip(chars)
            if stripped:
                self._parts[-1] = stripped
                return
            self._parts.pop()

    def newline(self, depth: int) -> None:
        """Start a new line indented ``depth`` levels."""
        self.rstrip(" ")
        self._parts.append("\n")
        self._parts.append(depth)

    def discard_empty_line(self) -> None:
        """Undo a line break that has nothing written after it yet."""
        if (
            len(self._parts) >= 2
            and self._parts[-2] == "\n"
            and isinstance(self._parts[-1], int)
        ):
            del self._parts[-2:]
            self.rstrip(" ")

    def reindent(self, depth: int) -> None:
        """Replace the indentation of a line that was just started."""
        if self._parts and isinstance(self._parts[-1], int):
            self._parts[-1] = depth
        else:
            self._parts.append(depth)

    def getvalue(self) -> str:
        return "".join(
            part if isinstance(part, str) else self.indent * part
            for part in self._parts
        )
