"""
Indentation scopes.

This module defines the scope stack the formatter uses to track the current
indentation depth. The depth is always the number of open scopes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ScopeKind(str, Enum):
    """Kinds of indentation scope.

    Attributes:
        BLOCK: Opened by ``(`` or a block keyword such as CASE, closed by its
            counterpart. A block still open at the end of the input is
            reported as unclosed.
        SPECIAL: Opened by a top-level keyword such as SELECT or WHERE. It
            ends implicitly when the next top-level keyword arrives.
    """

    BLOCK = "block"
    SPECIAL = "special"


@dataclass(frozen=True)
class IndentScope:
    """One open indentation scope.

    Attributes:
        kind: BLOCK or SPECIAL.
        opener: Token that opened the scope, upper-cased (``"("``,
            ``"CASE"``, ...). Empty for special scopes.
        closer: Upper-cased token that closes a keyword block.
    """

    kind: ScopeKind
    opener: str = ""
    closer: Optional[str] = None

    @classmethod
    def special(cls) -> IndentScope:
        return cls(ScopeKind.SPECIAL)

    @classmethod
    def parenthesis(cls) -> IndentScope:
        return cls(ScopeKind.BLOCK, "(", ")")

    @classmethod
    def keyword_block(cls, opener: str, closer: str) -> IndentScope:
        return cls(ScopeKind.BLOCK, opener.upper(), closer.upper())

    @property
    def is_special(self) -> bool:
        return self.kind is ScopeKind.SPECIAL

    @property
    def is_parenthesis(self) -> bool:
        return self.kind is ScopeKind.BLOCK and self.opener == "("


class IndentStack:
    """Stack of open indentation scopes.

    Example:
        >>> stack = IndentStack()
        >>> stack.push(IndentScope.parenthesis())
        >>> stack.push(IndentScope.special())
        >>> stack.depth
        2
        >>> stack.close_parenthesis()
        True
        >>> stack.depth
        0
    """

    def __init__(self) -> None:
        self._scopes: list[IndentScope] = []

    @property
    def depth(self) -> int:
        return len(self._scopes)

    def push(self, scope: IndentScope) -> None:
        self._scopes.append(scope)

    def pop(self) -> Optional[IndentScope]:
        return self._scopes.pop() if self._scopes else None

    def peek(self) -> Optional[IndentScope]:
        return self._scopes[-1] if self._scopes else None

    def collapse_special(self) -> bool:
        """Close the innermost scope if it is a special scope.

        Returns:
            True if a scope was closed.
        """
        top = self.peek()
        if top is not None and top.is_special:
            self._scopes.pop()
            return True
        return False

    def pop_specials(self) -> int:
        """Close every special scope on top of the stack.

        Returns:
            Number of scopes closed.
        """
        count = 0
        while self.collapse_special():
            count += 1
        return count

    def close_parenthesis(self) -> bool:
        """Close scopes down to and including the innermost ``(`` block.

        Special scopes and keyword blocks left open inside the parentheses
        are closed along with it.

        Returns:
            False if no ``(`` block was open. The stack is empty afterwards.
        """
        while self._scopes:
            if self._scopes.pop().is_parenthesis:
                return True
        return False

    def can_close_keyword_block(self, closer: str) -> bool:
        """Check if ``closer`` ends the innermost non-special scope."""
        for scope in reversed(self._scopes):
            if scope.is_special:
                continue
            return not scope.is_parenthesis and scope.closer == closer.upper()
        return False

    def close_keyword_block(self, closer: str) -> bool:
        """Close special scopes and the keyword block ended by ``closer``.

        Returns:
            False, leaving the stack untouched, if ``closer`` does not end
            the innermost non-special scope.
        """
        if not self.can_close_keyword_block(closer):
            return False
        while self._scopes.pop().is_special:
            pass
        return True

    def open_blocks(self) -> int:
        """Number of open block scopes."""
        return sum(1 for scope in self._scopes if not scope.is_special)
