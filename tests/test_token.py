"""
Tests for the Token model.
"""

import pytest

from sql_formatter import Token, TokenType


class TestTokenType:
    """Test TokenType helpers."""

    def test_reserved_types(self):
        """Test the three keyword types are reserved."""
        assert TokenType.RESERVED.is_reserved()
        assert TokenType.RESERVED_TOPLEVEL.is_reserved()
        assert TokenType.RESERVED_NEWLINE.is_reserved()
        assert not TokenType.WORD.is_reserved()
        assert not TokenType.BOUNDARY.is_reserved()

    def test_comment_types(self):
        """Test both comment types are comments."""
        assert TokenType.COMMENT.is_comment()
        assert TokenType.BLOCK_COMMENT.is_comment()
        assert not TokenType.QUOTE.is_comment()

    def test_closed_set(self):
        """Test the enum has exactly thirteen members."""
        assert len(TokenType) == 13


class TestToken:
    """Test Token value object."""

    def test_creation(self):
        """Test creating a token."""
        token = Token(TokenType.WORD, "name")
        assert token.type is TokenType.WORD
        assert token.value == "name"
        assert str(token) == "name"

    def test_immutable(self):
        """Test tokens cannot be modified."""
        token = Token(TokenType.WORD, "name")
        with pytest.raises(Exception):
            token.value = "other"

    def test_with_value(self):
        """Test with_value builds a new token."""
        token = Token(TokenType.RESERVED_TOPLEVEL, "GROUP\n  BY")
        collapsed = token.with_value("GROUP BY")

        assert collapsed.value == "GROUP BY"
        assert collapsed.type is TokenType.RESERVED_TOPLEVEL
        assert token.value == "GROUP\n  BY"

    def test_equality(self):
        """Test tokens compare by value."""
        assert Token(TokenType.NUMBER, "1") == Token(TokenType.NUMBER, "1")
        assert Token(TokenType.NUMBER, "1") != Token(TokenType.WORD, "1")

    def test_is_of_type(self):
        """Test is_of_type with several types."""
        token = Token(TokenType.COMMENT, "-- x")
        assert token.is_of_type(TokenType.COMMENT, TokenType.BLOCK_COMMENT)
        assert not token.is_of_type(TokenType.WORD)
        assert token.is_comment()
        assert not token.is_whitespace()

    def test_invalid_type(self):
        """Test a non-TokenType type is rejected."""
        with pytest.raises(TypeError):
            Token("word", "name")

    def test_invalid_value(self):
        """Test a non-string value is rejected."""
        with pytest.raises(TypeError):
            Token(TokenType.WORD, 42)
