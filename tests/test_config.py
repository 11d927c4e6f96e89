"""
Tests for FormatterConfig validation.
"""

import pytest

from sql_formatter import ConfigurationError, FormatterConfig, SqlFormatterError


class TestFormatterConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Test default values."""
        config = FormatterConfig()
        assert config.indent == "  "
        assert config.inline_lookahead_limit == 250
        assert config.inline_max_length == 30
        assert config.block_keywords == {"BEGIN": "END", "CASE": "END"}

    def test_defaults_not_shared(self):
        """Test each config gets its own block keyword table."""
        first = FormatterConfig()
        first.block_keywords["LOOP"] = "END LOOP"
        assert "LOOP" not in FormatterConfig().block_keywords

    def test_block_keywords_upper_cased(self):
        """Test block keywords are normalized to upper case."""
        config = FormatterConfig(block_keywords={"case": "end"})
        assert config.block_keywords == {"CASE": "END"}

    @pytest.mark.parametrize("indent", ["", " ", "\t", "    "])
    def test_whitespace_indent_accepted(self, indent):
        """Test any whitespace indent is accepted."""
        assert FormatterConfig(indent=indent).indent == indent

    def test_non_whitespace_indent_rejected(self):
        """Test a visible indent string is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            FormatterConfig(indent="--")
        assert exc_info.value.field_name == "indent"
        assert exc_info.value.value == "--"

    @pytest.mark.parametrize("field", ["inline_lookahead_limit", "inline_max_length"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_rejected(self, field, value):
        """Test limits must be positive."""
        with pytest.raises(ConfigurationError) as exc_info:
            FormatterConfig(**{field: value})
        assert exc_info.value.field_name == field
        assert isinstance(exc_info.value, SqlFormatterError)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"indent": 2},
            {"inline_lookahead_limit": "250"},
            {"inline_max_length": 30.0},
            {"inline_max_length": True},
            {"block_keywords": [("CASE", "END")]},
        ],
    )
    def test_wrong_types_rejected(self, kwargs):
        """Test wrong types raise TypeError."""
        with pytest.raises(TypeError):
            FormatterConfig(**kwargs)
