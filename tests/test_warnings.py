"""
Tests for the warning system and FormatResult.
"""

import json

import pytest

from sql_formatter import FormatResult, FormatWarning, SqlFormatter, WarningCollector


class TestFormatWarning:
    """Test FormatWarning."""

    def test_creation(self):
        """Test creating a warning."""
        warning = FormatWarning("ERROR", "Unmatched closing parenthesis", "offset 3")
        assert warning.to_dict() == {
            "level": "ERROR",
            "message": "Unmatched closing parenthesis",
            "context": "offset 3",
        }

    def test_invalid_level(self):
        """Test unknown levels are rejected."""
        with pytest.raises(ValueError):
            FormatWarning("FATAL", "boom")


class TestWarningCollector:
    """Test WarningCollector."""

    def test_empty(self):
        """Test a new collector is empty."""
        assert WarningCollector().get_all() == []

    def test_domain_helpers(self):
        """Test the helpers record the right levels and context."""
        collector = WarningCollector()
        collector.add("INFO", "note")
        collector.add_unclosed_scopes(2)
        collector.add_unmatched_close(7)

        warnings = collector.get_all()
        assert [w.level for w in warnings] == ["INFO", "WARNING", "ERROR"]
        assert warnings[1].message == (
            "2 unclosed parentheses or section(s) at end of input"
        )
        assert warnings[2].context == "offset 7"

    def test_tokenizer_error_preview(self):
        """Test long remainders are shortened."""
        collector = WarningCollector()
        collector.add_tokenizer_error(5, "x" * 50)
        message = collector.get_all()[0].message
        assert message == "Could not tokenize input: " + repr("x" * 20 + "...")

    def test_get_all_is_copy(self):
        """Test callers cannot modify the collector through get_all."""
        collector = WarningCollector()
        collector.add("INFO", "note")
        collector.get_all().clear()
        assert len(collector.get_all()) == 1


class TestFormatResult:
    """Test FormatResult."""

    def test_clean_result(self):
        """Test a balanced statement has no warnings."""
        result = SqlFormatter().format_result("SELECT 1")
        assert result.success
        assert result.warnings == []
        assert str(result) == "SELECT\n  1"
        assert result.sql == "SELECT 1"

    def test_to_dict(self):
        """Test dictionary conversion."""
        result = SqlFormatter().format_result("SELECT a)")
        data = result.to_dict()
        assert data["success"] is False
        assert data["sql"] == "SELECT a)"
        assert data["warnings"][0]["level"] == "ERROR"

    def test_to_json(self):
        """Test JSON conversion."""
        result = FormatResult(output="SELECT\n  1", sql="SELECT 1")
        assert json.loads(result.to_json()) == {
            "output": "SELECT\n  1",
            "sql": "SELECT 1",
            "success": True,
            "warnings": [],
        }

    def test_warnings_fresh_per_call(self):
        """Test warnings do not leak between calls."""
        formatter = SqlFormatter()
        assert formatter.format_result("SELECT (").warnings
        assert formatter.format_result("SELECT 1").warnings == []

    def test_summary(self):
        """Test warnings are counted per level."""
        result = SqlFormatter().format_result("SELECT a) + (b")
        assert result.get_summary() == {"INFO": 0, "WARNING": 1, "ERROR": 1}

    def test_summary_clean(self):
        """Test a clean result counts nothing."""
        assert SqlFormatter().format_result("SELECT 1").get_summary() == {
            "INFO": 0,
            "WARNING": 0,
            "ERROR": 0,
        }
