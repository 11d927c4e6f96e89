"""
Edge cases and error handling tests.

This module checks that malformed or unusual input is handled without
crashing and that the output keeps every significant token.
"""

import pytest

from sql_formatter import (
    CliHighlighter,
    HtmlHighlighter,
    SqlFormatter,
    Tokenizer,
    TokenType,
    format_result,
    format_sql,
    highlight,
    tokenize,
)

MALFORMED = [
    "SELECT 'unterminated",
    'SELECT "also unterminated',
    "SELECT 'C:\\",
    "SELECT `open",
    "SELECT [open",
    "/* never closed",
    "((((",
    "))))",
    ")(",
    "SELECT CASE CASE END",
    "END END END",
    "BEGIN",
    "LIMIT , , 5",
    "- - - 1",
    ";;;",
    "SELECT @",
    "SELECT :",
    "SELECT a.",
    "\t\n \r\n",
]


class TestMalformedInput:
    """Test best-effort handling of malformed SQL."""

    @pytest.mark.parametrize("sql", MALFORMED)
    def test_never_raises(self, sql):
        """Test every output mode terminates on malformed input."""
        formatter = SqlFormatter()
        formatter.format(sql)
        formatter.highlight(sql)
        formatter.compress(sql)
        formatter.remove_comments(sql)
        formatter.split_query(sql)

    @pytest.mark.parametrize("sql", MALFORMED)
    def test_never_raises_with_highlighters(self, sql):
        """Test the decorating highlighters cope as well."""
        SqlFormatter(CliHighlighter()).format(sql)
        SqlFormatter(HtmlHighlighter()).format(sql)

    def test_unterminated_string_kept(self):
        """Test an unterminated string is emitted whole."""
        assert format_sql("SELECT 'abc") == "SELECT\n  'abc"

    def test_unterminated_string_trailing_backslash(self):
        """Test a string ending in a lone backslash is not a tokenizer error."""
        result = format_result("SELECT 'C:\\")
        assert result.success
        assert result.warnings == []
        assert result.output == "SELECT\n  'C:\\"

    def test_many_closing_parentheses(self):
        """Test every unmatched ")" is reported."""
        result = format_result("))))")
        assert len(result.warnings) == 4
        assert all(w.level == "ERROR" for w in result.warnings)

    def test_unclosed_count(self):
        """Test nested unclosed groups are counted."""
        result = format_result("((((")
        assert result.warnings[0].message.startswith("4 unclosed")


class TestSignificantTokensPreserved:
    """Test formatting never drops or reorders significant tokens."""

    @pytest.mark.parametrize(
        "sql",
        [
            "SELECT a, b FROM t WHERE c IN (1, 2, 3) ORDER BY a DESC LIMIT 10",
            "UPDATE t SET a = a - 1 WHERE b <> 'x;y'",
            "SELECT CASE WHEN a > 0 THEN -1 ELSE 0 END AS s FROM t",
            "INSERT INTO t (a, b) VALUES (1, 'two'), (3, 'four')",
            "SELECT COUNT(DISTINCT a) FROM t GROUP BY b HAVING COUNT(*) > 1",
        ],
    )
    def test_same_tokens(self, sql):
        """Test the formatted text has the same non-whitespace tokens."""
        tokenizer = Tokenizer()

        def significant(text):
            return [
                token.value.upper()
                for token in tokenizer.tokenize(text)
                if token.type is not TokenType.WHITESPACE
            ]

        assert significant(format_sql(sql)) == significant(sql)


class TestHighlightLossless:
    """Test highlight leaves the text intact."""

    def test_plain(self):
        """Test plain highlighting is the identity."""
        sql = "select\ta ,b  -- x\nfrom t"
        assert highlight(sql) == sql

    def test_tokenize_function(self):
        """Test the module-level tokenize returns a list."""
        tokens = tokenize("SELECT 1")
        assert isinstance(tokens, list)
        assert "".join(token.value for token in tokens) == "SELECT 1"


class TestSharedFormatter:
    """Test formatter instances hold no per-call state."""

    def test_reuse(self):
        """Test one formatter gives the same result on repeated calls."""
        formatter = SqlFormatter()
        sql = "SELECT a FROM t WHERE (b = 1"
        first = formatter.format_result(sql)
        second = formatter.format_result(sql)
        assert first.output == second.output
        assert first.warnings == second.warnings

    def test_shared_tokenizer(self):
        """Test formatters can share one tokenizer."""
        tokenizer = Tokenizer()
        plain = SqlFormatter(tokenizer=tokenizer)
        html = SqlFormatter(HtmlHighlighter(), tokenizer=tokenizer)
        assert plain.tokenizer is html.tokenizer
        assert plain.format("SELECT 1") == "SELECT\n  1"
