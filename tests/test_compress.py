"""
Tests for the non-indenting output modes.

This module covers compress, remove_comments, split_query and plain
highlighting.
"""

import pytest

from sql_formatter import SqlFormatter, compress, remove_comments, split_query


@pytest.fixture
def formatter():
    return SqlFormatter()


class TestCompress:
    """Test collapsing SQL onto one line."""

    def test_collapses_whitespace_and_comments(self, formatter):
        """Test comments are dropped and whitespace runs collapsed."""
        sql = "SELECT  a,\n  b -- note\nFROM t"
        assert formatter.compress(sql) == "SELECT a, b FROM t"

    def test_already_compact(self, formatter):
        """Test compact SQL comes back unchanged."""
        sql = "SELECT * FROM MyTable WHERE id = 1"
        assert formatter.compress(sql) == sql

    def test_multi_word_keyword(self, formatter):
        """Test whitespace inside keywords is normalized."""
        assert formatter.compress("SELECT a FROM t GROUP\n\tBY a") == (
            "SELECT a FROM t GROUP BY a"
        )

    def test_comment_between_tokens(self, formatter):
        """Test a removed comment still separates its neighbours."""
        assert formatter.compress("SELECT a/* x */FROM t") == "SELECT a FROM t"

    def test_leading_comment(self, formatter):
        """Test nothing is left where a leading comment was."""
        assert formatter.compress("-- header\n/* more */ SELECT 1") == "SELECT 1"

    def test_strings_untouched(self, formatter):
        """Test whitespace inside strings is kept."""
        assert formatter.compress("SELECT 'a   b'") == "SELECT 'a   b'"

    def test_trailing_whitespace_trimmed(self, formatter):
        """Test trailing whitespace is removed."""
        assert formatter.compress("SELECT 1   \n") == "SELECT 1"

    def test_no_highlighting(self):
        """Test compress never decorates tokens."""
        from sql_formatter import HtmlHighlighter

        formatter = SqlFormatter(HtmlHighlighter())
        assert formatter.compress("SELECT 1") == "SELECT 1"

    def test_idempotent(self, formatter):
        """Test compressing twice changes nothing."""
        sql = "SELECT a, -- x\n b FROM t /* y */ WHERE c = 'd  e'"
        once = formatter.compress(sql)
        assert formatter.compress(once) == once

    def test_module_function(self):
        """Test the module-level shortcut."""
        assert compress("SELECT 1 -- one") == "SELECT 1"


class TestRemoveComments:
    """Test comment removal."""

    def test_line_comment(self, formatter):
        """Test line comments are removed and the rest formatted."""
        assert formatter.remove_comments("SELECT a -- note\nFROM t") == (
            "SELECT\n  a\nFROM\n  t"
        )

    def test_block_comment(self, formatter):
        """Test block comments leave a separator behind."""
        assert formatter.remove_comments("SELECT/* c */a FROM t") == (
            "SELECT\n  a\nFROM\n  t"
        )

    def test_hash_comment(self, formatter):
        """Test "#" comments are removed."""
        assert "#" not in formatter.remove_comments("SELECT 1 # note")

    def test_comment_markers_in_strings_kept(self, formatter):
        """Test comment markers inside strings survive."""
        assert formatter.remove_comments("SELECT '-- not a comment'") == (
            "SELECT\n  '-- not a comment'"
        )

    def test_plain_text_output(self):
        """Test the result is plain text even with a highlighter."""
        from sql_formatter import HtmlHighlighter

        formatter = SqlFormatter(HtmlHighlighter())
        assert formatter.remove_comments("SELECT 1 -- x") == "SELECT\n  1"

    def test_module_function(self):
        """Test the module-level shortcut."""
        assert remove_comments("/* x */ SELECT 1") == "SELECT\n  1"


class TestSplitQuery:
    """Test splitting scripts into statements."""

    def test_two_statements(self, formatter):
        """Test each statement keeps its semicolon."""
        assert formatter.split_query("SELECT 1; SELECT 2;") == [
            "SELECT 1;",
            "SELECT 2;",
        ]

    def test_last_statement_without_semicolon(self, formatter):
        """Test the final statement need not be terminated."""
        assert formatter.split_query("SELECT 1;\nSELECT 2") == ["SELECT 1;", "SELECT 2"]

    def test_semicolon_in_string(self, formatter):
        """Test semicolons inside strings do not split."""
        assert formatter.split_query("SELECT ';'; SELECT \"a;b\"") == [
            "SELECT ';';",
            'SELECT "a;b"',
        ]

    def test_semicolon_in_comment(self, formatter):
        """Test semicolons inside comments do not split."""
        assert formatter.split_query("SELECT /* ; */ 1; SELECT 2") == [
            "SELECT /* ; */ 1;",
            "SELECT 2",
        ]

    def test_empty_statements_dropped(self, formatter):
        """Test empty and comment-only statements are dropped."""
        assert formatter.split_query(";; SELECT 1;; -- done\n") == ["SELECT 1;"]

    def test_blank_input(self, formatter):
        """Test blank input has no statements."""
        assert formatter.split_query("   ") == []

    def test_module_function(self):
        """Test the module-level shortcut."""
        assert split_query("SELECT 1; SELECT 2") == ["SELECT 1;", "SELECT 2"]


class TestHighlightPlain:
    """Test highlighting with the plain highlighter."""

    @pytest.mark.parametrize(
        "sql",
        [
            "SELECT * FROM t",
            "  select a -- c\n from t  ",
            "SELECT 'unterminated",
        ],
    )
    def test_identity(self, formatter, sql):
        """Test plain highlighting returns the input unchanged."""
        assert formatter.highlight(sql) == sql


class TestScenarios:
    """Test whole statements through several modes."""

    def test_compress_insert(self, formatter):
        """Test a single-spaced insert compresses to itself."""
        sql = (
            "insert ignore into Table3 (column1, column2) "
            "VALUES ('test1','test2'), ('test3','test4');"
        )
        assert formatter.compress(sql) == sql

    def test_compress_after_format(self, formatter):
        """Test compressing formatted SQL gives the single-line form."""
        sql = "SELECT a, b FROM t WHERE c = 1"
        assert formatter.compress(formatter.format(sql)) == sql
