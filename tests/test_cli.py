"""
Tests for CLI functionality (end-to-end).

This module runs the command-line interface in a subprocess and checks
its output.
"""

import os
import subprocess
import sys
from pathlib import Path


class TestCLI:
    """Test CLI functionality (end-to-end)."""

    def run_cli(self, *args, stdin=None):
        """Run CLI command."""
        # Set UTF-8 encoding for Windows compatibility
        env = dict(os.environ)
        env["PYTHONIOENCODING"] = "utf-8"
        cmd = [sys.executable, "-m", "sql_formatter.cli"] + list(args)
        result = subprocess.run(
            cmd,
            input=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=Path.cwd(),
            env=env,
        )
        return result

    def test_format_argument(self):
        """Test formatting SQL given as an argument."""
        result = self.run_cli("SELECT a, b FROM t")

        assert result.returncode == 0
        assert result.stdout == "SELECT\n  a,\n  b\nFROM\n  t\n"

    def test_format_stdin(self):
        """Test formatting SQL read from stdin."""
        result = self.run_cli(stdin="SELECT 1")

        assert result.returncode == 0
        assert result.stdout == "SELECT\n  1\n"

    def test_no_color_when_piped(self):
        """Test no escape sequences are written to a pipe."""
        result = self.run_cli("SELECT 1")

        assert "\x1b[" not in result.stdout

    def test_indent_options(self):
        """Test the indent unit options."""
        assert self.run_cli("--indent", "    ", "SELECT 1").stdout == "SELECT\n    1\n"
        assert self.run_cli("--tab", "SELECT 1").stdout == "SELECT\n\t1\n"

    def test_compress(self):
        """Test compress mode."""
        result = self.run_cli("--compress", "SELECT  a,\n b -- note\nFROM t")

        assert result.returncode == 0
        assert result.stdout == "SELECT a, b FROM t\n"

    def test_remove_comments(self):
        """Test remove-comments mode."""
        result = self.run_cli("--remove-comments", "SELECT 1 -- note")

        assert result.stdout == "SELECT\n  1\n"

    def test_split(self):
        """Test split mode prints one statement per line."""
        result = self.run_cli("--split", "SELECT 1;\nSELECT\n  2;")

        assert result.stdout == "SELECT 1;\nSELECT 2;\n"

    def test_highlight_html(self):
        """Test HTML highlighting."""
        result = self.run_cli("--highlight", "--html", "--no-pre", "SELECT 1")

        assert result.stdout == (
            '<span style="font-weight:bold;">SELECT</span> '
            '<span style="color: green;">1</span>\n'
        )

    def test_tokens_table(self):
        """Test the token table."""
        result = self.run_cli("--tokens", "SELECT 1")

        assert result.returncode == 0
        assert "RESERVED_TOPLEVEL" in result.stdout
        assert "NUMBER" in result.stdout
        assert "Type" in result.stdout

    def test_unbalanced_reported(self):
        """Test unbalanced parentheses are reported on stderr."""
        result = self.run_cli("SELECT a)")

        assert result.returncode == 0
        assert "Unmatched closing parenthesis" in result.stderr
        assert "[ERROR]" in result.stderr

    def test_strict(self):
        """Test strict mode fails on unbalanced parentheses."""
        result = self.run_cli("--strict", "SELECT (a")

        assert result.returncode == 1
        assert "[WARN]" in result.stderr
        assert "WARNING: unclosed parentheses or section" in result.stdout
        assert "Strict mode: 0 error(s), 1 warning(s)" in result.stderr

    def test_strict_clean(self):
        """Test strict mode passes balanced SQL."""
        assert self.run_cli("--strict", "SELECT (a)").returncode == 0

    def test_invalid_indent(self):
        """Test an invalid indent is a configuration error."""
        result = self.run_cli("--indent", "xx", "SELECT 1")

        assert result.returncode == 1
        assert "indent must only contain whitespace" in result.stderr

    def test_invalid_max_length(self):
        """Test a non-positive length budget is rejected."""
        result = self.run_cli("--inline-max-length", "0", "SELECT 1")

        assert result.returncode == 1

    def test_exclusive_modes(self):
        """Test two modes cannot be combined."""
        result = self.run_cli("--compress", "--split", "SELECT 1")

        assert result.returncode == 2

    def test_help(self):
        """Test help output."""
        result = self.run_cli("--help")

        assert result.returncode == 0
        assert "sql-formatter" in result.stdout
