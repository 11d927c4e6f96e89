"""
Command-line interface for the SQL formatter.

This module reads SQL from a command argument or standard input and prints
it formatted, highlighted, compressed, without comments, split into
statements, or as a token table.
"""

import argparse
import sys
from typing import Optional

from colorama import Fore, Style, just_fix_windows_console
from tabulate import tabulate

from sql_formatter import (
    CliHighlighter,
    FormatterConfig,
    HtmlHighlighter,
    NullHighlighter,
    SqlFormatter,
    SqlFormatterError,
)
from sql_formatter.highlighter.base import Highlighter
from sql_formatter.models.config import (
    DEFAULT_INLINE_LOOKAHEAD_LIMIT,
    DEFAULT_INLINE_MAX_LENGTH,
)

USE_COLOR = True


def print_error(msg: str) -> None:
    """Print error message to stderr."""
    if USE_COLOR:
        print(f"{Fore.RED}[ERROR] {msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[ERROR] {msg}", file=sys.stderr)


def print_warning(msg: str) -> None:
    """Print warning message to stderr."""
    if USE_COLOR:
        print(f"{Fore.YELLOW}[WARN] {msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[WARN] {msg}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sql-formatter",
        description="SQL formatter and highlighter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Format a query
  %(prog)s "SELECT * FROM MyTable WHERE (id>5 AND name LIKE 'testing');"

  # Read from standard input
  cat query.sql | %(prog)s

  # Collapse onto one line
  %(prog)s --compress "SELECT  a,  b FROM t -- comment"

  # HTML output
  %(prog)s --html --highlight "SELECT 1"
        """,
    )

    # === Input parameters ===
    input_group = parser.add_argument_group("Input Options")
    input_group.add_argument(
        "sql", nargs="?", help="SQL to process (read from stdin when omitted)"
    )

    # === Mode parameters ===
    mode_group = parser.add_argument_group("Mode Options")
    modes = mode_group.add_mutually_exclusive_group()
    modes.add_argument(
        "--highlight", action="store_true", help="Highlight without reformatting"
    )
    modes.add_argument(
        "--compress", action="store_true", help="Collapse onto a single line"
    )
    modes.add_argument(
        "--remove-comments",
        action="store_true",
        help="Strip comments and format the rest",
    )
    modes.add_argument(
        "--split", action="store_true", help="Print one statement per line"
    )
    modes.add_argument(
        "--tokens", action="store_true", help="Print the token stream as a table"
    )

    # === Output parameters ===
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--html", action="store_true", help="Produce HTML instead of terminal colors"
    )
    output_group.add_argument(
        "--no-pre", action="store_true", help="Do not wrap HTML output in <pre>"
    )
    output_group.add_argument(
        "--no-color", action="store_true", help="Disable terminal colors"
    )

    # === Layout parameters ===
    layout_group = parser.add_argument_group("Layout Options")
    layout_group.add_argument(
        "--indent", default="  ", help="Indent unit (default: two spaces)"
    )
    layout_group.add_argument(
        "--tab", action="store_true", help="Indent with a tab character"
    )
    layout_group.add_argument(
        "--inline-max-length",
        type=int,
        default=DEFAULT_INLINE_MAX_LENGTH,
        help="Longest parenthesized group kept on one line (default: 30)",
    )
    layout_group.add_argument(
        "--lookahead",
        type=int,
        default=DEFAULT_INLINE_LOOKAHEAD_LIMIT,
        help="Tokens scanned when looking for a closing parenthesis (default: 250)",
    )
    layout_group.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when formatting reports any warning",
    )

    return parser


def choose_highlighter(args: argparse.Namespace) -> Highlighter:
    """Pick the highlighter for the requested output.

    Terminal colors are only used when stdout is a terminal.
    """
    if args.html:
        return HtmlHighlighter(use_pre=not args.no_pre)
    if args.no_color or not sys.stdout.isatty():
        return NullHighlighter()
    return CliHighlighter()


def read_sql(args: argparse.Namespace) -> str:
    if args.sql is not None:
        return args.sql
    return sys.stdin.read()


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI main entry point.

    Supported commands:
        sql-formatter "SELECT ..."
        echo "SELECT ..." | sql-formatter
        sql-formatter --highlight "SELECT ..."
        sql-formatter --compress "SELECT ..."
        sql-formatter --remove-comments "SELECT ..."
        sql-formatter --split "SELECT 1; SELECT 2"
        sql-formatter --tokens "SELECT ..."
    """
    global USE_COLOR

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.no_color or not sys.stderr.isatty():
        USE_COLOR = False
    just_fix_windows_console()

    try:
        sql = read_sql(args)
        config = FormatterConfig(
            indent="\t" if args.tab else args.indent,
            inline_max_length=args.inline_max_length,
            inline_lookahead_limit=args.lookahead,
        )
        formatter = SqlFormatter(choose_highlighter(args), config=config)

        if args.tokens:
            handle_tokens(formatter, sql)
        elif args.compress:
            print(formatter.compress(sql))
        elif args.remove_comments:
            print(formatter.remove_comments(sql))
        elif args.split:
            for statement in formatter.split_query(sql):
                print(formatter.compress(statement))
        elif args.highlight:
            print_output(formatter.highlight(sql))
        else:
            handle_format(formatter, sql, args.strict)

    except SqlFormatterError as e:
        print_error(f"Invalid configuration: {e}")
        sys.exit(1)
    except OSError as e:
        print_error(f"Could not read input: {e}")
        sys.exit(1)


def print_output(text: str) -> None:
    """Print highlighter output, which may already end with a newline."""
    sys.stdout.write(text if text.endswith("\n") else text + "\n")


def handle_format(formatter: SqlFormatter, sql: str, strict: bool) -> None:
    """Format SQL and report its problems on stderr."""
    result = formatter.format_result(sql)
    print_output(result.output)

    for warning in result.warnings:
        context = f" ({warning.context})" if warning.context else ""
        if warning.level == "ERROR":
            print_error(f"{warning.message}{context}")
        else:
            print_warning(f"{warning.message}{context}")

    if strict and result.warnings:
        summary = result.get_summary()
        print_error(
            f"Strict mode: {summary['ERROR']} error(s), "
            f"{summary['WARNING']} warning(s)"
        )
        sys.exit(1)


def handle_tokens(formatter: SqlFormatter, sql: str) -> None:
    """Print the token stream as a table."""
    rows = [
        (index, token.type.name, repr(token.value))
        for index, token in enumerate(formatter.tokenizer.tokenize(sql))
    ]
    print(tabulate(rows, headers=["#", "Type", "Value"], tablefmt="simple"))


if __name__ == "__main__":
    main()
