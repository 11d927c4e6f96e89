"""Version information."""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Version history
CHANGELOG = """
# Changelog

## v1.0.0

- Tokenizer with longest-match keyword, function and operator recognition
- Formatter with inline parenthesis groups, LIMIT handling, CASE/BEGIN
  blocks and unbalanced-parenthesis annotations
- Plain, terminal and HTML highlighters
- compress, remove_comments and split_query
- Command-line interface
"""
