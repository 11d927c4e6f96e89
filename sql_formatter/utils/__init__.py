"""
Utility helpers for the SQL formatter.

This package contains the diagnostics collected during a format pass.
"""

from sql_formatter.utils.warnings import FormatWarning, WarningCollector

__all__ = [
    "FormatWarning",
    "WarningCollector",
]
