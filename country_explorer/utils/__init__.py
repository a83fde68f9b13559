"""Utility functions for the Global Country Explorer.

This package provides:
- Display formatting for loosely-typed JSON values (formatting)
"""

from .formatting import (
    clean_text,
    format_grouped,
    format_plain_number,
    is_number,
    join_parts,
    join_texts,
)

__all__ = [
    "clean_text",
    "format_grouped",
    "format_plain_number",
    "is_number",
    "join_parts",
    "join_texts",
]
