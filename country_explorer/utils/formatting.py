"""Display formatting helpers for loosely-typed JSON values.

All helpers are total: they return None (or an empty result) for values of
the wrong shape instead of raising.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Iterable, Optional

# Matches the en-US default of at most three fraction digits
_GROUPED_QUANTUM = Decimal("0.001")


def is_number(value: Any) -> bool:
    """True for finite ints and floats. Booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def format_grouped(value: Any) -> Optional[str]:
    """Format a number with comma thousands separators.

    Fractions are rounded half-up to three digits and trailing zeros are
    dropped, so 1234.5 -> "1,234.5" and 551695.0 -> "551,695".
    """
    if not is_number(value):
        return None

    if isinstance(value, int):
        return f"{value:,}"

    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Room for every integer digit plus the three fraction digits
        ctx.prec = max(ctx.prec, exact.adjusted() + 5)
        rounded = exact.quantize(_GROUPED_QUANTUM, rounding=ROUND_HALF_UP)
    return f"{rounded:,.3f}".rstrip("0").rstrip(".")


def format_plain_number(value: Any) -> Optional[str]:
    """Format a number without grouping; integral floats lose their '.0'."""
    if not is_number(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def clean_text(value: Any) -> Optional[str]:
    """Return the stripped string, or None for blanks and non-strings."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def join_texts(values: Any, separator: str = ", ") -> Optional[str]:
    """Join the non-blank strings of a list, in order.

    Returns None when ``values`` is not a list/tuple or holds no usable text.
    """
    if not isinstance(values, (list, tuple)):
        return None
    return join_parts((clean_text(v) for v in values), separator)


def join_parts(parts: Iterable[Optional[str]], separator: str = ", ") -> Optional[str]:
    """Join already-formatted parts, skipping empty ones; None if nothing is left."""
    kept = [part for part in parts if part]
    return separator.join(kept) if kept else None
