"""Pagination — page-number parsing and total-page derivation.

Invariants:
    - parse_page_number() always returns a positive int (default 1)
    - parse_total_pages() always returns an int >= 1 (default 1)
    - Both are pure: no IO, no logging

Design Decisions:
    - Leading-integer parsing ("3abc" -> 3): matches how the upstream and browsers
      treat sloppy page segments; anything without leading digits falls back to 1
"""

import re
from collections.abc import Mapping

TOTAL_PAGES_HEADER = "x-wp-totalpages"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(raw: object) -> int | None:
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # beyond the interpreter's int-string digit limit
        return None


def parse_page_number(raw: str | None) -> int:
    """Route page segment -> positive page number, 1 when absent/garbage/non-positive."""
    value = _leading_int(raw)
    if value is None or value < 1:
        return 1
    return value


def parse_total_pages(headers: Mapping[str, str]) -> int:
    """Read the upstream total-pages header; 1 when missing, non-numeric or < 1."""
    value = _leading_int(headers.get(TOTAL_PAGES_HEADER))
    if value is None or value < 1:
        return 1
    return value
