"""
Query/path parameter parsing.
"""

from __future__ import annotations

import re

# ASCII digits only: int() alone also takes "1_000" and Thai digits ("๑").
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str) -> int:
    """
    Parse a decimal integer, surrounding whitespace allowed.

    Raises ValueError for anything else.
    """
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {raw!r}")
    return int(text)
