"""Integer token parsing shared by the number source and parameterized filters."""

from __future__ import annotations

import re
from typing import Optional

# Optional sign followed by ASCII digits only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_integer(token: str) -> Optional[int]:
    """Return the base-10 value of token, or None if it is not an integer."""
    if INTEGER_PATTERN.fullmatch(token) is None:
        return None
    return int(token)
