# filmgraph/common/strings/normalize.py
from __future__ import annotations

from typing import Optional, Tuple


def fold(s: Optional[str]) -> Optional[str]:
    """Case-insensitive key for emails and logins. None stays None."""
    if s is None:
        return None
    return s.strip().casefold()


def normalize_title(s: Optional[str]) -> Optional[str]:
    # lowercase + collapse whitespace
    if s is None:
        return None
    return " ".join(s.casefold().split())


def title_year_key(title: Optional[str], year: Optional[int]) -> Optional[Tuple[str, int]]:
    """
    Composite key used by the film index. Returns None when either part
    is missing so callers can treat it as "no key".
    """
    t = normalize_title(title)
    if not t or year is None:
        return None
    return (t, int(year))
