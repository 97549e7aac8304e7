"""Field defaulting rules shared by the HTML parsers.

These helpers never raise on odd input: anything missing or unparseable
degrades to the field's default.
"""

from __future__ import annotations

import re
from typing import Sequence

_NON_DIGITS = re.compile(r"[^0-9]")
_TITLE_VERSION = re.compile(r"(.+?)\s+v([\d.]+)")

UNKNOWN = "unknown"

# Stat list positions on a shards.info card
STARS, FORKS, OPEN_ISSUES, USED_BY, DEPENDENCIES, LAST_ACTIVITY = range(6)


def parse_count(text: str | None) -> int:
    """Return the digits of *text* read as one integer.

    ``"2,345,678 open issues"`` gives ``2345678``.  Text without any digit
    (``"No stars yet"``) gives ``0``.
    """
    if not text:
        return 0
    digits = _NON_DIGITS.sub("", text)
    return int(digits) if digits else 0


def stat_at(stats: Sequence[str], index: int) -> int:
    """Numeric value of the stat at *index*, ``0`` when out of range."""
    if index >= len(stats):
        return 0
    return parse_count(stats[index])


def last_activity(stats: Sequence[str]) -> str | None:
    if len(stats) <= LAST_ACTIVITY:
        return None
    return stats[LAST_ACTIVITY].strip()


def optional_text(text: str | None) -> str | None:
    """Trim *text*; empty or missing text becomes ``None``."""
    if text is None:
        return None
    text = text.strip()
    return text or None


def parse_title(title: str | None) -> tuple[str, str]:
    """Split a ``"<name> v<version>"`` page title into its two parts.

    Returns ``("unknown", "unknown")`` when no version token is found.
    """
    if title:
        match = _TITLE_VERSION.search(title)
        if match:
            return match.group(1), match.group(2)
    return UNKNOWN, UNKNOWN
