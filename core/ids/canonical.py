"""Canonical identifier helpers for cause numbers.

ID Schemes:
- FACTS: D-1-DC-<YY>-<SEQ>, SEQ being 5 or 6 digits
- Civil: D-1-GN-<YY>-<SEQ>

Century rule (used for every two-digit year, in every branch):
- YY >= 80 -> 19YY
- YY <  80 -> 20YY
"""

import re

FACTS_PREFIX = "D-1-DC"
CIVIL_PREFIX = "D-1-GN"

CENTURY_PIVOT = 80


def resolve_century(yy: str | int) -> int:
    """Resolve a two-digit year fragment to a full year.

    Args:
        yy: Two-digit year (e.g., "91", "05", 79)

    Returns:
        Four-digit year

    Examples:
        >>> resolve_century("91")
        1991
        >>> resolve_century("05")
        2005
        >>> resolve_century(79)
        2079
    """
    value = int(yy)
    if value >= CENTURY_PIVOT:
        return 1900 + value
    return 2000 + value


def year_suffix(year: int | str) -> str:
    """Return the last two digits of a year, zero-padded.

    Examples:
        >>> year_suffix(1985)
        '85'
        >>> year_suffix("7")
        '07'
    """
    y = str(year)
    return y[-2:] if len(y) > 2 else y.zfill(2)


def alphanumeric(raw: str) -> str:
    """Uppercase and strip everything but letters and digits.

    Examples:
        >>> alphanumeric("d-1-dc 05/987678")
        'D1DC05987678'
    """
    return re.sub(r"[^A-Z0-9]", "", raw.upper())


def digits_only(raw: str) -> str:
    """Strip everything but digits.

    Examples:
        >>> digits_only("No. 91-4954")
        '914954'
    """
    return re.sub(r"[^0-9]", "", raw)


def facts_number(yy: str, seq: str) -> str:
    """Render a FACTS cause number.

    Examples:
        >>> facts_number("05", "987678")
        'D-1-DC-05-987678'
    """
    return f"{FACTS_PREFIX}-{yy}-{seq}"
