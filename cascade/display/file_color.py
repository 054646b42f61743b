"""File folder colors for the 2002-2004 shelf years."""

FILE_COLORS: dict[str, str] = {
    "2002": "Yellow",
    "2003": "Gray",
    "2004": "Green",
}


def file_color(year: str | None) -> str | None:
    """Look up the folder color for a filing year.

    Args:
        year: Four-digit year string (may be None or "")

    Returns:
        Color name, or None for years without a color
    """
    if not year:
        return None
    return FILE_COLORS.get(year)
