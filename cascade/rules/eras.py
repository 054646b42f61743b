"""Era bands for FACTS cause numbers.

Each band maps a contiguous range of filing years to one record-storage
label and at most one alternate identifier. Bands are inclusive and do not
overlap. The last band is open-ended: it runs through the current year.
"""

from dataclasses import dataclass
from typing import Callable

from core.schemas.result import (
    ALT_MICROFILM_1990_2000,
    ALT_MICROFILM_PRE_1990,
    ALT_SHELF_LISTS,
    ALT_SHELF_SEVEN_DIGIT,
    SCHEME_FACTS,
    SCHEME_FACTS_1990_2000,
    SCHEME_FACTS_2001_2004,
    SCHEME_FACTS_2005_2009,
    SCHEME_FACTS_ONLY,
    SCHEME_FACTS_PRE_1990,
    SCHEME_FACTS_SIX_DIGIT,
    AlternateForm,
)

# (yy, seq) -> alternate value, or None when the band has no value for seq
Derivation = Callable[[str, str], str | None]


def same_sequence(yy: str, seq: str) -> str:
    """Alternate value is the FACTS sequence itself."""
    return seq


def shelf_seven_digit(yy: str, seq: str) -> str | None:
    """Interleave the year into a 6-digit sequence.

    First sequence digit, both year digits, then the sequence from
    index 2 onward.

    Examples:
        >>> shelf_seven_digit("02", "123456")
        '1023456'
        >>> shelf_seven_digit("02", "12345") is None
        True
    """
    if len(seq) != 6:
        return None
    return seq[0] + yy[0] + yy[1] + seq[2:]


@dataclass(frozen=True)
class EraBand:
    """One row of the era table.

    Attributes:
        start: First year in the band (None = unbounded below)
        end: Last year in the band (None = through the current year)
        scheme_label: Label for results in this band
        alternate_label: Label of the alternate form, if any
        derive: Builds the alternate value from (yy, seq)
    """

    start: int | None
    end: int | None
    scheme_label: str
    alternate_label: str | None = None
    derive: Derivation | None = None

    def contains(self, year: int, current_year: int) -> bool:
        """Check if a year falls in this band."""
        if self.start is not None and year < self.start:
            return False
        end = current_year if self.end is None else self.end
        return year <= end

    def alternates(self, yy: str, seq: str) -> tuple[AlternateForm, ...]:
        """Derive this band's alternate forms for a sequence."""
        if self.alternate_label is None or self.derive is None:
            return ()
        value = self.derive(yy, seq)
        if value is None:
            return ()
        return (AlternateForm(label=self.alternate_label, value=value),)


FACTS_ERA_BANDS: tuple[EraBand, ...] = (
    EraBand(None, 1989, SCHEME_FACTS_PRE_1990, ALT_MICROFILM_PRE_1990, same_sequence),
    EraBand(1990, 2000, SCHEME_FACTS_1990_2000, ALT_MICROFILM_1990_2000, same_sequence),
    EraBand(2001, 2004, SCHEME_FACTS_2001_2004, ALT_SHELF_SEVEN_DIGIT, shelf_seven_digit),
    EraBand(2005, 2009, SCHEME_FACTS_2005_2009, ALT_SHELF_LISTS, same_sequence),
    EraBand(2010, None, SCHEME_FACTS_ONLY),
)


def find_band(year: int, current_year: int) -> EraBand | None:
    """Find the era band containing a year.

    Args:
        year: Four-digit filing year
        current_year: Calendar year bounding the open-ended band

    Returns:
        Matching EraBand, or None for years after the current year
    """
    for band in FACTS_ERA_BANDS:
        if band.contains(year, current_year):
            return band
    return None


def facts_era(
    year: int, yy: str, seq: str, current_year: int
) -> tuple[str, tuple[AlternateForm, ...]]:
    """Select scheme label and alternate forms for a FACTS number.

    Args:
        year: Resolved filing year
        yy: Two-digit year fragment as written
        seq: FACTS sequence (5 or 6 digits)
        current_year: Calendar year bounding the open-ended band

    Returns:
        Tuple of (scheme_label, alternate_forms)
    """
    band = find_band(year, current_year)
    if band is None:
        return SCHEME_FACTS, ()
    return band.scheme_label, band.alternates(yy, seq)


def microfilm_label(year: int) -> str:
    """Label for a bare 6-digit number whose leading digits are the year."""
    if year < 1990:
        return SCHEME_FACTS_PRE_1990
    if year <= 2000:
        return SCHEME_FACTS_1990_2000
    return SCHEME_FACTS_SIX_DIGIT
