"""Classification result schemas for the cause number normalizer.

A ClassificationResult is the only thing the classifier hands back. It is
frozen: callers may drop a result from their display list, never edit it.
"""

from dataclasses import dataclass, field

# Scheme labels (record-storage system / era implied by a number)
SCHEME_CIVIL = "Civil case number"
SCHEME_FACTS_PRE_1990 = "FACTS / Microfilm (pre-1990)"
SCHEME_FACTS_1990_2000 = "FACTS / Microfilm / Shelf (1990–2000)"
SCHEME_FACTS_2001_2004 = "FACTS / Shelf (2001–2004)"
SCHEME_FACTS_2005_2009 = "Shelf / Offsite / OnBase / Sam / Linda's List / FACTS"
SCHEME_FACTS_ONLY = "FACTS only"
SCHEME_FACTS = "FACTS"
SCHEME_FACTS_SIX_DIGIT = "FACTS (6-digit)"
SCHEME_FACTS_1990 = "FACTS / Microfilm (1990)"
SCHEME_UNRECOGNIZED = "Unrecognized pattern"

# Alternate form labels
ALT_MICROFILM_PRE_1990 = "Microfilm / Tablet (pre-1990)"
ALT_MICROFILM_1990_2000 = "Microfilm / Tablet / Shelf (1990–2000)"
ALT_SHELF_SEVEN_DIGIT = "Shelf / Offsite / OnBase (7-digit)"
ALT_SHELF_LISTS = "Shelf / Offsite / OnBase / Lists (same number)"
ALT_MICROFILM_FIVE_DIGIT = "Microfilm / Tablet (5-digit)"
ALT_MICROFILM_SIX_DIGIT = "Microfilm / Tablet / Shelf (6-digit)"
ALT_FACTS_SIX_DIGIT = "FACTS sequence (6-digit)"


@dataclass(frozen=True)
class AlternateForm:
    """An equivalent identifier in another historical record system.

    Attributes:
        label: Record system(s) the value is valid in
        value: The identifier as written in that system
    """

    label: str
    value: str


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one raw cause number.

    Attributes:
        raw: Original input, unmodified
        normalized: Core digit sequence (None for unparsed civil numbers)
        canonical_form: Fully expanded modern identifier ("facts")
        filing_year: Four-digit year; "" when no year could be located,
            None when a civil number had no punctuated year fragment
        scheme_label: Record-storage system(s) for this year/format
        alternate_forms: Equivalent identifiers, in display order
        rule_id: Rule in the cascade that produced this result
    """

    raw: str
    scheme_label: str
    normalized: str | None = None
    canonical_form: str | None = None
    filing_year: str | None = None
    alternate_forms: tuple[AlternateForm, ...] = field(default_factory=tuple)
    rule_id: str = ""

    def __post_init__(self) -> None:
        """Validate the unrecognized-pattern and year invariants."""
        if self.scheme_label == SCHEME_UNRECOGNIZED:
            if self.filing_year != "" or self.alternate_forms:
                raise ValueError(
                    "Unrecognized results must have an empty filing_year "
                    "and no alternate forms"
                )
        if self.filing_year and not (
            len(self.filing_year) == 4 and self.filing_year.isdigit()
        ):
            raise ValueError(f"Invalid filing_year '{self.filing_year}'")

    @property
    def is_civil(self) -> bool:
        """Check if this result is a civil (D-1-GN) number."""
        return self.scheme_label.startswith(SCHEME_CIVIL)

    @property
    def is_recognized(self) -> bool:
        """Check if any rule other than the fallback matched."""
        return self.scheme_label != SCHEME_UNRECOGNIZED
