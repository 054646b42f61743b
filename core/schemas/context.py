"""Classification context passed through the rule cascade."""

from dataclasses import dataclass, field
from datetime import date

from core.ids.canonical import alphanumeric, digits_only


@dataclass
class ClassifyContext:
    """Mutable state carrier passed from rule to rule.

    Attributes:
        raw: Original input, never modified
        now: Reference date; bounds the open-ended "FACTS only" band
        working: Uppercased, trimmed input; rewrite rules may replace it
        rewrites: Rule IDs that rewrote `working`, in order
    """

    raw: str
    now: date
    working: str = ""
    rewrites: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.working:
            self.working = self.raw.strip().upper()

    @property
    def upper(self) -> str:
        """Uppercased, trimmed raw input (ignores rewrites)."""
        return self.raw.strip().upper()

    @property
    def alnum(self) -> str:
        """Raw input uppercased and stripped to letters and digits."""
        return alphanumeric(self.raw)

    @property
    def digits(self) -> str:
        """Raw input stripped to digits."""
        return digits_only(self.raw)

    @property
    def current_year(self) -> int:
        """Calendar year of the reference date."""
        return self.now.year

    def rewrite(self, rule_id: str, working: str) -> None:
        """Replace the working string on behalf of a rule.

        Args:
            rule_id: Rule performing the rewrite
            working: New working string
        """
        self.working = working
        self.rewrites.append(rule_id)
