"""Rule cascade classifier for cause numbers.

Rules run in the order given; the first one to produce a result wins.
Order matters: several patterns are narrower subsets of later ones.
"""

from datetime import date
from typing import Sequence

from cascade.rules.bare_digits import (
    FiveDigitRule,
    SevenDigitRule,
    SixDigitRule,
    SixDigitYearRule,
)
from cascade.rules.base import Rule
from cascade.rules.civil import CivilRule
from cascade.rules.facts import CompactFactsRule, FactsRule
from cascade.rules.fallback import FallbackRule
from core.schemas.context import ClassifyContext
from core.schemas.result import ClassificationResult


def default_rules() -> list[Rule]:
    """Build the standard cascade, highest priority first."""
    return [
        CivilRule(),
        CompactFactsRule(),
        FactsRule(),
        FiveDigitRule(),
        SixDigitYearRule(),
        SixDigitRule(),
        SevenDigitRule(),
        FallbackRule(),
    ]


class Classifier:
    """Run an ordered rule cascade over raw cause numbers.

    The classifier:
    1. Builds a fresh ClassifyContext per input
    2. Asks each rule in order whether it matches
    3. Lets matching rules rewrite the context or return a result
    4. Returns the first result produced

    Key Design Points:
    - No state survives between calls
    - A rule that returns None only rewrites the working string
    - The last rule must always produce a result
    """

    def __init__(self, rules: Sequence[Rule] | None = None) -> None:
        """Initialize classifier.

        Args:
            rules: Ordered rules (defaults to default_rules())
        """
        self._rules = list(rules) if rules is not None else default_rules()
        if not self._rules:
            raise ValueError("Classifier requires at least one rule")

    @property
    def rule_ids(self) -> list[str]:
        """Rule IDs in evaluation order."""
        return [rule.rule_id for rule in self._rules]

    def classify(self, raw: str, now: date | None = None) -> ClassificationResult:
        """Classify a raw cause number.

        Args:
            raw: Raw input (character set already gated by the caller)
            now: Reference date for the open-ended era band (default: today)

        Returns:
            ClassificationResult from the first rule that produced one

        Raises:
            RuntimeError: If no rule produced a result (cascade lacks a
                catch-all rule)
        """
        ctx = ClassifyContext(raw=raw, now=now or date.today())

        for rule in self._rules:
            if not rule.matches(ctx):
                continue
            result = rule.extract(ctx)
            if result is not None:
                return result

        raise RuntimeError(
            f"No rule produced a result for {raw!r}; rules: {self.rule_ids}"
        )


_DEFAULT_CLASSIFIER = Classifier()


def classify(raw: str, now: date | None = None) -> ClassificationResult:
    """Classify a raw cause number with the standard cascade.

    Never raises: unrecognized input yields an "Unrecognized pattern"
    result.

    Args:
        raw: Raw input string
        now: Reference date (default: today)

    Returns:
        ClassificationResult

    Examples:
        >>> classify("914954").canonical_form
        'D-1-DC-91-914954'
    """
    return _DEFAULT_CLASSIFIER.classify(raw, now)
