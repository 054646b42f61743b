"""Bare-digit rules for numbers typed without a prefix.

Only reached when neither the civil nor the FACTS rules matched. Each rule
keys off the count of digits left after stripping everything else.
"""

from cascade.rules.base import Rule
from cascade.rules.eras import microfilm_label
from core.ids.canonical import facts_number, resolve_century, year_suffix
from core.schemas.context import ClassifyContext
from core.schemas.result import (
    ALT_FACTS_SIX_DIGIT,
    ALT_MICROFILM_FIVE_DIGIT,
    ALT_MICROFILM_SIX_DIGIT,
    SCHEME_FACTS_1990,
    SCHEME_FACTS_2001_2004,
    SCHEME_FACTS_PRE_1990,
    AlternateForm,
    ClassificationResult,
)

# Assumed years for digit runs that carry no year of their own
FIVE_DIGIT_YEAR = 1985
SIX_DIGIT_YEAR = 1990


class FiveDigitRule(Rule):
    """Pre-1990 microfilm numbers.

    The year is not encoded in a 5-digit number; 1985 is assumed for all
    of them.
    """

    @property
    def rule_id(self) -> str:
        return "digits:5"

    def matches(self, ctx: ClassifyContext) -> bool:
        return len(ctx.digits) == 5

    def extract(self, ctx: ClassifyContext) -> ClassificationResult:
        digits = ctx.digits
        return self.create_result(
            ctx,
            scheme_label=SCHEME_FACTS_PRE_1990,
            normalized=digits,
            canonical_form=facts_number(year_suffix(FIVE_DIGIT_YEAR), digits.zfill(5)),
            filing_year=str(FIVE_DIGIT_YEAR),
            alternate_forms=(AlternateForm(ALT_MICROFILM_FIVE_DIGIT, digits),),
        )


class SixDigitYearRule(Rule):
    """6-digit numbers starting with 9: the first two digits are the year."""

    @property
    def rule_id(self) -> str:
        return "digits:6:year"

    def matches(self, ctx: ClassifyContext) -> bool:
        digits = ctx.digits
        return len(digits) == 6 and digits.startswith("9")

    def extract(self, ctx: ClassifyContext) -> ClassificationResult:
        digits = ctx.digits
        yy = digits[:2]
        year = resolve_century(yy)
        return self.create_result(
            ctx,
            scheme_label=microfilm_label(year),
            normalized=digits,
            canonical_form=facts_number(yy, digits),
            filing_year=str(year),
            alternate_forms=(AlternateForm(ALT_MICROFILM_SIX_DIGIT, digits),),
        )


class SixDigitRule(Rule):
    """Any other 6-digit number, filed under a generic 1990."""

    @property
    def rule_id(self) -> str:
        return "digits:6"

    def matches(self, ctx: ClassifyContext) -> bool:
        return len(ctx.digits) == 6

    def extract(self, ctx: ClassifyContext) -> ClassificationResult:
        digits = ctx.digits
        return self.create_result(
            ctx,
            scheme_label=SCHEME_FACTS_1990,
            normalized=digits,
            canonical_form=facts_number(year_suffix(SIX_DIGIT_YEAR), digits),
            filing_year=str(SIX_DIGIT_YEAR),
            alternate_forms=(AlternateForm(ALT_MICROFILM_SIX_DIGIT, digits),),
        )


class SevenDigitRule(Rule):
    """Shelf/OnBase 7-digit numbers (2001-2004).

    Digits 1-2 are the year; dropping digit 2 recovers the 6-digit FACTS
    sequence. Always resolved into the 2000s.
    """

    @property
    def rule_id(self) -> str:
        return "digits:7"

    def matches(self, ctx: ClassifyContext) -> bool:
        return len(ctx.digits) == 7

    def extract(self, ctx: ClassifyContext) -> ClassificationResult:
        digits = ctx.digits
        yy = digits[1:3]
        seq6 = digits[0] + digits[1] + digits[3:]
        return self.create_result(
            ctx,
            scheme_label=SCHEME_FACTS_2001_2004,
            normalized=digits,
            canonical_form=facts_number(yy, seq6),
            filing_year=str(2000 + int(yy)),
            alternate_forms=(AlternateForm(ALT_FACTS_SIX_DIGIT, seq6),),
        )
