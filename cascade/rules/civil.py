"""Civil case number rule (D-1-GN).

Civil numbers take absolute precedence over every FACTS rule: anything
whose alphanumeric form starts with D1GN is civil, even when the rest of
the string cannot be parsed.
"""

import re

from cascade.rules.base import Rule
from core.ids.canonical import resolve_century
from core.schemas.context import ClassifyContext
from core.schemas.result import SCHEME_CIVIL, ClassificationResult

CIVIL_ALNUM_PREFIX = "D1GN"
CIVIL_PATTERN = re.compile(r"^D-1-GN-([0-9]{2})-([0-9]+)", re.IGNORECASE)


class CivilRule(Rule):
    """Classify D-1-GN civil case numbers.

    Year and sequence are only filled in when the punctuated
    D-1-GN-YY-SEQ form matches; compact variants stay civil but bare.
    """

    @property
    def rule_id(self) -> str:
        return "civil"

    def matches(self, ctx: ClassifyContext) -> bool:
        return ctx.alnum.startswith(CIVIL_ALNUM_PREFIX)

    def extract(self, ctx: ClassifyContext) -> ClassificationResult:
        normalized = None
        filing_year = None

        match = CIVIL_PATTERN.match(ctx.upper)
        if match:
            filing_year = str(resolve_century(match.group(1)))
            normalized = match.group(2)

        return self.create_result(
            ctx,
            scheme_label=SCHEME_CIVIL,
            normalized=normalized,
            canonical_form=ctx.upper,
            filing_year=filing_year,
        )
