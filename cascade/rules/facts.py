"""FACTS cause number rules (D-1-DC-YY-SEQ).

Two rules cooperate: CompactFactsRule expands "d1dc05987678" into
"D-1-DC-05-987678" and steps aside; FactsRule then parses the punctuated
form, whether typed that way or produced by the rewrite.
"""

import re

from cascade.rules.base import Rule
from cascade.rules.eras import facts_era
from core.ids.canonical import facts_number, resolve_century
from core.schemas.context import ClassifyContext
from core.schemas.result import ClassificationResult

COMPACT_FACTS_PATTERN = re.compile(r"^D1DC([0-9]{2})([0-9]{5,6})$")
FACTS_PATTERN = re.compile(r"^D-1-DC-([0-9]{2})-([0-9]{5,6})$", re.IGNORECASE)


class CompactFactsRule(Rule):
    """Rewrite compact FACTS numbers into punctuated form."""

    @property
    def rule_id(self) -> str:
        return "facts:compact"

    def matches(self, ctx: ClassifyContext) -> bool:
        return COMPACT_FACTS_PATTERN.match(ctx.alnum) is not None

    def extract(self, ctx: ClassifyContext) -> None:
        match = COMPACT_FACTS_PATTERN.match(ctx.alnum)
        if match:
            ctx.rewrite(self.rule_id, facts_number(match.group(1), match.group(2)))
        return None


class FactsRule(Rule):
    """Classify punctuated FACTS numbers by era band."""

    @property
    def rule_id(self) -> str:
        return "facts"

    def matches(self, ctx: ClassifyContext) -> bool:
        return FACTS_PATTERN.match(ctx.working) is not None

    def extract(self, ctx: ClassifyContext) -> ClassificationResult:
        match = FACTS_PATTERN.match(ctx.working)
        if match is None:
            raise ValueError(f"Not a FACTS number: {ctx.working!r}")

        yy, seq = match.group(1), match.group(2)
        year = resolve_century(yy)
        scheme_label, alternates = facts_era(year, yy, seq, ctx.current_year)

        return self.create_result(
            ctx,
            scheme_label=scheme_label,
            normalized=seq,
            canonical_form=match.group(0),
            filing_year=str(year),
            alternate_forms=alternates,
        )
