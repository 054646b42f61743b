"""Fallback rule: always matches, always last."""

from cascade.rules.base import Rule
from core.schemas.context import ClassifyContext
from core.schemas.result import SCHEME_UNRECOGNIZED, ClassificationResult


class FallbackRule(Rule):
    """Degrade anything unrecognized to a displayable result."""

    @property
    def rule_id(self) -> str:
        return "fallback"

    def matches(self, ctx: ClassifyContext) -> bool:
        return True

    def extract(self, ctx: ClassifyContext) -> ClassificationResult:
        return self.create_result(
            ctx,
            scheme_label=SCHEME_UNRECOGNIZED,
            normalized=ctx.digits or ctx.upper,
            filing_year="",
        )
