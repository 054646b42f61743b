"""Rule ABC for the cause number classifier.

Each entry in the cascade is a Rule. The classifier asks every rule, in
order, whether it matches; the first rule whose extract() returns a result
wins. A rule may instead rewrite the context and return None, letting
later rules see the rewritten working string.
"""

from abc import ABC, abstractmethod

from core.schemas.context import ClassifyContext
from core.schemas.result import AlternateForm, ClassificationResult


class Rule(ABC):
    """Abstract base class for cascade rules.

    The classifier calls, for each rule in order:
    1. matches() to test the rule's pattern against the context
    2. extract() to build the result (or rewrite the context)

    Rules never see output produced by an earlier rule; the only shared
    state is the context's working string.
    """

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Return the unique rule identifier.

        Returns:
            Rule ID (e.g., "civil", "facts", "digits:7")
        """
        pass

    @abstractmethod
    def matches(self, ctx: ClassifyContext) -> bool:
        """Check whether this rule applies.

        Args:
            ctx: Classification context

        Returns:
            True if extract() should be called
        """
        pass

    @abstractmethod
    def extract(self, ctx: ClassifyContext) -> ClassificationResult | None:
        """Build the classification result.

        Args:
            ctx: Classification context

        Returns:
            ClassificationResult, or None if the rule only rewrote ctx
        """
        pass

    def create_result(
        self,
        ctx: ClassifyContext,
        scheme_label: str,
        normalized: str | None = None,
        canonical_form: str | None = None,
        filing_year: str | None = None,
        alternate_forms: tuple[AlternateForm, ...] = (),
    ) -> ClassificationResult:
        """Create a ClassificationResult stamped with this rule's ID.

        Args:
            ctx: Classification context (supplies raw input)
            scheme_label: Record system label
            normalized: Core digit sequence
            canonical_form: Expanded modern identifier
            filing_year: Four-digit year string
            alternate_forms: Equivalent identifiers

        Returns:
            ClassificationResult
        """
        return ClassificationResult(
            raw=ctx.raw,
            scheme_label=scheme_label,
            normalized=normalized,
            canonical_form=canonical_form,
            filing_year=filing_year,
            alternate_forms=tuple(alternate_forms),
            rule_id=self.rule_id,
        )
