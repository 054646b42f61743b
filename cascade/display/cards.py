"""Plain-text cards for classification results."""

from cascade.display.file_color import file_color
from core.schemas.result import ClassificationResult

PLACEHOLDER = "—"
CARD_WIDTH = 60


def card_heading(result: ClassificationResult) -> str:
    """Heading shown above the canonical form."""
    if "Civil" in result.scheme_label:
        return "Civil cause number"
    return "FACTS Cause Number"


def render_card(result: ClassificationResult, index: int | None = None) -> str:
    """Render one result as a text card.

    Args:
        result: Result to render
        index: Optional 1-based position shown in the card header

    Returns:
        Multi-line card text (no trailing newline)
    """
    lines = []
    header = f" [{index}] " if index is not None else " "
    lines.append(("-" * 2) + header + ("-" * (CARD_WIDTH - 2 - len(header))))

    lines.append(f"  Year:               {result.filing_year or PLACEHOLDER}")
    color = file_color(result.filing_year)
    if color:
        lines.append(f"  File color:         {color}")
    lines.append(f"  Location / System:  {result.scheme_label or PLACEHOLDER}")

    if result.canonical_form:
        lines.append(f"  {card_heading(result) + ':':<20}{result.canonical_form}")

    lines.append(f"  Original input:     {result.raw}")
    if result.normalized:
        lines.append(f"  Core sequence:      {result.normalized}")

    if result.alternate_forms:
        lines.append("  Other conversions:")
        for alt in result.alternate_forms:
            lines.append(f"    {alt.label}: {alt.value}")

    return "\n".join(lines)
