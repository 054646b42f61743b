"""Tests for the display layer.

Exit Criteria:
- ResultList is most-recent-first with remove-by-id and clear
- File colors cover 2002-2004 only
- Cards show year, color, system, canonical form, and conversions
"""

from datetime import date

import pytest

from cascade.display.cards import card_heading, render_card
from cascade.display.file_color import FILE_COLORS, file_color
from cascade.display.result_list import ResultEntry, ResultList
from cascade.runner.classifier import classify
from core.schemas.result import ClassificationResult

NOW = date(2026, 10, 19)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def facts_result() -> ClassificationResult:
    """2002 FACTS number with a shelf alternate."""
    return classify("D-1-DC-02-123456", NOW)


@pytest.fixture
def civil_result() -> ClassificationResult:
    """Punctuated civil number."""
    return classify("D-1-GN-05-123456", NOW)


@pytest.fixture
def unrecognized_result() -> ClassificationResult:
    """Fallback result."""
    return classify("1234", NOW)


# =============================================================================
# Test: file_color
# =============================================================================


class TestFileColor:
    """Tests for file_color."""

    def test_colors(self) -> None:
        """2002 yellow, 2003 gray, 2004 green."""
        assert file_color("2002") == "Yellow"
        assert file_color("2003") == "Gray"
        assert file_color("2004") == "Green"

    def test_no_color(self) -> None:
        """Other years and missing years have no color."""
        assert file_color("2005") is None
        assert file_color("") is None
        assert file_color(None) is None

    def test_table_size(self) -> None:
        """Only three years are colored."""
        assert len(FILE_COLORS) == 3


# =============================================================================
# Test: ResultList
# =============================================================================


class TestResultList:
    """Tests for ResultList."""

    def test_add_front(
        self, facts_result: ClassificationResult, civil_result: ClassificationResult
    ) -> None:
        """Newest entry comes first."""
        results = ResultList()
        results.add(facts_result)
        results.add(civil_result)

        assert results.results() == [civil_result, facts_result]
        assert len(results) == 2

    def test_remove_by_id(
        self, facts_result: ClassificationResult, civil_result: ClassificationResult
    ) -> None:
        """Remove drops exactly the identified entry."""
        results = ResultList()
        first = results.add(facts_result)
        results.add(civil_result)

        assert results.remove(first.id) is True
        assert results.results() == [civil_result]
        assert results.remove(first.id) is False

    def test_duplicates_have_distinct_ids(
        self, facts_result: ClassificationResult
    ) -> None:
        """Same result added twice is two entries."""
        results = ResultList()
        a = results.add(facts_result)
        b = results.add(facts_result)

        assert a.id != b.id
        results.remove(a.id)
        assert results.get(b.id) is b
        assert results.get(a.id) is None

    def test_clear(self, facts_result: ClassificationResult) -> None:
        """Clear empties the list."""
        results = ResultList()
        results.add(facts_result)
        results.clear()

        assert len(results) == 0
        assert list(results) == []

    def test_iter_yields_entries(self, facts_result: ClassificationResult) -> None:
        """Iteration yields ResultEntry objects."""
        results = ResultList()
        results.add(facts_result)

        entries = list(results)
        assert isinstance(entries[0], ResultEntry)
        assert entries[0].result is facts_result


# =============================================================================
# Test: render_card
# =============================================================================


class TestRenderCard:
    """Tests for render_card."""

    def test_facts_card(self, facts_result: ClassificationResult) -> None:
        """FACTS card shows color, heading, and shelf number."""
        card = render_card(facts_result)

        assert "2002" in card
        assert "File color:         Yellow" in card
        assert "FACTS Cause Number: D-1-DC-02-123456" in card
        assert "Shelf / Offsite / OnBase (7-digit): 1023456" in card
        assert "Core sequence:      123456" in card

    def test_civil_card(self, civil_result: ClassificationResult) -> None:
        """Civil card uses the civil heading."""
        card = render_card(civil_result)

        assert "Civil cause number:" in card
        assert "FACTS Cause Number" not in card
        assert "Other conversions" not in card

    def test_unrecognized_card(self, unrecognized_result: ClassificationResult) -> None:
        """Unrecognized card has a placeholder year and no canonical form."""
        card = render_card(unrecognized_result)

        assert "Year:               —" in card
        assert "Cause Number" not in card
        assert "Unrecognized pattern" in card

    def test_index_in_header(self, facts_result: ClassificationResult) -> None:
        """Index is shown in the first line."""
        card = render_card(facts_result, index=3)
        assert "[3]" in card.splitlines()[0]

    def test_heading(
        self, facts_result: ClassificationResult, civil_result: ClassificationResult
    ) -> None:
        """Heading depends on scheme."""
        assert card_heading(civil_result) == "Civil cause number"
        assert card_heading(facts_result) == "FACTS Cause Number"
