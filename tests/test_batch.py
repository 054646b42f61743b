"""Tests for batch CSV classification.

Exit Criteria:
- CSV cells load as strings (leading zeros kept)
- Blank cells and gate rejections are reported, not raised
- Output frame has one row per input row
"""

from datetime import date

import pandas as pd
import pytest

from cascade.batch.loaders import (
    ERROR_EMPTY,
    OUTPUT_COLUMNS,
    classify_frame,
    format_alternates,
    load_cause_numbers,
)
from cascade.runner.classifier import classify
from core.gate.charset import INVALID_LETTERS_MESSAGE

NOW = date(2026, 10, 19)


# =============================================================================
# Fixtures: Mock DataFrames
# =============================================================================


@pytest.fixture
def mock_numbers() -> pd.DataFrame:
    """Mixed cause numbers, including bad and blank cells."""
    return pd.DataFrame(
        {
            "cause_number": [
                "D-1-DC-02-123456",
                "abc123",
                None,
                "   ",
                " 914954 ",
            ],
            "note": ["a", "b", "c", "d", "e"],
        }
    )


@pytest.fixture
def csv_path(tmp_path):
    """CSV on disk with a leading-zero number and a blank cell."""
    path = tmp_path / "numbers.csv"
    path.write_text("cause_number,note\n00123,zeros\n,blank\nd1dc05987678,compact\n")
    return path


# =============================================================================
# Test: classify_frame
# =============================================================================


class TestClassifyFrame:
    """Tests for classify_frame."""

    def test_row_per_input(self, mock_numbers: pd.DataFrame) -> None:
        """Output keeps one row per input row."""
        table, results = classify_frame(mock_numbers, now=NOW)

        assert len(table) == 5
        assert list(table.columns) == OUTPUT_COLUMNS
        assert len(results) == 2

    def test_classified_rows(self, mock_numbers: pd.DataFrame) -> None:
        """Good rows carry facts, year, and color."""
        table, _ = classify_frame(mock_numbers, now=NOW)

        first = table.iloc[0]
        assert first["facts"] == "D-1-DC-02-123456"
        assert first["filing_year"] == "2002"
        assert first["file_color"] == "Yellow"
        assert first["alternate_forms"] == "Shelf / Offsite / OnBase (7-digit): 1023456"

        last = table.iloc[4]
        assert last["raw"] == "914954"
        assert last["facts"] == "D-1-DC-91-914954"

    def test_errors(self, mock_numbers: pd.DataFrame) -> None:
        """Rejected and blank rows record an error."""
        table, _ = classify_frame(mock_numbers, now=NOW)

        assert table.iloc[1]["error"] == INVALID_LETTERS_MESSAGE
        assert table.iloc[2]["error"] == ERROR_EMPTY
        assert table.iloc[3]["error"] == ERROR_EMPTY
        assert table["error"].notna().sum() == 3

    def test_missing_column(self, mock_numbers: pd.DataFrame) -> None:
        """Unknown column raises ValueError."""
        with pytest.raises(ValueError):
            classify_frame(mock_numbers, column="missing", now=NOW)

    def test_empty_frame(self) -> None:
        """Empty input gives empty output with the expected columns."""
        table, results = classify_frame(pd.DataFrame({"cause_number": []}), now=NOW)

        assert len(table) == 0
        assert list(table.columns) == OUTPUT_COLUMNS
        assert results == []


# =============================================================================
# Test: load_cause_numbers
# =============================================================================


class TestLoadCauseNumbers:
    """Tests for load_cause_numbers."""

    def test_strings_kept(self, csv_path) -> None:
        """Leading zeros survive loading."""
        frame = load_cause_numbers(csv_path)

        assert frame["cause_number"].iloc[0] == "00123"
        assert pd.isna(frame["cause_number"].iloc[1])

    def test_load_then_classify(self, csv_path) -> None:
        """Loaded frame classifies end to end."""
        table, results = classify_frame(load_cause_numbers(csv_path), now=NOW)

        assert table.iloc[0]["facts"] == "D-1-DC-85-00123"
        assert table.iloc[1]["error"] == ERROR_EMPTY
        assert table.iloc[2]["facts"] == "D-1-DC-05-987678"
        assert len(results) == 2

    def test_missing_file(self, tmp_path) -> None:
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_cause_numbers(tmp_path / "nope.csv")

    def test_missing_column(self, csv_path) -> None:
        """Missing column raises ValueError."""
        with pytest.raises(ValueError, match="Available columns"):
            load_cause_numbers(csv_path, column="case")


class TestFormatAlternates:
    """Tests for format_alternates."""

    def test_none(self) -> None:
        """No alternates is an empty string."""
        assert format_alternates(classify("D-1-DC-15-123456", NOW)) == ""
