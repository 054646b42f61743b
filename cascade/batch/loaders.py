"""Batch classification of cause numbers from CSV files.

Loads a column of raw cause numbers with pandas, runs each row through the
input gate and the classifier, and returns one output row per input row.
"""

from datetime import date
from pathlib import Path

import pandas as pd

from cascade.display.file_color import file_color
from cascade.runner.classifier import classify
from core.gate.charset import InvalidCharacterSet, collect_input
from core.schemas.result import ClassificationResult

DEFAULT_COLUMN = "cause_number"

OUTPUT_COLUMNS = [
    "raw",
    "normalized",
    "facts",
    "filing_year",
    "scheme_label",
    "alternate_forms",
    "file_color",
    "error",
]

ERROR_EMPTY = "empty"


def load_cause_numbers(path: Path | str, column: str = DEFAULT_COLUMN) -> pd.DataFrame:
    """Load a CSV of cause numbers.

    All cells are read as strings so leading zeros survive.

    Args:
        path: CSV file path
        column: Column holding raw cause numbers

    Returns:
        DataFrame as read from disk

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the column is missing
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    frame = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
    if column not in frame.columns:
        raise ValueError(
            f"Column '{column}' not found in {path}. "
            f"Available columns: {list(frame.columns)}"
        )
    return frame


def format_alternates(result: ClassificationResult) -> str:
    """Join alternate forms into one cell ("label: value; ...")."""
    return "; ".join(f"{alt.label}: {alt.value}" for alt in result.alternate_forms)


def result_to_row(result: ClassificationResult) -> dict[str, str | None]:
    """Flatten a result into an output row."""
    return {
        "raw": result.raw,
        "normalized": result.normalized,
        "facts": result.canonical_form,
        "filing_year": result.filing_year,
        "scheme_label": result.scheme_label,
        "alternate_forms": format_alternates(result),
        "file_color": file_color(result.filing_year),
        "error": None,
    }


def _error_row(raw: str, error: str) -> dict[str, str | None]:
    row: dict[str, str | None] = {name: None for name in OUTPUT_COLUMNS}
    row["raw"] = raw
    row["error"] = error
    return row


def classify_frame(
    frame: pd.DataFrame,
    column: str = DEFAULT_COLUMN,
    now: date | None = None,
) -> tuple[pd.DataFrame, list[ClassificationResult]]:
    """Classify every row of a DataFrame column.

    Blank cells and gate rejections do not stop the batch; they are
    reported in the "error" column and produce no result.

    Args:
        frame: Input DataFrame
        column: Column holding raw cause numbers
        now: Reference date for the classifier

    Returns:
        Tuple of (output DataFrame with OUTPUT_COLUMNS, classified results)

    Raises:
        ValueError: If the column is missing
    """
    if column not in frame.columns:
        raise ValueError(f"Column '{column}' not found")

    rows = []
    results = []

    for value in frame[column]:
        if pd.isna(value):
            rows.append(_error_row("", ERROR_EMPTY))
            continue

        raw = str(value)
        try:
            collected = collect_input(raw)
        except InvalidCharacterSet as e:
            rows.append(_error_row(raw, str(e)))
            continue

        if collected is None:
            rows.append(_error_row(raw, ERROR_EMPTY))
            continue

        result = classify(collected, now)
        results.append(result)
        rows.append(result_to_row(result))

    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS), results
