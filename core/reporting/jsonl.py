"""JSONL output for classification results.

Emits ClassificationResult objects as JSONL for later analysis, and
summarizes a batch by scheme.
"""

import json
from pathlib import Path
from typing import IO, Sequence

from core.schemas.result import SCHEME_UNRECOGNIZED, ClassificationResult


def result_to_dict(result: ClassificationResult) -> dict:
    """Convert ClassificationResult to serializable dict.

    The canonical form is emitted as "facts", matching the card layout.

    Args:
        result: ClassificationResult to convert

    Returns:
        Dict suitable for JSON serialization
    """
    return {
        "raw": result.raw,
        "normalized": result.normalized,
        "facts": result.canonical_form,
        "year": result.filing_year,
        "scheme": result.scheme_label,
        "conversions": [
            {"label": alt.label, "value": alt.value}
            for alt in result.alternate_forms
        ],
        "rule_id": result.rule_id,
    }


def write_result(result: ClassificationResult, file: IO[str]) -> None:
    """Write one classified cause number as a JSONL line.

    Era labels contain en dashes (e.g. "1990–2000"); they are written as-is,
    not \\u-escaped.

    Args:
        result: ClassificationResult to write
        file: Open file handle to write to
    """
    data = result_to_dict(result)
    json_line = json.dumps(data, ensure_ascii=False)
    file.write(json_line + "\n")


def write_results(
    results: Sequence[ClassificationResult],
    output_path: Path | str,
) -> int:
    """Write a batch of classified cause numbers to a JSONL file.

    Results are written in the order given, which for a display list is
    most recent first. Parent directories are created.

    Args:
        results: Results from classify() or classify_frame()
        output_path: Path to output JSONL file

    Returns:
        Number of results written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(output_path, "w", encoding="utf-8") as f:
        for result in results:
            write_result(result, f)
            count += 1

    return count


def read_results(input_path: Path | str) -> list[dict]:
    """Read classified cause numbers back from a JSONL file.

    Args:
        input_path: Path to input JSONL file

    Returns:
        List of dicts keyed raw/normalized/facts/year/scheme/conversions/rule_id
        (not hydrated to ClassificationResult objects)
    """
    input_path = Path(input_path)
    results = []

    with open(input_path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                results.append(json.loads(line))

    return results


def summarize_results(results: Sequence[ClassificationResult]) -> dict:
    """Generate summary statistics from results.

    Args:
        results: Sequence of ClassificationResults

    Returns:
        Dict with summary statistics
    """
    total = len(results)
    unrecognized_count = sum(1 for r in results if r.scheme_label == SCHEME_UNRECOGNIZED)

    scheme_counts: dict[str, int] = {}
    years: list[int] = []

    for result in results:
        scheme_counts[result.scheme_label] = scheme_counts.get(result.scheme_label, 0) + 1
        if result.filing_year:
            years.append(int(result.filing_year))

    return {
        "total": total,
        "unrecognized": unrecognized_count,
        "unrecognized_rate": unrecognized_count / total if total > 0 else 0.0,
        "scheme_counts": scheme_counts,
        "min_year": min(years) if years else None,
        "max_year": max(years) if years else None,
    }
