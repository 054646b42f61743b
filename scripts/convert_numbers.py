#!/usr/bin/env python
"""Convert cause numbers to FACTS form, filing year, and storage system.

Usage:
    python -m scripts.convert_numbers D-1-DC-05-123456 d1dc05987678 914954
    python -m scripts.convert_numbers --csv numbers.csv --column cause_number
    python -m scripts.convert_numbers --csv numbers.csv --output results.jsonl
    python -m scripts.convert_numbers            # interactive
"""

import argparse
import sys
from datetime import MAXYEAR, MINYEAR, date
from pathlib import Path
from typing import TextIO

from cascade.display.cards import render_card
from cascade.display.result_list import ResultList
from cascade.runner.classifier import classify
from core.gate.charset import InvalidCharacterSet, collect_input

INTERACTIVE_HELP = "Commands: <number> | rm N | clear | list | quit"


def print_cards(results: ResultList) -> None:
    """Print every card, most recent first."""
    if not len(results):
        print("  (no results)")
        return
    for index, entry in enumerate(results, start=1):
        print(render_card(entry.result, index=index))


def convert_one(raw: str, results: ResultList, now: date) -> bool:
    """Gate, classify, and add one input to the list.

    Returns:
        True if a result was added
    """
    try:
        collected = collect_input(raw)
    except InvalidCharacterSet as e:
        print(f"  ERROR: {raw!r}: {e}")
        return False

    if collected is None:
        return False

    results.add(classify(collected, now))
    return True


def run_interactive(now: date, stream: TextIO) -> int:
    """Read inputs line by line and keep a running list of cards."""
    results = ResultList()
    print(INTERACTIVE_HELP)

    for line in stream:
        command = line.strip()
        lowered = command.lower()

        if lowered in ("quit", "exit"):
            break
        if lowered == "clear":
            results.clear()
            print("  Cleared.")
            continue
        if lowered == "list":
            print_cards(results)
            continue
        if lowered.startswith("rm "):
            position = lowered[3:].strip()
            entries = list(results)
            if not position.isdigit() or not 1 <= int(position) <= len(entries):
                print(f"  ERROR: No card at position {position!r}")
                continue
            results.remove(entries[int(position) - 1].id)
            print_cards(results)
            continue

        if convert_one(command, results, now):
            print_cards(results)

    return 0


def run_batch(csv_path: Path, column: str, output: Path | None, now: date, verbose: bool) -> int:
    """Classify a CSV column and print a summary."""
    print("Loading cause numbers...")
    try:
        from cascade.batch.loaders import classify_frame, load_cause_numbers

        frame = load_cause_numbers(csv_path, column)
    except (FileNotFoundError, ValueError) as e:
        print(f"  ERROR: Failed to load {csv_path}: {e}")
        return 1

    print(f"  Loaded {len(frame):,} rows from {csv_path}")

    print()
    print("Classifying...")
    table, results = classify_frame(frame, column, now)
    rejected = int(table["error"].notna().sum())
    print(f"  Classified {len(results):,} rows")
    print(f"  Skipped/rejected {rejected:,} rows")

    if verbose:
        for _, row in table.iterrows():
            if isinstance(row["error"], str):
                print(f"    [SKIP] {row['raw']!r}: {row['error']}")
            else:
                print(f"    [OK] {row['raw']} -> {row['facts'] or '-'} ({row['scheme_label']})")

    if output:
        from core.reporting.jsonl import write_results

        count = write_results(results, output)
        print(f"  Wrote {count} results to {output}")

    print()
    print("Summary:")
    from core.reporting.jsonl import summarize_results

    summary = summarize_results(results)
    print(f"  Total classified: {summary['total']}")
    print(
        f"  Unrecognized: {summary['unrecognized']} "
        f"({summary['unrecognized_rate']:.1%})"
    )
    if summary["min_year"] is not None:
        print(f"  Filing years: {summary['min_year']}-{summary['max_year']}")
    print()
    print("  By scheme:")
    for scheme, count in sorted(summary["scheme_counts"].items()):
        print(f"    {scheme}: {count}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Run cause number conversion."""
    parser = argparse.ArgumentParser(
        description="Convert cause numbers to FACTS form and storage system"
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        help="Cause numbers to convert (omit for interactive mode)",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="CSV file of cause numbers to convert in batch",
    )
    parser.add_argument(
        "--column",
        type=str,
        default="cause_number",
        help="CSV column holding cause numbers (default: cause_number)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output JSONL file path (batch mode only)",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Treat this as the current year (default: today's year)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print one line per row in batch mode",
    )
    args = parser.parse_args(argv)

    if args.year is None:
        now = date.today()
    elif MINYEAR <= args.year <= MAXYEAR:
        now = date(args.year, 1, 1)
    else:
        print(f"ERROR: --year must be between {MINYEAR} and {MAXYEAR}, got {args.year}")
        return 1

    if args.csv:
        print("=" * 60)
        print("Cause Number Conversion - Batch")
        print("=" * 60)
        print(f"Input: {args.csv} (column: {args.column})")
        if args.output:
            print(f"Output: {args.output}")
        print()
        code = run_batch(args.csv, args.column, args.output, now, args.verbose)
        print()
        print("=" * 60)
        return code

    if not args.numbers:
        return run_interactive(now, sys.stdin)

    results = ResultList()
    failures = 0
    for raw in args.numbers:
        if not convert_one(raw, results, now):
            failures += 1

    print_cards(results)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
