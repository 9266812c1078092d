"""
Generate greetings for a guest list exported as CSV.

Reads `first_name`, `last_name` and a language column, and writes the same rows with
`greeting`, `greeting_confidence`, `greeting_method` and `detected_gender` appended.
Rows that already carry a hand-edited greeting (`greeting_auto_generated` is false)
are copied through untouched.
"""

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from osloveni.greetings import GreetingComposer, GreetingConfig

OUTPUT_COLUMNS = ["greeting", "greeting_confidence", "greeting_method", "detected_gender"]
FALSE_VALUES = {"0", "false", "no", "f", "n"}


def is_user_edited(row: Dict[str, str]) -> bool:
    flag = (row.get("greeting_auto_generated") or "").strip().lower()
    return bool((row.get("greeting") or "").strip()) and flag in FALSE_VALUES


def process_rows(
    rows: Iterator[Dict[str, str]], composer: GreetingComposer, language_column: str
) -> Iterator[Dict[str, str]]:
    for index, row in enumerate(rows, start=1):
        if is_user_edited(row):
            logging.debug(f"Row {index}: keeping user-edited greeting")
            yield row
            continue

        first_name = row.get("first_name", "")
        last_name = row.get("last_name", "")
        language = row.get(language_column, "")

        validation = composer.validate(first_name, last_name, language)
        for warning in validation.warnings:
            logging.debug(f"Row {index}: {warning}")
        if not validation.is_valid:
            logging.warning(f"Row {index}: {'; '.join(validation.errors)}")

        result = composer.compose(first_name, last_name, language)
        out = dict(row)
        out.update(
            greeting=result.text,
            greeting_confidence=result.confidence.value,
            greeting_method=result.method,
            detected_gender=result.detected_gender.value,
        )
        if "greeting_auto_generated" in row:
            out["greeting_auto_generated"] = "true"
        yield out


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate personalized greetings for a guest CSV.")
    parser.add_argument("input_path", type=Path, help="CSV with first_name and last_name columns.")
    parser.add_argument("--output", type=Path, default=None, help="Output CSV path (default: stdout).")
    parser.add_argument("--language-column", type=str, default="language", help="Column holding the language.")
    parser.add_argument("--informal", action="store_true", help="Generate first-name greetings.")
    parser.add_argument(
        "--no-first-name-fallback",
        action="store_true",
        help="For English guests of unknown gender use 'Mr./Ms.' instead of the first name.",
    )
    parser.add_argument("--trailing-comma", action="store_true", help="End every greeting with a comma.")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(message)s")

    config = (
        GreetingConfig.create_default()
        .with_formal(not args.informal)
        .with_fallback_to_first_name(not args.no_first_name_fallback)
        .with_trailing_comma(args.trailing_comma)
    )
    composer = GreetingComposer(config=config)

    with args.input_path.open(encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        fieldnames = list(reader.fieldnames or [])
        for column in ("first_name", "last_name"):
            if column not in fieldnames:
                logging.error(f"Missing required column '{column}' in {args.input_path}")
                return 2
        fieldnames += [c for c in OUTPUT_COLUMNS if c not in fieldnames]
        rows = list(process_rows(reader, composer, args.language_column))

    out_file = args.output.open("w", encoding="utf-8", newline="") if args.output else sys.stdout
    try:
        writer = csv.DictWriter(out_file, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)
    finally:
        if args.output:
            out_file.close()

    logging.info(f"Generated greetings for {len(rows)} guests")
    return 0


if __name__ == "__main__":
    sys.exit(main())
