"""
json2csv command line.

Usage:
    json2csv -i cars.json -f carModel,price,color
    cat cars.ldjson | json2csv -L --nested -f car.make,price -o cars.csv
"""
import argparse
import json
import re
import sys
from pathlib import Path
from typing import Any, List, Optional

import yaml

from json2csv.api import convert
from json2csv.core.config import settings
from json2csv.core.logging_config import setup_logger
from json2csv.schemas.options import OptionsError
from json2csv.validate.validator import ValidationError


class InputError(Exception):
    """Raised when the input document or field list cannot be read."""

    pass


def _split_list(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    return [item.strip() for item in value.split(",")]


_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "\\": "\\"}


def _unescape(value: str) -> str:
    # Shells pass backslash escapes literally; unknown escapes are kept as typed
    return re.sub(r"\\([tnr\\])", lambda m: _ESCAPES[m.group(1)], value)


def _read_text(path: Optional[Path]) -> str:
    try:
        if path is None:
            return sys.stdin.read()
        return path.read_text(encoding=settings.INPUT_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {path or 'stdin'}: {e}")


def load_document(text: str, ldjson: bool = False) -> Any:
    """
    Parse the input document.

    Args:
        text: Raw input
        ldjson: One JSON record per non-blank line

    Returns:
        Parsed document (record, list of records, or None for blank input)
    """
    try:
        if ldjson:
            return [json.loads(line) for line in text.splitlines() if line.strip()]
        if not text.strip():
            return None
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON input: {e}")


def load_field_list(path: Path) -> List[str]:
    """Load field paths from a YAML (or JSON) list file."""
    try:
        with open(path, "r", encoding=settings.INPUT_ENCODING) as f:
            fields = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {path}: {e}")
    except yaml.YAMLError as e:
        raise InputError(f"Invalid field list {path}: {e}")

    if not isinstance(fields, list):
        raise InputError(f"Field list {path} must contain a list of field paths")
    return [str(f) for f in fields]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json2csv", description="Convert JSON records to CSV"
    )
    parser.add_argument("-i", "--input", type=Path, help="Input JSON file (default: stdin)")
    parser.add_argument("-o", "--output", type=Path, help="Output CSV file (default: stdout)")
    parser.add_argument("-f", "--fields", help="Comma-separated field paths")
    parser.add_argument(
        "-l", "--field-list", type=Path, help="YAML/JSON file with a list of field paths"
    )
    parser.add_argument("--field-names", help="Comma-separated header labels")
    parser.add_argument("-d", "--delimiter", default=",", help="Field delimiter")
    parser.add_argument("-e", "--eol", default="\n", help="Row terminator")
    parser.add_argument("-q", "--quote", default='"', help="Quote marker ('' disables quoting)")
    parser.add_argument("-n", "--no-header", action="store_true", help="Omit the header row")
    parser.add_argument("--nested", action="store_true", help="Resolve dot-separated field paths")
    parser.add_argument("--default-value", default="", help="Value for missing fields")
    parser.add_argument(
        "-L", "--ldjson", action="store_true", help="Input is line-delimited JSON"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    logger = setup_logger("json2csv", level="DEBUG" if args.verbose else None)

    try:
        data = load_document(_read_text(args.input), ldjson=args.ldjson)
        fields = load_field_list(args.field_list) if args.field_list else _split_list(args.fields)
        csv_text = convert(
            {
                "data": data,
                "fields": fields,
                "fieldNames": _split_list(args.field_names),
                "hasCSVColumnTitle": not args.no_header,
                "quotes": args.quote,
                "del": _unescape(args.delimiter),
                "eol": _unescape(args.eol),
                "nested": args.nested,
                "defaultValue": args.default_value,
            }
        )
    except (InputError, ValidationError, OptionsError) as e:
        print(f"json2csv: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding=settings.OUTPUT_ENCODING, newline="") as f:
            f.write(csv_text)
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(csv_text + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
