"""
Command-line interface for record validation and CSV export.

Usage:
    python -m src.cli.records_cli validate --entity <entity> --input <file> [options]
    python -m src.cli.records_cli validate --rules <rules.yaml> --input <file>
    python -m src.cli.records_cli export --report <report> --input <file> --output-dir <dir> [options]
    python -m src.cli.records_cli list-entities

Input files are JSON or YAML holding one record or a list of records.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from src.core.entities import ENTITY_SCHEMAS, get_engine
from src.core.rules import RuleConfigLoader, RuleEngine
from src.export import DirectoryArtifactHost, export_to_csv, report_filename
from src.export.reports import REPORTS, get_report
from src.observability.logger import get_logger, setup_logger
from src.utils.validation import ArtifactNameError, validate_file_path

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def load_records(path: str | Path) -> list[dict[str, Any]]:
    """
    Load records from a JSON or YAML file.

    Raises:
        ValueError: If the file cannot be parsed or holds no records
    """
    path = validate_file_path(path, "input")
    text = path.read_text(encoding="utf-8-sig")

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Cannot parse {path}: {e}")

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError(f"{path} must contain a record or a list of records")

    return data


def validate_command(args) -> int:
    """
    Validate every record in the input file and print the results as JSON.

    Returns:
        EXIT_OK when all records are valid, EXIT_INVALID otherwise
    """
    if args.rules:
        engine = RuleEngine(RuleConfigLoader(args.rules).load_schema())
    else:
        engine = get_engine(args.entity)

    records = load_records(args.input)
    logger.info(f"Validating {len(records)} {engine.schema.entity} record(s) from {args.input}")

    results = engine.validate_batch(records)
    invalid = sum(1 for result in results if not result.ok)

    payload = [result.as_dict() for result in results]
    if args.only_invalid:
        payload = [item for item in payload if not item["ok"]]
    print(json.dumps(payload, ensure_ascii=False, indent=2))

    logger.info(
        "Validation finished",
        extra={"entity": engine.schema.entity, "total": len(results), "invalid": invalid},
    )
    return EXIT_INVALID if invalid else EXIT_OK


def export_command(args) -> int:
    """Export the input records as a report CSV into the output directory."""
    columns, prefix = get_report(args.report)
    records = load_records(args.input)
    filename = args.filename or report_filename(prefix)

    host = DirectoryArtifactHost(args.output_dir, overwrite=not args.no_overwrite)
    export_to_csv(records, columns, filename, host)

    print(str(Path(args.output_dir) / filename))
    return EXIT_OK


def list_entities_command(args) -> int:
    """Print the entity and report names the other commands accept."""
    print(json.dumps(
        {"entities": sorted(ENTITY_SCHEMAS), "reports": sorted(REPORTS)},
        ensure_ascii=False,
        indent=2,
    ))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="niwalog-records",
        description="Validate business records and export report CSVs",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL env var or INFO)",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT env var or json)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    validate_parser = subparsers.add_parser("validate", help="Validate records against an entity schema")
    target = validate_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--entity", choices=sorted(ENTITY_SCHEMAS), help="Built-in entity schema")
    target.add_argument("--rules", help="YAML rule file describing the schema")
    validate_parser.add_argument("--input", required=True, help="JSON or YAML file with records")
    validate_parser.add_argument(
        "--only-invalid",
        action="store_true",
        help="Print results for invalid records only",
    )

    export_parser = subparsers.add_parser("export", help="Export records as a report CSV")
    export_parser.add_argument("--report", required=True, choices=sorted(REPORTS), help="Report layout")
    export_parser.add_argument("--input", required=True, help="JSON or YAML file with report rows")
    export_parser.add_argument("--output-dir", required=True, help="Directory to write the CSV into")
    export_parser.add_argument(
        "--filename",
        default=None,
        help="Output file name (default: <report prefix>_<today>.csv)",
    )
    export_parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Fail instead of replacing an existing file",
    )

    subparsers.add_parser("list-entities", help="List entity schemas and reports")

    return parser


COMMANDS = {
    "validate": validate_command,
    "export": export_command,
    "list-entities": list_entities_command,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level or args.log_format:
        setup_logger(level=args.log_level, format_type=args.log_format)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    try:
        return COMMANDS[args.command](args)
    except (ArtifactNameError, FileNotFoundError, FileExistsError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
