"""
Command-line interface for checking records against a validation chain.

Usage:
    python -m rulechain.cli.check_cli check --rules <rules.yaml> --input <records.json> [options]
    python -m rulechain.cli.check_cli describe --rules <rules.yaml>
    python -m rulechain.cli.check_cli validators
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from rulechain.core.rules import ChainConfigLoader, DictRecord
from rulechain.core.validators import default_registry
from rulechain.observability.logger import configure_logging, get_logger, log_operation

logger = get_logger(__name__)


def load_records(path: str | Path) -> list[dict[str, Any]]:
    """
    Load records from a JSON or YAML file.

    Args:
        path: File holding one record (a mapping) or a list of records

    Returns:
        List of record mappings

    Raises:
        ValueError: If the file does not hold mappings
    """
    path = Path(path)
    with open(path) as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError(f"{path} must contain a record mapping or a list of record mappings")
    return data


def check_records(chain, records: list[dict[str, Any]], raw_records: list[dict[str, Any]] | None = None) -> list[dict[str, Any]]:
    """
    Run the chain against each record.

    Returns:
        One result per record: index, valid flag and failure report
    """
    results = []
    for idx, attributes in enumerate(records):
        raw = raw_records[idx] if raw_records is not None else None
        record = DictRecord(attributes, raw_attributes=raw)
        record.failed_validators.clear()
        chain.run(record)

        results.append({
            "index": idx,
            "valid": record.failed_validators.is_empty(),
            "failures": record.failed_validators.to_dict(),
        })
    return results


def format_text(results: list[dict[str, Any]]) -> str:
    """Render check results as human-readable text."""
    lines = []
    for result in results:
        status = "OK" if result["valid"] else "FAILED"
        lines.append(f"Record {result['index']}: {status}")

        failures = result["failures"]
        for attribute, entries in failures.get("attribute", {}).items():
            for entry in entries:
                lines.append(f"  {attribute} {entry['message']} [{entry['validator']}:{entry['error_code']}]")
        for entry in failures.get("model", []):
            attributes = ", ".join(entry["attributes"])
            lines.append(f"  ({attributes}) {entry['message']} [{entry['validator']}:{entry['error_code']}]")
    return "\n".join(lines)


def check_command(args) -> int:
    """
    Execute check command.

    Returns:
        Exit code: 0 if every record is valid, 1 otherwise
    """
    chain = ChainConfigLoader(args.rules).load_chain()
    records = load_records(args.input)

    raw_records = None
    if args.raw_input:
        raw_records = load_records(args.raw_input)
        if len(raw_records) != len(records):
            raise ValueError(
                f"--raw-input holds {len(raw_records)} record(s), --input holds {len(records)}"
            )

    with log_operation("Checking records", logger=logger, rules=str(args.rules), records=len(records)) as outcome:
        results = check_records(chain, records, raw_records)
        failed = sum(1 for result in results if not result["valid"])
        outcome["failed"] = failed

    if args.format == "json":
        print(json.dumps({"results": results, "total": len(results), "failed": failed}, indent=2, default=str))
    else:
        print(format_text(results))
        print(f"\n{len(results) - failed}/{len(results)} record(s) valid")

    return 1 if failed else 0


def describe_command(args) -> int:
    """Print a summary of the chain defined in the rules file."""
    chain = ChainConfigLoader(args.rules).load_chain()
    summary = chain.get_summary()

    print(f"\n{'=' * 60}")
    print(f"VALIDATION CHAIN: {args.rules}")
    print(f"{'=' * 60}")
    print(f"Validations:         {summary['total_validations']}")
    print(f"Nested chains:       {summary['total_chains']}")
    print(f"Max depth:           {summary['max_depth']}")
    print(f"Continue on failure: {summary['continue_on_failure']}")
    print("\nValidations by validator:")
    for name, count in sorted(summary["validations_by_validator"].items()):
        print(f"  {name:<20} {count}")
    return 0


def validators_command(args) -> int:
    """List the registered validators."""
    for validator_class in sorted(default_registry, key=lambda v: v.validator_name()):
        raw = " (raw)" if validator_class.raw else ""
        codes = ", ".join(validator_class.error_codes)
        print(f"{validator_class.validator_name():<20} inputs={validator_class.inputs}{raw}  codes: {codes}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check records against a rulechain validation chain",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default: $LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Log format (default: $LOG_FORMAT or json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser(
        "check",
        help="Validate records against a chain"
    )
    check_parser.add_argument(
        "--rules",
        required=True,
        help="YAML chain configuration file"
    )
    check_parser.add_argument(
        "--input",
        required=True,
        help="JSON or YAML file with a record or a list of records"
    )
    check_parser.add_argument(
        "--raw-input",
        help="Records before type coercion, in the same order as --input (optional)"
    )
    check_parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)"
    )

    describe_parser = subparsers.add_parser(
        "describe",
        help="Summarize a chain configuration"
    )
    describe_parser.add_argument(
        "--rules",
        required=True,
        help="YAML chain configuration file"
    )

    subparsers.add_parser(
        "validators",
        help="List registered validators"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the check CLI."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, format_type=args.log_format)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "check":
            return check_command(args)
        elif args.command == "describe":
            return describe_command(args)
        elif args.command == "validators":
            return validators_command(args)
        else:
            parser.print_help()
            return 1

    except (ValueError, yaml.YAMLError, FileNotFoundError) as e:
        logger.error(f"Configuration error: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
