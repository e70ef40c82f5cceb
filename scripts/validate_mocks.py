#!/usr/bin/env python3
"""
Validate mock JSON files.

Checks every file under mocks/ against the mock schema, reports duplicate
apiName + predicate pairs and naming convention warnings.
Exits with code 1 if any error is found; warnings alone don't fail the run.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add repo root to path so `api_virtualization.*` imports work when running from scripts/
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from api_virtualization.catalog.validator import ValidationReport, validate_mock_tree
from api_virtualization.utils.config_loader import load_virtualization_config


def print_report(report: ValidationReport) -> None:
    print(f"Found {report.total_files} JSON file(s)\n")

    for result in report.files:
        if result.errors:
            print(f"FAIL {result.source_file}")
        elif result.warnings:
            print(f"WARN {result.source_file}")
        else:
            print(f"PASS {result.source_file}")
        for error in result.errors:
            print(f"  ERROR: {error}")
        for warning in result.warnings:
            print(f"  WARNING: {warning}")

    if report.duplicates:
        print(f"\nFound {len(report.duplicates)} duplicate mock(s):")
        for duplicate in report.duplicates:
            print(f"  ERROR: {duplicate.describe()}")

    if report.naming_warnings:
        print(f"\n{len(report.naming_warnings)} naming convention warning(s):")
        for warning in report.naming_warnings:
            print(f"  WARNING: {warning}")

    print(f"\n{'=' * 60}")
    print("\nValidation Summary:")
    print(f"   Total files: {report.total_files}")
    print(f"   Valid: {report.valid_count}")
    print(f"   Errors: {report.total_errors}")
    print(f"   Warnings: {report.total_warnings}")

    if report.has_errors:
        print(f"\nValidation failed with {report.total_errors} error(s)")
    elif report.total_warnings:
        print(f"\nValidation passed with {report.total_warnings} warning(s)")
    else:
        print("\nAll mocks are valid!")


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate mock JSON files against the mock schema")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML file")
    parser.add_argument("--mocks-dir", type=Path, default=None, help="Mocks root directory (default: from config)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = load_virtualization_config(args.config)
    mocks_dir = args.mocks_dir or Path(config.mocks.root_dir)

    print("Validating mock JSON files...\n")
    try:
        report = validate_mock_tree(mocks_dir, config.mocks.extension)
    except (FileNotFoundError, NotADirectoryError) as e:
        print(f"ERROR: {e}")
        return 1

    print_report(report)
    return 1 if report.has_errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
