"""Check NHI numbers from the command line.

Usage:
    python scripts/check_nhi.py ZZZ0016 zzz00ax
    python scripts/check_nhi.py --json --disable-checksum ABC1234
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from nhifield.core.config import AppSettings, setup_logging
from nhifield.models.nhi import ValidationResult
from nhifield.validator.messages import render_result
from nhifield.validator.nhi_validator import NHIValidatorService

logger = logging.getLogger("nhifield.scripts.check_nhi")


def check_identifiers(identifiers: list[str], disable_checksum: bool | None = None) -> list[ValidationResult]:
    """Validate each identifier with settings-derived defaults."""
    settings = AppSettings()
    service = NHIValidatorService(settings.validation)
    results = [service.validate(i, disable_checksum_validation=disable_checksum) for i in identifiers]
    invalid = sum(1 for r in results if not r.valid)
    logger.debug("Checked %d identifiers, %d invalid", len(results), invalid)
    return results


def format_line(raw: str, result: ValidationResult) -> str:
    status = "valid" if result.valid else "INVALID"
    line = f"{raw}\t{result.value}\t{result.format.lower()}\t{status}"
    if not result.valid:
        line += f"\t{render_result(result)}"
    return line


def to_json(raw: str, result: ValidationResult) -> dict[str, Any]:
    return {"input": raw, **result.model_dump(mode="json"), "message": render_result(result)}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate New Zealand NHI numbers")
    parser.add_argument("identifiers", nargs="+", help="NHI numbers to check")
    parser.add_argument(
        "--disable-checksum", action="store_true", default=None,
        help="Only check the pattern (for test fixtures)",
    )
    parser.add_argument("--json", action="store_true", help="Print results as a JSON array")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    results = check_identifiers(args.identifiers, disable_checksum=args.disable_checksum)

    if args.json:
        print(json.dumps([to_json(raw, r) for raw, r in zip(args.identifiers, results)], indent=2))
    else:
        for raw, r in zip(args.identifiers, results):
            print(format_line(raw, r))

    return 0 if all(r.valid for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
