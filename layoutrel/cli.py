"""Command-line entry point: run a batch of checks against a recorded layout.

    layoutrel-check snapshot.json checks.json [--json] [--log-level debug]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv
from pydantic import TypeAdapter, ValidationError

from layoutrel.config import Settings
from layoutrel.engine.suite import CheckSuite
from layoutrel.models.checks import CheckRequest, SuiteResult
from layoutrel.models.snapshot import LayoutSnapshot

logger = logging.getLogger(__name__)

_REQUESTS = TypeAdapter(list[CheckRequest])


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _print_report(result: SuiteResult) -> None:
    for r in result.results:
        if r.error:
            status = "ERROR"
        else:
            status = "PASS" if r.passed else "FAIL"
        detail = r.error or repr(r.value)
        print(f"[{status}] {r.label}: {detail}")
    print(
        f"Done: {result.checks_passed} passed, {result.checks_failed} failed, "
        f"{len(result.errors)} errors"
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = Settings()

    parser = argparse.ArgumentParser(description="Evaluate layout relationship checks")
    parser.add_argument("snapshot", help="Layout snapshot JSON (viewport + element boxes)")
    parser.add_argument("checks", help="JSON list of check requests")
    parser.add_argument("--json", action="store_true", help="Print the suite result as JSON")
    parser.add_argument("--log-level", default=settings.layoutrel_log_level, help="Logging level")
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        snapshot = LayoutSnapshot.load(args.snapshot)
        with open(args.checks, encoding="utf-8") as f:
            requests = _REQUESTS.validate_python(json.load(f))
    except FileNotFoundError as e:
        print(f"File not found: {e.filename}", file=sys.stderr)
        return 2
    except (ValidationError, json.JSONDecodeError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    logger.debug("Loaded %d elements and %d checks", len(snapshot.elements), len(requests))

    result = asyncio.run(CheckSuite().run(snapshot, requests))

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        _print_report(result)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
