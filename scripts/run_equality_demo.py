#!/usr/bin/env python3
"""Box Equality demonstrations.

Shows how a dictionary, a set and a distinct() pass treat four boxes
under two equality strategies: an injected full-field comparer, and a
height-only equality defined by the box type itself.

Usage:
    python scripts/run_equality_demo.py [options]

Options:
    --demo NAME     comparer, equatable or all (default: from environment, all)
    --json          Print the reports as JSON instead of console lines
    --dev-logs      Console log rendering even when
                    BOX_DEMO_LOG_ENVIRONMENT=production

Environment (also read from .env):
    BOX_DEMO_DEMONSTRATIONS, BOX_DEMO_LOG_ENVIRONMENT, BOX_DEMO_OUTPUT_FORMAT,
    LOG_LEVEL
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from box_equality.api.models import DemoRunResponse
from box_equality.application.services import DEMONSTRATIONS, EqualityDemoService
from box_equality.bootstrap import configure_structlog
from box_equality.config import DemoConfig
from box_equality.domain.models import DemoReport
from box_equality.infrastructure.observability import get_logger_for_service


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Demonstrate intrusive versus injected equality on boxes",
    )
    parser.add_argument(
        "--demo",
        choices=[*DEMONSTRATIONS, "all"],
        default=None,
        help="Demonstration to run (default: BOX_DEMO_DEMONSTRATIONS or all)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print reports as JSON",
    )
    parser.add_argument(
        "--dev-logs",
        action="store_true",
        help="Render logs for the console, overriding BOX_DEMO_LOG_ENVIRONMENT=production",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> DemoConfig:
    """Apply command line overrides on top of the environment config."""
    config = DemoConfig.from_environment()
    if args.demo is not None:
        demonstrations = DEMONSTRATIONS if args.demo == "all" else (args.demo,)
        config = replace(config, demonstrations=demonstrations)
    if args.json:
        config = replace(config, output_format="json")
    if args.dev_logs:
        config = replace(config, log_environment="development")
    return config


def print_reports(reports: list[DemoReport]) -> None:
    """Print each report's console lines, separated by a blank line."""
    for index, report in enumerate(reports):
        if index:
            print()
        for line in report.lines():
            print(line)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        0 on success, 2 on invalid configuration.
    """
    load_dotenv()
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    correlation_id = configure_structlog(config.log_environment)
    log = get_logger_for_service("run_equality_demo", component="cli").bind(
        correlation_id=correlation_id,
    )
    log.info(
        "run_started",
        demonstrations=list(config.demonstrations),
        output_format=config.output_format,
    )

    service = EqualityDemoService()
    reports = service.run_all(config.demonstrations)

    log.info("run_completed", report_count=len(reports))

    if config.output_format == "json":
        response = DemoRunResponse.from_reports(reports, correlation_id=correlation_id)
        print(response.model_dump_json(indent=2))
    else:
        print_reports(reports)
    return 0


if __name__ == "__main__":
    sys.exit(main())
