#!/usr/bin/env python3
"""
Collection memory calculator command line.

Estimates the RAM each Typesense collection needs and prints a ranked
report with a recommended provisioning figure.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from .config import get_settings
from .exceptions import ConfigurationError, IndexServiceError, MemoryCalculatorError
from .report import render_json, render_text
from .services.calculator import create_memory_calculator
from .storage.typesense_client import TypesenseClient
from .utils.logging import get_logger, setup_logging
from .utils.metrics import metrics_collector

EXIT_OK = 0
EXIT_COLLECTION_FAILED = 1
EXIT_SETUP_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memsizer",
        description="Estimate the memory footprint of Typesense collections",
    )
    parser.add_argument("--host", help="Typesense host (TYPESENSE_HOST)")
    parser.add_argument("--port", type=int, help="Typesense port (TYPESENSE_PORT)")
    parser.add_argument("--protocol", choices=["http", "https"], help="Typesense protocol (TYPESENSE_PROTOCOL)")
    parser.add_argument("--api-key", help="Typesense API key (TYPESENSE_API_KEY)")
    parser.add_argument("--multiplier", type=float,
                        help="Safety multiplier for the recommended figure (ESTIMATOR_SAFETY_MULTIPLIER)")
    parser.add_argument("--legacy-array-widths", action="store_true", default=None,
                        help="Price numeric arrays at one byte per element")
    parser.add_argument("--max-concurrency", type=int, help="Collections estimated at once")
    parser.add_argument("--fail-fast", action="store_true", default=None,
                        help="Abort on the first collection that fails")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Report format")
    parser.add_argument("--log-level", help="Logging level (LOG_LEVEL)")
    parser.add_argument("--metrics", action="store_true", help="Print Prometheus metrics after the report")
    return parser


async def run(args: argparse.Namespace) -> int:
    logger = get_logger(__name__)
    settings = get_settings()

    overrides = {
        key: value for key, value in (
            ("host", args.host),
            ("port", args.port),
            ("protocol", args.protocol),
            ("api_key", args.api_key),
        ) if value is not None
    }
    config = settings.typesense.model_copy(update=overrides)
    multiplier = args.multiplier if args.multiplier is not None else settings.estimator.safety_multiplier

    if multiplier <= 0:
        logger.error("Invalid configuration", error_message="Safety multiplier must be positive")
        return EXIT_SETUP_FAILED
    if args.max_concurrency is not None and args.max_concurrency < 1:
        logger.error("Invalid configuration", error_message="Max concurrency must be at least 1")
        return EXIT_SETUP_FAILED

    try:
        client = TypesenseClient(config=config)
        calculator = create_memory_calculator(
            client,
            legacy_array_widths=args.legacy_array_widths,
            max_concurrency=args.max_concurrency,
            fail_fast=args.fail_fast,
        )
        reports = await calculator.run()
    except (ConfigurationError, IndexServiceError) as e:
        logger.error("Estimation could not start", error_type=e.kind, error_message=e.message)
        return EXIT_SETUP_FAILED
    except MemoryCalculatorError as e:
        logger.error("Estimation aborted", error_type=e.kind, error_message=e.message, details=e.details)
        return EXIT_COLLECTION_FAILED

    if args.format == "json":
        print(render_json(reports, multiplier))
    else:
        render_text(reports, multiplier)

    if args.metrics:
        print(metrics_collector.get_metrics().decode("utf-8"))

    if any(not report.succeeded for report in reports):
        return EXIT_COLLECTION_FAILED
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(log_level=args.log_level)
    except ConfigurationError as e:
        print(f"memsizer: {e.message}", file=sys.stderr)
        return EXIT_SETUP_FAILED
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
