"""Command line interface for the quotes verifier."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .core.config import DEFAULT_BASE_URL, load_configuration
from .runner import run

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Quotes fixture verifier")
    parser.add_argument("--base_url", default=DEFAULT_BASE_URL, help="Base URL of the fixture site")
    parser.add_argument("--remote_url", default=None, help="Remote browser server endpoint")
    parser.add_argument("--driver", default="chrome", help="Browser to drive: chrome or firefox")
    parser.add_argument("--report", default=None, help="Optional JSON file for the action log")
    parser.add_argument(
        "--only",
        action="append",
        metavar="CAPABILITY",
        help="Run only the named capability (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def run_cli(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_arguments(argv)
    configure_logging(args.verbose)

    # Driver names are validated here, before any browser session is opened.
    config = load_configuration(
        args.base_url,
        remote_url=args.remote_url,
        driver=args.driver,
        report_name=args.report,
    )

    print(f"[*] Verifying {config.base_url} with {config.driver}")
    run(config, only=args.only)


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
