"""Helper script to execute a single verifier capability in isolation.

Runs one named capability (for example ``parse_quotes_tableful``) against the
fixture site without the rest of the run. Useful when debugging one layout.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Guarantee imports resolve to the local source tree when running from a checkout.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    src_str = str(SRC_PATH)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)

from quotes_verifier.core.config import DEFAULT_BASE_URL, load_configuration
from quotes_verifier.runner import run


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Runs a single capability of the quotes verifier")
    parser.add_argument("capability", help="Capability name, e.g. parse_quotes_js")
    parser.add_argument("--base_url", default=DEFAULT_BASE_URL, help="Base URL of the fixture site")
    parser.add_argument("--driver", default="chrome", help="Browser to drive: chrome or firefox")
    parser.add_argument(
        "--headless",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force headless mode (default comes from .env/environment)",
    )
    parser.add_argument("--report", default=None, help="Optional JSON file for the action log")
    return parser.parse_args()


def main() -> None:
    args = parse_arguments()

    config = load_configuration(args.base_url, driver=args.driver, report_name=args.report)
    if args.headless is not None:
        config.headless = args.headless

    print(f"[*] Running {args.capability} against {config.base_url}")
    try:
        log = run(config, only=[args.capability])
    except KeyboardInterrupt:
        print("[!] Interrupted by user")
        return

    for name, outcome in log.entries.items():
        print(f"    {name:<28}: {outcome}")


if __name__ == "__main__":
    main()
