#!/usr/bin/env python3
"""Runs the quotes verifier straight from a checkout via ``quotes_verifier.cli``."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent
SRC_PATH = ROOT / "src"
if SRC_PATH.exists():  # import the package from src/ when it is not installed
    sys.path.insert(0, str(SRC_PATH))


def main() -> None:
    cli = importlib.import_module("quotes_verifier.cli")
    cli.run_cli(sys.argv[1:])


if __name__ == "__main__":
    main()
