"""Configuration loading utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidArgumentError

DEFAULT_BASE_URL = "http://127.0.0.1:5000"
DEFAULT_USERNAME = "user"
DEFAULT_PASSWORD = "mySupperPupper#sEcrEt"
EXPECTED_QUOTE_COUNT = 100

# CLI driver name -> Playwright browser type attribute
SUPPORTED_DRIVERS = {
    "chrome": "chromium",
    "firefox": "firefox",
}


class PaginationPolicy(Enum):
    """How a paginated extraction decides it has read the last page."""

    NEXT_CONTROL = "next_control"  # stop when no "next" control is rendered
    PREVIOUS_CONTROL = "previous_control"  # stop once a "previous" control appears
    FIXED_PAGES = "fixed_pages"  # stop after ``fixed_page_count`` pages
    END_MARKER = "end_marker"  # stop when the page text carries ``end_marker``


@dataclass(slots=True)
class VerifierConfig:
    """Holds runtime options for a full verification run."""

    base_url: str
    remote_url: Optional[str] = None
    driver: str = "chrome"
    headless: bool = False
    username: str = DEFAULT_USERNAME
    password: str = DEFAULT_PASSWORD
    navigation_timeout: float = 60.0
    wait_timeout: float = 5.0
    scroll_delay: float = 1.0
    expected_count: int = EXPECTED_QUOTE_COUNT
    base_policy: PaginationPolicy = PaginationPolicy.NEXT_CONTROL
    js_policy: PaginationPolicy = PaginationPolicy.NEXT_CONTROL
    tableful_policy: PaginationPolicy = PaginationPolicy.END_MARKER
    fixed_page_count: int = 10
    end_marker: str = "No quotes found"
    report_path: Optional[Path] = None

    @property
    def browser_type(self) -> str:
        return resolve_browser_type(self.driver)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"


def resolve_browser_type(driver: str) -> str:
    """Maps a CLI driver name to the Playwright browser type name."""

    try:
        return SUPPORTED_DRIVERS[driver]
    except KeyError:
        supported = ", ".join(sorted(SUPPORTED_DRIVERS))
        raise InvalidArgumentError(
            f"Unsupported driver {driver!r}; expected one of: {supported}"
        ) from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgumentError(f"{name} must be a number, got {raw!r}") from None


def load_configuration(
    base_url: str = DEFAULT_BASE_URL,
    *,
    remote_url: Optional[str] = None,
    driver: str = "chrome",
    report_name: Optional[str] = None,
) -> VerifierConfig:
    """Builds a ``VerifierConfig`` from CLI input and environment variables."""

    resolve_browser_type(driver)
    load_dotenv()  # Loads .env values if present

    return VerifierConfig(
        base_url=base_url.rstrip("/"),
        remote_url=remote_url or None,
        driver=driver,
        headless=os.getenv("HEADLESS", "false").lower() in {"1", "true", "yes"},
        username=os.getenv("QUOTES_USERNAME") or DEFAULT_USERNAME,
        password=os.getenv("QUOTES_PASSWORD") or DEFAULT_PASSWORD,
        navigation_timeout=_env_float("NAVIGATION_TIMEOUT", 60.0),
        wait_timeout=_env_float("WAIT_TIMEOUT", 5.0),
        report_path=Path(report_name).resolve() if report_name else None,
    )
