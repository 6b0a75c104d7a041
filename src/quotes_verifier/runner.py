"""Capability registry and run orchestration."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Tuple

from .auth.session import SessionController
from .browser.alerts import AlertMonitor
from .browser.session import open_browser
from .core.action_log import ActionLog
from .core.config import VerifierConfig
from .core.errors import InvalidArgumentError
from .extraction.strategies import QuoteExtractor
from .forms.widgets import FormFiller
from .navigation.navigator import Navigator

logger = logging.getLogger(__name__)

ALERT_TEXT = "Quotes verifier alert"


@dataclass(frozen=True)
class Capability:
    """A named zero-argument operation and the check applied to its result."""

    name: str
    description: str
    invoke: Callable[[], Any]
    check: Callable[[Any], bool] = bool


@dataclass
class QuotesVerifier:
    """Wires every component around one page and one action log."""

    page: Any
    config: VerifierConfig
    log: ActionLog = field(default_factory=ActionLog)

    def __post_init__(self) -> None:
        self.navigator = Navigator(self.page, self.config)
        self.extractor = QuoteExtractor(self.page, self.navigator, self.log, self.config)
        self.session = SessionController(self.page, self.navigator, self.config)
        self.forms = FormFiller(self.page, self.navigator, self.log, self.config)
        self.alerts = AlertMonitor(self.page, timeout=self.config.wait_timeout)

    def login(self) -> bool:
        return self.session.login(self.config.username, self.config.password)

    def logout(self) -> bool:
        return self.session.logout()

    def raise_alert(self) -> bool:
        return self.alerts.raise_alert(ALERT_TEXT)

    def handle_alert(self) -> bool:
        return self.alerts.handle_alert()

    def fill_form(self) -> bool:
        self.forms.fill_form()
        return all(outcome for name, outcome in self.log.entries.items() if name.startswith("form."))


def build_capabilities(verifier: QuotesVerifier) -> Tuple[Capability, ...]:
    """Returns the capabilities in the order a run executes them."""

    extractor = verifier.extractor
    expected = verifier.config.expected_count

    def has_expected_count(records: Any) -> bool:
        return len(records) == expected

    def non_empty(value: Any) -> bool:
        return bool(value)

    return (
        Capability("parse_random_quote", "Parsed random quote", extractor.parse_random_quote, non_empty),
        Capability("login", "Logged in", verifier.login),
        Capability("parse_quotes_base", "Parsed all quotes using base page", extractor.parse_quotes_base, has_expected_count),
        Capability("logout", "Logged out", verifier.logout),
        Capability("raise_alert", "Alert raised", verifier.raise_alert),
        Capability("handle_alert", "Alert handled", verifier.handle_alert),
        Capability("parse_quotes_scroll", "Parsed all quotes using AJAX scrolling", extractor.parse_quotes_scroll, has_expected_count),
        Capability("parse_quotes_by_filter", "Parsed quotes using search filters", extractor.parse_quotes_by_filter, non_empty),
        Capability("parse_quotes_frames", "Parsed quotes from 2 frames", extractor.parse_quotes_frames),
        Capability("parse_quotes_js", "Parsed all quotes using JS generated page", extractor.parse_quotes_js, has_expected_count),
        Capability("parse_quotes_tableful", "Parsed all quotes using tableful layout", extractor.parse_quotes_tableful, has_expected_count),
        Capability("parse_quotes_iframe", "Parsed random quote inside iframe", extractor.parse_quotes_iframe, non_empty),
        Capability("fill_form", "Filled every form widget", verifier.fill_form),
    )


def select_capabilities(
    capabilities: Iterable[Capability], names: Optional[Iterable[str]] = None
) -> Tuple[Capability, ...]:
    registry = tuple(capabilities)
    if not names:
        return registry
    known = {capability.name: capability for capability in registry}
    selected = []
    for name in names:
        if name not in known:
            raise InvalidArgumentError(f"Unknown capability: {name!r}")
        selected.append(known[name])
    return tuple(selected)


def run_capabilities(capabilities: Iterable[Capability], log: ActionLog) -> bool:
    """Invokes each capability in order; the first raised error aborts the rest."""

    for capability in capabilities:
        logger.info("Running %s", capability.name)
        result = capability.invoke()
        log.record(capability.name, bool(capability.check(result)))
        print(f"    {capability.description}: {log[capability.name]}")
    return log.summary()


def run(
    config: VerifierConfig,
    *,
    only: Optional[Iterable[str]] = None,
    browser_factory: Callable[[VerifierConfig], Any] = open_browser,
) -> ActionLog:
    """Runs the capabilities against a fresh browser session and reports the outcome."""

    started = time.monotonic()
    log = ActionLog()
    try:
        with browser_factory(config) as page:
            verifier = QuotesVerifier(page, config, log)
            capabilities = select_capabilities(build_capabilities(verifier), only)
            passed = run_capabilities(capabilities, log)
        print("No errors" if passed else f"Errors: {', '.join(log.failures)}")
        if config.report_path:
            log.save(config.report_path)
            print(f"[+] Report saved to {config.report_path}")
    finally:
        print(f"Elapsed time: {time.monotonic() - started:.2f}s")
    return log
