import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from quotes_verifier.core.errors import WaitTimeoutError
from quotes_verifier.core.waiting import browser_wait, to_milliseconds


def test_browser_wait_yields_milliseconds():
    with browser_wait("logout link", 2.5) as timeout:
        assert timeout == 2500

    assert to_milliseconds(0.2) == 200


def test_playwright_timeout_becomes_wait_timeout():
    with pytest.raises(WaitTimeoutError) as excinfo:
        with browser_wait("logout link", 0.05):
            raise PlaywrightTimeoutError("Timeout 50ms exceeded.")

    assert excinfo.value.timeout == 0.05
    assert "logout link" in str(excinfo.value)


def test_other_errors_pass_through():
    with pytest.raises(RuntimeError):
        with browser_wait("logout link", 1):
            raise RuntimeError("browser closed")
