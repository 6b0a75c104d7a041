import json

import pytest

from quotes_verifier.browser.alerts import AlertMonitor
from quotes_verifier.core.errors import PreconditionViolationError, WaitTimeoutError
from tests.helpers.fake_browser import FakeDialog, FakePage


def _alerting_page():
    page = FakePage()
    dialogs = []

    def open_dialog(page, script):
        message = json.loads(script[len("window.alert("):-1])
        dialogs.append(FakeDialog(message))
        page.emit("dialog", dialogs[-1])

    page.on_evaluate = open_dialog
    return page, dialogs


def _monitor(page):
    return AlertMonitor(page, timeout=0.2)


def test_raise_then_handle(capsys):
    page, dialogs = _alerting_page()
    monitor = _monitor(page)

    assert monitor.raise_alert("Hello there") is True
    assert dialogs[0].dismissed
    assert monitor.handle_alert() is True
    assert "Alert text: Hello there" in capsys.readouterr().out
    assert monitor.seen == ["Hello there"]


def test_handle_without_alert_is_rejected():
    page, _ = _alerting_page()
    monitor = _monitor(page)

    with pytest.raises(PreconditionViolationError, match="Alert does not exist"):
        monitor.handle_alert()


def test_handled_alert_cannot_be_handled_again():
    page, _ = _alerting_page()
    monitor = _monitor(page)
    monitor.raise_alert("once")
    monitor.handle_alert()

    with pytest.raises(PreconditionViolationError):
        monitor.handle_alert()


def test_raise_times_out_when_no_dialog_opens():
    monitor = _monitor(FakePage())

    with pytest.raises(WaitTimeoutError):
        monitor.raise_alert("nobody listens")
