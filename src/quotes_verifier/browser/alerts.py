"""Alert dialog handling."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..core.errors import PreconditionViolationError
from ..core.waiting import browser_wait

logger = logging.getLogger(__name__)


@dataclass
class AlertMonitor:
    """Captures dialogs opened by the page so they can be inspected later.

    Playwright blocks script execution while a dialog is open, so the listener
    dismisses each dialog as it arrives and keeps its message as the pending
    alert until ``handle_alert`` consumes it.
    """

    page: Any
    timeout: float = 5.0
    pending: Optional[str] = None
    seen: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.page.on("dialog", self._on_dialog)

    def _on_dialog(self, dialog: Any) -> None:
        message = dialog.message
        logger.debug("Dialog (%s) opened: %s", dialog.type, message)
        self.pending = message
        self.seen.append(message)
        dialog.dismiss()

    @property
    def exists(self) -> bool:
        return self.pending is not None

    def raise_alert(self, text: str) -> bool:
        """Opens ``window.alert(text)`` and reports whether that dialog was seen."""

        with browser_wait("alert dialog", self.timeout) as timeout:
            with self.page.expect_event("dialog", timeout=timeout) as dialog_info:
                self.page.evaluate(f"window.alert({json.dumps(text)})")
        return dialog_info.value.message == text and self.pending == text

    def handle_alert(self) -> bool:
        if not self.exists:
            raise PreconditionViolationError("Alert does not exist")
        print(f"Alert text: {self.pending}")
        self.pending = None
        return not self.exists
