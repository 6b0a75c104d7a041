"""Login/logout transitions against the fixture site."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..core.config import VerifierConfig
from ..core.endpoints import Endpoint
from ..core.errors import PreconditionViolationError
from ..core.waiting import browser_wait
from ..navigation.navigator import Navigator

logger = logging.getLogger(__name__)

LOGOUT_LINK = "a[href='/logout']"
LOGIN_LINK = "a[href='/login']"
USERNAME_INPUT = "input#username"
PASSWORD_INPUT = "input#password"
SUBMIT_INPUT = "input[type='submit']"


@dataclass
class SessionController:
    """Moves the session between the logged-out and logged-in states.

    A rendered logout link means "authenticated", a rendered login link means
    "anonymous". Each transition either ends in the opposite state or raises.
    """

    page: Any
    navigator: Navigator
    config: VerifierConfig

    def _present(self, selector: str) -> bool:
        return self.page.locator(selector).count() > 0

    @property
    def logged_in(self) -> bool:
        return self._present(LOGOUT_LINK)

    def _wait_for(self, selector: str, description: str) -> None:
        with browser_wait(description, self.config.wait_timeout) as timeout:
            self.page.wait_for_selector(selector, state="attached", timeout=timeout)

    def login(self, username: str, password: str) -> bool:
        if self.logged_in:
            raise PreconditionViolationError("You're already logged in")

        self.navigator.switch_to(Endpoint.LOGIN)
        self.page.locator(USERNAME_INPUT).fill(username)
        self.page.locator(PASSWORD_INPUT).fill(password)
        self.page.locator(SUBMIT_INPUT).click()

        self._wait_for(LOGOUT_LINK, "logout link after login")
        logger.info("Logged in as %s", username)
        return self.logged_in

    def logout(self) -> bool:
        if not self.logged_in:
            raise PreconditionViolationError("You aren't logged in")

        self.page.locator(LOGOUT_LINK).first.click()
        self._wait_for(LOGIN_LINK, "login link after logout")
        logger.info("Logged out")
        return self._present(LOGIN_LINK) and not self.logged_in
