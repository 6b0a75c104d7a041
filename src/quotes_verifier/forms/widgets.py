"""Multi-widget form exercised on the form endpoint.

Every mutation is read back right after it is made and the comparison is
recorded in the action log under ``form.<widget>``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Tuple

from ..core.action_log import ActionLog
from ..core.config import VerifierConfig
from ..core.endpoints import Endpoint
from ..core.errors import ElementNotFoundError
from ..core.waiting import browser_wait
from ..navigation.navigator import Navigator

logger = logging.getLogger(__name__)

FORM_SELECTOR = "form#quote-form"
TEXT_INPUT = "input[name='name']"
TEXTAREA = "textarea[name='comment']"
RADIO_GROUP = "input[type='radio'][name='gender']"
CHECKBOX_GROUP = "input[type='checkbox'][name='topics']"
DROPDOWN_TOGGLE = "div.custom-select .select-selected"
DROPDOWN_ITEMS = "div.custom-select .select-items div"
TABLE_RADIO_ROWS = "table#rating tr"
EMAIL_BY_XPATH = "xpath=//form//input[@type='email']"
EMAIL_BY_NAME = "input[name='email']"
SUBMIT_BUTTON = "form button[type='submit']"


@dataclass(frozen=True)
class FormValues:
    """Values written into the form during a run."""

    name: str = "Quote Collector"
    comment: str = "Checking every widget on the form page."
    gender: str = "other"
    topics: Tuple[str, ...] = ("life", "humor")
    dropdown: str = "Albert Einstein"
    rating_row: str = "Excellent"
    email: str = "collector@example.com"
    confirmation: str = "Thank you"


@dataclass
class FormFiller:
    page: Any
    navigator: Navigator
    log: ActionLog
    config: VerifierConfig
    values: FormValues = field(default_factory=FormValues)

    def _locate(self, selector: str, description: str) -> Any:
        locator = self.page.locator(selector)
        if locator.count() == 0:
            raise ElementNotFoundError(description, self.page.url)
        return locator

    def fill_form(self) -> None:
        self.navigator.switch_to(Endpoint.FORM)
        self._locate(FORM_SELECTOR, "Form")

        self.set_text_input()
        self.set_textarea()
        self.set_radio()
        self.set_checkboxes()
        self.set_dropdown()
        self.set_table_radio()
        self.set_by_raw_selector()
        self.submit()

    # ------------------------------------------------------------------
    # Widgets
    # ------------------------------------------------------------------
    def set_text_input(self) -> bool:
        name_input = self._locate(TEXT_INPUT, "Name input")
        name_input.fill(self.values.name)
        return self.log.record("form.text_input", name_input.input_value() == self.values.name)

    def set_textarea(self) -> bool:
        area = self._locate(TEXTAREA, "Comment textarea")
        area.fill(self.values.comment)
        return self.log.record("form.textarea", area.input_value() == self.values.comment)

    def set_radio(self) -> bool:
        radio = self._locate(f"{RADIO_GROUP}[value='{self.values.gender}']", "Gender radio")
        radio.check()
        return self.log.record("form.radio", radio.is_checked())

    def set_checkboxes(self) -> bool:
        boxes = self._locate(CHECKBOX_GROUP, "Topic checkboxes")
        for box in boxes.all():
            value = box.get_attribute("value")
            if value in self.values.topics:
                box.check()
            else:
                box.uncheck()
        checked = {box.get_attribute("value") for box in boxes.all() if box.is_checked()}
        return self.log.record("form.checkboxes", checked == set(self.values.topics))

    def set_dropdown(self) -> bool:
        """Drives the JavaScript rendered dropdown, which has no native ``select``."""

        toggle = self._locate(DROPDOWN_TOGGLE, "Custom dropdown")
        toggle.click()
        items = self.page.locator(DROPDOWN_ITEMS).filter(has_text=self.values.dropdown)
        with browser_wait(f"dropdown item {self.values.dropdown!r}", self.config.wait_timeout) as timeout:
            items.first.wait_for(state="visible", timeout=timeout)
        items.first.click()
        return self.log.record(
            "form.dropdown", toggle.inner_text().strip() == self.values.dropdown
        )

    def set_table_radio(self) -> bool:
        row = self._locate(TABLE_RADIO_ROWS, "Rating table").filter(has_text=self.values.rating_row)
        if row.count() == 0:
            raise ElementNotFoundError(f"Rating row {self.values.rating_row!r}", self.page.url)
        radio = row.locator("input[type='radio']").first
        radio.check()
        return self.log.record("form.table_radio", radio.is_checked())

    def set_by_raw_selector(self) -> bool:
        """Writes through an XPath path and reads back through the name attribute."""

        by_xpath = self._locate(EMAIL_BY_XPATH, "Email input (XPath)")
        by_xpath.fill(self.values.email)
        by_name = self._locate(EMAIL_BY_NAME, "Email input (name)")
        return self.log.record(
            "form.raw_selector",
            by_name.input_value() == self.values.email == by_xpath.input_value(),
        )

    def submit(self) -> bool:
        self._locate(SUBMIT_BUTTON, "Form submit button").click()
        self.page.wait_for_load_state()
        marker = self.values.confirmation
        confirmed = marker in self.page.locator("body").inner_text() or marker in self.page.title()
        logger.info("Form submitted; confirmation marker %s", "found" if confirmed else "missing")
        return self.log.record("form.submitted", confirmed)
