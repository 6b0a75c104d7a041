import pytest

from quotes_verifier.core.action_log import ActionLog
from quotes_verifier.core.config import VerifierConfig
from tests.helpers.fixture_site import BASE_URL


@pytest.fixture
def config() -> VerifierConfig:
    return VerifierConfig(
        base_url=BASE_URL,
        navigation_timeout=0.2,
        wait_timeout=0.2,
        scroll_delay=0,
    )


@pytest.fixture
def log() -> ActionLog:
    return ActionLog()
