import pytest

from asyncsignals.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Each test reads configuration from a clean environment."""
    for name in (
        "ASYNCSIGNALS_SKIP_EQUAL",
        "ASYNCSIGNALS_NOTIFY_ON_SUBSCRIBE",
        "ASYNCSIGNALS_RAISE_SUBSCRIBER_ERRORS",
        "ASYNCSIGNALS_DEBUG",
        "ASYNCSIGNALS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
