import pytest

from config.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in (
        "CONTAINS_SEQUENCE",
        "CONTAINS_PRESENT_TARGET",
        "CONTAINS_ABSENT_TARGET",
        "CONTAINS_LOG_LEVEL",
        "CONTAINS_VERIFICATION__MAX_LENGTH",
        "CONTAINS_VERIFICATION__ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
