import pytest

from jpnorm.core.settings import get_settings


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Yield *monkeypatch* with the settings cache cleared before and after."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
