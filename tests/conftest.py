# tests/conftest.py

import pytest

@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to isolate the config module from the real environment.

    This fixture runs automatically for every test (`autouse=True`) and clears
    the variables the Config object reads, so every test starts from defaults.
    """
    for key in ("JOB_MODE", "INTERVAL", "PAGE_SIZE", "NAMESPACE_FILE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_k8s_config_state(monkeypatch):
    """
    Autouse fixture that forgets any previously loaded cluster configuration,
    so tests never depend on the order in which they run.
    """
    from kubepulse.core import k8s_client

    monkeypatch.setattr(k8s_client, "_CONFIG_LOADED", False)
