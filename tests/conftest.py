import pytest

from autoapply.contexts.workflow.config import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Keep a developer's AUTOAPPLY_CONFIG from leaking into tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
