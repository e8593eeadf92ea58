from pathlib import Path

import pytest

from fsbox.modules.config import config_manager
from fsbox.modules.sandbox.dispatcher import ToolDispatcher
from fsbox.modules.sandbox.session import SandboxSession

_SETTINGS_ENV_VARS = (
    "MCP_FILESYSTEM_BASE_DIR",
    "LOG_LEVEL",
    "APP_LOG_DIR",
    "DEBUG_MODE",
    "FEATURE_METRICS_LOGGING_ENABLED",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from the caller's environment and cached settings."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_manager.reload_configs()
    yield
    config_manager.reload_configs()


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """An existing, empty sandbox root."""
    path = tmp_path / "root"
    path.mkdir()
    return path


@pytest.fixture
def session(root: Path) -> SandboxSession:
    return SandboxSession(root)


@pytest.fixture
def dispatcher(session: SandboxSession) -> ToolDispatcher:
    return ToolDispatcher(session)
