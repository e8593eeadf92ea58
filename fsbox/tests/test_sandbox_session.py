"""Tests for SandboxSession root handling."""

import pytest

from fsbox.domain.errors import InvalidArgumentError, IOFailureError, NotFoundError
from fsbox.modules.config.config_manager import AppSettings
from fsbox.modules.sandbox.session import SandboxSession


def test_from_settings_uses_configured_base_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("MCP_FILESYSTEM_BASE_DIR", str(tmp_path / "configured"))
    session = SandboxSession.from_settings(AppSettings())
    assert session.root == str(tmp_path / "configured")


def test_from_settings_falls_back_to_uploads():
    session = SandboxSession.from_settings(AppSettings())
    assert session.root == "./uploads"


def test_ensure_root_creates_and_is_idempotent(tmp_path):
    session = SandboxSession(tmp_path / "a" / "b")
    session.ensure_root()
    session.ensure_root()
    assert (tmp_path / "a" / "b").is_dir()


def test_ensure_root_reports_blocked_creation(tmp_path):
    blocker = tmp_path / "occupied"
    blocker.write_text("not a directory")
    session = SandboxSession(blocker / "root")
    with pytest.raises(IOFailureError, match="Cannot create base directory"):
        session.ensure_root()


def test_set_root_requires_existing_directory(tmp_path):
    session = SandboxSession(tmp_path)
    with pytest.raises(NotFoundError):
        session.set_root(str(tmp_path / "missing"))
    assert session.root == str(tmp_path)


def test_set_root_rejects_files(tmp_path):
    (tmp_path / "f.txt").write_text("x")
    session = SandboxSession(tmp_path)
    with pytest.raises(InvalidArgumentError):
        session.set_root(str(tmp_path / "f.txt"))


def test_set_root_resolves_against_given_cwd(tmp_path):
    (tmp_path / "child").mkdir()
    session = SandboxSession("./uploads")
    new_root = session.set_root("child", cwd=tmp_path)
    assert new_root == str((tmp_path / "child").resolve())
    assert session.root == new_root


def test_repr_shows_root():
    assert repr(SandboxSession("/srv/data")) == "SandboxSession(root='/srv/data')"
