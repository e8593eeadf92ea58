"""Tests for the fsbox-server CLI."""

import logging
import os
import sys
from unittest.mock import patch

import pytest

from fsbox import server_cli
from fsbox.modules.config import config_manager


def _run_main(argv, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["fsbox-server", *argv])
    with pytest.raises(SystemExit) as exc_info:
        server_cli.main()
    return exc_info.value.code


def test_parser_defaults():
    args = server_cli.build_parser().parse_args([])
    assert args.transport == "stdio"
    assert args.base_dir is None
    assert args.env_file is None
    assert args.port is None


def test_parser_rejects_unknown_transport():
    with pytest.raises(SystemExit):
        server_cli.build_parser().parse_args(["--transport", "ftp"])


def test_version_flag(monkeypatch, capsys):
    assert _run_main(["--version"], monkeypatch) == 0
    assert "fsbox-server version" in capsys.readouterr().out


def test_missing_env_file_exits_with_two(monkeypatch, tmp_path, capsys):
    assert _run_main(["--env", str(tmp_path / "missing.env")], monkeypatch) == 2
    assert "env file not found" in capsys.readouterr().err


def test_base_dir_and_env_file_are_applied(monkeypatch, tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("LOG_LEVEL=WARNING\n")
    # load_dotenv writes os.environ directly; register the keys so monkeypatch removes them afterwards
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("LOG_LEVEL")
    monkeypatch.setenv("MCP_FILESYSTEM_BASE_DIR", "placeholder")

    with patch("fsbox.server_cli.run_server", return_value=0) as mock_run:
        code = _run_main(["--env", str(env_file), "--base-dir", str(tmp_path / "box")], monkeypatch)

    assert code == 0
    mock_run.assert_called_once()
    assert os.environ["MCP_FILESYSTEM_BASE_DIR"] == str(tmp_path / "box")
    assert os.environ["LOG_LEVEL"] == "WARNING"


def test_run_server_reloads_settings_and_serves(monkeypatch, tmp_path):
    monkeypatch.setenv("MCP_FILESYSTEM_BASE_DIR", str(tmp_path / "box"))
    args = server_cli.build_parser().parse_args(["--transport", "http", "--port", "9100"])

    with patch("fsbox.core.logging_config.setup_logging") as mock_setup, \
            patch("fsbox.mcp.filesystem.main.serve", return_value=0) as mock_serve:
        assert server_cli.run_server(args) == 0

    mock_setup.assert_called_once()
    mock_serve.assert_called_once_with(transport="http", host="127.0.0.1", port=9100)
    assert config_manager.app_settings.base_dir == str(tmp_path / "box")


def test_run_server_stdio_has_no_host_or_port(monkeypatch):
    args = server_cli.build_parser().parse_args([])
    with patch("fsbox.core.logging_config.setup_logging"), \
            patch("fsbox.mcp.filesystem.main.serve", return_value=1) as mock_serve:
        assert server_cli.run_server(args) == 1
    mock_serve.assert_called_once_with(transport="stdio", host=None, port=None)


def test_run_server_warns_about_unusable_base_dir(monkeypatch, tmp_path, caplog):
    (tmp_path / "file.txt").write_text("x")
    monkeypatch.setenv("MCP_FILESYSTEM_BASE_DIR", str(tmp_path / "file.txt"))
    args = server_cli.build_parser().parse_args([])

    with patch("fsbox.core.logging_config.setup_logging"), \
            patch("fsbox.mcp.filesystem.main.serve", return_value=0) as mock_serve, \
            caplog.at_level(logging.WARNING, logger="fsbox.server_cli"):
        assert server_cli.run_server(args) == 0

    mock_serve.assert_called_once()
    assert "Configuration checks failed: base_dir" in caplog.text
