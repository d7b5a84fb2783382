from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_syslog import cli as cli_module
from lib_log_syslog import config as syslog_config
from lib_log_syslog.runtime import RuntimeConfig, build_runtime_settings


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    """Reset shared dotenv state around each test."""

    syslog_config._reset_dotenv_state_for_testing()
    yield
    syslog_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values the runtime then picks up."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_SYSLOG_ENDPOINT=dotenv-collector:6514\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_SYSLOG_ENDPOINT", raising=False)

    try:
        loaded = syslog_config.enable_dotenv()

        assert loaded == env_file.resolve()
        assert os.environ["LOG_SYSLOG_ENDPOINT"] == "dotenv-collector:6514"
        assert build_runtime_settings(RuntimeConfig()).sink.endpoint == ("dotenv-collector", 6514)
    finally:
        os.environ.pop("LOG_SYSLOG_ENDPOINT", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LOG_SYSLOG_SENDER=dotenv-sender\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("LOG_SYSLOG_SENDER", "real-sender")

    result = syslog_config.enable_dotenv()

    assert result is not None
    assert os.environ["LOG_SYSLOG_SENDER"] == "real-sender"


def test_enable_dotenv_searches_from_explicit_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    project = tmp_path / "project"
    deep = project / "src" / "pkg"
    deep.mkdir(parents=True)
    (project / ".env").write_text("LOG_SYSLOG_FACILITY=local6\n")
    monkeypatch.delenv("LOG_SYSLOG_FACILITY", raising=False)

    try:
        assert syslog_config.enable_dotenv(search_from=deep) == (project / ".env").resolve()
        assert os.environ["LOG_SYSLOG_FACILITY"] == "local6"
    finally:
        os.environ.pop("LOG_SYSLOG_FACILITY", None)


def test_enable_dotenv_loads_only_once(tmp_path: Path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / ".env").write_text("")
    (second / ".env").write_text("")

    assert syslog_config.enable_dotenv(search_from=first) == (first / ".env").resolve()
    assert syslog_config.enable_dotenv(search_from=second) == (first / ".env").resolve()


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(syslog_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(syslog_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {syslog_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {syslog_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []
