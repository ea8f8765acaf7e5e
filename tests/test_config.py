"""Tests for settings loading and logging setup."""

import logging
from collections.abc import Callable, Iterator

import pytest
import structlog

from ratecore.config import AppSettings, CliSettings
from ratecore.funding.engine import compute_funding_and_interest
from ratecore.funding.models import MarketSnapshot
from ratecore.logging import get_logger, setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettings:
    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.cli.indent == 2
        assert settings.cli.default_payoff_decimals == 0

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RATECORE_LOG_LEVEL", "DEBUG")
        assert AppSettings().log_level == "DEBUG"

    def test_cli_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RATECORE_CLI_DEFAULT_PAYOFF_DECIMALS", "-2")
        assert CliSettings().default_payoff_decimals == -2


class TestLogging:
    def test_setup_installs_single_handler(self, restore_root_logger: None) -> None:
        setup_logging("debug")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_root_logger: None) -> None:
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_json_format(
        self,
        restore_root_logger: None,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("RATECORE_LOG_FORMAT", "json")
        settings = AppSettings()
        assert settings.log_format == "json"
        setup_logging("INFO", settings.log_format)
        get_logger("ratecore.test").info("json_logging_configured", value="1")
        assert '"event": "json_logging_configured"' in capsys.readouterr().err

    def test_library_use_without_setup_stays_off_stdout(
        self,
        restore_root_logger: None,
        make_snapshot: Callable[..., MarketSnapshot],
        now: int,
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Before setup_logging, engine events go to stdlib logging only."""
        structlog.reset_defaults()
        caplog.set_level(logging.DEBUG)
        compute_funding_and_interest(make_snapshot(), now_seconds=now)
        assert capsys.readouterr().out == ""
        assert "funding_and_interest_computed" in caplog.text
