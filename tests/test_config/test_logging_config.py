"""Tests for the structlog setup."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from pfi_negotiator import __version__
from pfi_negotiator.config import Settings
from pfi_negotiator.logging_config import (
    REDACTED,
    get_logger,
    redact_secrets,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def _last_json_line(out: str) -> dict:
    return json.loads(out.strip().splitlines()[-1])


class TestSetupLogging:
    def test_production_emits_json_with_service_context(self, capsys) -> None:
        setup_logging(Settings(app_env="production", app_log_level="INFO"))

        get_logger("pfi_negotiator.test").info("offerings.fetched", pfi_did="did:dht:a", count=2)

        entry = _last_json_line(capsys.readouterr().out)
        assert entry["event"] == "offerings.fetched"
        assert entry["pfi_did"] == "did:dht:a"
        assert entry["level"] == "info"
        assert entry["service"] == "pfi-negotiator"
        assert entry["env"] == "production"
        assert entry["version"] == __version__

    def test_tokens_are_masked(self, capsys) -> None:
        setup_logging(Settings(app_env="staging", app_log_level="DEBUG"))

        get_logger("pfi_negotiator.test").warning(
            "issuer.credential_received", token="eyJ.payload.sig", subject_did="did:dht:alice"
        )

        entry = _last_json_line(capsys.readouterr().out)
        assert entry["token"] == REDACTED
        assert entry["subject_did"] == "did:dht:alice"

    def test_level_comes_from_settings(self, capsys) -> None:
        setup_logging(Settings(app_env="production", app_log_level="warning"))

        logger = get_logger("pfi_negotiator.test")
        logger.info("dropped")
        logger.warning("kept")

        lines = capsys.readouterr().out.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["kept"]
        assert logging.getLogger().level == logging.WARNING

    def test_development_uses_console_renderer(self) -> None:
        setup_logging(Settings(app_env="development"))

        [handler] = logging.getLogger().handlers
        assert isinstance(handler.formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_noisy_loggers_quieted(self) -> None:
        setup_logging(Settings(app_env="production", app_log_level="DEBUG"))
        assert logging.getLogger("httpx").level == logging.WARNING


class TestHelpers:
    @pytest.mark.parametrize(
        ("name", "level"),
        [("DEBUG", logging.DEBUG), ("error", logging.ERROR), ("verbose", logging.INFO)],
    )
    def test_resolve_level(self, name: str, level: int) -> None:
        assert resolve_level(name) == level

    def test_redact_secrets_leaves_other_keys(self) -> None:
        event = {"event": "x", "authorization": "Bearer abc", "credentials": ["jwt"], "count": 1}
        assert redact_secrets(None, "info", event) == {
            "event": "x",
            "authorization": REDACTED,
            "credentials": REDACTED,
            "count": 1,
        }
