"""Tests for logging setup."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from conftest import APP_KEY, APP_SECRET, CONSUMER_KEY, FakeSession
from ovh_api.api.async_client import AsyncOvhClient
from ovh_api.api.signing import Redacted
from ovh_api.core.logger import setup_logging


def _flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def test_console_only_without_log_dir() -> None:
    logger = setup_logging(level="DEBUG")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_is_idempotent() -> None:
    first = setup_logging()
    second = setup_logging(level="ERROR")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.ERROR


def test_log_dir_creates_both_files(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"

    logger = setup_logging(level="DEBUG", log_dir=str(log_dir))
    logger.error("falha ao ler %s", "/me")
    _flush(logger)

    assert len(logger.handlers) == 3
    assert (log_dir / "ovh_api.log").exists()
    assert "falha ao ler /me" in (log_dir / "ovh_api_errors.log").read_text(encoding="utf-8")


def test_log_files_never_contain_secrets(tmp_path: Path, fake_session: FakeSession) -> None:
    logger = setup_logging(level="DEBUG", log_dir=str(tmp_path))
    client = AsyncOvhClient("ovh-eu", APP_KEY, APP_SECRET, CONSUMER_KEY, session=fake_session)  # type: ignore[arg-type]

    asyncio.run(client.post("/me/contact", {"x": 1}))
    logger.error("credenciais: %s", Redacted(APP_SECRET))
    _flush(logger)

    signature = fake_session.signed_calls[0]["headers"]["X-Ovh-Signature"]
    debug_log = (tmp_path / "ovh_api.log").read_text(encoding="utf-8")
    error_log = (tmp_path / "ovh_api_errors.log").read_text(encoding="utf-8")
    assert "POST https://eu.api.ovh.com/1.0/me/contact" in debug_log
    for text in (debug_log, error_log):
        assert APP_SECRET not in text
        assert signature not in text
        assert f"'{CONSUMER_KEY}'" not in text
