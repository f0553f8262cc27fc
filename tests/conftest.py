"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from ovh_api.api import signing
from ovh_api.core.constants import (
    ENV_APPLICATION_KEY,
    ENV_APPLICATION_SECRET,
    ENV_CONSUMER_KEY,
    ENV_ENDPOINT,
    LOGGER_NAME,
)

APP_KEY = "my_app_key"
APP_SECRET = "s3cr3t"
CONSUMER_KEY = "ck"
SERVER_TIME = 1000
LOCAL_TIME = 1010


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse."""

    def __init__(
        self,
        status: int = 200,
        body: str | bytes = "",
        read_error: BaseException | None = None,
    ) -> None:
        self.status = status
        self._body = body
        self._read_error = read_error
        self.released = False

    async def text(self) -> str:
        if self._read_error is not None:
            raise self._read_error
        if isinstance(self._body, bytes):
            return self._body.decode("utf-8")
        return self._body

    def release(self) -> None:
        self.released = True


class FakeSession:
    """Records requests; answers /auth/time with ``server_time``."""

    def __init__(self) -> None:
        self.closed = False
        self.calls: list[dict[str, Any]] = []
        self.server_time: str | bytes = str(SERVER_TIME)
        self.status = 200
        self.body: str | bytes = '{"ok":true}'
        self.error: BaseException | None = None
        self.read_error: BaseException | None = None

    async def request(self, method: str, url: str, headers: dict[str, str] | None = None, data: Any = None) -> FakeResponse:
        self.calls.append({"method": method, "url": url, "headers": dict(headers or {}), "data": data})
        if self.error is not None:
            raise self.error
        if url.endswith("/auth/time"):
            return FakeResponse(200, self.server_time)
        return FakeResponse(self.status, self.body, self.read_error)

    async def close(self) -> None:
        self.closed = True

    @property
    def signed_calls(self) -> list[dict[str, Any]]:
        return [call for call in self.calls if not call["url"].endswith("/auth/time")]


@pytest.fixture()
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture()
def frozen_time(monkeypatch: pytest.MonkeyPatch) -> int:
    """Pin the local clock to LOCAL_TIME."""
    monkeypatch.setattr(signing, "current_time", lambda: LOCAL_TIME)
    return LOCAL_TIME


@pytest.fixture()
def write_conf(tmp_path: Path) -> Callable[..., Path]:
    """Write an ovh.conf, optionally dropping keys."""

    def _write(endpoint: str = "ovh-eu", omit: tuple[str, ...] = ()) -> Path:
        lines = ["[default]"]
        if "endpoint" not in omit:
            lines.append(f"endpoint={endpoint}")
        lines.append("")
        lines.append(f"[{endpoint}]")
        values = {
            "application_key": APP_KEY,
            "application_secret": APP_SECRET,
            "consumer_key": CONSUMER_KEY,
        }
        for key, value in values.items():
            if key not in omit:
                lines.append(f"{key}={value}")
        path = tmp_path / "ovh.conf"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove OVH_* variables and restore them after the test."""
    for var in (ENV_ENDPOINT, ENV_APPLICATION_KEY, ENV_APPLICATION_SECRET, ENV_CONSUMER_KEY):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch


@pytest.fixture(autouse=True)
def _reset_logger() -> Any:
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
