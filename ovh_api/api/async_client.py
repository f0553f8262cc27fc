"""Async client for the OVH API."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from ovh_api.api.base import BaseOvhClient
from ovh_api.api.signing import SignedRequest, encode_body, parse_time_delta
from ovh_api.core.constants import AUTH_TIME_PATH, JSON_CONTENT_TYPE
from ovh_api.core.exceptions import TransportError
from ovh_api.core.logger import logger


class AsyncOvhClient(BaseOvhClient):
    """Signed-request client over a shared aiohttp session.

    Holds no per-request state, so one instance can serve concurrent
    callers. Every authenticated call performs two sequential round trips:
    ``/auth/time`` then the request itself.
    """

    def __init__(
        self,
        endpoint: str,
        application_key: str,
        application_secret: str,
        consumer_key: str,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(endpoint, application_key, application_secret, consumer_key, timeout=timeout)
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Return the open session, creating one on first use."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
            self._owns_session = True
        return self._session

    async def _send(self, request: SignedRequest) -> aiohttp.ClientResponse:
        session = await self._get_session()
        logger.debug("%s %s headers=%s", request.method, request.url, request.headers)
        try:
            response = await session.request(
                request.method,
                request.url,
                headers=request.wire_headers(),
                data=request.data,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}", cause=exc) from exc
        logger.debug("%s %s -> %s", request.method, request.url, response.status)
        return response

    async def _call(self, method: str, path: str, body: str = "", bodied: bool = False) -> aiohttp.ClientResponse:
        time_delta = await self.time_delta()
        request = self.signer.sign(
            method,
            path,
            body,
            time_delta,
            content_type=JSON_CONTENT_TYPE if bodied else None,
        )
        return await self._send(request)

    async def time_delta(self) -> int:
        """Return local time minus API server time, in seconds.

        Raises:
            TransportError: Request failed or the body is not a timestamp.
        """
        response = await self.get_noauth(AUTH_TIME_PATH)
        try:
            body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as exc:
            raise TransportError(f"reading {AUTH_TIME_PATH} failed: {exc}", cause=exc) from exc
        finally:
            response.release()
        return parse_time_delta(body)

    async def get_noauth(self, path: str) -> aiohttp.ClientResponse:
        """GET without signature; only ``X-Ovh-Application`` is sent."""
        return await self._send(self.signer.unsigned("GET", path))

    async def get(self, path: str) -> aiohttp.ClientResponse:
        return await self._call("GET", path)

    async def delete(self, path: str) -> aiohttp.ClientResponse:
        return await self._call("DELETE", path)

    async def post(self, path: str, data: Any) -> aiohttp.ClientResponse:
        """POST ``data`` as JSON; the serialized text is signed and sent as-is."""
        return await self._call("POST", path, encode_body(data), bodied=True)

    async def put(self, path: str, data: Any) -> aiohttp.ClientResponse:
        """PUT ``data`` as JSON; the serialized text is signed and sent as-is."""
        return await self._call("PUT", path, encode_body(data), bodied=True)

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("OVH API session closed")

    async def __aenter__(self) -> "AsyncOvhClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
