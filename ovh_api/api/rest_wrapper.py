"""Blocking REST wrapper for OVH API calls."""

from __future__ import annotations

from typing import Any

import requests

from ovh_api.api.base import BaseOvhClient
from ovh_api.api.signing import SignedRequest, encode_body, parse_time_delta
from ovh_api.core.constants import AUTH_TIME_PATH, JSON_CONTENT_TYPE
from ovh_api.core.exceptions import TransportError
from ovh_api.core.logger import logger


class OvhClient(BaseOvhClient):
    """Signed-request client over a ``requests.Session``.

    Same protocol as :class:`ovh_api.api.async_client.AsyncOvhClient` for
    callers without an event loop.
    """

    def __init__(
        self,
        endpoint: str,
        application_key: str,
        application_secret: str,
        consumer_key: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(endpoint, application_key, application_secret, consumer_key, timeout=timeout)
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _send(self, request: SignedRequest) -> requests.Response:
        logger.debug("%s %s headers=%s", request.method, request.url, request.headers)
        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=request.wire_headers(),
                data=request.data,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}", cause=exc) from exc
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        return response

    def _call(self, method: str, path: str, body: str = "", bodied: bool = False) -> requests.Response:
        request = self.signer.sign(
            method,
            path,
            body,
            self.time_delta(),
            content_type=JSON_CONTENT_TYPE if bodied else None,
        )
        return self._send(request)

    def time_delta(self) -> int:
        """Return local time minus API server time, in seconds."""
        return parse_time_delta(self.get_noauth(AUTH_TIME_PATH).text)

    def get_noauth(self, path: str) -> requests.Response:
        """GET without signature; only ``X-Ovh-Application`` is sent."""
        return self._send(self.signer.unsigned("GET", path))

    def get(self, path: str) -> requests.Response:
        return self._call("GET", path)

    def delete(self, path: str) -> requests.Response:
        return self._call("DELETE", path)

    def post(self, path: str, data: Any) -> requests.Response:
        """Signed POST of ``data`` as JSON.

        Args:
            path: API path, e.g. ``/domain/zone/example.com/record``.
            data: Payload serialized once to JSON.
        """
        return self._call("POST", path, encode_body(data), bodied=True)

    def put(self, path: str, data: Any) -> requests.Response:
        """Signed PUT of ``data`` as JSON."""
        return self._call("PUT", path, encode_body(data), bodied=True)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "OvhClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
