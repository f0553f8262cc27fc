"""Request signing for the OVH API.

Every authenticated request carries a ``$1$`` SHA1 signature over
``secret+consumer_key+METHOD+url+body+timestamp``. The server recomputes it
and rejects the call on any mismatch, so the body and timestamp used here
must be exactly the ones sent on the wire.
"""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import dataclass, field
from typing import Any

from ovh_api.core.constants import (
    HEADER_APPLICATION,
    HEADER_CONSUMER,
    HEADER_CONTENT_TYPE,
    HEADER_SIGNATURE,
    HEADER_TIMESTAMP,
    INT64_MAX,
    INT64_MIN,
    SIGNATURE_PREFIX,
    SIGNATURE_SEPARATOR,
)
from ovh_api.core.exceptions import SerializationError, TransportError

REDACTED = "[REDACTED]"


class Redacted:
    """String wrapper that never renders its value.

    ``str()`` and ``repr()`` both hide the content; call :meth:`reveal` at
    the transport boundary only.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        self._value = value

    def reveal(self) -> str:
        return self._value

    def __str__(self) -> str:
        return REDACTED

    def __repr__(self) -> str:
        return f"Redacted({REDACTED!r})"

    def __format__(self, format_spec: str) -> str:
        return format(REDACTED, format_spec)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Redacted):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Redacted, self._value))

    def __bool__(self) -> bool:
        return bool(self._value)


HeaderValue = str | Redacted


@dataclass(frozen=True)
class Credentials:
    """Application and consumer credentials."""

    application_key: str
    application_secret: Redacted
    consumer_key: Redacted

    @classmethod
    def create(cls, application_key: str, application_secret: str, consumer_key: str) -> "Credentials":
        return cls(application_key, Redacted(application_secret), Redacted(consumer_key))


@dataclass(frozen=True)
class SignedRequest:
    """Per-call request context, discarded once the call completes."""

    method: str
    url: str
    body: str
    headers: dict[str, HeaderValue] = field(default_factory=dict)

    def wire_headers(self) -> dict[str, str]:
        """Headers with sensitive values revealed, for the transport only."""
        return {
            name: value.reveal() if isinstance(value, Redacted) else value
            for name, value in self.headers.items()
        }

    @property
    def data(self) -> bytes | None:
        """Body bytes to transmit, or None for bodyless requests."""
        return self.body.encode("utf-8") if self.body else None


def current_time() -> int:
    """Local Unix time in seconds."""
    return int(time.time())


def check_int64(value: int, what: str) -> int:
    """Raise TransportError when value does not fit a signed 64-bit integer."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise TransportError(f"{what} out of range: {value}")
    return value


def parse_time_delta(body: str, now: int | None = None) -> int:
    """Turn an ``/auth/time`` response body into ``local - server`` seconds.

    Raises:
        TransportError: Body is not a non-negative integer, or the delta
            does not fit a signed 64-bit integer.
    """
    try:
        server_time = int(body.strip())
    except ValueError as exc:
        raise TransportError(f"invalid server time {body!r}", cause=exc) from exc
    if server_time < 0:
        raise TransportError(f"invalid server time {body!r}")
    if now is None:
        now = current_time()
    return check_int64(now - server_time, "time delta")


def make_timestamp(time_delta: int, now: int | None = None) -> str:
    """Return ``now + time_delta`` as a decimal string."""
    if now is None:
        now = current_time()
    return str(check_int64(now + time_delta, "timestamp"))


def compute_signature(
    application_secret: str,
    consumer_key: str,
    method: str,
    url: str,
    body: str,
    timestamp: str,
) -> str:
    """Compute the ``$1$`` request signature.

    Args:
        application_secret: Application secret.
        consumer_key: Consumer key.
        method: HTTP method, upper case.
        url: Full request URL.
        body: Serialized body, empty string for bodyless requests.
        timestamp: Decimal timestamp string sent in ``X-Ovh-Timestamp``.

    Returns:
        ``"$1$"`` followed by the lowercase hex SHA1 digest.
    """
    payload = SIGNATURE_SEPARATOR.join(
        [application_secret, consumer_key, method, url, body, timestamp]
    )
    return SIGNATURE_PREFIX + hashlib.sha1(payload.encode("utf-8")).hexdigest()


def encode_body(data: Any) -> str:
    """Serialize a request body to compact JSON.

    Called once per request; the result is both signed and transmitted.

    Raises:
        SerializationError: ``data`` is not JSON serializable, or holds
            NaN or infinite floats.
    """
    try:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot encode request body: {exc}", cause=exc) from exc


class RequestSigner:
    """Builds request contexts for one set of credentials and base URL."""

    def __init__(self, base_url: str, credentials: Credentials) -> None:
        self.base_url = base_url
        self.credentials = credentials

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def default_headers(self) -> dict[str, HeaderValue]:
        return {HEADER_APPLICATION: self.credentials.application_key}

    def unsigned(self, method: str, path: str) -> SignedRequest:
        """Request context carrying only the application header."""
        return SignedRequest(method=method, url=self.url(path), body="", headers=self.default_headers())

    def sign(
        self,
        method: str,
        path: str,
        body: str,
        time_delta: int,
        content_type: str | None = None,
    ) -> SignedRequest:
        """Build a fully signed request context.

        Args:
            method: HTTP method, used both for signing and on the wire.
            path: API path, appended to the base URL.
            body: Serialized body, empty string for GET/DELETE.
            time_delta: Value returned by ``time_delta()`` for this call.
            content_type: Content-type header for bodied requests.
        """
        url = self.url(path)
        timestamp = make_timestamp(time_delta)
        signature = compute_signature(
            self.credentials.application_secret.reveal(),
            self.credentials.consumer_key.reveal(),
            method,
            url,
            body,
            timestamp,
        )

        headers = self.default_headers()
        headers[HEADER_CONSUMER] = self.credentials.consumer_key
        headers[HEADER_TIMESTAMP] = Redacted(timestamp)
        headers[HEADER_SIGNATURE] = Redacted(signature)
        if content_type is not None:
            headers[HEADER_CONTENT_TYPE] = content_type

        return SignedRequest(method=method, url=url, body=body, headers=headers)
