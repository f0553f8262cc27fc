"""Custom exceptions for the OVH API client."""

from __future__ import annotations


class OvhClientError(Exception):
    """Base exception for client errors."""


class ConfigurationError(OvhClientError):
    """Configuration error.

    Raised at construction time: unreadable config file, missing key or
    unknown endpoint. Never retried.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class UnknownEndpointError(ConfigurationError):
    """Endpoint identifier is not in the registry."""

    def __init__(self, endpoint: str) -> None:
        super().__init__(f"unknown endpoint `{endpoint}`", key="endpoint")
        self.endpoint = endpoint


class TransportError(OvhClientError):
    """Network failure or unusable server time response."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class SerializationError(OvhClientError):
    """Request body cannot be encoded as JSON."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
