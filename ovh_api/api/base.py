"""Construction shared by the sync and async clients."""

from __future__ import annotations

import os
from typing import Any, TypeVar

from ovh_api.api.endpoints import resolve_endpoint
from ovh_api.api.signing import Credentials, RequestSigner
from ovh_api.core.config import ClientConfig, load_config, load_env_config
from ovh_api.core.exceptions import UnknownEndpointError

ClientT = TypeVar("ClientT", bound="BaseOvhClient")


class BaseOvhClient:
    """Resolves the endpoint and owns the credentials."""

    def __init__(
        self,
        endpoint: str,
        application_key: str,
        application_secret: str,
        consumer_key: str,
        *,
        timeout: float | None = None,
    ) -> None:
        """Build the client without network or disk I/O.

        Raises:
            UnknownEndpointError: ``endpoint`` is not a known identifier.
        """
        base_url = resolve_endpoint(endpoint)
        if base_url is None:
            raise UnknownEndpointError(endpoint)

        self.endpoint = endpoint
        self.signer = RequestSigner(
            base_url,
            Credentials.create(application_key, application_secret, consumer_key),
        )
        self.timeout = timeout

    @classmethod
    def new(
        cls: type[ClientT],
        endpoint: str,
        application_key: str,
        application_secret: str,
        consumer_key: str,
        **kwargs: Any,
    ) -> ClientT | None:
        """Like the constructor, but returns None for an unknown endpoint."""
        try:
            return cls(endpoint, application_key, application_secret, consumer_key, **kwargs)
        except UnknownEndpointError:
            return None

    @classmethod
    def from_config(cls: type[ClientT], config: ClientConfig, **kwargs: Any) -> ClientT:
        return cls(
            config.endpoint,
            config.application_key,
            config.application_secret,
            config.consumer_key,
            **kwargs,
        )

    @classmethod
    def from_conf(cls: type[ClientT], path: str | os.PathLike[str], **kwargs: Any) -> ClientT:
        """Build a client from an ``ovh.conf`` file.

        Raises:
            ConfigurationError: Unreadable file, missing key or unknown endpoint.
        """
        return cls.from_config(load_config(path), **kwargs)

    @classmethod
    def from_env(
        cls: type[ClientT],
        env_file: str | os.PathLike[str] | None = None,
        **kwargs: Any,
    ) -> ClientT:
        """Build a client from ``OVH_*`` environment variables."""
        return cls.from_config(load_env_config(env_file), **kwargs)

    @property
    def base_url(self) -> str:
        return self.signer.base_url

    @property
    def credentials(self) -> Credentials:
        return self.signer.credentials

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(endpoint={self.endpoint!r}, "
            f"application_key={self.credentials.application_key!r})"
        )
