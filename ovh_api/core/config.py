"""Loading client configuration from ``ovh.conf`` files or the environment."""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from dotenv import load_dotenv

from ovh_api.core.constants import (
    CONFIG_CREDENTIAL_KEYS,
    CONFIG_DEFAULT_SECTION,
    CONFIG_ENDPOINT_KEY,
    CONFIG_FILE_LOCATIONS,
    ENV_APPLICATION_KEY,
    ENV_APPLICATION_SECRET,
    ENV_CONFIG_FILE,
    ENV_CONSUMER_KEY,
    ENV_ENDPOINT,
)
from ovh_api.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class ClientConfig:
    """Values needed to build a client."""

    endpoint: str
    application_key: str
    application_secret: str = field(repr=False)
    consumer_key: str = field(repr=False)


def _missing(key: str) -> ConfigurationError:
    return ConfigurationError(f"missing key `{key}`", key=key)


def _read_ini(path: str | os.PathLike[str]) -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    try:
        with open(path, encoding="utf-8") as fh:
            parser.read_file(fh)
    except OSError as exc:
        raise ConfigurationError(f"cannot read config file {os.fspath(path)}: {exc}") from exc
    except configparser.Error as exc:
        raise ConfigurationError(f"cannot parse config file {os.fspath(path)}: {exc}") from exc
    return parser


def _get(parser: configparser.ConfigParser, section: str, key: str) -> str:
    value = parser.get(section, key, fallback=None)
    if value is None or not value.strip():
        raise _missing(key)
    return value.strip()


def load_config(path: str | os.PathLike[str]) -> ClientConfig:
    """Parse an ``ovh.conf`` file.

    The ``[default]`` section names the endpoint; the section named after
    that endpoint holds the credentials::

        [default]
        endpoint=ovh-eu

        [ovh-eu]
        application_key=...
        application_secret=...
        consumer_key=...

    Args:
        path: Path to the INI file.

    Returns:
        Parsed configuration.

    Raises:
        ConfigurationError: File unreadable or a required key missing.
    """
    parser = _read_ini(path)
    endpoint = _get(parser, CONFIG_DEFAULT_SECTION, CONFIG_ENDPOINT_KEY)
    application_key, application_secret, consumer_key = (
        _get(parser, endpoint, key) for key in CONFIG_CREDENTIAL_KEYS
    )
    return ClientConfig(
        endpoint=endpoint,
        application_key=application_key,
        application_secret=application_secret,
        consumer_key=consumer_key,
    )


def load_env_config(env_file: str | os.PathLike[str] | None = None) -> ClientConfig:
    """Read configuration from ``OVH_*`` environment variables.

    An optional dotenv file is loaded first; variables already set in the
    environment take precedence over it.
    """
    load_dotenv(env_file if env_file is not None else ENV_CONFIG_FILE, override=False)

    values = {}
    for var in (ENV_ENDPOINT, ENV_APPLICATION_KEY, ENV_APPLICATION_SECRET, ENV_CONSUMER_KEY):
        value = os.getenv(var)
        if not value or not value.strip():
            raise _missing(var)
        values[var] = value.strip()

    return ClientConfig(
        endpoint=values[ENV_ENDPOINT],
        application_key=values[ENV_APPLICATION_KEY],
        application_secret=values[ENV_APPLICATION_SECRET],
        consumer_key=values[ENV_CONSUMER_KEY],
    )


def find_config_file(locations: Iterable[Path] = CONFIG_FILE_LOCATIONS) -> Path | None:
    """Return the first existing config file, or None."""
    for location in locations:
        if location.is_file():
            return location
    return None
