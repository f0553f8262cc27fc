"""Low-level client for the OVH API using signed requests."""

from ovh_api.api.async_client import AsyncOvhClient
from ovh_api.api.endpoints import ENDPOINTS, resolve_endpoint
from ovh_api.api.rest_wrapper import OvhClient
from ovh_api.api.signing import Redacted, compute_signature
from ovh_api.core.exceptions import (
    ConfigurationError,
    OvhClientError,
    SerializationError,
    TransportError,
    UnknownEndpointError,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncOvhClient",
    "OvhClient",
    "ENDPOINTS",
    "resolve_endpoint",
    "Redacted",
    "compute_signature",
    "OvhClientError",
    "ConfigurationError",
    "UnknownEndpointError",
    "SerializationError",
    "TransportError",
]
