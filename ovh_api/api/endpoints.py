"""Known OVH API endpoints."""

from __future__ import annotations

from types import MappingProxyType

ENDPOINTS = MappingProxyType(
    {
        "ovh-eu": "https://eu.api.ovh.com/1.0",
        "ovh-us": "https://api.us.ovhcloud.com/1.0",
        "ovh-ca": "https://ca.api.ovh.com/1.0",
        "kimsufi-eu": "https://eu.api.kimsufi.com/1.0",
        "kimsufi-ca": "https://ca.api.kimsufi.com/1.0",
        "soyoustart-eu": "https://eu.api.soyoustart.com/1.0",
        "soyoustart-ca": "https://ca.api.soyoustart.com/1.0",
    }
)


def resolve_endpoint(endpoint: str) -> str | None:
    """Return the base URL for an endpoint identifier, or None if unknown."""
    return ENDPOINTS.get(endpoint)
