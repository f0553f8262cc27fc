"""Constants shared by the OVH client."""

from __future__ import annotations

from pathlib import Path

# =============================================================================
# HEADERS
# =============================================================================
HEADER_APPLICATION = "X-Ovh-Application"
HEADER_CONSUMER = "X-Ovh-Consumer"
HEADER_TIMESTAMP = "X-Ovh-Timestamp"
HEADER_SIGNATURE = "X-Ovh-Signature"
HEADER_CONTENT_TYPE = "Content-type"
JSON_CONTENT_TYPE = "application/json"

SIGNATURE_PREFIX = "$1$"
SIGNATURE_SEPARATOR = "+"

# =============================================================================
# API
# =============================================================================
AUTH_TIME_PATH = "/auth/time"

# Signed 64-bit bounds for time delta and timestamps.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# =============================================================================
# CONFIGURATION
# =============================================================================
CONFIG_DEFAULT_SECTION = "default"
CONFIG_ENDPOINT_KEY = "endpoint"
CONFIG_CREDENTIAL_KEYS = ("application_key", "application_secret", "consumer_key")

# Checked in order; first existing file wins.
CONFIG_FILE_LOCATIONS = (
    Path("ovh.conf"),
    Path("~/.ovh.conf").expanduser(),
    Path("/etc/ovh.conf"),
)

ENV_CONFIG_FILE = "ovh.env"
ENV_ENDPOINT = "OVH_ENDPOINT"
ENV_APPLICATION_KEY = "OVH_APPLICATION_KEY"
ENV_APPLICATION_SECRET = "OVH_APPLICATION_SECRET"
ENV_CONSUMER_KEY = "OVH_CONSUMER_KEY"

# =============================================================================
# LOGS AND CLI
# =============================================================================
LOGGER_NAME = "ovh_api"
LOGS_DIR = "logs"

EXIT_OK = 0
EXIT_HTTP_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_TRANSPORT_ERROR = 3
