"""
Constants for the AccessGrid client library.
Header names and path keywords must match what the AccessGrid API expects.
"""

VERSION = "1.0.0"

# HTTP Headers
HEADER_ACCOUNT_ID = "X-ACCT-ID"
HEADER_PAYLOAD_SIG = "X-PAYLOAD-SIG"
HEADER_USER_AGENT = "User-Agent"

SDK_NAME = "accessgrid-python"
USER_AGENT = f"{SDK_NAME}/{VERSION}"

DEFAULT_BASE_URL = "https://api.accessgrid.com"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,              # HTTP timeout in seconds
}

# Query parameter carrying a copy of the signed payload for body-less requests
SIG_PAYLOAD_PARAM = "sig_payload"

# Trailing path segments that act on the resource named just before them
ACTION_KEYWORDS = frozenset({"suspend", "resume", "unlink", "delete"})

# Last segment of the key card listing endpoint
LISTING_SEGMENT = "key-cards"

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH"})
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
