"""
AccessGrid Client Library

A Python client library for the AccessGrid API: issue and manage NFC key
cards, and manage card templates and their event logs.

Example usage:
    from accessgrid import AccessGridClient

    client = AccessGridClient("your-account-id", "your-secret-key")
    cards = client.access_cards.list(template_id="0xd3adb00b5")
"""

import logging

from .client import AccessGridClient, AsyncAccessGridClient
from .config import AccessGridSettings
from .exceptions import (
    AccessGridError,
    AuthenticationError,
    InsufficientBalanceError,
    APIRequestError,
    DeserializationError,
    ConfigurationError,
    TransportError
)
from .constants import (
    HEADER_ACCOUNT_ID,
    HEADER_PAYLOAD_SIG,
    SIG_PAYLOAD_PARAM,
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    USER_AGENT,
    VERSION
)
from .models import (
    AccessCard,
    AccessPassEvent,
    AccessPassEventType,
    AccessPassState,
    AccountBalanceEventType,
    CardTemplateEvent,
    CardTemplateEventType,
    CreateTemplateRequest,
    CredentialProfileEvent,
    CredentialProfileEventType,
    Device,
    DeviceKind,
    DeviceStatus,
    DeviceType,
    EventLogEntry,
    EventLogFilters,
    HIDOrgEventType,
    LandingPageEventType,
    ListKeysRequest,
    Platform,
    Protocol,
    ProvisionCardRequest,
    SupportInfo,
    Template,
    TemplateDesign,
    UnifiedAccessPass,
    UpdateCardRequest,
    UpdateTemplateRequest
)
from .signing import build_payload, sign

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = VERSION
__author__ = "AccessGrid"
__all__ = [
    "AccessGridClient",
    "AsyncAccessGridClient",
    "AccessGridSettings",
    "AccessGridError",
    "AuthenticationError",
    "InsufficientBalanceError",
    "APIRequestError",
    "DeserializationError",
    "ConfigurationError",
    "TransportError",
    "HEADER_ACCOUNT_ID",
    "HEADER_PAYLOAD_SIG",
    "SIG_PAYLOAD_PARAM",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "USER_AGENT",
    "AccessCard",
    "AccessPassEvent",
    "AccessPassEventType",
    "AccessPassState",
    "AccountBalanceEventType",
    "CardTemplateEvent",
    "CardTemplateEventType",
    "CreateTemplateRequest",
    "CredentialProfileEvent",
    "CredentialProfileEventType",
    "Device",
    "DeviceKind",
    "DeviceStatus",
    "DeviceType",
    "EventLogEntry",
    "EventLogFilters",
    "HIDOrgEventType",
    "LandingPageEventType",
    "ListKeysRequest",
    "Platform",
    "Protocol",
    "ProvisionCardRequest",
    "SupportInfo",
    "Template",
    "TemplateDesign",
    "UnifiedAccessPass",
    "UpdateCardRequest",
    "UpdateTemplateRequest",
    "build_payload",
    "sign"
]
