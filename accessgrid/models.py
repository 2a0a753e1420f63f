"""
Wire models for the AccessGrid API.

Keys are camelCase unless the API names a field explicitly, in which case
the field carries that name as its alias. Unset fields are omitted from
request bodies entirely.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DeviceKind(str, Enum):
    MOBILE = "mobile"
    WATCH = "watch"


class DeviceType(str, Enum):
    IPHONE = "iphone"
    APPLE_WATCH = "apple_watch"
    ANDROID_PHONE = "android_phone"
    ANDROID_WATCH = "android_watch"


class Protocol(str, Enum):
    DESFIRE = "desfire"
    SEOS = "seos"
    SMART_TAP = "smart_tap"


class DeviceStatus(str, Enum):
    CREDENTIALS_CREATED = "CredentialsCreated"
    BUNDLE_DELIVERED = "bundle_delivered"
    INSTALLED = "installed"
    # token as sent by the API
    UNINSTALLED = "unintstalled"
    SUSPENDED = "suspended"


class Platform(str, Enum):
    APPLE = "apple"
    ANDROID = "android"


class AccessPassState(str, Enum):
    CREATED = "created"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    UNLINK = "unlink"
    DELETED = "deleted"


class AccessPassEventType(str, Enum):
    ISSUED = "ag.access_pass.issued"
    VIEWED = "ag.access_pass.viewed"
    UPDATED = "ag.access_pass.updated"
    SUSPENDED = "ag.access_pass.suspended"
    RESUMED = "ag.access_pass.resumed"
    UNLINKED = "ag.access_pass.unlinked"
    DELETED = "ag.access_pass.deleted"
    DEVICE_ADDED = "ag.access_pass.device_added"
    DEVICE_REMOVED = "ag.access_pass.device_removed"
    EXPIRED = "ag.access_pass.expired"


class CardTemplateEventType(str, Enum):
    CREATED = "ag.card_template.created"
    UPDATED = "ag.card_template.updated"
    REQUEST_PUBLISHING = "ag.card_template.request_publishing"
    PUBLISHED = "ag.card_template.published"


class LandingPageEventType(str, Enum):
    CREATED = "ag.landing_page.created"
    UPDATED = "ag.landing_page.updated"
    ATTACHED_TO_TEMPLATE = "ag.landing_page.attached_to_template"


class CredentialProfileEventType(str, Enum):
    CREATED = "ag.credential_profile.created"
    ATTACHED_TO_TEMPLATE = "ag.credential_profile.attached_to_template"


class HIDOrgEventType(str, Enum):
    CREATED = "ag.hid_org.created"
    ACTIVATED = "ag.hid_org.activated"


class AccountBalanceEventType(str, Enum):
    LOW = "ag.account_balance.low"


class WireModel(BaseModel):
    """Base for every model that travels over the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-ready dict sent to the API, without unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Device(WireModel):
    id: Optional[str] = None
    platform: Optional[Platform] = None
    device_type: Optional[DeviceType] = Field(default=None, alias="device_type")
    status: Optional[DeviceStatus] = None
    created_at: Optional[datetime] = Field(default=None, alias="created_at")
    updated_at: Optional[datetime] = Field(default=None, alias="updated_at")


class CardFields(WireModel):
    """Fields shared by issued cards and the requests that create or update them."""

    card_template_id: Optional[str] = Field(default=None, alias="card_template_id")
    employee_id: Optional[str] = Field(default=None, alias="employee_id")
    # Only allowed when the card template has key diversification enabled
    tag_id: Optional[str] = Field(default=None, alias="tag_id")
    # H10301 (26 bit) format, under 255
    site_code: Optional[str] = Field(default=None, alias="site_code")
    # H10301 (26 bit) format, under 65,535
    card_number: Optional[str] = Field(default=None, alias="card_number")
    credential_pool_id: Optional[str] = Field(default=None, alias="credential_pool_id")
    # Up to 8192 bytes, proprietary data formats only
    file_data: Optional[str] = Field(default=None, alias="file_data")
    full_name: Optional[str] = Field(default=None, alias="full_name")
    email: Optional[str] = None
    phone_number: Optional[str] = Field(default=None, alias="phone_number")
    classification: Optional[str] = None
    title: Optional[str] = None
    start_date: Optional[datetime] = Field(default=None, alias="start_date")
    expiration_date: Optional[datetime] = Field(default=None, alias="expiration_date")
    # Base64 encoded image
    employee_photo: Optional[str] = Field(default=None, alias="employee_photo")
    # Hotel use case only
    member_id: Optional[str] = Field(default=None, alias="member_id")
    membership_status: Optional[str] = Field(default=None, alias="membership_status")
    is_pass_ready_to_transact: Optional[bool] = Field(default=None, alias="is_pass_ready_to_transact")
    tile_data: Optional[Any] = Field(default=None, alias="tile_data")
    reservations: Optional[Any] = None
    allow_on_multiple_devices: Optional[bool] = Field(default=None, alias="allow_on_multiple_devices")
    metadata: Optional[Dict[str, Any]] = None


class AccessCard(CardFields):
    """A single issued NFC key."""

    id: Optional[str] = None
    install_url: Optional[str] = Field(default=None, alias="install_url")
    state: Optional[AccessPassState] = None
    direct_install_url: Optional[str] = Field(default=None, alias="direct_install_url")
    devices: Optional[List[Device]] = None

    def __str__(self):
        state = self.state.value if self.state else None
        return f"AccessCard(name='{self.full_name}', id='{self.id}', state='{state}')"


class UnifiedAccessPass(WireModel):
    """A pass issued against a template pair, holding one card per platform."""

    id: Optional[str] = None
    install_url: Optional[str] = Field(default=None, alias="install_url")
    state: Optional[AccessPassState] = None
    status: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    details: List[AccessCard]

    def __str__(self):
        return f"UnifiedAccessPass(id='{self.id}', cards={len(self.details)})"


class ProvisionCardRequest(CardFields):
    pass


class UpdateCardRequest(CardFields):
    pass


class ListKeysRequest(WireModel):
    """Query filters for listing keys. Never sent as a body."""

    template_id: Optional[str] = None
    # active, suspended, unlink or deleted
    state: Optional[str] = None


class Template(WireModel):
    id: Optional[str] = None
    name: Optional[str] = None
    platform: Optional[str] = None
    use_case: Optional[str] = Field(default=None, alias="use_case")
    protocol: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="created_at")
    last_published_at: Optional[str] = Field(default=None, alias="last_published_at")
    issued_keys_count: Optional[int] = Field(default=None, alias="issued_keys_count")
    active_keys_count: Optional[int] = Field(default=None, alias="active_keys_count")
    allowed_device_counts: Optional[Any] = Field(default=None, alias="allowed_device_counts")
    support_settings: Optional[Any] = Field(default=None, alias="support_settings")
    terms_settings: Optional[Any] = Field(default=None, alias="terms_settings")
    style_settings: Optional[Any] = Field(default=None, alias="style_settings")


class TemplateDesign(WireModel):
    """Card template design. Colors are 6 character hex values, images are base64."""

    background_color: Optional[str] = Field(default=None, alias="background_color")
    label_color: Optional[str] = Field(default=None, alias="label_color")
    label_secondary_color: Optional[str] = Field(default=None, alias="label_secondary_color")
    background_image: Optional[str] = Field(default=None, alias="background_image")
    logo_image: Optional[str] = Field(default=None, alias="logo_image")
    icon_image: Optional[str] = Field(default=None, alias="icon_image")


class SupportInfo(WireModel):
    """Support details shown on the back of an issued NFC key."""

    support_url: Optional[str] = Field(default=None, alias="support_url")
    support_phone_number: Optional[str] = Field(default=None, alias="support_phone_number")
    support_email: Optional[str] = Field(default=None, alias="support_email")
    privacy_policy_url: Optional[str] = Field(default=None, alias="privacy_policy_url")
    terms_and_conditions_url: Optional[str] = Field(default=None, alias="terms_and_conditions_url")


class CreateTemplateRequest(WireModel):
    name: Optional[str] = None
    platform: Optional[Platform] = None
    use_case: Optional[str] = Field(default=None, alias="use_case")
    protocol: Optional[Protocol] = None
    allow_on_multiple_devices: Optional[bool] = Field(default=None, alias="allow_on_multiple_devices")
    # 1-5, only with allow_on_multiple_devices
    watch_count: Optional[int] = Field(default=None, alias="watch_count")
    iphone_count: Optional[int] = Field(default=None, alias="iphone_count")
    design: Optional[TemplateDesign] = None
    support_info: Optional[SupportInfo] = Field(default=None, alias="support_info")


class UpdateTemplateRequest(WireModel):
    card_template_id: str = Field(alias="card_template_id")
    name: Optional[str] = None
    allow_on_multiple_devices: Optional[bool] = Field(default=None, alias="allow_on_multiple_devices")
    watch_count: Optional[int] = Field(default=None, alias="watch_count")
    iphone_count: Optional[int] = Field(default=None, alias="iphone_count")
    support_info: Optional[SupportInfo] = Field(default=None, alias="support_info")


class EventLogFilters(WireModel):
    """Filters for a template's event log, sent as query parameters."""

    # mobile or watch
    device: Optional[str] = None
    start_date: Optional[datetime] = Field(default=None, alias="start_date")
    end_date: Optional[datetime] = Field(default=None, alias="end_date")
    # issue, install, update, suspend, resume or unlink
    event_type: Optional[str] = Field(default=None, alias="event_type")

    def to_query(self) -> Dict[str, str]:
        params = {}
        if self.device:
            params["device"] = self.device
        if self.start_date is not None:
            params["start_date"] = self.start_date.isoformat()
        if self.end_date is not None:
            params["end_date"] = self.end_date.isoformat()
        if self.event_type:
            params["event_type"] = self.event_type
        return params


class EventLogEntry(WireModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    timestamp: Optional[datetime] = None
    user_id: Optional[str] = Field(default=None, alias="user_id")


class KeysListResponse(WireModel):
    keys: Optional[List[AccessCard]] = None


class EventLogResponse(WireModel):
    events: Optional[List[EventLogEntry]] = None


class AccessPassEventDetails(WireModel):
    id: Optional[str] = None
    card_template_id: Optional[str] = Field(default=None, alias="card_template_id")
    platform: Optional[Platform] = None
    protocol: Optional[Protocol] = None
    status: Optional[str] = None
    card_number: Optional[str] = Field(default=None, alias="card_number")
    site_code: Optional[str] = Field(default=None, alias="site_code")


class AccessPassEventCardTemplate(WireModel):
    id: Optional[str] = None
    platform: Optional[Platform] = None
    protocol: Optional[Protocol] = None
    name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    hid_org_id: Optional[str] = Field(default=None, alias="hid_org_id")


class AccessPassEventDevice(WireModel):
    id: Optional[str] = None
    card_template_id: Optional[str] = Field(default=None, alias="card_template_id")
    platform: Optional[Platform] = None
    type: Optional[DeviceType] = None
    protocol: Optional[Protocol] = None
    status: Optional[DeviceStatus] = None
    card_number: Optional[str] = Field(default=None, alias="card_number")
    site_code: Optional[str] = Field(default=None, alias="site_code")


class AccessPassEvent(WireModel):
    """CloudEvents data of an access pass webhook event."""

    id: Optional[str] = None
    card_template_id: Optional[str] = Field(default=None, alias="card_template_id")
    state: Optional[AccessPassState] = None
    full_name: Optional[str] = Field(default=None, alias="full_name")
    employee_id: Optional[str] = Field(default=None, alias="employee_id")
    title: Optional[str] = None
    start_date: Optional[datetime] = Field(default=None, alias="start_date")
    expiration_date: Optional[datetime] = Field(default=None, alias="expiration_date")
    metadata: Optional[Dict[str, Any]] = None
    hid_org_id: Optional[str] = Field(default=None, alias="hid_org_id")
    card_templates: Optional[List[AccessPassEventCardTemplate]] = Field(default=None, alias="card_templates")
    details: Optional[AccessPassEventDetails] = None
    devices: Optional[List[AccessPassEventDevice]] = None


class CardTemplateEvent(WireModel):
    """CloudEvents data of a card template webhook event."""

    id: Optional[str] = Field(default=None, alias="card_template_id")
    name: Optional[str] = None
    platform: Optional[Platform] = None
    protocol: Optional[Protocol] = None
    metadata: Optional[Dict[str, Any]] = None
    hid_org_id: Optional[str] = Field(default=None, alias="hid_org_id")


class CredentialProfileEvent(WireModel):
    id: Optional[str] = Field(default=None, alias="credential_profile_id")
