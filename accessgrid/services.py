"""
Resource services for the AccessGrid API.

Services only map methods to endpoints and query strings. They return
whatever the owning client's dispatcher returns, so the same service works
for the blocking client (values) and the asyncio client (awaitables).
"""

import json
from enum import Enum
from typing import List, Optional, Union

from .models import (
    AccessCard,
    CreateTemplateRequest,
    EventLogEntry,
    EventLogFilters,
    EventLogResponse,
    KeysListResponse,
    ListKeysRequest,
    ProvisionCardRequest,
    Template,
    UnifiedAccessPass,
    UpdateCardRequest,
    UpdateTemplateRequest,
)

KEY_CARDS_PATH = "/v1/key-cards"
CARD_TEMPLATES_PATH = "/v1/console/card-templates"

IssueResult = Union[AccessCard, UnifiedAccessPass]


def parse_issue_result(body: str) -> IssueResult:
    """
    Resolve an issue response to a single card or a unified access pass.

    A non-empty ``details`` array means the request was made against a
    template pair and the API returned one card per platform.
    """
    data = json.loads(body)
    if isinstance(data, dict) and data.get("details"):
        return UnifiedAccessPass.model_validate(data)
    return AccessCard.model_validate(data)


def parse_key_list(body: str) -> List[AccessCard]:
    data = json.loads(body)
    if data is None:
        return []
    return KeysListResponse.model_validate(data).keys or []


def parse_event_log(body: str) -> List[EventLogEntry]:
    data = json.loads(body)
    if data is None:
        return []
    return EventLogResponse.model_validate(data).events or []


def _query_value(value) -> str:
    if isinstance(value, Enum):
        return value.value
    return str(value)


class AccessCardsService:
    """Service for managing access cards."""

    def __init__(self, client):
        self._client = client

    def issue(self, request: ProvisionCardRequest):
        """
        Issue a new access card, or a unified access pass for template pairs.

        Returns:
            AccessCard or UnifiedAccessPass
        """
        return self._client.post(KEY_CARDS_PATH, request, response_type=parse_issue_result)

    # Alias kept for callers of the older name
    provision = issue

    def get(self, card_id: str):
        """Get details about a specific access card."""
        return self._client.get(f"{KEY_CARDS_PATH}/{card_id}", response_type=AccessCard)

    def update(self, card_id: str, request: UpdateCardRequest):
        """Update an existing access card."""
        return self._client.patch(f"{KEY_CARDS_PATH}/{card_id}", request, response_type=AccessCard)

    def list(self, request: Optional[ListKeysRequest] = None, *,
             template_id: Optional[str] = None, state: Optional[str] = None):
        """
        List NFC keys provisioned for a card template.

        Filters come either from a ListKeysRequest or from keyword arguments.

        Returns:
            List of AccessCard
        """
        if request is not None:
            template_id = template_id or request.template_id
            state = state or request.state

        params = {}
        if template_id:
            params["template_id"] = template_id
        if state:
            params["state"] = _query_value(state)

        return self._client.get(KEY_CARDS_PATH, params=params, response_type=parse_key_list)

    def _manage(self, card_id: str, action: str):
        return self._client.post(f"{KEY_CARDS_PATH}/{card_id}/{action}", response_type=AccessCard)

    def suspend(self, card_id: str):
        """Suspend an access card."""
        return self._manage(card_id, "suspend")

    def resume(self, card_id: str):
        """Resume a suspended access card."""
        return self._manage(card_id, "resume")

    def unlink(self, card_id: str):
        """Unlink an access card from its current holder."""
        return self._manage(card_id, "unlink")

    def delete(self, card_id: str):
        """Delete an access card."""
        return self._manage(card_id, "delete")


class ConsoleService:
    """Service for console operations (enterprise only)."""

    def __init__(self, client):
        self._client = client

    def create_template(self, request: CreateTemplateRequest):
        return self._client.post(CARD_TEMPLATES_PATH, request, response_type=Template)

    def update_template(self, request: UpdateTemplateRequest):
        """Update a card template; the target comes from ``request.card_template_id``."""
        return self._client.put(
            f"{CARD_TEMPLATES_PATH}/{request.card_template_id}", request, response_type=Template
        )

    def read_template(self, template_id: str):
        return self._client.get(f"{CARD_TEMPLATES_PATH}/{template_id}", response_type=Template)

    def event_log(self, template_id: str, filters: Optional[EventLogFilters] = None):
        """
        Get event log entries for a card template.

        Args:
            template_id: Card template id
            filters: Optional device, date range and event type filters

        Returns:
            List of EventLogEntry
        """
        params = filters.to_query() if filters else {}
        return self._client.get(
            f"{CARD_TEMPLATES_PATH}/{template_id}/logs", params=params, response_type=parse_event_log
        )
