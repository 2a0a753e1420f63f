"""
Unit tests for the resource services.
"""

import json
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from accessgrid import (
    AccessCard,
    AccessGridClient,
    AccessPassState,
    CreateTemplateRequest,
    DeserializationError,
    EventLogFilters,
    ListKeysRequest,
    Platform,
    Protocol,
    Template,
    UnifiedAccessPass,
    UpdateCardRequest,
    UpdateTemplateRequest,
)
from accessgrid.services import parse_issue_result


def make_response(status_code=200, text="{}"):
    response = Mock()
    response.status_code = status_code
    response.text = text
    return response


class TestParseIssueResult:
    """Test single card vs unified pass disambiguation."""

    def test_details_present(self):
        body = '{"id": "pass-1", "details": [{"id": "a", "state": "active"}]}'

        result = parse_issue_result(body)

        assert isinstance(result, UnifiedAccessPass)
        assert result.details[0].state is AccessPassState.ACTIVE

    def test_details_absent(self):
        result = parse_issue_result('{"id": "card-1", "full_name": "Jane"}')

        assert isinstance(result, AccessCard)
        assert result.full_name == "Jane"

    def test_details_null(self):
        assert isinstance(parse_issue_result('{"id": "card-1", "details": null}'), AccessCard)

    def test_details_empty(self):
        assert isinstance(parse_issue_result('{"id": "card-1", "details": []}'), AccessCard)

    def test_single_card_has_no_details(self):
        """Test a single card result never carries a details list."""
        result = parse_issue_result('{"id": "card-1", "details": []}')

        assert not hasattr(result, "details")
        assert "details" not in result.to_wire()


class TestServices:
    """Test service methods map to the right endpoints."""

    @pytest.fixture
    def session(self):
        session = Mock()
        session.request.return_value = make_response()
        return session

    @pytest.fixture
    def client(self, session):
        return AccessGridClient("test-account", "test-secret", session=session)

    def last_call(self, session):
        args, kwargs = session.request.call_args
        return args[0], args[1], kwargs

    def test_issue_single_card(self, client, session):
        session.request.return_value = make_response(text='{"id": "card-1", "state": "active"}')

        result = client.access_cards.issue({"card_template_id": "tpl-1"})

        method, url, kwargs = self.last_call(session)
        assert (method, url) == ("POST", "https://api.accessgrid.com/v1/key-cards")
        assert isinstance(result, AccessCard)

    def test_provision_alias(self, client, session):
        session.request.return_value = make_response(text='{"id": "p", "details": [{"id": "a"}]}')

        result = client.access_cards.provision({"card_template_id": "pair"})

        assert isinstance(result, UnifiedAccessPass)

    def test_issue_unparseable(self, client, session):
        session.request.return_value = make_response(text="<html>")

        with pytest.raises(DeserializationError):
            client.access_cards.issue({"card_template_id": "tpl-1"})

    def test_get(self, client, session):
        session.request.return_value = make_response(text='{"id": "abc123"}')

        card = client.access_cards.get("abc123")

        method, url, _ = self.last_call(session)
        assert method == "GET"
        assert url.startswith("https://api.accessgrid.com/v1/key-cards/abc123?sig_payload=")
        assert card.id == "abc123"

    def test_update(self, client, session):
        client.access_cards.update("abc123", UpdateCardRequest(full_name="John Smith"))

        method, url, kwargs = self.last_call(session)
        assert (method, url) == ("PATCH", "https://api.accessgrid.com/v1/key-cards/abc123")
        assert json.loads(kwargs['data']) == {"full_name": "John Smith"}

    def test_list_from_request(self, client, session):
        session.request.return_value = make_response(text='{"keys": [{"id": "a"}]}')

        cards = client.access_cards.list(ListKeysRequest(template_id="tpl-1", state="suspended"))

        _, url, _ = self.last_call(session)
        assert "template_id=tpl-1&state=suspended&sig_payload=" in url
        assert [card.id for card in cards] == ["a"]

    def test_list_enum_state(self, client, session):
        session.request.return_value = make_response(text='{"keys": []}')

        cards = client.access_cards.list(template_id="tpl-1", state=AccessPassState.ACTIVE)

        _, url, _ = self.last_call(session)
        assert "state=active" in url
        assert cards == []

    def test_list_missing_keys(self, client, session):
        assert client.access_cards.list(template_id="tpl-1") == []

    @pytest.mark.parametrize("body", ['{"keys": null}', "null"])
    def test_list_null_keys(self, client, session, body):
        """Test a null key list or null body yields an empty list."""
        session.request.return_value = make_response(text=body)

        assert client.access_cards.list(template_id="tpl-1") == []

    def test_issued_card_has_no_details(self, client, session):
        session.request.return_value = make_response(text='{"id": "card-1", "details": null}')

        card = client.access_cards.issue({"card_template_id": "tpl-1"})

        assert isinstance(card, AccessCard)
        assert not hasattr(card, "details")

    @pytest.mark.parametrize("action", ["suspend", "resume", "unlink", "delete"])
    def test_actions(self, client, session, action):
        session.request.return_value = make_response(text='{"id": "abc123"}')

        getattr(client.access_cards, action)("abc123")

        method, url, kwargs = self.last_call(session)
        assert method == "POST"
        assert url == (
            f"https://api.accessgrid.com/v1/key-cards/abc123/{action}"
            "?sig_payload=%7B%22id%22%3A%20%22abc123%22%7D"
        )
        assert kwargs['data'] is None

    def test_create_template(self, client, session):
        session.request.return_value = make_response(text='{"id": "tpl-1", "name": "Badge"}')

        template = client.console.create_template(CreateTemplateRequest(
            name="Badge",
            platform=Platform.APPLE,
            use_case="employee_badge",
            protocol=Protocol.DESFIRE,
        ))

        method, url, kwargs = self.last_call(session)
        assert (method, url) == ("POST", "https://api.accessgrid.com/v1/console/card-templates")
        assert json.loads(kwargs['data']) == {
            "name": "Badge",
            "platform": "apple",
            "use_case": "employee_badge",
            "protocol": "desfire",
        }
        assert isinstance(template, Template)

    def test_update_template(self, client, session):
        client.console.update_template(UpdateTemplateRequest(card_template_id="tpl-1", name="New"))

        method, url, kwargs = self.last_call(session)
        assert (method, url) == ("PUT", "https://api.accessgrid.com/v1/console/card-templates/tpl-1")
        assert json.loads(kwargs['data']) == {"card_template_id": "tpl-1", "name": "New"}

    def test_read_template(self, client, session):
        session.request.return_value = make_response(text='{"id": "tpl-1", "issued_keys_count": 3}')

        template = client.console.read_template("tpl-1")

        _, url, _ = self.last_call(session)
        assert url == (
            "https://api.accessgrid.com/v1/console/card-templates/tpl-1"
            "?sig_payload=%7B%22id%22%3A%20%22tpl-1%22%7D"
        )
        assert template.issued_keys_count == 3

    def test_event_log(self, client, session):
        session.request.return_value = make_response(
            text='{"events": [{"type": "install", "timestamp": "2025-01-02T03:04:05Z", "user_id": "u1"}]}'
        )
        filters = EventLogFilters(
            device="mobile",
            start_date=datetime(2025, 1, 1, tzinfo=timezone.utc),
            event_type="install",
        )

        events = client.console.event_log("tpl-1", filters)

        _, url, _ = self.last_call(session)
        assert url.startswith("https://api.accessgrid.com/v1/console/card-templates/tpl-1/logs?")
        assert "device=mobile" in url
        assert "start_date=2025-01-01T00%3A00%3A00%2B00%3A00" in url
        assert "end_date" not in url
        assert "event_type=install" in url
        assert "sig_payload=%7B%22id%22%3A%20%22logs%22%7D" in url
        assert events[0].user_id == "u1"

    def test_event_log_no_filters(self, client, session):
        session.request.return_value = make_response(text='{"events": []}')

        assert client.console.event_log("tpl-1") == []

    @pytest.mark.parametrize("body", ['{"events": null}', "null"])
    def test_event_log_null_events(self, client, session, body):
        """Test a null event list or null body yields an empty list."""
        session.request.return_value = make_response(text=body)

        assert client.console.event_log("tpl-1") == []
