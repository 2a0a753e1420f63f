"""
Integration tests against a live AccessGrid account.

Skipped unless ACCESSGRID_ACCOUNT_ID, ACCESSGRID_SECRET_KEY and
ACCESSGRID_TEMPLATE_ID are set.
"""

import os

import pytest

from accessgrid import AccessGridClient, AsyncAccessGridClient, AuthenticationError

TEMPLATE_ID = os.environ.get("ACCESSGRID_TEMPLATE_ID")

pytestmark = pytest.mark.skipif(
    not (os.environ.get("ACCESSGRID_ACCOUNT_ID")
         and os.environ.get("ACCESSGRID_SECRET_KEY")
         and TEMPLATE_ID),
    reason="AccessGrid credentials not configured",
)


class TestIntegration:
    """Integration tests with the AccessGrid API."""

    @pytest.fixture
    def client(self):
        with AccessGridClient.from_env() as client:
            yield client

    def test_list_keys(self, client):
        cards = client.access_cards.list(template_id=TEMPLATE_ID)

        assert isinstance(cards, list)

    def test_read_template(self, client):
        template = client.console.read_template(TEMPLATE_ID)

        assert template.id == TEMPLATE_ID

    def test_wrong_secret_rejected(self, client):
        bad = AccessGridClient(client.account_id, "definitely-not-the-secret", client.base_url)

        with pytest.raises(AuthenticationError):
            bad.access_cards.list(template_id=TEMPLATE_ID)

    @pytest.mark.asyncio
    async def test_async_list_keys(self):
        async with AsyncAccessGridClient.from_env() as client:
            cards = await client.access_cards.list(template_id=TEMPLATE_ID)

        assert isinstance(cards, list)
