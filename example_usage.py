#!/usr/bin/env python3
"""
Basic usage examples for the AccessGrid Python client library.

Reads ACCESSGRID_ACCOUNT_ID and ACCESSGRID_SECRET_KEY from the environment
and walks through listing, issuing and managing NFC keys.
"""

import asyncio
import sys
from datetime import datetime, timedelta, timezone

from accessgrid import (
    AccessGridClient,
    AccessGridError,
    AsyncAccessGridClient,
    ConfigurationError,
    ProvisionCardRequest,
    UnifiedAccessPass,
)

TEMPLATE_ID = "0xd3adb00b5"


def main():
    """Run basic usage examples."""

    print("=== AccessGrid Python Client Basic Usage Examples ===\n")

    try:
        client = AccessGridClient.from_env()
    except ConfigurationError as e:
        print(f"Please set ACCESSGRID_ACCOUNT_ID and ACCESSGRID_SECRET_KEY ({e.message})")
        return 1

    secret = client.secret_key.get_secret_value()
    print("1. Client created")
    print(f"   Account ID: {client.account_id}")
    print(f"   Secret Key: {secret[:3]}...{secret[-3:]}\n")

    with client:
        try:
            print("2. Listing access cards...")
            cards = client.access_cards.list(template_id=TEMPLATE_ID)
            print(f"   Found {len(cards)} cards")
            for card in cards:
                print(f"   {card}")
            print()

            print("3. Issuing a new card...")
            now = datetime.now(timezone.utc)
            result = client.access_cards.issue(ProvisionCardRequest(
                card_template_id=TEMPLATE_ID,
                employee_id="101010101",
                card_number="42069",
                site_code="42",
                full_name="John Doe",
                email="john@example.com",
                phone_number="+15555550100",
                classification="Employee",
                title="Developer",
                start_date=now,
                expiration_date=now + timedelta(days=365),
            ))
            if isinstance(result, UnifiedAccessPass):
                print(f"   Unified pass issued with {len(result.details)} cards")
                card_id = result.details[0].id
            else:
                print(f"   Card issued. Install URL: {result.install_url}")
                card_id = result.id
            print()

            print("4. Suspending and resuming the card...")
            suspended = client.access_cards.suspend(card_id)
            print(f"   State: {suspended.state}")
            resumed = client.access_cards.resume(card_id)
            print(f"   State: {resumed.state}\n")

        except AccessGridError as e:
            print(f"   ✗ {type(e).__name__}: {e}")
            return 1

    print("5. Same listing with the asyncio client...")
    asyncio.run(list_async())
    return 0


async def list_async():
    async with AsyncAccessGridClient.from_env() as client:
        cards = await client.access_cards.list(template_id=TEMPLATE_ID)
        print(f"   Found {len(cards)} cards")


if __name__ == "__main__":
    sys.exit(main())
