"""Shared pytest fixtures for publisher tests."""

from __future__ import annotations

import pytest

from plpublisher.application.publisher import Publisher

APPLICATION_ID = 1
SECURITY_KEY = "123"
TRANSACTION_KEY = "123"

# md5("456" + "123"); the network signs transactionId with the transaction key
TRANSACTION_HASH = "d964173dc44da83eeafa3aebbee9a1a0"
# md5("123" + "123")
OFFER_HASH = "4297f44b13955235245b2497399d7a93"


@pytest.fixture
def publisher() -> Publisher:
    """Publisher with the credentials used throughout the test vectors."""
    return Publisher(APPLICATION_ID, SECURITY_KEY, TRANSACTION_KEY)


@pytest.fixture
def callback_params() -> dict[str, str]:
    """Query parameters of a genuine transactionComplete callback."""
    return {
        "cmd": "transactionComplete",
        "userId": "saad-1-bb753c1132",
        "amt": "1.0",
        "offerInvitationId": "123",
        "status": "C",
        "oidHash": OFFER_HASH,
        "currencyAmt": "50",
        "transactionId": "456",
        "endUserId": "saad",
        "offerTitle": "Survey",
        "useragent": "Peanut Labs Media",
        "currencyName": "Pointies",
        "offerType": "Survey",
        "txnHash": TRANSACTION_HASH,
        "program": "",
    }
