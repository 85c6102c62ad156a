"""Authentication and parsing of reward notifications.

A notification arrives as flat query parameters. `verify_notification` must
succeed on the offer and transaction hashes before any other field is
trusted; `parse_notification` then builds the typed record.
"""

from __future__ import annotations

import hmac
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Final, Mapping, Optional

from ..crypto.checksum import keyed_checksum
from ..domain.entities import Offer, RewardNotification
from ..domain.errors import InvalidAmountError, InvalidCurrencyAmountError

# Query parameter names are fixed by the network.
PARAM_TRANSACTION_ID: Final[str] = "transactionId"
PARAM_OFFER_INVITATION_ID: Final[str] = "offerInvitationId"
PARAM_OFFER_HASH: Final[str] = "oidHash"
PARAM_TRANSACTION_HASH: Final[str] = "txnHash"
PARAM_AMOUNT: Final[str] = "amt"
PARAM_OFFER_TITLE: Final[str] = "offerTitle"
PARAM_OFFER_TYPE: Final[str] = "offerType"
PARAM_STATUS: Final[str] = "status"
PARAM_PROGRAM: Final[str] = "program"
PARAM_CURRENCY_NAME: Final[str] = "currencyName"
PARAM_CURRENCY_AMOUNT: Final[str] = "currencyAmt"
PARAM_USER_ID: Final[str] = "userId"
PARAM_END_USER_ID: Final[str] = "endUserId"

_DECIMAL_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def _hashes_match(expected: str, supplied: str) -> bool:
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))


def verify_notification(
    offer_invitation_id: str,
    transaction_id: str,
    offer_hash: str,
    transaction_hash: str,
    security_key: str,
    transaction_key: str,
) -> bool:
    """Check both callback hashes. Pure function.

    The offer hash is the keyed checksum of (offer_invitation_id, security_key)
    and the transaction hash that of (transaction_id, transaction_key). Both
    comparisons are exact and case-sensitive, and both are always evaluated.

    The transaction hash in the network's published sample callback was
    computed with an empty transaction key, so it only verifies when
    transaction_key is "".

    Returns:
        True only if both hashes match.
    """
    offer_ok = _hashes_match(
        keyed_checksum(offer_invitation_id, security_key), offer_hash
    )
    transaction_ok = _hashes_match(
        keyed_checksum(transaction_id, transaction_key), transaction_hash
    )
    return offer_ok and transaction_ok


def parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    """Parse a base-10 number, returning None when it is not one.

    Values that overflow a double are rejected as well.
    """
    if value is None or not _DECIMAL_RE.fullmatch(value):
        return None
    if not math.isfinite(float(value)):
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        return None


def parse_notification(params: Mapping[str, str]) -> RewardNotification:
    """Build a RewardNotification from already authenticated parameters.

    String fields are copied verbatim, missing keys become empty strings.
    Status is not checked against TransactionStatus.

    Raises:
        InvalidAmountError: If `amt` is missing or malformed.
        InvalidCurrencyAmountError: If `currencyAmt` is missing or malformed.
        Both carry the record populated so far on `.notification`.
    """
    notification = RewardNotification(
        transaction_id=params.get(PARAM_TRANSACTION_ID, ""),
        offer=Offer(id=params.get(PARAM_OFFER_INVITATION_ID, "")),
    )

    amount = parse_decimal(params.get(PARAM_AMOUNT))
    if amount is None:
        raise InvalidAmountError(notification)
    notification.amount = amount

    notification.offer.title = params.get(PARAM_OFFER_TITLE, "")
    notification.offer.type = params.get(PARAM_OFFER_TYPE, "")
    notification.status = params.get(PARAM_STATUS, "")
    notification.program = params.get(PARAM_PROGRAM, "")
    notification.currency_name = params.get(PARAM_CURRENCY_NAME, "")

    currency_amount = parse_decimal(params.get(PARAM_CURRENCY_AMOUNT))
    if currency_amount is None:
        raise InvalidCurrencyAmountError(notification)
    notification.currency_amount = currency_amount

    notification.publisher_user_id = params.get(PARAM_USER_ID, "")
    notification.end_user_id = params.get(PARAM_END_USER_ID, "")
    return notification
