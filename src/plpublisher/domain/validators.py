"""Pure validation functions for publisher credentials and end-user ids.

These functions hold the credential and end-user id rules and can be tested
in isolation without building credentials.
"""

from __future__ import annotations

from typing import Final

from .errors import (
    InvalidApplicationIDError,
    InvalidEndUserIDError,
    InvalidSecurityKeyError,
    InvalidTransactionKeyError,
)

END_USER_ID_MAX_LENGTH: Final[int] = 200


def validate_application_id(application_id: int) -> None:
    """Validate the application id issued by the network. Pure function.

    Args:
        application_id: Numeric application id

    Raises:
        InvalidApplicationIDError: If the id is not a positive integer.
    """
    if isinstance(application_id, bool) or not isinstance(application_id, int):
        raise InvalidApplicationIDError()
    if application_id <= 0:
        raise InvalidApplicationIDError()


def validate_security_key(security_key: str) -> None:
    """Raise InvalidSecurityKeyError if the security key is empty."""
    if not security_key:
        raise InvalidSecurityKeyError()


def validate_transaction_key(transaction_key: str) -> None:
    """Raise InvalidTransactionKeyError if the transaction key is empty."""
    if not transaction_key:
        raise InvalidTransactionKeyError()


def validate_end_user_id(end_user_id: str) -> None:
    """Validate the publisher's own user id before it is embedded in a user id.

    Raises:
        InvalidEndUserIDError: If the id is empty or longer than 200 characters.
    """
    if not end_user_id or len(end_user_id) > END_USER_ID_MAX_LENGTH:
        raise InvalidEndUserIDError()
