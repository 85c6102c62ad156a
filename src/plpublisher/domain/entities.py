"""Publisher domain entities: credentials, offers and reward notifications."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum, IntEnum
from typing import Any, Final, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .validators import (
    validate_application_id,
    validate_security_key,
    validate_transaction_key,
)


DEFAULT_HOST: Final[str] = "https://www.peanutlabs.com"

# The network gives up after this many deliveries of a notification.
MAX_NOTIFICATION_ATTEMPTS: Final[int] = 5


class TransactionStatus(str, Enum):
    """Outcome of the action reported by a notification."""

    COMPLETE = "C"
    # quality check failure or over quota
    FAILED = "F"
    # disqualified from a survey
    SCREENOUT = "P"


class OfferType(str, Enum):
    """Kind of task the user completed."""

    OFFER = "offer"
    SURVEY = "survey"


class NotificationResponse(IntEnum):
    """Acknowledgement the network expects in the callback response body."""

    SUCCESS = 1
    # asks the network to deliver the notification again
    FAILURE = 0


class PublisherCredentials(BaseModel):
    """Keys issued to a publisher application. Immutable once built.

    Construction checks the application id, then the security key, then
    the transaction key.
    """

    model_config = ConfigDict(frozen=True)

    application_id: int
    security_key: str = Field(repr=False)
    transaction_key: str = Field(repr=False)

    def __init__(self, **data: Any) -> None:
        validate_application_id(data.get("application_id"))
        validate_security_key(data.get("security_key"))
        validate_transaction_key(data.get("transaction_key"))
        super().__init__(**data)


class Offer(BaseModel):
    """Offer or survey the user completed to earn the reward."""

    id: str = ""
    title: str = ""
    type: str = ""


class RewardNotification(BaseModel):
    """Parameters sent by the network when a reward is earned."""

    # user id within the publisher's own application
    end_user_id: str = ""
    # the three part id generated for the network
    publisher_user_id: str = ""
    # dollar amount earned by the publisher
    amount: Optional[Decimal] = None
    status: str = ""
    transaction_id: str = ""
    # virtual currency earned by the user
    currency_amount: Optional[Decimal] = None
    currency_name: str = ""
    # which currency was earned, for publishers with several
    program: str = ""
    offer: Offer = Field(default_factory=Offer)

    @field_serializer("amount", "currency_amount")
    def serialize_decimal(self, value: Optional[Decimal]) -> Optional[str]:
        return str(value) if value is not None else None

    def known_status(self) -> Optional[TransactionStatus]:
        """Return the status as a TransactionStatus, or None if unrecognised."""
        try:
            return TransactionStatus(self.status)
        except ValueError:
            return None
