"""Publisher-side integration with the Peanut Labs rewards network."""

from .application.identity import generate_user_id
from .application.notification import parse_notification, verify_notification
from .application.publisher import Publisher
from .application.redirect import generate_redirect_url
from .crypto.checksum import keyed_checksum
from .domain.entities import (
    DEFAULT_HOST,
    MAX_NOTIFICATION_ATTEMPTS,
    NotificationResponse,
    Offer,
    OfferType,
    PublisherCredentials,
    RewardNotification,
    TransactionStatus,
)
from .domain.errors import (
    InvalidAmountError,
    InvalidApplicationIDError,
    InvalidCallbackSignatureError,
    InvalidCurrencyAmountError,
    InvalidEndUserIDError,
    InvalidSecurityKeyError,
    InvalidTransactionKeyError,
    NotificationParseError,
    PublisherError,
)

__all__ = [
    "DEFAULT_HOST",
    "InvalidAmountError",
    "InvalidApplicationIDError",
    "InvalidCallbackSignatureError",
    "InvalidCurrencyAmountError",
    "InvalidEndUserIDError",
    "InvalidSecurityKeyError",
    "InvalidTransactionKeyError",
    "MAX_NOTIFICATION_ATTEMPTS",
    "NotificationParseError",
    "NotificationResponse",
    "Offer",
    "OfferType",
    "Publisher",
    "PublisherCredentials",
    "PublisherError",
    "RewardNotification",
    "TransactionStatus",
    "generate_redirect_url",
    "generate_user_id",
    "keyed_checksum",
    "parse_notification",
    "verify_notification",
]
