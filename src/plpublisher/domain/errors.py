"""Domain-specific exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .entities import RewardNotification


class PublisherError(ValueError):
    """Base class for every error raised by the publisher integration."""


class InvalidApplicationIDError(PublisherError):
    """Raised when the application id is not a positive integer."""

    def __init__(self, message: str = "Invalid Application ID") -> None:
        super().__init__(message)


class InvalidSecurityKeyError(PublisherError):
    """Raised when the security key is empty."""

    def __init__(self, message: str = "Invalid Security Key") -> None:
        super().__init__(message)


class InvalidTransactionKeyError(PublisherError):
    """Raised when the transaction key is empty."""

    def __init__(self, message: str = "Invalid Transaction Key") -> None:
        super().__init__(message)


class InvalidEndUserIDError(PublisherError):
    """Raised when an end-user id is empty or too long."""

    def __init__(self, message: str = "Invalid EndUserID") -> None:
        super().__init__(message)


class InvalidCallbackSignatureError(PublisherError):
    """Raised when either callback hash does not match.

    Deliberately does not say which of the two hashes failed.
    """

    def __init__(
        self, message: str = "Invalid Hash for the reward notification"
    ) -> None:
        super().__init__(message)


class NotificationParseError(PublisherError):
    """Raised when an authenticated notification carries malformed data.

    `notification` holds the fields populated before the failure so callers
    can log the transaction context.
    """

    def __init__(
        self, message: str, notification: Optional["RewardNotification"] = None
    ) -> None:
        super().__init__(message)
        self.notification = notification


class InvalidAmountError(NotificationParseError):
    """Raised when `amt` is missing or not a number."""

    def __init__(self, notification: Optional["RewardNotification"] = None) -> None:
        super().__init__("Invalid Amount in callback", notification)


class InvalidCurrencyAmountError(NotificationParseError):
    """Raised when `currencyAmt` is missing or not a number."""

    def __init__(self, notification: Optional["RewardNotification"] = None) -> None:
        super().__init__("Invalid Currency Amount in callback", notification)
