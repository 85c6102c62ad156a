"""Publisher integration object tying credentials to the core operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from ..domain.entities import DEFAULT_HOST, PublisherCredentials, RewardNotification
from ..domain.errors import InvalidCallbackSignatureError
from .identity import generate_user_id
from .notification import (
    PARAM_OFFER_HASH,
    PARAM_OFFER_INVITATION_ID,
    PARAM_TRANSACTION_HASH,
    PARAM_TRANSACTION_ID,
    parse_notification,
    verify_notification,
)
from .redirect import generate_redirect_url

if TYPE_CHECKING:
    from ..env import Settings


class Publisher:
    """Integration with the rewards network for one publisher application.

    Construction validates the credentials and never touches the network.
    Every method is a pure function of the credentials and its arguments, so
    one instance can be shared freely between threads and tasks.
    """

    def __init__(
        self,
        application_id: int,
        security_key: str,
        transaction_key: str,
        host: str = DEFAULT_HOST,
    ) -> None:
        self._credentials = PublisherCredentials(
            application_id=application_id,
            security_key=security_key,
            transaction_key=transaction_key,
        )
        self._host = host

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Publisher":
        """Build a publisher from application settings."""
        return cls(
            application_id=settings.application_id,
            security_key=settings.security_key,
            transaction_key=settings.transaction_key,
            host=settings.host,
        )

    @property
    def credentials(self) -> PublisherCredentials:
        return self._credentials

    @property
    def application_id(self) -> int:
        return self._credentials.application_id

    @property
    def host(self) -> str:
        return self._host

    def generate_user_id(self, end_user_id: str) -> str:
        """Return the three part user id expected by the reward center."""
        return generate_user_id(
            end_user_id,
            self._credentials.application_id,
            self._credentials.security_key,
        )

    def generate_reward_center_url(self, end_user_id: str) -> str:
        """Return the reward center URL for the given end user."""
        return generate_redirect_url(end_user_id, self._credentials, self._host)

    def verify_reward_notification(self, params: Mapping[str, str]) -> bool:
        """Check the offer and transaction hashes of a notification."""
        return verify_notification(
            offer_invitation_id=params.get(PARAM_OFFER_INVITATION_ID, ""),
            transaction_id=params.get(PARAM_TRANSACTION_ID, ""),
            offer_hash=params.get(PARAM_OFFER_HASH, ""),
            transaction_hash=params.get(PARAM_TRANSACTION_HASH, ""),
            security_key=self._credentials.security_key,
            transaction_key=self._credentials.transaction_key,
        )

    def process_reward_notification(
        self, params: Mapping[str, str]
    ) -> RewardNotification:
        """Authenticate and parse a reward notification.

        Args:
            params: Query parameters of the callback request

        Returns:
            The parsed notification.

        Raises:
            InvalidCallbackSignatureError: If either hash is wrong. No field
                of the notification is exposed in that case.
            InvalidAmountError: If the amount is malformed.
            InvalidCurrencyAmountError: If the currency amount is malformed.
        """
        if not self.verify_reward_notification(params):
            raise InvalidCallbackSignatureError()
        return parse_notification(params)
