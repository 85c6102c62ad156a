"""Reward center link building."""

from __future__ import annotations

from ..domain.entities import DEFAULT_HOST, PublisherCredentials
from .identity import generate_user_id

USER_GREETING_PATH = "/userGreeting.php"


def generate_redirect_url(
    end_user_id: str,
    credentials: PublisherCredentials,
    base_host: str = DEFAULT_HOST,
) -> str:
    """Return the reward center URL for an end user.

    The generated user id is inserted verbatim. InvalidEndUserIDError from
    the id generation propagates unchanged.
    """
    user_id = generate_user_id(
        end_user_id, credentials.application_id, credentials.security_key
    )
    return f"{base_host}{USER_GREETING_PATH}?userId={user_id}"
