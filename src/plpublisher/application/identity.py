"""Generation of the three part user id handed to the rewards network."""

from __future__ import annotations

from ..crypto.checksum import USER_ID_CHECKSUM_LENGTH, keyed_checksum
from ..domain.validators import validate_end_user_id


def generate_user_id(end_user_id: str, application_id: int, security_key: str) -> str:
    """Return `{end_user_id}-{application_id}-{checksum}`.

    The checksum is the first 10 hex characters of the keyed checksum over
    end_user_id, application_id and security_key, in that order. The same
    inputs always produce the same id.

    Raises:
        InvalidEndUserIDError: If end_user_id is empty or too long.
    """
    validate_end_user_id(end_user_id)
    checksum = keyed_checksum(end_user_id, str(application_id), security_key)
    return f"{end_user_id}-{application_id}-{checksum[:USER_ID_CHECKSUM_LENGTH]}"
