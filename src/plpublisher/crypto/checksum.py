"""Keyed checksum shared with the rewards network.

The remote side computes the same digest independently, so the algorithm
(MD5), the concatenation order and the lowercase hex rendering are part of
the wire protocol and must not change.
"""

from __future__ import annotations

import hashlib
from typing import Final


MD5: Final[str] = "md5"
USER_ID_CHECKSUM_LENGTH: Final[int] = 10


def keyed_checksum(*fragments: str) -> str:
    """Return the lowercase hex MD5 of the fragments concatenated in order."""
    data = "".join(fragments).encode("utf-8")
    return hashlib.new(MD5, data, usedforsecurity=False).hexdigest()
