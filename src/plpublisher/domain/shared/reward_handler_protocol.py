"""Protocol interface for reward handler implementations.

The publisher library never stores rewards. Whatever credits the user, and
deduplicates repeated deliveries by transaction id, sits behind this protocol
so the HTTP layer can be wired to any backend and tested with a mock.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..entities import RewardNotification


class RewardHandlerProtocol(Protocol):
    """Protocol for components that act on authenticated reward notifications."""

    async def handle(self, notification: "RewardNotification") -> bool:
        """Process a reward notification.

        Args:
            notification: Authenticated and fully parsed notification

        Returns:
            True once the reward has been durably processed (the network is
            acknowledged), False to ask the network to deliver it again.
        """
        ...
