"""Default reward handler."""

from __future__ import annotations

import logging

from ..domain.entities import RewardNotification

logger = logging.getLogger(__name__)


class LoggingRewardHandler:
    """Log each reward and acknowledge it.

    Nothing is stored. Deployments that credit users replace this handler
    through the `get_reward_handler` dependency.
    """

    async def handle(self, notification: RewardNotification) -> bool:
        logger.info(
            "Reward notification transaction_id=%s end_user_id=%s status=%s "
            "amount=%s currency_amount=%s %s offer_id=%s",
            notification.transaction_id,
            notification.end_user_id,
            notification.status,
            notification.amount,
            notification.currency_amount,
            notification.currency_name,
            notification.offer.id,
        )
        return True
