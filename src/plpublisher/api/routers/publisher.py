"""Reward center and reward notification routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from prometheus_client import Counter

from ...application.publisher import Publisher
from ...domain.entities import NotificationResponse
from ...domain.errors import (
    InvalidCallbackSignatureError,
    InvalidEndUserIDError,
    NotificationParseError,
)
from ...domain.shared import RewardHandlerProtocol
from ..dependencies import get_publisher, get_reward_handler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/publisher", tags=["publisher"])

reward_notifications_total = Counter(
    "reward_notifications_total",
    "Total reward notifications received, by outcome",
    ["outcome"],
)


def _acknowledge(
    response: NotificationResponse, status_code: int = status.HTTP_200_OK
) -> PlainTextResponse:
    return PlainTextResponse(str(int(response)), status_code=status_code)


@router.get("/reward-center")
async def redirect_to_reward_center(
    end_user_id: str = Query(..., description="User id within the publisher app"),
    publisher: Publisher = Depends(get_publisher),
) -> RedirectResponse:
    """Redirect the user to the reward center."""
    try:
        url = publisher.generate_reward_center_url(end_user_id)
    except InvalidEndUserIDError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return RedirectResponse(url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/notifications", response_class=PlainTextResponse)
async def receive_reward_notification(
    request: Request,
    publisher: Publisher = Depends(get_publisher),
    reward_handler: RewardHandlerProtocol = Depends(get_reward_handler),
) -> PlainTextResponse:
    """Authenticate, parse and hand off a reward notification.

    The body is `1` when the reward was processed and `0` when the network
    should deliver it again.
    """
    try:
        notification = publisher.process_reward_notification(request.query_params)
    except InvalidCallbackSignatureError:
        reward_notifications_total.labels(outcome="rejected").inc()
        logger.warning(
            "Rejected reward notification with invalid hash from %s",
            request.client.host if request.client else "unknown",
        )
        return _acknowledge(
            NotificationResponse.FAILURE, status.HTTP_403_FORBIDDEN
        )
    except NotificationParseError as e:
        reward_notifications_total.labels(outcome="malformed").inc()
        partial = e.notification
        logger.error(
            "Malformed reward notification transaction_id=%s offer_id=%s: %s",
            partial.transaction_id if partial else "",
            partial.offer.id if partial else "",
            e,
        )
        return _acknowledge(NotificationResponse.FAILURE)

    try:
        processed = await reward_handler.handle(notification)
    except Exception as e:
        reward_notifications_total.labels(outcome="handler_error").inc()
        logger.exception(
            "Reward handler failed for transaction_id=%s: %s",
            notification.transaction_id,
            e,
        )
        return _acknowledge(NotificationResponse.FAILURE)

    if not processed:
        reward_notifications_total.labels(outcome="deferred").inc()
        return _acknowledge(NotificationResponse.FAILURE)

    reward_notifications_total.labels(outcome="accepted").inc()
    return _acknowledge(NotificationResponse.SUCCESS)
