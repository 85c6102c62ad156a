"""FastAPI dependencies for the publisher API."""

from __future__ import annotations

from fastapi import Depends

from ..application.publisher import Publisher
from ..domain.shared import RewardHandlerProtocol
from ..env import Settings, get_settings
from ..infrastructure.reward_handler import LoggingRewardHandler


def get_publisher(settings: Settings = Depends(get_settings)) -> Publisher:
    """Get publisher built from settings."""
    return Publisher.from_settings(settings)


def get_reward_handler() -> RewardHandlerProtocol:
    """Get reward handler."""
    return LoggingRewardHandler()
