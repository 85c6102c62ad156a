"""Shared domain utilities.

This package is domain-accessible and should not depend on application code.
"""

from .reward_handler_protocol import RewardHandlerProtocol

__all__ = ["RewardHandlerProtocol"]
