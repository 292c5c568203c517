"""Jira webhook relay.

This module handles:
- Receiving Jira webhooks
- Rendering them as Mattermost messages
- Posting the messages to the destination webhook
"""

from .server import app, create_app
from .config import RelayConfig
from .dispatcher import DispatchResult, WebhookDispatcher

__all__ = [
    "app",
    "create_app",
    "RelayConfig",
    "DispatchResult",
    "WebhookDispatcher",
]
