"""Jira Relay - Jira webhooks as Mattermost messages.

This package is organized as:

- jira_relay.transform: Webhook parsing, markup translation and message rendering
- jira_relay.relay: HTTP server, outbound dispatcher and CLI
- jira_relay.models: Shared data models
- jira_relay.common: Shared utilities
"""

__version__ = "1.0.0"

from . import models
from . import transform
from . import common

__all__ = [
    "models",
    "transform",
    "common",
]
