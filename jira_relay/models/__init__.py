"""Shared models for webhook processing."""

from .jira_models import (
    JiraWebhook,
    JiraUser,
    JiraIssue,
    JiraIssueFields,
    JiraIssueType,
    JiraComment,
    JiraChangelog,
    JiraChangelogItem,
)

from .event import (
    EventKind,
    Actor,
    IssueRef,
    FieldChange,
    InboundEvent,
)

from .message import (
    RenderedMessage,
    OutboundPayload,
)

__all__ = [
    # Inbound Jira payload
    "JiraWebhook",
    "JiraUser",
    "JiraIssue",
    "JiraIssueFields",
    "JiraIssueType",
    "JiraComment",
    "JiraChangelog",
    "JiraChangelogItem",
    # Normalized event
    "EventKind",
    "Actor",
    "IssueRef",
    "FieldChange",
    "InboundEvent",
    # Outgoing message
    "RenderedMessage",
    "OutboundPayload",
]
