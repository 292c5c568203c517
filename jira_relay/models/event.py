"""Normalized, immutable view of a Jira webhook event."""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict


class EventKind(str, Enum):
    """Kind of Jira notification, keyed by its ``webhookEvent`` value."""

    ISSUE_CREATED = "jira:issue_created"
    ISSUE_UPDATED = "jira:issue_updated"
    ISSUE_DELETED = "jira:issue_deleted"
    UNKNOWN = ""

    @classmethod
    def from_webhook_event(cls, value: Optional[str]) -> "EventKind":
        for kind in cls:
            if kind is not cls.UNKNOWN and kind.value == value:
                return kind
        return cls.UNKNOWN

    @property
    def action(self) -> str:
        """Verb used in the rendered message; empty for unknown events."""
        return _ACTIONS[self]


_ACTIONS = {
    EventKind.ISSUE_CREATED: "created",
    EventKind.ISSUE_UPDATED: "updated",
    EventKind.ISSUE_DELETED: "deleted",
    EventKind.UNKNOWN: "",
}


class Actor(BaseModel):
    model_config = ConfigDict(frozen=True)

    display_name: str = ""
    login_name: str = ""
    avatar_icon_url: str = ""


class IssueRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    self_url: str = ""
    key: str = ""
    issue_type_name: str = ""
    issue_type_icon_url: str = ""
    summary: str = ""


class FieldChange(BaseModel):
    """A single changelog entry, values kept exactly as received."""
    model_config = ConfigDict(frozen=True)

    field_name: str = ""
    from_value: str = ""
    to_value: str = ""


class InboundEvent(BaseModel):
    """Everything needed to render one chat message.

    The default instance is the zero-valued event produced when a payload
    cannot be decoded in tolerant mode.
    """
    model_config = ConfigDict(frozen=True)

    event_kind: EventKind = EventKind.UNKNOWN
    actor: Actor = Actor()
    issue: IssueRef = IssueRef()
    comment: Optional[str] = None
    field_changes: Tuple[FieldChange, ...] = ()
