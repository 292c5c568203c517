"""Decoding of raw webhook bytes into an InboundEvent."""

import json
import logging
from typing import Union

from ..models import (
    Actor,
    EventKind,
    FieldChange,
    InboundEvent,
    IssueRef,
    JiraIssue,
    JiraIssueFields,
    JiraIssueType,
    JiraUser,
    JiraWebhook,
)
from .exceptions import ParseError

logger = logging.getLogger(__name__)

AVATAR_SIZE = "16x16"


def parse_event(raw: Union[bytes, str], strict: bool = False) -> InboundEvent:
    """Parse a Jira webhook payload.

    Decoding is field-local: a missing or mistyped field reads as empty and
    the rest of the event is kept. A payload that is not a JSON object
    produces the zero-valued ``InboundEvent`` in tolerant mode (the default)
    so rendering can still go ahead; with ``strict=True`` it raises
    ``ParseError``.
    """
    try:
        webhook = decode_webhook(raw)
    except ParseError as e:
        if strict:
            raise
        logger.warning(f"Ignoring undecodable webhook payload: {e}")
        return InboundEvent()

    return to_event(webhook)


def decode_webhook(raw: Union[bytes, str]) -> JiraWebhook:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON payload: {e}") from e

    if not isinstance(payload, dict):
        raise ParseError(f"Expected a JSON object, got {type(payload).__name__}")

    return JiraWebhook.model_validate(payload)


def to_event(webhook: JiraWebhook) -> InboundEvent:
    """Flatten the wire model, turning missing values into empty strings."""
    user = webhook.user or JiraUser()
    issue = webhook.issue or JiraIssue()
    fields = issue.fields or JiraIssueFields()
    issue_type = fields.issuetype or JiraIssueType()
    avatars = user.avatarUrls or {}

    actor = Actor(
        display_name=user.displayName or "",
        login_name=user.name or "",
        avatar_icon_url=avatars.get(AVATAR_SIZE) or "",
    )
    issue_ref = IssueRef(
        self_url=issue.self_url or "",
        key=issue.key or "",
        issue_type_name=issue_type.name or "",
        issue_type_icon_url=issue_type.iconUrl or "",
        summary=fields.summary or "",
    )

    changes = []
    if webhook.changelog and webhook.changelog.items:
        for item in webhook.changelog.items:
            changes.append(FieldChange(
                field_name=item.field or "",
                from_value=item.fromString or "",
                to_value=item.toString or "",
            ))

    comment = webhook.comment.body if webhook.comment else None

    return InboundEvent(
        event_kind=EventKind.from_webhook_event(webhook.webhookEvent),
        actor=actor,
        issue=issue_ref,
        comment=comment or None,
        field_changes=tuple(changes),
    )
