"""Pydantic models for the inbound Jira webhook payload.

Every field is optional: Jira omits or nulls many of them depending on the
event, and the relay renders whatever is present. A field holding a value of
the wrong type reads as missing, so the rest of the payload still decodes.
"""

from typing import Any, Dict, List, Optional
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class JiraModel(BaseModel):
    """Base for tolerant Jira payload models."""
    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="wrap")
    @classmethod
    def _drop_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


class JiraUser(JiraModel):
    """User who triggered the event."""

    name: Optional[str] = None
    displayName: Optional[str] = None
    avatarUrls: Optional[Dict[str, Optional[str]]] = None


class JiraIssueType(JiraModel):
    """Jira issue type information."""

    name: Optional[str] = None
    iconUrl: Optional[str] = None


class JiraIssueFields(JiraModel):
    """The subset of issue fields used in chat messages."""

    summary: Optional[str] = None
    issuetype: Optional[JiraIssueType] = None


class JiraIssue(JiraModel):
    """Jira issue information."""
    model_config = ConfigDict(populate_by_name=True)

    self_url: Optional[str] = Field(None, alias="self")
    key: Optional[str] = None
    fields: Optional[JiraIssueFields] = None


class JiraComment(JiraModel):
    """Comment attached to the event."""

    body: Optional[str] = None


class JiraChangelogItem(JiraModel):
    """Individual changelog item."""

    field: Optional[str] = None
    fromString: Optional[str] = None
    toString: Optional[str] = None


class JiraChangelog(JiraModel):
    """Jira changelog information."""

    items: Optional[List[JiraChangelogItem]] = None


class JiraWebhook(JiraModel):
    """Jira webhook envelope covering issue and comment events."""

    webhookEvent: Optional[str] = None
    user: Optional[JiraUser] = None
    issue: Optional[JiraIssue] = None
    comment: Optional[JiraComment] = None
    changelog: Optional[JiraChangelog] = None
