"""Tests for webhook payload parsing."""

import json

import pytest

from jira_relay.models import EventKind, FieldChange, InboundEvent
from jira_relay.transform import ParseError, parse_event


def test_parse_sample_webhook(updated_webhook_bytes):
    event = parse_event(updated_webhook_bytes)

    assert event.event_kind is EventKind.ISSUE_UPDATED
    assert event.actor.display_name == "Mike Mannion"
    assert event.actor.login_name == "mmannion"
    assert event.actor.avatar_icon_url == "https://jira.example.com/secure/useravatar?size=xsmall&avatarId=10341"
    assert event.issue.self_url == "https://jira.example.com/rest/api/2/issue/10099"
    assert event.issue.key == "BTS-16"
    assert event.issue.issue_type_name == "Story"
    assert event.issue.issue_type_icon_url == "https://jira.example.com/images/icons/issuetypes/story.svg"
    assert event.issue.summary == "Upgrade hibernate-related dependencies"
    assert event.comment == "Looks good (y)\n{code:java}session.flush();{code}"


def test_changelog_order_and_null_values(updated_webhook_bytes):
    event = parse_event(updated_webhook_bytes)

    assert event.field_changes == (
        FieldChange(field_name="status", from_value="To Do", to_value="In Progress"),
        FieldChange(field_name="assignee", from_value="", to_value="Mike Mannion"),
        FieldChange(field_name="description", from_value="Bump versions", to_value="h2. Scope\n* hibernate-core"),
    )


@pytest.mark.parametrize("webhook_event, kind", [
    ("jira:issue_created", EventKind.ISSUE_CREATED),
    ("jira:issue_updated", EventKind.ISSUE_UPDATED),
    ("jira:issue_deleted", EventKind.ISSUE_DELETED),
    ("comment_created", EventKind.UNKNOWN),
    ("", EventKind.UNKNOWN),
])
def test_event_kind_mapping(webhook_event, kind):
    event = parse_event(json.dumps({"webhookEvent": webhook_event}))
    assert event.event_kind is kind


def test_unknown_event_has_empty_action():
    assert EventKind.UNKNOWN.action == ""
    assert EventKind.ISSUE_DELETED.action == "deleted"


def test_missing_sections_become_empty():
    event = parse_event(b'{"webhookEvent": "jira:issue_deleted", "extra": {"ignored": true}}')

    assert event.actor.display_name == ""
    assert event.issue.key == ""
    assert event.comment is None
    assert event.field_changes == ()


def test_empty_comment_is_absent():
    event = parse_event(b'{"comment": {"body": ""}}')
    assert event.comment is None


def test_missing_avatar_size():
    event = parse_event(b'{"user": {"avatarUrls": {"48x48": "http://x/big.png"}}}')
    assert event.actor.avatar_icon_url == ""


@pytest.mark.parametrize("raw", [
    b"",
    b"not json",
    b'{"webhookEvent": ',
    b"[1, 2]",
    b'{"issue": "BTS-16"}',
    b"\xff\xfe",
])
def test_tolerant_mode_returns_zero_event(raw):
    assert parse_event(raw) == InboundEvent()


@pytest.mark.parametrize("raw", [
    b"not json",
    b'"just a string"',
    b"[1, 2]",
])
def test_strict_mode_raises(raw):
    with pytest.raises(ParseError):
        parse_event(raw, strict=True)


def test_strict_mode_accepts_valid_payload(created_webhook_bytes):
    event = parse_event(created_webhook_bytes, strict=True)
    assert event.issue.key == "ABC-1"


def test_mistyped_field_keeps_rest_of_event():
    payload = {
        "webhookEvent": "jira:issue_created",
        "user": {"displayName": "Jane Doe"},
        "issue": {"key": "SVD-1", "fields": {"summary": 42}},
    }

    event = parse_event(json.dumps(payload))

    assert event.event_kind is EventKind.ISSUE_CREATED
    assert event.actor.display_name == "Jane Doe"
    assert event.issue.key == "SVD-1"
    assert event.issue.summary == ""


def test_unused_fields_of_any_type_are_ignored():
    payload = {
        "timestamp": "2024-01-01T00:00:00Z",
        "issue_event_type_name": 7,
        "issue": {"key": "ABC-1"},
    }
    assert parse_event(json.dumps(payload), strict=True).issue.key == "ABC-1"


def test_mistyped_sections_read_as_missing():
    payload = {
        "webhookEvent": "jira:issue_updated",
        "user": "jane",
        "comment": {"body": ["not", "text"]},
        "changelog": {"items": "none"},
        "issue": {"key": "ABC-2", "self": 5, "fields": {"issuetype": {"name": "Bug", "iconUrl": False}}},
    }

    event = parse_event(json.dumps(payload), strict=True)

    assert event.event_kind is EventKind.ISSUE_UPDATED
    assert event.actor.display_name == ""
    assert event.comment is None
    assert event.field_changes == ()
    assert event.issue.key == "ABC-2"
    assert event.issue.self_url == ""
    assert event.issue.issue_type_name == "Bug"
    assert event.issue.issue_type_icon_url == ""
