import json
from pathlib import Path

import pytest

RESOURCES = Path(__file__).parent / "resources"


def load_resource(name: str) -> bytes:
    return (RESOURCES / name).read_bytes()


@pytest.fixture
def updated_webhook_bytes() -> bytes:
    return load_resource("sample_webhook_issue_updated.json")


@pytest.fixture
def created_webhook() -> dict:
    """Minimal issue-created webhook."""
    return {
        "webhookEvent": "jira:issue_created",
        "user": {
            "name": "jane",
            "displayName": "Jane Doe",
            "avatarUrls": {"16x16": "http://x/a.png"},
        },
        "issue": {
            "self": "https://jira.example.com/rest/api/2/issue/10001",
            "key": "ABC-1",
            "fields": {
                "summary": "Crash on load",
                "issuetype": {"name": "Bug", "iconUrl": "http://x/b.png"},
            },
        },
    }


@pytest.fixture
def created_webhook_bytes(created_webhook) -> bytes:
    return json.dumps(created_webhook).encode("utf-8")
