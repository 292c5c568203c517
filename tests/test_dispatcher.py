"""Tests for outbound delivery."""

import types

import requests

from jira_relay.relay.dispatcher import WebhookDispatcher


def test_dispatch_posts_json(monkeypatch):
    calls = []

    def fake_post(url, data=None, headers=None, timeout=None):
        calls.append((url, data, headers, timeout))
        return types.SimpleNamespace(ok=True, status_code=200, text="ok")

    monkeypatch.setattr("jira_relay.relay.dispatcher.requests.post", fake_post)

    result = WebhookDispatcher(timeout=3).dispatch("https://chat.example.com/hooks/abc", b'{"text":"hi"}')

    assert result.ok
    assert result.status_code == 200
    assert calls == [(
        "https://chat.example.com/hooks/abc",
        b'{"text":"hi"}',
        {"Content-Type": "application/json"},
        3,
    )]


def test_dispatch_reports_connection_error(monkeypatch):
    def fake_post(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr("jira_relay.relay.dispatcher.requests.post", fake_post)

    result = WebhookDispatcher().dispatch("https://chat.example.com/hooks/abc", b"{}")

    assert not result.ok
    assert result.status_code is None
    assert "connection refused" in result.error


def test_dispatch_reports_error_status(monkeypatch):
    def fake_post(*args, **kwargs):
        return types.SimpleNamespace(ok=False, status_code=500, text="Internal Server Error")

    monkeypatch.setattr("jira_relay.relay.dispatcher.requests.post", fake_post)

    result = WebhookDispatcher().dispatch("https://chat.example.com/hooks/abc", b"{}")

    assert not result.ok
    assert result.status_code == 500
    assert result.error == "HTTP 500"
