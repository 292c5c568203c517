"""Tests for the relay CLI."""

import json

from click.testing import CliRunner

from jira_relay.relay.cli import cli


def test_render_command(updated_webhook_bytes, tmp_path):
    webhook_file = tmp_path / "webhook.json"
    webhook_file.write_bytes(updated_webhook_bytes)

    result = CliRunner().invoke(cli, ["render", str(webhook_file)])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["text"].startswith("![user_icon](https://jira.example.com/secure/useravatar")
    assert "\nStatus: ~~To Do~~ In Progress" in data["text"]


def test_render_command_strict_rejects_garbage(tmp_path):
    webhook_file = tmp_path / "webhook.json"
    webhook_file.write_text("not json")

    result = CliRunner().invoke(cli, ["render", "--strict", str(webhook_file)])

    assert result.exit_code == 1


def test_config_command(monkeypatch):
    monkeypatch.setenv("PORT", "5050")
    monkeypatch.delenv("JIRA_RELAY_MESSAGE_CONFIG", raising=False)

    result = CliRunner().invoke(cli, ["config"])

    assert result.exit_code == 0
    assert "Port: 5050" in result.output
    assert "Bot Username: JIRA" in result.output
