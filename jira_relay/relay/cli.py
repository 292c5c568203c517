"""CLI for the Jira webhook relay."""

import sys
from pathlib import Path

import click
from rich.console import Console

from ..config import MessageConfig
from ..transform import ParseError, render_payload
from .config import RelayConfig

console = Console()


@click.group()
def cli():
    """Jira to Mattermost webhook relay CLI."""
    pass


@cli.command()
@click.option("--host", default=None, help="Host to bind to (default: JIRA_RELAY_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind to (default: PORT or 5000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def serve(host, port, reload):
    """Start the webhook relay server."""
    config = RelayConfig.from_env()
    host = host or config.host
    port = port or config.port
    try:
        console.print("🚀 Starting Jira webhook relay...")
        console.print(f"📡 Host: {host}")
        console.print(f"🔌 Port: {port}")
        console.print(f"🔄 Reload: {reload}")

        import uvicorn
        uvicorn.run(
            "jira_relay.relay.server:app",
            host=host,
            port=port,
            reload=reload,
            log_level="info"
        )

    except KeyboardInterrupt:
        console.print("⏹️  Server stopped by user")
    except Exception as e:
        console.print(f"❌ Server failed: {e}", style="red")
        sys.exit(1)


@cli.command()
def config():
    """Show current configuration."""
    try:
        config = RelayConfig.from_env()
        message_config = MessageConfig.load(config.message_config_path)
    except Exception as e:
        console.print(f"❌ Failed to load configuration: {e}", style="red")
        sys.exit(1)

    console.print("📋 Relay Configuration:")
    console.print(f"  Host: {config.host}")
    console.print(f"  Port: {config.port}")
    console.print(f"  Webhook Endpoint: {config.webhook_endpoint}")
    console.print(f"  Destination Parameter: {config.hook_url_param}")
    console.print(f"  Strict Parsing: {config.strict_parse}")
    console.print(f"  Dispatch Timeout: {config.dispatch_timeout}s")
    console.print(f"  Log Directory: {config.log_dir or 'Console only'}")
    console.print(f"  Capture Requests: {config.capture_requests}")
    console.print(f"  Message Config: {config.message_config_path or 'Built-in defaults'}")
    console.print(f"  Bot Username: {message_config.bot_username}")
    console.print(f"  Priority Prefix: {message_config.priority_key_prefix} -> #{message_config.priority_color}")
    multiline = [name for name, enabled in message_config.multiline_fields.items() if enabled]
    console.print(f"  Multiline Fields: {', '.join(multiline) or 'None'}")


@cli.command()
@click.argument("webhook_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--message-config", "message_config_path", default=None, help="Message settings YAML file")
@click.option("--strict", is_flag=True, help="Fail on payloads that cannot be decoded")
def render(webhook_file, message_config_path, strict):
    """Print the chat payload produced for a saved Jira webhook JSON file."""
    try:
        message_config = MessageConfig.load(message_config_path)
        payload = render_payload(webhook_file.read_bytes(), message_config, strict=strict)
    except ParseError as e:
        console.print(f"❌ {e}", style="red", markup=False)
        sys.exit(1)

    click.echo(payload.decode("utf-8"))


if __name__ == "__main__":
    cli()
