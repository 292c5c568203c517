"""Configuration for the webhook relay server."""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class RelayConfig:
    """Configuration for the webhook relay server."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000

    # Webhook settings
    webhook_endpoint: str = "/"
    hook_url_param: str = "mattermost_hook_url"
    strict_parse: bool = False

    # Message settings (YAML file, see MessageConfig)
    message_config_path: Optional[str] = None

    # Outbound delivery
    dispatch_timeout: float = 10.0

    # Logging
    log_dir: Optional[str] = None
    capture_requests: bool = False

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """Create configuration from environment variables."""
        return cls(
            host=os.getenv("JIRA_RELAY_HOST", "0.0.0.0"),
            port=int(os.getenv("PORT") or "5000"),
            webhook_endpoint=os.getenv("JIRA_RELAY_WEBHOOK_ENDPOINT", "/"),
            hook_url_param=os.getenv("JIRA_RELAY_HOOK_URL_PARAM", "mattermost_hook_url"),
            strict_parse=_env_flag("JIRA_RELAY_STRICT_PARSE"),
            message_config_path=os.getenv("JIRA_RELAY_MESSAGE_CONFIG") or None,
            dispatch_timeout=float(os.getenv("JIRA_RELAY_DISPATCH_TIMEOUT", "10")),
            log_dir=os.getenv("JIRA_RELAY_LOG_DIR") or None,
            capture_requests=_env_flag("JIRA_RELAY_CAPTURE_REQUESTS"),
        )
