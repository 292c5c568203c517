"""Logging utilities for consistent logging across modules."""

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


def _log_path(log_dir: Optional[str] = None) -> Optional[Path]:
    """Resolve the log directory, or None when logging goes to the console only."""
    log_dir = log_dir or os.getenv("JIRA_RELAY_LOG_DIR")
    if not log_dir:
        return None
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    return log_path


def _timestamp() -> str:
    return datetime.now().strftime("%Y%m%dT%H%M%S%f")


def setup_logging(log_dir: Optional[str] = None, level: int = logging.INFO) -> None:
    """Setup logging configuration.

    Without a log directory only the console handler is installed.
    """
    handlers: list = [logging.StreamHandler()]
    if log_dir:
        handlers.append(logging.FileHandler(_log_path(log_dir) / "jira_relay.log"))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


def log_server_message(message: str) -> None:
    """Log server-related messages."""
    logging.info(f"[SERVER] {message}")


def log_webhook_request(
    body: bytes,
    query_params: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> Optional[Path]:
    """Capture the raw inbound webhook.

    The capture goes to a timestamped file when a log directory is
    configured, and to the console log otherwise.
    """
    payload = body.decode("utf-8", errors="replace")
    log_path = _log_path(log_dir)
    if log_path is None:
        logging.info(f"Webhook received with query parameters {query_params or {}}:\n{payload}")
        return None

    try:
        webhook_file = log_path / f"webhook-{_timestamp()}.log"

        with open(webhook_file, "w", encoding="utf-8") as f:
            f.write(f"Webhook received at: {datetime.now().isoformat()}\n")
            if query_params:
                f.write(f"Query parameters: {json.dumps(query_params, indent=2)}\n")
            f.write(f"Webhook payload:\n{payload}\n")

        logging.info(f"Webhook logged to: {webhook_file}")
        return webhook_file

    except OSError as e:
        logging.error(f"Failed to log webhook request: {e}")
        return None


def log_error(error_message: str, error_data: str = "", log_dir: Optional[str] = None) -> None:
    """Log error messages.

    The offending data goes to its own timestamped file when a log directory
    is configured, and to the debug log otherwise.
    """
    logging.error(error_message)
    if not error_data:
        return

    log_path = _log_path(log_dir)
    if log_path is None:
        logging.debug(f"Error data: {error_data}")
        return

    try:
        error_file = log_path / f"error-{_timestamp()}.log"

        with open(error_file, "w", encoding="utf-8") as f:
            f.write(f"Error occurred at: {datetime.now().isoformat()}\n")
            f.write(f"Error message: {error_message}\n")
            f.write(f"Error data:\n{error_data}\n")

        logging.error(f"Error logged to: {error_file}")

    except OSError as e:
        logging.error(f"Failed to log error: {e}")
