"""Delivery of rendered payloads to the chat webhook."""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Outcome of a single delivery attempt."""

    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


class WebhookDispatcher:
    """POSTs payloads to an incoming-webhook URL.

    Exactly one attempt is made per payload; failures are returned, not raised.
    """

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    def dispatch(self, url: str, payload: bytes) -> DispatchResult:
        try:
            response = requests.post(
                url,
                data=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Failed to deliver message to {url}: {e}")
            return DispatchResult(ok=False, error=str(e))

        if not response.ok:
            logger.error(f"Chat webhook answered {response.status_code}: {response.text[:200]}")
            return DispatchResult(
                ok=False,
                status_code=response.status_code,
                error=f"HTTP {response.status_code}",
            )

        logger.info(f"Delivered message to chat webhook ({response.status_code})")
        return DispatchResult(ok=True, status_code=response.status_code)
