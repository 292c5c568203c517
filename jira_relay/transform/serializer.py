"""Mapping of rendered messages onto the outgoing webhook payload."""

import logging
from typing import Optional, Union

from ..config import MessageConfig
from ..models import OutboundPayload, RenderedMessage
from .composer import compose
from .parser import parse_event

logger = logging.getLogger(__name__)


def serialize(message: RenderedMessage, config: Optional[MessageConfig] = None) -> OutboundPayload:
    config = config or MessageConfig()
    return OutboundPayload(
        text=message.body,
        username=config.bot_username,
        icon_url=config.bot_icon_url,
        color=message.color_hint or None,
    )


def render_payload(
    raw: Union[bytes, str],
    config: Optional[MessageConfig] = None,
    strict: bool = False,
) -> bytes:
    """Run the full pipeline: webhook bytes in, chat payload bytes out."""
    event = parse_event(raw, strict=strict)
    payload = serialize(compose(event, config), config).to_bytes()
    logger.debug(f"Outgoing payload: {payload!r}")
    return payload
