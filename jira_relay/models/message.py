"""Rendered chat message and the outgoing webhook payload."""

import json
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RenderedMessage(BaseModel):
    """Composed message text plus display metadata."""
    model_config = ConfigDict(frozen=True)

    body: str
    color_hint: Optional[str] = None


class OutboundPayload(BaseModel):
    """Incoming-webhook message accepted by Mattermost."""
    model_config = ConfigDict(frozen=True)

    pretext: Optional[str] = None
    text: str
    username: str
    icon_url: str
    color: Optional[str] = None

    def to_bytes(self) -> bytes:
        """Compact JSON; ``pretext`` and ``color`` are dropped when unset or empty."""
        data = self.model_dump()
        for optional in ("pretext", "color"):
            if not data[optional]:
                del data[optional]
        return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
