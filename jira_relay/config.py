from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

DEFAULT_MULTILINE_FIELDS = (
    "Acceptance Criteria",
    "Demo Script",
    "Release Notes Text",
    "Description",
    "Deployment Notes",
)

DEFAULT_BOT_USERNAME = "JIRA"
DEFAULT_BOT_ICON_URL = "https://raw.githubusercontent.com/hhommersom/mattermost-jira/master/logo-02.png"


def _load_file(path: str | Path) -> dict:
    with open(path, "r", encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


def _multiline_map(value) -> Dict[str, bool]:
    if isinstance(value, dict):
        return {str(name): bool(flag) for name, flag in value.items()}
    if isinstance(value, (list, tuple)):
        return {str(name): True for name in value}
    raise ValueError("multiline_fields must be a list of names or a name->bool mapping")


@dataclass
class MessageConfig:
    """Settings that shape the rendered chat message."""

    multiline_fields: Dict[str, bool] = field(
        default_factory=lambda: {name: True for name in DEFAULT_MULTILINE_FIELDS}
    )
    bot_username: str = DEFAULT_BOT_USERNAME
    bot_icon_url: str = DEFAULT_BOT_ICON_URL
    priority_key_prefix: str = "SVD"
    priority_color: str = "ff0000"

    @classmethod
    def load(cls, path: Optional[str | Path] = None) -> "MessageConfig":
        """Load settings from a YAML file; keys that are absent keep their defaults."""
        if path is None:
            return cls()

        data = _load_file(path)
        config = cls()
        if "multiline_fields" in data:
            config.multiline_fields = _multiline_map(data["multiline_fields"])
        for key in ("bot_username", "bot_icon_url", "priority_key_prefix", "priority_color"):
            if data.get(key) is not None:
                setattr(config, key, str(data[key]))
        return config
