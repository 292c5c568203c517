"""Composition of the chat message body from an InboundEvent."""

import logging
from typing import Optional, Tuple
from urllib.parse import urlsplit

from ..config import MessageConfig
from ..models import InboundEvent, RenderedMessage
from .changelog import render_changelog
from .markup import translate

logger = logging.getLogger(__name__)

# ![user_icon](icon) [User Name](profile) updated task ![task_icon](icon) [TSK-42](issue) "Summary"
MESSAGE_TEMPLATE = (
    "![user_icon]({avatar}) [{display_name}]({scheme}://{host}/secure/ViewProfile.jspa?name={login}) "
    "{action} {issue_type} ![task_icon]({issue_type_icon}) [{key}]({scheme}://{host}/browse/{key}) "
    "\"{summary}\"{changelog}{comment}"
)


def split_base_url(url: str) -> Tuple[str, str]:
    """Return the scheme and host (with port) of ``url``, or empty strings."""
    try:
        parts = urlsplit(url)
    except ValueError:
        logger.debug(f"Could not parse issue URL: {url!r}")
        return "", ""
    return parts.scheme, parts.netloc.rpartition("@")[2]


def render_comment(comment: Optional[str]) -> str:
    if not comment:
        return ""
    return f"\nComment:\n{translate(comment)}\n"


def color_for_key(key: str, config: MessageConfig) -> Optional[str]:
    if config.priority_key_prefix and key.startswith(config.priority_key_prefix):
        return config.priority_color
    return None


def compose(event: InboundEvent, config: Optional[MessageConfig] = None) -> RenderedMessage:
    """Build the message body and color for ``event``."""
    config = config or MessageConfig()
    scheme, host = split_base_url(event.issue.self_url)

    body = MESSAGE_TEMPLATE.format(
        avatar=event.actor.avatar_icon_url,
        display_name=event.actor.display_name,
        login=event.actor.login_name,
        scheme=scheme,
        host=host,
        action=event.event_kind.action,
        issue_type=event.issue.issue_type_name.lower(),
        issue_type_icon=event.issue.issue_type_icon_url,
        key=event.issue.key,
        summary=event.issue.summary,
        changelog=render_changelog(event.field_changes, config.multiline_fields),
        comment=render_comment(event.comment),
    )
    logger.debug(f"Composed message: {body}")

    return RenderedMessage(body=body, color_hint=color_for_key(event.issue.key, config))
