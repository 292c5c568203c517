"""Jira webhook to chat message transformation.

- markup: Jira wiki markup to Mattermost markdown
- parser: raw webhook bytes to InboundEvent
- changelog: field changes to message text
- composer: InboundEvent to RenderedMessage
- serializer: RenderedMessage to the outgoing payload
"""

from .exceptions import TransformError, ParseError
from .markup import MarkupTranslator, translate
from .parser import parse_event
from .changelog import capitalize_field, render_changelog
from .composer import compose
from .serializer import serialize, render_payload

__all__ = [
    "TransformError",
    "ParseError",
    "MarkupTranslator",
    "translate",
    "parse_event",
    "capitalize_field",
    "render_changelog",
    "compose",
    "serialize",
    "render_payload",
]
