"""Rendering of changelog items into message text."""

from typing import Iterable, Mapping

from ..models import FieldChange
from .markup import translate

EMPTY_FROM_VALUE = "None"


def capitalize_field(name: str) -> str:
    """Upper-case the first character only; the rest is kept verbatim."""
    return name[:1].upper() + name[1:]


def render_change(change: FieldChange, multiline_fields: Mapping[str, bool]) -> str:
    name = capitalize_field(change.field_name)
    from_value = change.from_value or EMPTY_FROM_VALUE

    if multiline_fields.get(name, False):
        return f"\nChanged **{name}**:\n\n---\n{translate(change.to_value)}\n"
    return f"\n{name}: ~~{from_value.strip(' ')}~~ {change.to_value}"


def render_changelog(changes: Iterable[FieldChange], multiline_fields: Mapping[str, bool]) -> str:
    """Render changes in the order received.

    Fields listed in ``multiline_fields`` get a block with the translated new
    value; every other field is shown inline with the old value struck out.
    """
    return "".join(render_change(change, multiline_fields) for change in changes)
