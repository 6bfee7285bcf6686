"""Plain text projection and mention extraction for marked up values."""

from typing import List, Optional

from .markup import (
    PLACEHOLDERS,
    DisplayTransform,
    compile_markup,
    iterate_mentions_markup,
)
from .models import Mention, MentionOccurrence


def get_plain_text(
    value: str, markup: str, display_transform: Optional[DisplayTransform] = None
) -> str:
    """Render a marked up value as the plain text the user sees.

    Args:
        value: Marked up value
        markup: Markup template
        display_transform: Optional function (id, display, type) -> display

    Returns:
        The value with every mention replaced by its (transformed) display string
    """
    pattern = compile_markup(markup)

    def replace(match) -> str:
        # group 0 is the whole match, capturing groups follow
        display = match.group(pattern.display_pos + 1)
        if display_transform:
            mention_type = (
                match.group(pattern.type_pos + 1)
                if pattern.type_pos is not None
                else None
            )
            display = display_transform(
                match.group(pattern.id_pos + 1), display, mention_type
            )
        return display

    return pattern.regex.sub(replace, value)


def get_mentions(
    value: str, markup: str, display_transform: Optional[DisplayTransform] = None
) -> List[Mention]:
    """Collect every mention of the marked up value in source order.

    Args:
        value: Marked up value
        markup: Markup template
        display_transform: Optional function (id, display, type) -> display

    Returns:
        List of Mention records with their source and plain text offsets
    """
    return [
        Mention(
            id=event.id,
            display=event.display,
            type=event.type,
            index=event.index,
            plain_text_index=event.plain_text_index,
        )
        for event in iterate_mentions_markup(value, markup, display_transform)
        if isinstance(event, MentionOccurrence)
    ]


def make_mentions_markup(
    markup: str, id: str, display: str, type: Optional[str] = None
) -> str:
    """Serialize a single mention into the markup template."""
    result = markup.replace(PLACEHOLDERS["id"], "" if id is None else str(id), 1)
    result = result.replace(
        PLACEHOLDERS["display"], "" if display is None else str(display), 1
    )
    result = result.replace(PLACEHOLDERS["type"], "" if type is None else str(type), 1)
    return result
