"""Mapping between plain text offsets and marked up value offsets."""

from typing import Any, Optional

from .markup import DisplayTransform, iterate_mentions_markup
from .models import IndexCorrection, LiteralRun, MentionOccurrence
from .utils import is_number


def map_plain_text_index(
    value: str,
    markup: str,
    index_in_plain_text: Any,
    in_markup_correction: str = IndexCorrection.START,
    display_transform: Optional[DisplayTransform] = None,
) -> Any:
    """Return the offset in the marked up value for a plain text offset.

    Args:
        value: Marked up value
        markup: Markup template
        index_in_plain_text: Offset in the plain text; anything that is not a
            number is returned unchanged
        in_markup_correction: What to return when the offset lies inside a mention:
            - START: the index of the mention markup's first char
            - END: the index after the mention markup's last char
            - NULL: None
        display_transform: Optional function (id, display, type) -> display

    Returns:
        The corresponding offset in the marked up value, or len(value) when the
        offset is past the last literal run
    """
    if not is_number(index_in_plain_text):
        return index_in_plain_text

    for event in iterate_mentions_markup(value, markup, display_transform):
        if isinstance(event, LiteralRun):
            if event.plain_text_index + len(event.text) >= index_in_plain_text:
                return event.index + index_in_plain_text - event.plain_text_index
        elif event.plain_text_index + len(event.display) > index_in_plain_text:
            # The literal run before the mention claims its left boundary, so
            # only offsets strictly inside the mention get here
            if in_markup_correction == IndexCorrection.NULL:
                return None
            if in_markup_correction == IndexCorrection.END:
                return event.end_index
            return event.index

    # A mention at the very end of the value leaves the caret position unclaimed
    return len(value)


def find_start_of_mention_in_plain_text(
    value: str,
    markup: str,
    index_in_plain_text: int,
    display_transform: Optional[DisplayTransform] = None,
) -> int:
    """Return the plain text start of the mention containing the given offset.

    If the offset does not lie inside a mention, it is returned unchanged.
    """
    for event in iterate_mentions_markup(value, markup, display_transform):
        if (
            isinstance(event, MentionOccurrence)
            and event.plain_text_index
            <= index_in_plain_text
            < event.plain_text_index + len(event.display)
        ):
            return event.plain_text_index
    return index_in_plain_text


def is_inside_of_mention(
    value: str,
    markup: str,
    index_in_plain_text: int,
    display_transform: Optional[DisplayTransform] = None,
) -> bool:
    """Return whether the plain text offset lies strictly inside a mention."""
    mention_start = find_start_of_mention_in_plain_text(
        value, markup, index_in_plain_text, display_transform
    )
    return mention_start != index_in_plain_text
