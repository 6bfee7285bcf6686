"""Reconciling plain text edits into the marked up value."""

from typing import Optional, Tuple

from .logging import get_logger
from .mapping import map_plain_text_index
from .markup import DisplayTransform
from .mentions import get_plain_text
from .models import IndexCorrection
from .utils import splice_string

logger = get_logger("change")


def _map_splice_range(
    value: str,
    markup: str,
    splice_start: int,
    splice_end: int,
    display_transform: Optional[DisplayTransform],
) -> Tuple[int, int]:
    mapped_start = map_plain_text_index(
        value, markup, splice_start, IndexCorrection.START, display_transform
    )
    mapped_end = map_plain_text_index(
        value, markup, splice_end, IndexCorrection.END, display_transform
    )
    return mapped_start, mapped_end


def apply_change_to_value(
    value: str,
    markup: str,
    plain_text_value: str,
    selection_start_before_change: Optional[int],
    selection_end_before_change: Optional[int],
    selection_end_after_change: int,
    display_transform: Optional[DisplayTransform] = None,
) -> str:
    """Apply a change of the plain text to the underlying marked up value.

    The change is located with the text selection before and after the edit.
    An edit that touches a mention removes the whole mention markup. When the
    result does not render to ``plain_text_value`` (e.g. the browser applied an
    autocorrection outside the selection) the splice is recomputed once from
    the first differing character.

    Args:
        value: Marked up value before the change
        markup: Markup template
        plain_text_value: Plain text after the change
        selection_start_before_change: Selection start in the old plain text, or
            None when unknown
        selection_end_before_change: Selection end in the old plain text, or None
            when unknown
        selection_end_after_change: Selection end in the new plain text
        display_transform: Optional function (id, display, type) -> display

    Returns:
        The new marked up value
    """
    old_plain_text_value = get_plain_text(value, markup, display_transform)

    length_delta = len(old_plain_text_value) - len(plain_text_value)
    if selection_start_before_change is None:
        selection_start_before_change = selection_end_after_change + length_delta

    if selection_end_before_change is None:
        selection_end_before_change = selection_start_before_change

    if (
        plain_text_value == old_plain_text_value
        and selection_start_before_change == selection_end_before_change
        and selection_end_before_change == selection_end_after_change
    ):
        return value

    # Replacing a composed character (e.g. an accented letter typed with a dead
    # key) reports a collapsed selection although one character was substituted
    if (
        selection_start_before_change == selection_end_before_change
        and selection_end_before_change == selection_end_after_change
        and len(old_plain_text_value) == len(plain_text_value)
    ):
        selection_start_before_change -= 1

    insert = plain_text_value[selection_start_before_change:selection_end_after_change]

    # Backspace with no range selection moves the caret left of the start
    splice_start = min(selection_start_before_change, selection_end_after_change)

    splice_end = selection_end_before_change
    if selection_start_before_change == selection_end_after_change:
        # Delete key with no range selection removes text right of the caret
        splice_end = max(
            selection_end_before_change, selection_start_before_change + length_delta
        )

    mapped_splice_start, mapped_splice_end = _map_splice_range(
        value, markup, splice_start, splice_end, display_transform
    )

    control_splice_start = map_plain_text_index(
        value, markup, splice_start, IndexCorrection.NULL, display_transform
    )
    control_splice_end = map_plain_text_index(
        value, markup, splice_end, IndexCorrection.NULL, display_transform
    )
    will_remove_mention = control_splice_start is None or control_splice_end is None

    new_value = splice_string(value, mapped_splice_start, mapped_splice_end, insert)

    if will_remove_mention:
        logger.debug(
            "Edit of plain text range [%s, %s) removes a mention", splice_start, splice_end
        )
        return new_value

    control_plain_text_value = get_plain_text(new_value, markup, display_transform)
    if control_plain_text_value == plain_text_value:
        return new_value

    # Some autocorrection changed text outside of the selection: find the start
    # of the difference and re-extract the insertion from there
    splice_start = 0
    common_length = min(len(plain_text_value), len(control_plain_text_value))
    while (
        splice_start < common_length
        and plain_text_value[splice_start] == control_plain_text_value[splice_start]
    ):
        splice_start += 1

    insert = plain_text_value[splice_start:selection_end_after_change]

    # The unchanged remainder after the caret marks the end of the replaced range
    splice_end = old_plain_text_value.rfind(
        plain_text_value[selection_end_after_change:]
    )

    logger.debug(
        "Autocorrection detected, re-splicing plain text range [%s, %s) with %r",
        splice_start,
        splice_end,
        insert,
    )

    mapped_splice_start, mapped_splice_end = _map_splice_range(
        value, markup, splice_start, splice_end, display_transform
    )
    return splice_string(value, mapped_splice_start, mapped_splice_end, insert)
