"""Markup template compilation and scanning.

A markup template is a string such as ``@[__display__](__id__)`` in which the
placeholders ``__display__``, ``__id__`` and ``__type__`` mark where a
mention's fields are embedded. This module turns a template into a regular
expression and walks a marked up value, yielding the literal text runs and the
mention occurrences in source order.
"""

import re
from functools import lru_cache
from typing import Callable, Iterator, Optional

from .exceptions import InvalidTemplateError
from .logging import get_logger
from .models import LiteralRun, MarkupPattern, MentionOccurrence, ScanEvent
from .utils import escape_regex

logger = get_logger("markup")

PLACEHOLDERS = {
    "id": "__id__",
    "display": "__display__",
    "type": "__type__",
}

# Non-greedy placeholder group, never spanning a line terminator
CAPTURE_GROUP = r"([^\n\r\u2028\u2029]+?)"

DisplayTransform = Callable[[str, str, Optional[str]], str]


def get_position_of_capturing_group(markup: str, parameter_name: str) -> Optional[int]:
    """Return the 0-based capturing group of a parameter in the template regex.

    Args:
        markup: Markup template
        parameter_name: One of "id", "display" or "type"

    Returns:
        The group rank of the placeholder among all placeholders present in the
        template, or None for "type" when the template has no __type__.

    Raises:
        InvalidTemplateError: When parameter_name is unknown or the template
            contains neither __id__ nor __display__
    """
    if parameter_name not in PLACEHOLDERS:
        raise InvalidTemplateError(
            "parameter_name must be 'id', 'display', or 'type', "
            f"got {parameter_name!r}"
        )

    positions = {}
    for name, placeholder in PLACEHOLDERS.items():
        index = markup.find(placeholder)
        positions[name] = index if index >= 0 else None

    if positions["display"] is None and positions["id"] is None:
        raise InvalidTemplateError(
            f"The markup `{markup}` must contain at least one of the placeholders "
            "`__id__` or `__display__`"
        )

    if parameter_name == "type" and positions["type"] is None:
        return None

    sorted_indices = sorted(index for index in positions.values() if index is not None)

    # With only one of __id__ and __display__ present, both parameters read the
    # same captured string
    if positions["display"] is None:
        positions["display"] = positions["id"]
    if positions["id"] is None:
        positions["id"] = positions["display"]

    return sorted_indices.index(positions[parameter_name])


def markup_to_regex(markup: str, match_at_end: bool = False) -> "re.Pattern[str]":
    """Build the regex matching occurrences of the markup template.

    Args:
        markup: Markup template
        match_at_end: Anchor the pattern to the end of the string

    Returns:
        Compiled pattern with one non-greedy group per placeholder
    """
    pattern = escape_regex(markup)
    pattern = pattern.replace(PLACEHOLDERS["display"], CAPTURE_GROUP, 1)
    pattern = pattern.replace(PLACEHOLDERS["id"], CAPTURE_GROUP, 1)
    pattern = pattern.replace(PLACEHOLDERS["type"], CAPTURE_GROUP, 1)
    if match_at_end:
        # "$" would also match before a trailing newline
        pattern += r"\Z"
    return re.compile(pattern)


@lru_cache(maxsize=64)
def compile_markup(markup: str, match_at_end: bool = False) -> MarkupPattern:
    """Compile a template into its regex and the group position of each parameter."""
    compiled = MarkupPattern(
        markup=markup,
        regex=markup_to_regex(markup, match_at_end),
        display_pos=get_position_of_capturing_group(markup, "display"),
        id_pos=get_position_of_capturing_group(markup, "id"),
        type_pos=get_position_of_capturing_group(markup, "type"),
    )
    logger.debug(
        "Compiled markup %r (display=%s, id=%s, type=%s)",
        markup,
        compiled.display_pos,
        compiled.id_pos,
        compiled.type_pos,
    )
    return compiled


def iterate_mentions_markup(
    value: str,
    markup: str,
    display_transform: Optional[DisplayTransform] = None,
) -> Iterator[ScanEvent]:
    """Walk the marked up value from left to right.

    Yields a LiteralRun for the text before every mention (empty when two
    mentions touch or the value starts with a mention), a MentionOccurrence for
    every match and, if non-empty, a final LiteralRun for the trailing text.
    Plain text offsets account for the transformed display strings.

    Args:
        value: Marked up value
        markup: Markup template
        display_transform: Optional function (id, display, type) -> display

    Raises:
        InvalidTemplateError: When the template is invalid
    """
    pattern = compile_markup(markup)
    start = 0
    plain_text_index = 0

    for match in pattern.regex.finditer(value):
        mention_id = match.group(pattern.id_pos + 1)
        display = match.group(pattern.display_pos + 1)
        mention_type = (
            match.group(pattern.type_pos + 1) if pattern.type_pos is not None else None
        )
        if display_transform:
            display = display_transform(mention_id, display, mention_type)

        substr = value[start : match.start()]
        yield LiteralRun(text=substr, index=start, plain_text_index=plain_text_index)
        plain_text_index += len(substr)

        yield MentionOccurrence(
            markup=match.group(0),
            index=match.start(),
            plain_text_index=plain_text_index,
            id=mention_id,
            display=display,
            type=mention_type,
            last_mention_end_index=start,
        )
        plain_text_index += len(display)

        start = match.end()

    if start < len(value):
        yield LiteralRun(
            text=value[start:], index=start, plain_text_index=plain_text_index
        )
