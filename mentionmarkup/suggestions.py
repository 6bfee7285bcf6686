"""Helpers over the suggestion results collected per mention type.

Suggestions are passed as a mapping from mention type to a descriptor dict
holding at least a ``results`` list, e.g.::

    {"users": {"results": [...], "markup": "..."}, "tags": {"results": [...]}}

Mention types are visited in the mapping's insertion order.
"""

from typing import Any, Dict, List, Mapping, Optional

from .models import SuggestionGroup, SuggestionItem


def count_suggestions(suggestions: Mapping[str, Dict[str, Any]]) -> int:
    return sum(len(descriptor["results"]) for descriptor in suggestions.values())


def get_suggestions(suggestions: Mapping[str, Dict[str, Any]]) -> List[SuggestionGroup]:
    return [
        SuggestionGroup(suggestions=descriptor["results"], descriptor=descriptor)
        for descriptor in suggestions.values()
    ]


def get_suggestion(
    suggestions: Mapping[str, Dict[str, Any]], index: int
) -> Optional[SuggestionItem]:
    """Return the suggestion at a global index across all mention types.

    Args:
        suggestions: Mapping from mention type to descriptor
        index: Position in the flattened list of all results

    Returns:
        The SuggestionItem at that position, or None if the index is out of range
    """
    items = [
        SuggestionItem(suggestion=suggestion, descriptor=group.descriptor)
        for group in get_suggestions(suggestions)
        for suggestion in group.suggestions
    ]
    if not 0 <= index < len(items):
        return None
    return items[index]
