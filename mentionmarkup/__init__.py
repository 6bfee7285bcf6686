from .change import apply_change_to_value
from .editor import MarkupEditor
from .exceptions import InvalidTemplateError, MentionMarkupError
from .mapping import (
    find_start_of_mention_in_plain_text,
    is_inside_of_mention,
    map_plain_text_index,
)
from .markup import (
    PLACEHOLDERS,
    compile_markup,
    get_position_of_capturing_group,
    iterate_mentions_markup,
    markup_to_regex,
)
from .mentions import get_mentions, get_plain_text, make_mentions_markup
from .models import (
    IndexCorrection,
    LiteralRun,
    MarkupPattern,
    Mention,
    MentionOccurrence,
    SuggestionGroup,
    SuggestionItem,
)
from .suggestions import count_suggestions, get_suggestion, get_suggestions
from .utils import escape_html, escape_regex, splice_string

__version__ = "0.1.0"
__all__ = [
    "MarkupEditor",
    "InvalidTemplateError",
    "MentionMarkupError",
    "IndexCorrection",
    "LiteralRun",
    "MarkupPattern",
    "Mention",
    "MentionOccurrence",
    "SuggestionGroup",
    "SuggestionItem",
    "PLACEHOLDERS",
    "apply_change_to_value",
    "compile_markup",
    "count_suggestions",
    "escape_html",
    "escape_regex",
    "find_start_of_mention_in_plain_text",
    "get_mentions",
    "get_plain_text",
    "get_position_of_capturing_group",
    "get_suggestion",
    "get_suggestions",
    "is_inside_of_mention",
    "iterate_mentions_markup",
    "make_mentions_markup",
    "map_plain_text_index",
    "markup_to_regex",
    "splice_string",
]
