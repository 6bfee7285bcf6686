import os
from typing import List, Optional

from dotenv import load_dotenv

from .change import apply_change_to_value
from .mapping import (
    find_start_of_mention_in_plain_text,
    is_inside_of_mention,
    map_plain_text_index,
)
from .markup import DisplayTransform, compile_markup
from .mentions import get_mentions, get_plain_text, make_mentions_markup
from .models import IndexCorrection, Mention

load_dotenv()

DEFAULT_MARKUP = "@[__display__](__id__)"


class MarkupEditor:
    """Mention markup operations bound to one template and display transform.

    A text input widget keeps one editor per input so that the template and the
    display transform stay the same across a sequence of edits.
    """

    def __init__(
        self,
        markup: Optional[str] = None,
        display_transform: Optional[DisplayTransform] = None,
    ):
        """Initialize the editor.

        Args:
            markup: Optional markup template. If not provided, will be read from
                MENTIONS_MARKUP env var, falling back to DEFAULT_MARKUP.
            display_transform: Optional function (id, display, type) -> display
                applied wherever a mention's display string is produced

        Raises:
            InvalidTemplateError: When the template has neither __id__ nor __display__
        """
        self.markup = markup or os.getenv("MENTIONS_MARKUP") or DEFAULT_MARKUP
        self.display_transform = display_transform

        # Fail early on a misconfigured template
        compile_markup(self.markup)

    def plain_text(self, value: str) -> str:
        return get_plain_text(value, self.markup, self.display_transform)

    def mentions(self, value: str) -> List[Mention]:
        return get_mentions(value, self.markup, self.display_transform)

    def map_index(
        self,
        value: str,
        index_in_plain_text: int,
        in_markup_correction: str = IndexCorrection.START,
    ) -> Optional[int]:
        return map_plain_text_index(
            value,
            self.markup,
            index_in_plain_text,
            in_markup_correction,
            self.display_transform,
        )

    def find_start_of_mention(self, value: str, index_in_plain_text: int) -> int:
        return find_start_of_mention_in_plain_text(
            value, self.markup, index_in_plain_text, self.display_transform
        )

    def is_inside_of_mention(self, value: str, index_in_plain_text: int) -> bool:
        return is_inside_of_mention(
            value, self.markup, index_in_plain_text, self.display_transform
        )

    def apply_change(
        self,
        value: str,
        plain_text_value: str,
        selection_start_before_change: Optional[int],
        selection_end_before_change: Optional[int],
        selection_end_after_change: int,
    ) -> str:
        """Apply an edit of the plain text to the marked up value.

        Args:
            value: Marked up value before the change
            plain_text_value: Plain text after the change
            selection_start_before_change: Selection start before the change, or None
            selection_end_before_change: Selection end before the change, or None
            selection_end_after_change: Selection end after the change

        Returns:
            The new marked up value
        """
        return apply_change_to_value(
            value,
            self.markup,
            plain_text_value,
            selection_start_before_change,
            selection_end_before_change,
            selection_end_after_change,
            self.display_transform,
        )

    def make_markup(self, id: str, display: str, type: Optional[str] = None) -> str:
        return make_mentions_markup(self.markup, id, display, type)
