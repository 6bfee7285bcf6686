import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union


class IndexCorrection:
    """Boundary policy for plain text offsets that fall inside a mention."""

    START = "START"  # index of the mention markup's first char
    END = "END"  # index after the mention markup's last char
    NULL = "NULL"  # no valid index, returns None


@dataclass(frozen=True)
class MarkupPattern:
    markup: str
    regex: "re.Pattern[str]"
    display_pos: int
    id_pos: int
    type_pos: Optional[int] = None


@dataclass
class LiteralRun:
    text: str
    index: int  # Start position in the marked up value
    plain_text_index: int  # Start position in the plain text


@dataclass
class MentionOccurrence:
    markup: str  # Whole matched markup
    index: int  # Start position in the marked up value
    plain_text_index: int  # Start position in the plain text
    id: str
    display: str  # Already passed through the display transform
    type: Optional[str]
    last_mention_end_index: int  # End of the previous match in the marked up value

    @property
    def end_index(self) -> int:
        return self.index + len(self.markup)


ScanEvent = Union[LiteralRun, MentionOccurrence]


@dataclass
class Mention:
    id: str
    display: str
    type: Optional[str]
    index: int
    plain_text_index: int


@dataclass
class SuggestionGroup:
    suggestions: List[Any]
    descriptor: Dict[str, Any]


@dataclass
class SuggestionItem:
    suggestion: Any
    descriptor: Dict[str, Any]
