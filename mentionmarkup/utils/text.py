"""String helpers shared by the markup scanner and the change reconciler."""

import re
from typing import Any, Callable, Dict, Optional

ESCAPE_MAP = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "`": "&#x60;",
}

_REGEX_SPECIALS = re.compile(r"[-/\\^$*+?.()|\[\]{}]")


def _create_escaper(escape_map: Dict[str, str]) -> Callable[[Any], str]:
    pattern = re.compile("(?:" + "|".join(map(re.escape, escape_map)) + ")")

    def escaper(text: Optional[Any]) -> str:
        text = "" if text is None else str(text)
        # Skip the substitution when nothing needs escaping
        if not pattern.search(text):
            return text
        return pattern.sub(lambda match: escape_map[match.group(0)], text)

    return escaper


escape_html = _create_escaper(ESCAPE_MAP)


def escape_regex(text: str) -> str:
    """Backslash-escape every regular expression metacharacter in ``text``."""
    return _REGEX_SPECIALS.sub(lambda match: "\\" + match.group(0), text)


def splice_string(text: str, start: int, end: int, insert: str) -> str:
    """Replace ``text[start:end]`` with ``insert``.

    Offsets are clamped to ``[0, len(text)]``, so negative or oversized offsets
    select the string boundaries instead of counting from the end.
    """
    length = len(text)
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    return text[:start] + insert + text[end:]


def is_number(obj: Any) -> bool:
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)
