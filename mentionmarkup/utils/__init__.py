from .text import escape_html, escape_regex, is_number, splice_string

__all__ = ["escape_html", "escape_regex", "is_number", "splice_string"]
