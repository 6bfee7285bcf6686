"""Exception classes for the mentionmarkup library.

This module contains all the exceptions that can be raised by mentionmarkup.
Exceptions are categorized into two groups:
1. Base exceptions (base class for all library exceptions)
2. Template exceptions (related to the markup template supplied by the caller)
"""


# -----------------------------------------------------------------------------
# Base Exceptions
# -----------------------------------------------------------------------------
class MentionMarkupError(Exception):
    """Base class for all mentionmarkup exceptions."""

    pass


# -----------------------------------------------------------------------------
# Template Exceptions
# -----------------------------------------------------------------------------
class InvalidTemplateError(MentionMarkupError, ValueError):
    """Raised when a markup template lacks both the __id__ and __display__
    placeholders, or when an unknown parameter name is requested."""

    pass
