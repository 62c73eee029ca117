from __future__ import annotations


class TaqvimError(Exception):
    """Base class for errors raised by the calendar package."""


class InvalidArgument(TaqvimError, ValueError):
    """A caller passed a month, offset, or field outside its valid range."""


class SuggestionError(TaqvimError):
    """The AI suggestion could not be produced."""
