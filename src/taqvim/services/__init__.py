"""Outbound service integrations."""

from __future__ import annotations

from .suggestions import USER_ERROR_MESSAGE, EventSuggestion, SuggestionService

__all__ = ["EventSuggestion", "SuggestionService", "USER_ERROR_MESSAGE"]
