from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from openai import OpenAI

from ..config import LlmSettings, get_settings
from ..core.labels import format_jalali
from ..domain import CalendarDate, SuggestionError

logger = logging.getLogger(__name__)

USER_ERROR_MESSAGE = "خطا در ارتباط با هوش مصنوعی. لطفاً دوباره تلاش کنید."

_SYSTEM_PROMPT = (
    "You suggest calendar events. Always respond with a JSON object of the form "
    '{"title": "...", "description": "..."} where "title" is a short, creative event title '
    'and "description" is a one-sentence description of the event.'
)

_PROMPT_TEMPLATE = (
    "برای یک رویداد در تاریخ {formatted_date} یک ایده پیشنهاد بده.\n"
    "پاسخ باید کاملا به زبان فارسی باشد."
)


@dataclass(frozen=True, slots=True)
class EventSuggestion:
    title: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "description": self.description}


def build_prompt(day: CalendarDate) -> str:
    return _PROMPT_TEMPLATE.format(formatted_date=format_jalali(day, with_weekday=True))


def parse_suggestion(content: str) -> EventSuggestion:
    """Validate a model reply and turn it into an :class:`EventSuggestion`."""

    try:
        payload = json.loads(content.strip())
    except json.JSONDecodeError as exc:
        raise SuggestionError("Invalid JSON response from AI") from exc
    if not isinstance(payload, dict):
        raise SuggestionError("Invalid JSON response from AI")

    title = payload.get("title")
    description = payload.get("description")
    if not isinstance(title, str) or not isinstance(description, str):
        raise SuggestionError("Invalid JSON response from AI")
    if not title.strip() or not description.strip():
        raise SuggestionError("Invalid JSON response from AI")
    return EventSuggestion(title=title.strip(), description=description.strip())


class SuggestionService:
    """Asks an OpenAI-compatible chat model for an event idea on a given day."""

    def __init__(self, settings: Optional[LlmSettings] = None, *, client: Any = None) -> None:
        self.settings = settings or get_settings().llm
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None or self.settings.is_configured

    def _ensure_client(self) -> Any:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SuggestionError(f"Suggestion model is not configured. Missing: {missing}")
        default_query = {}
        if self.settings.api_version:
            default_query["api-version"] = self.settings.api_version
        self._client = OpenAI(
            api_key=self.settings.api_key,
            base_url=self.settings.base_url,
            organization=self.settings.organization,
            project=self.settings.project,
            default_query=default_query or None,
        )
        return self._client

    def suggest(self, day: CalendarDate) -> EventSuggestion:
        client = self._ensure_client()
        logger.debug("Requesting suggestion for %s", day.isoformat())
        try:
            prompt = build_prompt(day)
            completion = client.chat.completions.create(
                model=self.settings.model,
                temperature=self.settings.temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
            content = completion.choices[0].message.content or ""
            suggestion = parse_suggestion(content)
        except SuggestionError:
            logger.exception("Error generating event suggestion for %s", day.isoformat())
            raise
        except Exception as exc:  # noqa: BLE001
            logger.exception("Error generating event suggestion for %s", day.isoformat())
            raise SuggestionError("Failed to get suggestion from the AI service.") from exc
        logger.info("Received suggestion for %s", day.isoformat())
        return suggestion
