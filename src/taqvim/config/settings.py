from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_WEEK_START_OFFSET = 1


@dataclass(frozen=True)
class LlmSettings:
    api_key: Optional[str]
    model: str
    base_url: Optional[str]
    api_version: Optional[str]
    organization: Optional[str]
    project: Optional[str]
    temperature: float = 0.8

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.model)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.api_key:
            missing.append("OPENAI_API_KEY")
        if not self.model:
            missing.append("OPENAI_MODEL")
        return missing


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    week_start_offset: int


@dataclass(frozen=True)
class AppSettings:
    llm: LlmSettings
    ui: UiSettings


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", name, raw)
        return default


def _week_start_from_env(name: str) -> int:
    raw = os.getenv(name)
    if not raw:
        return DEFAULT_WEEK_START_OFFSET
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if not 0 <= value <= 6:
        logger.warning("Ignoring invalid %s=%r; expected 0-6", name, raw)
        return DEFAULT_WEEK_START_OFFSET
    return value


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    llm = LlmSettings(
        api_key=os.getenv("OPENAI_API_KEY"),
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        base_url=os.getenv("OPENAI_BASE_URL"),
        api_version=os.getenv("OPENAI_API_VERSION"),
        organization=os.getenv("OPENAI_ORG"),
        project=os.getenv("OPENAI_PROJECT"),
        temperature=_float_from_env("TAQVIM_SUGGESTION_TEMPERATURE", 0.8),
    )

    ui = UiSettings(
        app_name=os.getenv("TAQVIM_APP_NAME", "تقویم هوشمند رویداد"),
        week_start_offset=_week_start_from_env("TAQVIM_WEEK_START_OFFSET"),
    )

    return AppSettings(llm=llm, ui=ui)
