"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, LlmSettings, UiSettings, get_settings
from .theme import AppPalette

__all__ = ["AppSettings", "AppPalette", "LlmSettings", "UiSettings", "get_settings"]
