"""Gemini model catalog.

The table below is the single source for wire ids, display names, parsing and
listing. Add a model by adding one member.
"""

from __future__ import annotations

from enum import Enum

from ..base.catalog import CatalogModel, model_catalog


@model_catalog
class GeminiModel(CatalogModel, Enum):
    """Gemini models reachable through the ``generateContent`` endpoint."""

    FLASH_20 = ("gemini-2.0-flash", "Gemini 2.0 Flash")
    FLASH_20_LITE = ("gemini-2.0-flash-lite", "Gemini 2.0 Flash Lite")
    FLASH_25 = ("gemini-2.5-flash", "Gemini 2.5 Flash")
    PRO_25 = ("gemini-2.5-pro", "Gemini 2.5 Pro")
    FLASH_THINKING = ("gemini-2.0-flash-thinking-exp-01-21", "Gemini 2.0 Flash Thinking")


__all__ = ["GeminiModel"]
