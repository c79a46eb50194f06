"""OpenAI model catalog (Responses API)."""

from __future__ import annotations

from enum import Enum

from ..base.catalog import CatalogModel, model_catalog


@model_catalog
class OpenaiModel(CatalogModel, Enum):
    """Models accepted by ``POST /responses``."""

    O3 = ("o3", "GPT-o3")
    O3_PRO = ("o3-pro", "GPT-o3 Pro")
    O3_MINI = ("o3-mini", "GPT-o3 Mini")
    O4_MINI = ("o4-mini", "GPT-o4 Mini")
    GPT_5 = ("gpt-5", "GPT-5")
    GPT_5_MINI = ("gpt-5-mini", "GPT-5 Mini")
    GPT_5_NANO = ("gpt-5-nano", "GPT-5 Nano")
    GPT_5_CHAT = ("gpt-5-chat-latest", "GPT-5 Chat")
    GPT_41 = ("gpt-4.1", "GPT-4.1")
    GPT_41_MINI = ("gpt-4.1-mini", "GPT-4.1 Mini")
    GPT_41_NANO = ("gpt-4.1-nano", "GPT-4.1 Nano")
    GPT_4O = ("gpt-4o", "GPT-4o")
    GPT_4O_MINI = ("gpt-4o-mini", "GPT-4o Mini")


__all__ = ["OpenaiModel"]
