"""Gemini provider package."""

from .client import Gemini, GeminiBuilder
from .models import GeminiModel
from .response import GeminiResponse

__all__ = ["Gemini", "GeminiBuilder", "GeminiModel", "GeminiResponse"]
