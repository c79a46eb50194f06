"""latchlm.config.defaults
=======================

Central place for small, stable default values used across the latchlm
package. Base URLs can be overridden via environment variables, the optional
config file, or the provider builders.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep provider modules free of magic literals.

This module intentionally avoids importing from other latchlm packages to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Provider display names (used in errors and logs) ----
GEMINI_PROVIDER_NAME = "Gemini"
OPENAI_PROVIDER_NAME = "OpenAI"
OPENROUTER_PROVIDER_NAME = "OpenRouter"

# ---- Provider base URLs ----
# Gemini paths are appended as /v1beta/models/{id}:generateContent.
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"

# Canonical provider slugs accepted by the factory and the config layer.
SUPPORTED_PROVIDERS = ("gemini", "openai", "openrouter")

__all__ = [
    "GEMINI_PROVIDER_NAME",
    "OPENAI_PROVIDER_NAME",
    "OPENROUTER_PROVIDER_NAME",
    "GEMINI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_BASE_URL",
    "SUPPORTED_PROVIDERS",
]
