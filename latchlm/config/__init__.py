"""Provider configuration resolved from layered sources.

``get_provider_config(name)`` returns a plain dict with any of ``api_key``,
``base_url``, ``http_referer`` and ``x_title``. Sources, lowest precedence
first:

1. packaged defaults (base URLs, see :mod:`latchlm.config.defaults`);
2. the file named by ``LATCHLM_CONFIG_FILE``, parsed as JSON and otherwise
   as YAML, keyed by provider::

       openrouter:
         http_referer: https://example.org
         x_title: My App

3. ``<PROVIDER>_API_KEY``, ``<PROVIDER>_BASE_URL``, ``<PROVIDER>_HTTP_REFERER``
   and ``<PROVIDER>_X_TITLE`` (``GOOGLE_API_KEY`` fills a missing Gemini key);
4. keyword overrides given by the caller (``None`` values ignored).

A ``.env`` file (``DOTENV_FILE``, default ``./.env``) is read into the process
environment on first use. The file and ``.env`` are cached until
:func:`reset_config_cache`.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .defaults import (
    GEMINI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_BASE_URL,
)
from .env import is_placeholder, resolve_provider_key

# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "gemini": {"base_url": GEMINI_DEFAULT_BASE_URL},
    "openai": {"base_url": OPENAI_DEFAULT_BASE_URL},
    "openrouter": {"base_url": OPENROUTER_DEFAULT_BASE_URL},
}


ENV_FIELD_MAP = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "http_referer": "HTTP_REFERER",
    "x_title": "X_TITLE",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _parse_dotenv_line(raw: str) -> Optional[Tuple[str, str]]:
    """Split ``KEY=VALUE``; comments, blanks and malformed lines yield ``None``."""
    text = raw.strip()
    if not text or text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip("'\"")


def _load_dotenv_once() -> None:
    """Copy ``.env`` entries into ``os.environ``.

    Real values already in the environment win; unset or placeholder values
    are replaced.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    dotenv = Path(os.getenv("DOTENV_FILE", ".env"))
    if not dotenv.is_file():
        return
    for raw in dotenv.read_text(encoding="utf-8").splitlines():
        entry = _parse_dotenv_line(raw)
        if entry is None:
            continue
        key, value = entry
        if key not in os.environ or is_placeholder(os.environ[key]):
            os.environ[key] = value


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("LATCHLM_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    data: Any
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars ->
    env aliases (api key only, when still unset) -> overrides
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if not cfg.get("api_key"):
        key, _ = resolve_provider_key(name)
        if key:
            cfg["api_key"] = key

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and ``.env`` state (tests, reloads)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
]
