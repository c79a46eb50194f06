from __future__ import annotations

import json

from latchlm.config import get_provider_config, reset_config_cache
from latchlm.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    get_env_var_candidates,
    get_env_var_name,
    is_placeholder,
    resolve_provider_key,
)


def test_env_map_contains_expected_keys():
    assert set(ENV_MAP) == {"gemini", "openai", "openrouter"}


def test_get_env_var_name_and_aliases():
    assert get_env_var_name("openai") == "OPENAI_API_KEY"
    assert get_env_var_name("GEMINI") == "GEMINI_API_KEY"
    assert get_env_var_name("unknown") is None
    assert ENV_ALIASES["gemini"][0] == "GEMINI_API_KEY"
    assert list(get_env_var_candidates("gemini")) == ["GEMINI_API_KEY", "GOOGLE_API_KEY"]


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("example-key")
    assert is_placeholder("test_token")
    assert not is_placeholder("real-value")
    assert not is_placeholder(None)


def test_resolve_provider_key_prefers_canonical(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "canon")
    monkeypatch.setenv("GOOGLE_API_KEY", "alias")
    assert resolve_provider_key("gemini") == ("canon", "GEMINI_API_KEY")


def test_resolve_provider_key_falls_back_to_alias(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "placeholder")
    monkeypatch.setenv("GOOGLE_API_KEY", "alias")
    assert resolve_provider_key("gemini") == ("alias", "GOOGLE_API_KEY")
    assert resolve_provider_key("nope") == (None, None)


def test_provider_config_defaults():
    assert get_provider_config("openai") == {"base_url": "https://api.openai.com/v1"}


def test_provider_config_merge_order(monkeypatch, tmp_path):
    cfg_file = tmp_path / "latchlm.json"
    cfg_file.write_text(
        json.dumps({"openrouter": {"base_url": "http://from-file", "x_title": "File Title"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("LATCHLM_CONFIG_FILE", str(cfg_file))
    monkeypatch.setenv("OPENROUTER_X_TITLE", "Env Title")
    monkeypatch.setenv("OPENROUTER_API_KEY", "env-key")
    reset_config_cache()

    cfg = get_provider_config("openrouter", overrides={"api_key": "override-key", "http_referer": None})
    assert cfg["base_url"] == "http://from-file"
    assert cfg["x_title"] == "Env Title"
    assert cfg["api_key"] == "override-key"
    assert "http_referer" not in cfg


def test_provider_config_reads_yaml(monkeypatch, tmp_path):
    cfg_file = tmp_path / "latchlm.yaml"
    cfg_file.write_text("gemini:\n  base_url: http://yaml-host\n", encoding="utf-8")
    monkeypatch.setenv("LATCHLM_CONFIG_FILE", str(cfg_file))
    reset_config_cache()
    assert get_provider_config("gemini")["base_url"] == "http://yaml-host"


def test_provider_config_key_from_alias(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "g-key")
    assert get_provider_config("gemini")["api_key"] == "g-key"


def test_dotenv_file_is_loaded_once(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("# comment\nOPENAI_API_KEY='from-dotenv'\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    reset_config_cache()
    try:
        assert get_provider_config("openai")["api_key"] == "from-dotenv"
    finally:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
