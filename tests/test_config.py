# tests/test_config.py
from importlib import reload
import aidoctor.core.config as cfg_mod

def test_defaults_present(monkeypatch):
    # Tests the fixed sampling values and the default models when no overrides are set.
    for name in ("OPENAI_MODEL", "ANTHROPIC_MODEL", "PERPLEXITY_MODEL", "UPSTREAM_TIMEOUT_S"):
        monkeypatch.delenv(name, raising=False)
    reload(cfg_mod)
    assert cfg_mod.TEMPERATURE == 0.2
    assert cfg_mod.TOP_P == 0.9
    assert cfg_mod.MAX_TOKENS == 800
    assert cfg_mod.OPENAI_MODEL == "gpt-4.1-2025-04-14"
    assert cfg_mod.ANTHROPIC_MODEL == "claude-sonnet-4-20250514"
    assert cfg_mod.PERPLEXITY_MODEL == "llama-3.1-sonar-small-128k-online"
    assert cfg_mod.UPSTREAM_TIMEOUT_S is None

def test_timeout_parsing(monkeypatch):
    # Tests that UPSTREAM_TIMEOUT_S is opt-in and parsed as seconds.
    monkeypatch.setenv("UPSTREAM_TIMEOUT_S", "12.5")
    reload(cfg_mod)
    assert cfg_mod.UPSTREAM_TIMEOUT_S == 12.5
    monkeypatch.setenv("UPSTREAM_TIMEOUT_S", "")
    reload(cfg_mod)
    assert cfg_mod.UPSTREAM_TIMEOUT_S is None

def test_priority_order():
    assert cfg_mod.PROVIDER_PRIORITY == ("openai", "anthropic", "perplexity")
    assert list(cfg_mod.load_provider_configs()) == list(cfg_mod.PROVIDER_PRIORITY)

def test_non_numeric_timeouts_fall_back(monkeypatch):
    # Tests that a bad timeout value does not stop the app from importing.
    monkeypatch.setenv("UPSTREAM_TIMEOUT_S", "soon")
    monkeypatch.setenv("GATEWAY_TIMEOUT_S", "a minute")
    reload(cfg_mod)
    assert cfg_mod.UPSTREAM_TIMEOUT_S is None
    assert cfg_mod.GATEWAY_TIMEOUT_S == 60.0
    monkeypatch.delenv("UPSTREAM_TIMEOUT_S")
    monkeypatch.delenv("GATEWAY_TIMEOUT_S")
    reload(cfg_mod)
