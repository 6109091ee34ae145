from __future__ import annotations

from mittwald_providers.base.repositories import KeysRepository


def test_mapping_wins_over_env(monkeypatch):
    monkeypatch.setenv("MITTWALD_API_KEY", "sk-from-env")
    repo = KeysRepository({"mittwald_api_key": "sk-from-mapping"})
    res = repo.get_resolution("mittwald_api_key")
    assert (res.api_key, res.source) == ("sk-from-mapping", "mapping")  # nosec B101


def test_env_fallback_uses_upper_cased_identifier(monkeypatch):
    monkeypatch.setenv("TEAM_LLM_KEY", "sk-team")
    res = KeysRepository().get_resolution("team-llm-key")
    assert res.api_key == "sk-team" and res.source == "env"  # nosec B101
    assert res.extra == {"env_var": "TEAM_LLM_KEY"}  # nosec B101


def test_placeholders_are_ignored(monkeypatch):
    monkeypatch.setenv("MITTWALD_API_KEY", "your-placeholder-key")
    repo = KeysRepository({"mittwald_api_key": "changeme"})
    assert repo.resolve("mittwald_api_key") is None  # nosec B101


def test_blank_identifier_resolves_to_nothing():
    res = KeysRepository({"": "sk-x"}).get_resolution("  ")
    assert res.api_key is None and res.source == "none"  # nosec B101
