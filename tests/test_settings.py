from settings import DEFAULT_USER_AGENT, Settings


def test_from_env_defaults(monkeypatch):
    for name in (
        "GOOGLE_GENERATIVE_AI_API_KEY",
        "GEMINI_API_KEY",
        "OPENROUTER_API_KEY",
        "CURSEFORGE_API_KEY",
        "RESOLUTION_PROVIDER_TIMEOUT_SECONDS",
        "HTTP_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.has_llm_key is False
    assert settings.curseforge_api_key is None
    assert settings.provider_timeout_seconds == 8.0
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_from_env_reads_keys_and_timeouts(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gm-key")
    monkeypatch.setenv("CURSEFORGE_API_KEY", "  cf-key  ")
    monkeypatch.setenv("RESOLUTION_PROVIDER_TIMEOUT_SECONDS", "2.5")

    settings = Settings.from_env()

    assert settings.has_llm_key is True
    assert settings.curseforge_api_key == "cf-key"
    assert settings.provider_timeout_seconds == 2.5


def test_non_numeric_timeout_uses_default(monkeypatch):
    monkeypatch.setenv("RESOLUTION_PROVIDER_TIMEOUT_SECONDS", "soon")

    assert Settings.from_env().provider_timeout_seconds == 8.0
