from __future__ import annotations

from geoarena.core.config import Settings, get_settings


def test_settings_defaults(monkeypatch) -> None:
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_FORMAT", "DEFAULT_LOCALE", "DEFAULT_DIFFICULTY", "RNG_SEED"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_env == "dev"
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.default_locale == "en"
    assert settings.default_difficulty == "medium"
    assert settings.default_continent == "all"
    assert settings.rng_seed is None


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "console")
    monkeypatch.setenv("DEFAULT_CONTINENT", "Europe")
    monkeypatch.setenv("RNG_SEED", "42")

    settings = Settings(_env_file=None)

    assert settings.log_format == "console"
    assert settings.default_continent == "Europe"
    assert settings.rng_seed == 42


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
