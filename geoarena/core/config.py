from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    default_locale: str = Field(default="en", alias="DEFAULT_LOCALE")
    default_difficulty: str = Field(default="medium", alias="DEFAULT_DIFFICULTY")
    default_continent: str = Field(default="all", alias="DEFAULT_CONTINENT")
    rng_seed: int | None = Field(default=None, alias="RNG_SEED")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
