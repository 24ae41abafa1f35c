from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    level: str = Field(default="INFO", alias="LOG_LEVEL")


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    env: str = Field(default="development", alias="APP_ENV")

    database_url: str = Field(default="sqlite+aiosqlite:///./data/hospital.db", alias="DATABASE_URL")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")
    seed_data: bool = Field(default=True, alias="SEED_DATA")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache
def get_settings() -> AppConfig:
    return AppConfig()

