from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from tickerquote.core.errors import ConfigurationError


class MatchMode(str, Enum):
    STRICT = "strict"
    SET = "set"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PMP_KEY: str = Field(min_length=1)
    FMP_BASE_URL: str = "https://financialmodelingprep.com/api/v3"
    QUOTE_MATCH_MODE: MatchMode = MatchMode.STRICT
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment (and .env), once per process."""
    try:
        return Settings()
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        if any(err["loc"] == ("PMP_KEY",) for err in exc.errors()):
            raise ConfigurationError("PMP_KEY environment variable not set") from exc
        raise ConfigurationError(f"Invalid settings: {fields}") from exc
