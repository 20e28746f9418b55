from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, env_file_encoding="utf-8", extra="ignore")

    massive_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("MASSIVE_API_KEY", "POLYGON_API_KEY"),
    )
    massive_base_url: str = "https://api.massive.com"
    massive_timeout_seconds: float = 20.0

    @field_validator("massive_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        normalized = value.strip().rstrip("/")
        if not normalized:
            raise ValueError("MASSIVE_BASE_URL must not be empty")
        return normalized

    @field_validator("massive_timeout_seconds")
    @classmethod
    def _validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("MASSIVE_TIMEOUT_SECONDS must be positive")
        return value


settings = Settings()
