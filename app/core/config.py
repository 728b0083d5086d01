from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PORT = "8080"
RELEASE_MODE = "release"


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Lab 01 API"
    APP_VERSION: str = "1.0.0"
    DESCRIPTION: str = "Minimal HTTP API demonstrating routing, path and query parameters"

    # Server
    HOST: str = "0.0.0.0"
    PORT: str = DEFAULT_PORT

    # Logging
    SERVER_MODE: str = Field(
        default="debug",
        validation_alias=AliasChoices("SERVER_MODE", "GIN_MODE"),
    )
    LOG_FORMAT: str = "text"  # text, json

    @field_validator("PORT", mode="before")
    @classmethod
    def default_empty_port(cls, v):
        """An empty PORT means unset, same as a missing one."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_PORT
        return v

    @property
    def is_release(self) -> bool:
        return self.SERVER_MODE == RELEASE_MODE


def get_settings() -> Settings:
    return Settings()


# Global settings instance
settings = get_settings()
