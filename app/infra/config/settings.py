"""
Application configuration settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"], case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field("Slide Deck API", alias="APP_NAME")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # Database
    database_url: str = Field(
        "sqlite+aiosqlite:///./slide_decks.db", alias="DATABASE_URL"
    )
    debug_sql: bool = Field(False, alias="DATABASE_ECHO")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(True, alias="CORS_ALLOW_CREDENTIALS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    # Viewer client
    api_base_url: str = Field("http://localhost:8000", alias="API_BASE_URL")
    api_timeout_seconds: float = Field(10.0, alias="API_TIMEOUT_SECONDS")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
