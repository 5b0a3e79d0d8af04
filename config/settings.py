"""Application configuration using Pydantic Settings."""

import os
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# NOTE: logfire.configure() is not called here. Logfire is configured once at
# application startup (main.py via observability/logfire_config.py) or in
# pytest hooks (conftest.py).


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Everything has a default so the wizard can start locally with only
    ANTHROPIC_API_KEY exported.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # CORS Settings
    allowed_origins: str = Field(
        default="http://localhost:3000, http://localhost:5173",
        description="Comma-separated list of allowed CORS origins"
    )

    # Local persistence (history + theme preference)
    database_url: str = Field(
        default="sqlite:///./outreach.db",
        description="SQLAlchemy URL of the local key/value store"
    )
    history_storage_key: str = Field(default="academicOutreachHistory", description="Key of the history entry")
    theme_storage_key: str = Field(default="theme", description="Key of the theme preference entry")

    # External APIs
    anthropic_api_key: str = Field(default="", description="Anthropic API key")
    resume_model: str = Field(default="anthropic:claude-haiku-4-5", description="Model used to read the resume")
    discovery_model: str = Field(
        default="anthropic:claude-sonnet-4-5-20250929",
        description="Model used to search for academic contacts"
    )
    drafting_model: str = Field(
        default="anthropic:claude-sonnet-4-5-20250929",
        description="Model used to draft outreach emails"
    )
    enable_web_search: bool = Field(default=True, description="Give the discovery model a web search tool")
    llm_timeout: float = Field(default=120.0, description="Per-request timeout for model calls (seconds)")

    # Wizard behaviour
    default_purpose: str = Field(default="seeking a PhD research position", description="Initial outreach purpose")
    max_resume_bytes: int = Field(default=10 * 1024 * 1024, description="Largest accepted resume upload")
    dispatch_delay_seconds: float = Field(
        default=1.5,
        ge=0,
        description="Pause between opening consecutive mail client windows"
    )
    attachment_reminder: str = Field(
        default="\n\n(Remember to attach your resume!)",
        description="Text appended to every dispatched email body"
    )
    open_mail_client: bool = Field(
        default=True,
        description="Open mailto links on this machine; when false they are only returned to the browser"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(default="", description="Logfire observability token")

    @field_validator("allowed_origins")
    @classmethod
    def parse_origins(cls, v: str) -> List[str]:
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate that the database URL is provided."""
        if not v.strip():
            raise ValueError("Database URL cannot be empty")
        return v.strip()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"

    @property
    def is_sqlite(self) -> bool:
        """True when the key/value store lives in a SQLite file (the default)."""
        return self.database_url.startswith("sqlite")


# Create a singleton instance
settings = Settings()

# Ensure SDKs that read ANTHROPIC_API_KEY at import time see the configured value.
if settings.anthropic_api_key:
    os.environ.setdefault("ANTHROPIC_API_KEY", settings.anthropic_api_key)


def get_settings() -> "Settings":
    """Return the singleton settings instance."""
    return settings
