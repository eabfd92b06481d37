"""
Configuration management for the HK Holiday Calendar service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    APP_ENV: str = Field(default="local", description="Application environment: local, staging, prod")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level: DEBUG, INFO, WARNING, ERROR")

    # CORS settings
    ALLOWED_ORIGINS: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins. Use '*' for local only."
    )

    # Version (can be git SHA or semver)
    VERSION: Optional[str] = Field(default=None, description="Application version (git SHA or semver)")

    # Holiday feeds: "local" reads the cached JSON files, "remote" calls the 1823 endpoints
    HOLIDAY_SOURCE: str = Field(default="local", description="Holiday feed source: local or remote")
    HOLIDAY_FEED_EN_URL: str = Field(
        default="https://www.1823.gov.hk/common/ical/en.json",
        description="English public holiday feed"
    )
    HOLIDAY_FEED_ZH_URL: str = Field(
        default="https://www.1823.gov.hk/common/ical/tc.json",
        description="Traditional Chinese public holiday feed"
    )
    HOLIDAY_CACHE_EN_PATH: str = Field(default="data/holidays-en.json", description="Cached English feed")
    HOLIDAY_CACHE_ZH_PATH: str = Field(default="data/holidays-zh.json", description="Cached Chinese feed")
    HOLIDAY_FETCH_TIMEOUT: float = Field(default=30.0, description="Per-request timeout in seconds for remote feeds")

    INGEST_ON_STARTUP: bool = Field(default=True, description="Load holiday feeds in the background at startup")
    DEFAULT_LOCALE: str = Field(default="en", description="Locale used when the browser does not ask for zh")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Validate APP_ENV"""
        allowed = ["local", "staging", "prod"]
        if v not in allowed:
            raise ValueError(f"APP_ENV must be one of {allowed}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate LOG_LEVEL"""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return v.upper()

    @field_validator("HOLIDAY_SOURCE")
    @classmethod
    def validate_holiday_source(cls, v: str) -> str:
        allowed = ["local", "remote"]
        if v.lower() not in allowed:
            raise ValueError(f"HOLIDAY_SOURCE must be one of {allowed}")
        return v.lower()

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        allowed = ["zh", "en"]
        if v.lower() not in allowed:
            raise ValueError(f"DEFAULT_LOCALE must be one of {allowed}")
        return v.lower()

    def validate_production(self) -> None:
        """
        Validate settings for production environment

        Raises:
            ValueError: If production settings are invalid
        """
        if self.APP_ENV == "prod":
            # ALLOWED_ORIGINS must not be wildcard in production
            if self.ALLOWED_ORIGINS == "*" or not self.ALLOWED_ORIGINS:
                raise ValueError(
                    "ALLOWED_ORIGINS must be explicitly set (not '*') in production environment"
                )

    def get_allowed_origins_list(self) -> List[str]:
        """
        Get list of allowed CORS origins

        Returns:
            List of allowed origins (or ['*'] for local)
        """
        if self.ALLOWED_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Create settings instance
settings = Settings()

# Validate production settings if in prod
if settings.APP_ENV == "prod":
    settings.validate_production()
