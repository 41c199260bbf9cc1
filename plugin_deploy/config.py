"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file without clobbering variables set by the caller
load_dotenv(override=False)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials (either account sid/auth token or api key/secret)
    twilio_account_sid: str = Field(default="")
    twilio_auth_token: str = Field(default="")
    twilio_api_key: str = Field(default="")
    twilio_api_secret: str = Field(default="")

    # Feature toggles
    unbundled_react: bool = False

    # Remote APIs
    serverless_base_url: str = "https://serverless.twilio.com/v1"
    serverless_upload_base_url: str = "https://serverless-upload.twilio.com/v1"
    flex_api_base_url: str = "https://flex-api.twilio.com/v1"
    accounts_base_url: str = "https://api.twilio.com/2010-04-01"
    http_timeout: float = 30.0

    # Build polling
    build_poll_interval: float = 1.0
    build_poll_timeout: float = 300.0  # 5 minutes

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["console", "json"] = "console"
    log_file: str | None = None

    @property
    def has_account_credentials(self) -> bool:
        """Check if account sid/auth token credentials are configured."""
        return bool(self.twilio_account_sid and self.twilio_auth_token)

    @property
    def has_api_key_credentials(self) -> bool:
        """Check if api key/secret credentials are configured."""
        return bool(self.twilio_api_key and self.twilio_api_secret)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
