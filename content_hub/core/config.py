"""Application configuration."""

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Environment variables will be loaded and validated using Pydantic.
    """

    app_name: str = "Content Hub"
    version: str = "0.1.0"
    api_prefix: str = "/api"

    # CORS Settings
    cors_origins: list[str] = ["*"]  # Public content is served to any site
    cors_allow_credentials: bool = False

    # Redis Settings
    REDIS_URL: str | None = "redis://localhost:6379"
    REDIS_POOL_SIZE: int = 10
    REDIS_MAX_RETRIES: int = Field(default=3, ge=1)
    REDIS_RETRY_DELAY: float = Field(default=1.0, ge=0)

    # Content Settings
    PUBLIC_DIR: Path = Path("public")
    STARTUP_SYNC_ENABLED: bool = True

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    # Chat Settings (OpenAI-compatible inference endpoint)
    CHAT_BASE_URL: str = "https://router.huggingface.co/v1"
    CHAT_MODEL_NAME: str = "mistralai/Mistral-7B-Instruct-v0.2"
    CHAT_TEMPERATURE: float = Field(default=0.7, ge=0, le=1)
    CHAT_MAX_TOKENS: int = Field(default=512, gt=0)
    CHAT_TIMEOUT: int = Field(default=30, gt=0)

    # API Keys
    HUGGINGFACEHUB_API_TOKEN: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",  # Allow extra fields in environment
    )

    @model_validator(mode="after")
    def use_test_configs_for_testing(self) -> "Settings":
        """Use test Redis for tests to ensure isolation."""
        import os

        if os.getenv("TESTING") == "true" and self.REDIS_URL:
            # Use TEST_REDIS_URL if provided, otherwise switch to database 1
            test_redis_url = os.getenv("TEST_REDIS_URL")
            if test_redis_url:
                self.REDIS_URL = test_redis_url
            elif self.REDIS_URL.endswith("/0"):
                # Switch from database 0 to database 1 for tests
                self.REDIS_URL = self.REDIS_URL[:-2] + "/1"
            elif not self.REDIS_URL.endswith("/1"):
                # Add database 1 if no database specified
                if self.REDIS_URL.endswith("/"):
                    self.REDIS_URL = self.REDIS_URL + "1"
                else:
                    self.REDIS_URL = self.REDIS_URL + "/1"
        return self


# Create settings instance
settings = Settings()
