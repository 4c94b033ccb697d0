"""Client settings loaded from environment variables."""

import os
from uuid import UUID

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """Workflow client configuration. Values come from ``WORKFLOW_*`` variables."""

    # Backend
    base_url: str = Field(default="http://localhost:8080")
    request_timeout: float = Field(default=30.0)

    # Identity
    company_id: UUID | None = Field(default=None)
    user_id: UUID | None = Field(default=None)

    # Per-service configuration
    notification_id: UUID | None = Field(default=None)
    storage_id: UUID | None = Field(default=None)
    webhook_key: str | None = Field(default=None)
    api_token: str | None = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="WORKFLOW_",
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)


settings = Settings()
