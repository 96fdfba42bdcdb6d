# mfa_api/core/config.py

from typing import List, Literal, Optional

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------------------------------
    # Project
    # -------------------------------------------------
    APP_NAME: str = "MFA Methods API"
    DEBUG: bool = False
    ENVIRONMENT: str = "local"
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    # -------------------------------------------------
    # Entra ID app registration (client credentials)
    # -------------------------------------------------
    TENANT_ID: Optional[str] = None
    CLIENT_ID: Optional[str] = None
    CLIENT_SECRET: Optional[str] = None
    LOGIN_AUTHORITY: str = "https://login.microsoftonline.com"

    # -------------------------------------------------
    # Microsoft Graph
    # -------------------------------------------------
    GRAPH_BASE_URL: str = "https://graph.microsoft.com"
    GRAPH_METHODS_API_VERSION: str = "v1.0"
    # signInPreferences is only exposed on the beta surface
    GRAPH_PREFERENCES_API_VERSION: str = "beta"
    GRAPH_TIMEOUT_SECONDS: float = 10.0

    # -------------------------------------------------
    # HTTP
    # -------------------------------------------------
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # -------------------------------------------------
    # Pydantic Settings
    # -------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",        # ignore unknown env vars
        case_sensitive=False,
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    # -------------------------------------------------
    # Computed / convenience properties
    # -------------------------------------------------
    @computed_field
    @property
    def GRAPH_SCOPE(self) -> str:  # type: ignore[override]
        """
        Client-credentials scope: every application permission granted to the app.
        """
        return f"{self.GRAPH_BASE_URL.rstrip('/')}/.default"

    @computed_field
    @property
    def TOKEN_URL(self) -> str:  # type: ignore[override]
        return (
            f"{self.LOGIN_AUTHORITY.rstrip('/')}/{self.TENANT_ID}/oauth2/v2.0/token"
        )

    @property
    def graph_configured(self) -> bool:
        return bool(self.TENANT_ID and self.CLIENT_ID and self.CLIENT_SECRET)


settings = Settings()
