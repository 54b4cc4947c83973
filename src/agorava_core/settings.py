"""
agorava_core.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for logging and per-provider OAuth applications.
- Validate OAuth application settings with the shared preconditions.
- Hide secrets from repr/logging (e.g., API secret).
- Offer a cached settings instance.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from agorava_core.api.preconditions import (
    check_empty_string,
    check_not_null,
    check_valid_oauth_callback,
)
from agorava_core.constants import OUT_OF_BAND


class OAuthAppSettings(BaseModel):
    """
    Credentials and callback registered with one social network.
    """

    model_config = ConfigDict(frozen=True)

    social_media_name: str
    api_key: str
    api_secret: str = Field(repr=False)
    callback: str = OUT_OF_BAND
    scope: str | None = None

    @field_validator("social_media_name", "api_key", "api_secret")
    @classmethod
    def not_blank(cls, value: str, info: ValidationInfo) -> str:
        check_empty_string(value, f"{info.field_name} must not be blank")
        return value

    @field_validator("callback")
    @classmethod
    def valid_callback(cls, value: str) -> str:
        check_valid_oauth_callback(value, f"Invalid OAuth callback: {value!r}")
        return value


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AGORAVA_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "agorava"
    log_level: str = "INFO"

    # JSON object keyed by provider name, e.g. AGORAVA_OAUTH_APPS='{"twitter": {...}}'
    oauth_apps: dict[str, OAuthAppSettings] = Field(default_factory=dict)

    def oauth_app(self, name: str) -> OAuthAppSettings:
        app = self.oauth_apps.get(name)
        check_not_null(app, f"No OAuth application configured for {name!r}")
        return app


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Precondition failures inside validators surface as pydantic `ValidationError`.
