"""Application configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FbAdsMcpSettings(BaseSettings):
    """Configuration for the Facebook Ads MCP server."""

    model_config = SettingsConfigDict(env_prefix="FB_ADS_MCP_", extra="ignore")

    access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("FACEBOOK_ACCESS_TOKEN", "FB_ADS_MCP_ACCESS_TOKEN"),
        description="Access token sent with every Graph API call",
    )
    enabled_categories: str = Field(
        default="",
        validation_alias=AliasChoices("ENABLED_CATEGORIES", "FB_ADS_MCP_ENABLED_CATEGORIES"),
        description="Comma separated scopes loaded at startup",
    )
    graph_api_base_url: str = Field(
        default="https://graph.facebook.com",
        description="Base URL of the Graph API",
    )
    graph_video_base_url: str = Field(
        default="https://graph-video.facebook.com",
        description="Base URL used for video chunk transfers",
    )
    graph_api_version: str = Field(
        default="v23.0",
        description="Graph API version to target",
    )
    default_scopes: str = Field(
        default="essentials",
        description="Scopes loaded when ENABLED_CATEGORIES is empty",
    )
    default_timeout_seconds: float = Field(default=60.0, ge=1.0, description="HTTP request timeout")
    upload_transient_retry_delay: float = Field(
        default=1.0,
        ge=0.0,
        description="Delay in seconds before retrying a transient chunk upload error",
    )
    enable_request_logging: bool = Field(default=False, description="Emit a log line per Graph request")
    pii_redaction_keys: Sequence[str] = Field(
        default=("access_token", "authorization"),
        description="Keys that should be redacted in logs",
    )
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("graph_api_version")
    def _validate_version(cls, value: str) -> str:
        if not value.startswith("v"):
            msg = "Graph API versions must be prefixed with 'v'"
            raise ValueError(msg)
        return value

    @property
    def startup_scopes(self) -> list[str]:
        raw = self.enabled_categories.strip() or self.default_scopes
        return [scope.strip() for scope in raw.split(",") if scope.strip()]


@lru_cache(maxsize=1)
def get_settings() -> FbAdsMcpSettings:
    """Return cached settings instance."""

    return FbAdsMcpSettings()


__all__ = ["FbAdsMcpSettings", "get_settings"]
