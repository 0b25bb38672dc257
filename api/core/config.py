"""Centralised application configuration using Pydantic settings."""
from __future__ import annotations

from functools import lru_cache
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class FeatureFlags(BaseModel):
    """Feature flag configuration exposed to the rest of the application."""

    enable_sample_data: bool = True


class AppConfig(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    app_env: str = Field(default="development", alias="APP_ENV")
    service_name: str = Field(default="rfp-qualification-engine", alias="SERVICE_NAME")
    cors_allowed_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        alias="CORS_ALLOWED_ORIGINS",
        validate_default=True,
    )
    feature_enable_sample_data: bool = Field(default=True, alias="FEATURE_ENABLE_SAMPLE_DATA")

    @field_validator("cors_allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Optional[str | List[str]]) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return list(value)

    @field_validator("cors_allowed_origins", mode="after")
    @classmethod
    def _default_origins(cls, value: List[str], info) -> List[str]:
        if value:
            return value
        environment = str(info.data.get("app_env", "development")).lower()
        if environment == "development":
            return ["http://localhost:3000", "http://127.0.0.1:3000"]
        return []

    @computed_field
    def environment(self) -> str:
        """Normalized environment name."""

        return self.app_env.lower()

    @computed_field
    def feature_flags(self) -> FeatureFlags:
        """Return strongly-typed feature flags."""

        return FeatureFlags(enable_sample_data=self.feature_enable_sample_data)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Load configuration, caching the result for reuse."""

    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "FeatureFlags", "get_config"]
