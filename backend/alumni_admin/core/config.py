from functools import lru_cache
from typing import Any

from pydantic import AnyUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    debug: bool = Field(False, description="Enable FastAPI debug mode")
    environment: str = Field(
        default="development",
        description="Runtime environment (development|staging|production)",
    )
    gateway_base_url: AnyUrl = Field(
        default="https://7wgbsyva7h.execute-api.ap-south-1.amazonaws.com/dev",
        description="Base URL of the alumni platform REST gateway",
    )
    page_size: int = Field(
        20, description="Number of records requested per list page", ge=1
    )
    search_debounce_seconds: float = Field(
        default=0.3,
        description="Quiet period after the last keystroke before a search fires",
        ge=0,
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every gateway request",
        gt=0,
    )
    api_token: str | None = Field(
        default=None,
        description="Static bearer token; takes precedence over every other token source",
    )
    token_env_var: str = Field(
        default="ALUMNI_ADMIN_TOKEN",
        description="Environment variable consulted for the bearer token",
    )
    token_storage_paths: list[str] | str = Field(
        default_factory=list,
        description=(
            "JSON token storage files checked in order (persistent storage first, "
            "then session storage); comma-separated string or list"
        ),
    )
    resource_overrides: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Per-resource overrides of gateway paths and filter parameters",
    )

    def resource_config(self, resource_name: str) -> dict[str, Any]:
        base = dict(self.resource_overrides.get("__default__", {}))
        specific = self.resource_overrides.get(resource_name, {})
        if specific:
            base.update(specific)
        return base

    @field_validator("token_storage_paths", mode="after")
    @classmethod
    def _parse_storage_paths(cls, value: Any) -> list[str]:
        if value in (None, "", []):
            return []
        if isinstance(value, str):
            candidate = value.strip()
            if not candidate:
                return []
            return [
                item for item in (part.strip() for part in candidate.split(",")) if item
            ]
        if isinstance(value, (list, tuple, set)):
            return [str(item).strip() for item in value if str(item).strip()]
        raise ValueError(
            "TOKEN_STORAGE_PATHS must be provided as a list or comma-separated string"
        )

    @property
    def gateway_url(self) -> str:
        return str(self.gateway_base_url).rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
