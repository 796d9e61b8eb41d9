"""Centralized configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables.

    All fields are optional with sensible defaults.
    Validation occurs on first get_settings() call.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    output_channel_name: str = "kube9"

    # Issue reporting
    issue_tracker_url: str = "https://github.com/alto9/kube9-vscode/issues/new"
    issue_title_max_chars: int = Field(default=50, gt=0)

    # Remediation targets
    kubeconfig: str = "~/.kube/config"
    timeout_setting_key: str = "kube9.timeout"
    refresh_command: str = "kube9.refreshTree"
    open_settings_command: str = "workbench.action.openSettings"

    # Documentation links
    connection_docs_url: str = "https://kube9.io/docs/troubleshooting#connection-errors"
    rbac_docs_url: str = "https://kubernetes.io/docs/reference/access-authn-authz/rbac/"
    kubectl_install_url: str = "https://kubernetes.io/docs/tasks/tools/"
    api_docs_url: str = "https://kubernetes.io/docs/reference/using-api/api-concepts/"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {', '.join(sorted(valid_levels))}")
        return upper

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dictionary."""
        return self.model_dump()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached Settings singleton.

    The cache ensures only one Settings instance exists per process.

    For testing: override with get_settings.cache_clear() then set env vars.
    """
    return Settings()
