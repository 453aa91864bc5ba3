"""Runtime configuration of the binding.

Read from `ESB_FIREPLACE_*` environment variables (and an optional `.env`)
with pydantic-settings, so the orchestrator and the user can tune logging
without touching the solution file.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FireplaceSettings(BaseSettings):
    """Settings shared by the CLI and the logger."""

    model_config = SettingsConfigDict(
        env_prefix="ESB_FIREPLACE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Minimum level of log lines written to stderr.",
    )
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of console text.",
    )
    show_traceback: bool = Field(
        default=False,
        description="Print the full traceback when a run fails.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
