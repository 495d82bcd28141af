"""Runtime configuration for factum."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FactumSettings(BaseSettings):
    """Settings for test case execution.

    Loads from environment variables automatically:
        FACTUM_MAX_DISPLAY_STRING_LENGTH, FACTUM_DISPLAY_ELLIPSIS,
        FACTUM_TRACE_ENABLED, FACTUM_TRACE_OUTPUT
    """

    max_display_string_length: int = Field(
        default=50, ge=1, description="Longest string argument rendered in a display name"
    )
    display_ellipsis: str = Field(default="...", description="Marker appended to truncated strings")
    trace_enabled: bool = Field(default=False, description="Open a span for every test case run")
    trace_output: Path = Field(default=Path("traces.jsonl"), description="JSONL file receiving spans")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="FACTUM_",
    )


def get_settings() -> FactumSettings:
    """Read settings from the current environment."""
    return FactumSettings()
