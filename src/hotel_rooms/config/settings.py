"""Runtime configuration for the hotel console.

Relies on pydantic-settings so that environment variables (prefixed with ``HOTEL_``)
can override defaults. The defaults reproduce the stock behaviour, so no
configuration is needed to run the menu.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Captures runtime configuration for the hotel console."""

    log_level: str = Field(default="WARNING")
    log_dir: Optional[Path] = Field(
        default=None, description="Directory for the log file; None keeps logging on stderr only"
    )
    max_base_cost: float = Field(
        default=1_000_000.0, description="Upper bound accepted by the base cost prompt"
    )
    label_warning_length: int = Field(
        default=50, description="Room labels longer than this are accepted with a warning"
    )
    cost_precision: int = Field(default=2, description="Decimal places used when printing costs")

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_dir", mode="before")
    def _expand_log_dir(cls, value: str | Path | None) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @field_validator("max_base_cost")
    def _validate_max_base_cost(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("max_base_cost must be positive")
        return value

    @field_validator("label_warning_length")
    def _validate_label_warning_length(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("label_warning_length must be positive")
        return value

    @field_validator("cost_precision")
    def _validate_cost_precision(cls, value: int) -> int:
        if value < 0:
            raise ValueError("cost_precision must not be negative")
        return value

    def format_cost(self, value: float) -> str:
        return f"{value:.{self.cost_precision}f}"
