# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for metric defaults and logging setup. Per-call
options are derived from these settings by BetweennessOptions.from_settings()
and ModularityOptions.from_settings().
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from graphmetrics.logging.handlers import parse_interval, parse_size


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Betweenness centrality ===
    betweenness_weighted: bool = False
    betweenness_normalized: bool = True
    betweenness_weight_attribute: str = "weight"
    betweenness_centrality_attribute: str = "centrality"
    betweenness_workers: int = 1

    # === Modularity ===
    modularity_community_attribute: str = "community"
    modularity_weight_attribute: str = "weight"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("betweenness_workers")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("betweenness_workers must be >= 1")
        return v

    @field_validator(
        "betweenness_weight_attribute",
        "betweenness_centrality_attribute",
        "modularity_community_attribute",
        "modularity_weight_attribute",
    )
    @classmethod
    def validate_attribute_name(cls, v: str, info) -> str:  # noqa: N805
        if not v.strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        # Assigning centrality must not clobber the labels modularity reads.
        if self.betweenness_centrality_attribute == self.modularity_community_attribute:
            errors.append(
                "BETWEENNESS_CENTRALITY_ATTRIBUTE must differ from "
                "MODULARITY_COMMUNITY_ATTRIBUTE"
            )

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if parse_size(self.log_rotation) is None and parse_interval(self.log_rotation) is None:
            errors.append(
                f"LOG_ROTATION {self.log_rotation!r} is neither a size nor an interval"
            )

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-call config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
