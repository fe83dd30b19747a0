"""Configuration management for gridstack.

Grid behaviour is described by an explicit, immutable ``GridConfig`` value
that is handed to every engine instance. Process-wide defaults for that
value are loaded from environment variables or a .env file.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gridstack.exceptions import ConfigurationError


class GridConfig(BaseModel):
    """Read-only grid configuration consumed by the layout engine."""

    model_config = ConfigDict(frozen=True)

    column_count: Annotated[int, Field(ge=1, description="Number of grid columns")] = 5
    min_row_count: Annotated[int, Field(ge=1, description="Rows always materialized")] = 5
    default_column_span: Annotated[int, Field(ge=1)] = 2
    default_row_span: Annotated[int, Field(ge=1)] = 2
    item_margin: Annotated[float, Field(ge=0, description="Pixel margin around each item")] = 5.0
    auto_assign: Annotated[
        bool, Field(description="Ignore spans supplied with added items and use the defaults")
    ] = True

    @model_validator(mode="after")
    def validate_default_span(self) -> GridConfig:
        if self.default_column_span > self.column_count:
            raise ValueError(
                f"default_column_span ({self.default_column_span}) exceeds "
                f"column_count ({self.column_count})"
            )
        return self


class GridStackSettings(BaseSettings):
    """Default grid settings loaded from environment variables and .env files.

    Priority (highest to lowest):
      1. Explicit constructor arguments
      2. Environment variables (GRIDSTACK_COLUMN_COUNT, GRIDSTACK_MIN_ROW_COUNT, etc.)
      3. .env file in current directory
    """

    model_config = SettingsConfigDict(
        env_prefix="GRIDSTACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    column_count: Annotated[int, Field(ge=1)] = 5
    min_row_count: Annotated[int, Field(ge=1)] = 5
    default_column_span: Annotated[int, Field(ge=1)] = 2
    default_row_span: Annotated[int, Field(ge=1)] = 2
    item_margin: Annotated[float, Field(ge=0)] = 5.0
    auto_assign: bool = True

    def grid_config(self, **overrides: object) -> GridConfig:
        """Build a GridConfig from these settings.

        Raises:
            ConfigurationError: If the combined values do not form a valid grid.
        """
        values = {
            "column_count": self.column_count,
            "min_row_count": self.min_row_count,
            "default_column_span": self.default_column_span,
            "default_row_span": self.default_row_span,
            "item_margin": self.item_margin,
            "auto_assign": self.auto_assign,
        }
        values.update(overrides)
        try:
            return GridConfig(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid grid settings: {e}") from e


# Singleton-ish: lazily loaded on first access
_settings: GridStackSettings | None = None


def get_settings(**overrides: object) -> GridStackSettings:
    """Get or create the settings singleton."""
    global _settings
    if _settings is None or overrides:
        _settings = GridStackSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Reset cached settings (useful for testing)."""
    global _settings
    _settings = None
