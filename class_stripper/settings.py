"""
Pydantic Settings Implementation for Class Stripper.

Process-wide settings loaded from the environment (or a `.env` file). Per-call
cleaning options are not settings; they live in CleaningConfig.
"""

from functools import lru_cache
from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic_settings import SettingsConfigDict

from class_stripper.core.constants import (
    FALSY_VALUES,
    MAX_BUBBLE_SWEEPS,
    MAX_EMPTY_DIV_REMOVALS,
    MAX_OPTIMIZE_PASSES,
    TRUTHY_VALUES,
)


class Settings(PydanticBaseSettings):
    """
    Application settings using Pydantic for validation and environment loading.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        validate_assignment=True,
        extra="ignore",
    )

    # Debug settings
    debug_logs_enabled: bool = Field(
        default=False, description="Enable debug logging output"
    )

    # Structural optimizer ceilings
    max_optimize_passes: int = Field(
        default=MAX_OPTIMIZE_PASSES,
        description="Maximum outer bubbling/pruning passes per optimize call",
        gt=0,
    )
    max_bubble_sweeps: int = Field(
        default=MAX_BUBBLE_SWEEPS,
        description="Maximum wrapper bubbling sweeps per bubbling run",
        gt=0,
    )
    max_empty_div_removals: int = Field(
        default=MAX_EMPTY_DIV_REMOVALS,
        description="Maximum empty div deletions per pruning run",
        gt=0,
    )

    # Service Information
    service_name: str = Field("class-stripper", description="Name of the service.")
    service_version: str = "0.1.0"

    @field_validator("debug_logs_enabled", mode="before")
    def parse_debug_logs(cls, v: Any) -> bool:
        """Accept the usual on/off spellings, and nothing else."""
        if not isinstance(v, str):
            return bool(v)
        normalized = v.strip().lower()
        if normalized in TRUTHY_VALUES:
            return True
        if normalized in FALSY_VALUES:
            return False
        raise ValueError(
            f"Invalid boolean value: '{v}'. Must be one of: "
            f"{', '.join(TRUTHY_VALUES + FALSY_VALUES)}"
        )

    @property
    def optimizer_ceilings(self) -> Dict[str, int]:
        """Keyword arguments for StructuralOptimizer."""
        return {
            "max_passes": self.max_optimize_passes,
            "max_bubble_sweeps": self.max_bubble_sweeps,
            "max_empty_removals": self.max_empty_div_removals,
        }


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings instance (singleton pattern).

    Returns:
        Settings: The application settings instance
    """
    return Settings()


def reload_settings():
    """Drop the cached settings so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
