"""
Configuration management for Pocket Arcade.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from pocket_arcade.gameplay.constants import (
    DEFAULT_FIELD_WIDTH, DEFAULT_PUZZLE_SIZE, FIELD_EDGE_MARGIN, PUZZLE_SIZES,
    SPAWN_INTERVAL_MS, TICK_INTERVAL_MS,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level for the front end"
    )

    # Shooter
    shooter_field_width: float = Field(
        default=DEFAULT_FIELD_WIDTH,
        gt=2 * FIELD_EDGE_MARGIN,
        description="Width of the shooter play field in game units"
    )
    shooter_tick_interval_ms: int = Field(
        default=TICK_INTERVAL_MS,
        gt=0,
        description="Interval between simulation ticks in milliseconds"
    )
    shooter_spawn_interval_ms: int = Field(
        default=SPAWN_INTERVAL_MS,
        gt=0,
        description="Interval between obstacle spawns in milliseconds"
    )

    # Puzzle
    puzzle_default_size: int = Field(
        default=DEFAULT_PUZZLE_SIZE,
        description="Board size the puzzle opens with (4, 6 or 9)"
    )

    # Display
    frame_rate: int = Field(default=60, gt=0)
    window_width: int = Field(default=640)
    window_height: int = Field(default=720)

    class Config:
        env_prefix = "POCKET_ARCADE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @field_validator("puzzle_default_size")
    @classmethod
    def _check_puzzle_size(cls, value: int) -> int:
        if value not in PUZZLE_SIZES:
            raise ValueError(f"puzzle size must be one of {PUZZLE_SIZES}, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
