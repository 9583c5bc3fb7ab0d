"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dinorun.game.constants import SCREEN_WIDTH, MAX_TICK_TRAVEL


class GameSettings(BaseModel):
    """Tunable gameplay settings."""

    # Lead distance, as a fraction of screen width, that triggers a spawn.
    # 0.9 is the tuned default, 0.5 gives the sparser early layout.
    spawn_threshold: float = Field(default=0.9, gt=0.0, le=1.0)

    # Cells behind the player before an obstacle scores and is dropped
    retire_margin: int = Field(default=5, ge=1)

    @model_validator(mode="after")
    def check_spawn_lead(self) -> "GameSettings":
        """Reject layouts where one tick can retire the only obstacle left."""
        spawn_distance = SCREEN_WIDTH * self.spawn_threshold
        if spawn_distance <= self.retire_margin + MAX_TICK_TRAVEL:
            raise ValueError(
                f"spawn distance {spawn_distance:g} must exceed "
                f"retire_margin + {MAX_TICK_TRAVEL} ({self.retire_margin + MAX_TICK_TRAVEL})"
            )
        return self


class SimulatorSettings(BaseModel):
    """Desktop window settings."""

    title: str = "Dinorun"
    cell_width: int = Field(default=12, ge=4)
    cell_height: int = Field(default=14, ge=4)
    fps: int = Field(default=60, ge=1)
    fullscreen: bool = False
    font_name: Optional[str] = None  # None picks pygame's default monospace lookup


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DINORUN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    seed: Optional[int] = None

    # Nested settings
    game: GameSettings = Field(default_factory=GameSettings)
    simulator: SimulatorSettings = Field(default_factory=SimulatorSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
