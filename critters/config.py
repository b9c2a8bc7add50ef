"""Configuration settings for the critter simulation.

Uses Pydantic Settings for validation and environment variable support.
All settings can be overridden via CRITTERS_* environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class SimulationConfig(BaseSettings):
    """Global configuration for the critter simulation."""

    # World
    world_width: int = Field(default=60, gt=0)
    world_height: int = Field(default=50, gt=0)
    seed: int | None = None  # None = fresh entropy each run

    # Infection
    hop_advantage: float = Field(default=0.2, ge=0.0, le=1.0)  # P(infect fails) without hop

    # Engine
    check_invariants: bool = True  # verify grid/registry/ledger after every tick

    # Shell
    debug_mode: bool = False
    max_ticks: int = Field(default=1000, ge=0)
    tick_delay: float = Field(default=0.05, ge=0.0)  # seconds between frames
    block_size: int = Field(default=1, gt=0)  # steps per rendered frame

    # Population
    species_counts: dict[str, int] = Field(
        default={"Bear": 30, "Tiger": 30, "WhiteTiger": 30, "NinjaCat": 30}
    )

    model_config = {"env_prefix": "CRITTERS_"}
