"""
Game configuration.

Defaults live in domain.constants; load_config() layers environment
variables (optionally from a .env file) on top of them.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

from domain.constants import (
    BASE_INTERVAL_MS,
    FALLBACK_SCAN,
    GRID_SIZE,
    INTERVAL_DECREMENT_MS,
    MAX_FOOD_ATTEMPTS,
    MAX_LEVEL,
    MIN_INTERVAL_MS,
    PLACEMENT_FALLBACKS,
    SCORE_PER_LEVEL,
)


logger = logging.getLogger(__name__)

ENV_PREFIX = "SNAKE_"


@dataclass(frozen=True)
class GameConfig:
    grid_width: int = GRID_SIZE
    grid_height: int = GRID_SIZE
    score_per_level: int = SCORE_PER_LEVEL
    max_level: int = MAX_LEVEL
    base_interval_ms: int = BASE_INTERVAL_MS
    min_interval_ms: int = MIN_INTERVAL_MS
    interval_decrement_ms: int = INTERVAL_DECREMENT_MS
    max_placement_attempts: int = MAX_FOOD_ATTEMPTS
    placement_fallback: str = FALLBACK_SCAN

    def __post_init__(self):
        for name in ("grid_width", "grid_height", "score_per_level", "max_level",
                     "min_interval_ms", "max_placement_attempts"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}.")
        if self.interval_decrement_ms < 0:
            raise ValueError(
                f"interval_decrement_ms must not be negative, got {self.interval_decrement_ms}."
            )
        if self.min_interval_ms > self.base_interval_ms:
            raise ValueError(
                f"min_interval_ms ({self.min_interval_ms}) exceeds "
                f"base_interval_ms ({self.base_interval_ms})."
            )
        if self.placement_fallback not in PLACEMENT_FALLBACKS:
            available = ", ".join(sorted(PLACEMENT_FALLBACKS))
            raise ValueError(
                f"Unknown placement fallback '{self.placement_fallback}'. Available: {available}"
            )

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s%s=%r is not an integer; using %s.", ENV_PREFIX, name, raw, default)
        return default


def load_config(base: Optional[GameConfig] = None) -> GameConfig:
    """
    Build a GameConfig from SNAKE_* environment variables.

    Args:
        base: Config supplying the defaults (GameConfig() if omitted)

    Returns:
        A validated GameConfig
    """
    base = base or GameConfig()

    fallback = os.getenv(ENV_PREFIX + "PLACEMENT_FALLBACK", "").strip().lower()
    if fallback and fallback not in PLACEMENT_FALLBACKS:
        logger.warning(
            "%sPLACEMENT_FALLBACK=%r is invalid; defaulting to %s.",
            ENV_PREFIX, fallback, base.placement_fallback,
        )
        fallback = ""

    return GameConfig(
        grid_width=_env_int("GRID_WIDTH", base.grid_width),
        grid_height=_env_int("GRID_HEIGHT", base.grid_height),
        score_per_level=_env_int("SCORE_PER_LEVEL", base.score_per_level),
        max_level=_env_int("MAX_LEVEL", base.max_level),
        base_interval_ms=_env_int("BASE_INTERVAL_MS", base.base_interval_ms),
        min_interval_ms=_env_int("MIN_INTERVAL_MS", base.min_interval_ms),
        interval_decrement_ms=_env_int("INTERVAL_DECREMENT_MS", base.interval_decrement_ms),
        max_placement_attempts=_env_int("MAX_PLACEMENT_ATTEMPTS", base.max_placement_attempts),
        placement_fallback=fallback or base.placement_fallback,
    )
