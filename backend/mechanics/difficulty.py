"""
Score -> level -> tick interval mapping.
"""

from config import GameConfig


class DifficultyCurve:
    def __init__(self, config: GameConfig):
        self.score_per_level = config.score_per_level
        self.max_level = config.max_level
        self.base_interval_ms = config.base_interval_ms
        self.min_interval_ms = config.min_interval_ms
        self.interval_decrement_ms = config.interval_decrement_ms

    def level_for(self, score: int) -> int:
        """Level 1 at score 0, one more every `score_per_level` points, capped."""
        return min(self.max_level, max(score, 0) // self.score_per_level + 1)

    def interval_for(self, level: int) -> int:
        """Tick period in milliseconds, floored at `min_interval_ms`."""
        return max(
            self.min_interval_ms,
            self.base_interval_ms - (level - 1) * self.interval_decrement_ms,
        )
