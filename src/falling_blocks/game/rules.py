from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    line_clear_score: int = 100
    score_per_level: int = 1000
    base_tick_ms: int = 10
    initial_drop_ms: int = 500

    def __post_init__(self) -> None:
        if self.score_per_level <= 0:
            raise ValueError(f"score_per_level must be positive, got {self.score_per_level}")
        if self.base_tick_ms <= 0 or self.initial_drop_ms <= 0:
            raise ValueError("tick durations must be positive")
        if self.line_clear_score < 0:
            raise ValueError(f"line_clear_score must not be negative, got {self.line_clear_score}")

    @property
    def initial_drop_tick(self) -> int:
        return self.initial_drop_ms // self.base_tick_ms

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return self.line_clear_score * lines

    def level_for_score(self, score: int) -> int:
        return score // self.score_per_level + 1

    def drop_tick_for_level(self, level: int) -> int:
        """Ticks needed per automatic drop; shrinks geometrically with level.

        Never below one tick, so gravity keeps running at high levels.
        """
        ticks = self.initial_drop_ms * 5 ** (-0.1 * (level - 1)) / self.base_tick_ms
        # Half-up rounding, not Python's banker's rounding
        return max(1, int(math.floor(ticks + 0.5)))
