from __future__ import annotations

from dataclasses import dataclass, field

from .rules import ScoringRules


@dataclass(frozen=True)
class GameConfig:
    width: int = 10
    height: int = 20
    spawn_x: int = 4
    spawn_y: int = -2
    preview_x: int = 3
    preview_y: int = 1
    rules: ScoringRules = field(default_factory=ScoringRules)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")


DEFAULT_CONFIG = GameConfig()
