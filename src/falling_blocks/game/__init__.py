"""Game module for Falling Blocks.

Exports the deterministic engine and its building blocks:
- GameGrid: Playfield geometry, collision and line clearing
- Cell, Colour, generate_tetromino: Piece factory (RGB: shared colour palette)
- ScoringRules: Score, level and drop-speed policy
- GameConfig: Board size and spawn anchors
- GameState, initial_state: Immutable game snapshot and its bootstrap value
- Action, apply: The state transition function
- FallingBlockGame: Session object folding actions onto the latest state
"""

from .config import DEFAULT_CONFIG, GameConfig
from .core import Action, FallingBlockGame, apply, reduce_state, run
from .grid import GameGrid, translate
from .pieces import RGB, Cell, Colour, generate_tetromino, index_of_colour
from .rng import hash_seed, random_seed, scale
from .rules import ScoringRules
from .state import GameState, initial_state

__all__ = [
    "DEFAULT_CONFIG",
    "GameConfig",
    "Action",
    "FallingBlockGame",
    "apply",
    "reduce_state",
    "run",
    "GameGrid",
    "translate",
    "Cell",
    "Colour",
    "RGB",
    "generate_tetromino",
    "index_of_colour",
    "hash_seed",
    "random_seed",
    "scale",
    "ScoringRules",
    "GameState",
    "initial_state",
]
