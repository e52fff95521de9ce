"""Term Snake — a terminal Snake game."""

from term_snake.config import GameConfig
from term_snake.engine import GameEngine, GameStatus
from term_snake.grid import CellType, Grid
from term_snake.highscore import HighscoreStore
from term_snake.snake import Direction, Location, Snake

__all__ = [
    "CellType",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameStatus",
    "Grid",
    "HighscoreStore",
    "Location",
    "Snake",
]
