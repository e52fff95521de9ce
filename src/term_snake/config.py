"""Fixed game constants."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from term_snake.snake import Direction

# Blank separator, score line, and status/help line below the board.
HUD_LINES = 3


@dataclass(frozen=True)
class GameConfig:
    """Board size, timing, and scoring constants for a game."""

    # Board
    columns: int = 100
    rows: int = 15
    start_x: int = 0
    start_y: int = 0
    start_direction: Direction = Direction.RIGHT

    # Timing
    frames_per_second: float = 15.0
    vertical_frame_factor: float = 1.75

    # Scoring and spawning
    food_points: int = 1
    superfood_points: int = 3
    superfood_chance: float = 0.3
    spawn_attempts: int = 100

    def __post_init__(self) -> None:
        if self.frames_per_second <= 0:
            raise ValueError("frames_per_second must be positive.")
        if self.vertical_frame_factor <= 0:
            raise ValueError("vertical_frame_factor must be positive.")
        if not 0.0 <= self.superfood_chance <= 1.0:
            raise ValueError("superfood_chance must be within [0, 1].")
        if self.spawn_attempts < 0:
            raise ValueError("spawn_attempts must be >= 0.")
        if not (0 <= self.start_x < self.columns and 0 <= self.start_y < self.rows):
            raise ValueError("Start position must lie on the board.")

    @property
    def frame_seconds(self) -> float:
        """Frame interval while moving horizontally."""
        return 1.0 / self.frames_per_second

    @property
    def screen_lines(self) -> int:
        """Terminal lines needed for the board and HUD."""
        return self.rows + HUD_LINES

    def frame_interval(self, direction: Direction) -> float:
        """Return the delay before the next tick for the given heading.

        Vertical moves wait longer so the snake appears to travel at the
        same speed on terminals whose character cells are taller than wide.
        """
        if direction.is_vertical:
            return self.frame_seconds * self.vertical_frame_factor
        return self.frame_seconds

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        d = asdict(self)
        d["start_direction"] = self.start_direction.name.lower()
        return d
