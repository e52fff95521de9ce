"""Step-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from collections import deque

import numpy as np

from term_snake.config import GameConfig
from term_snake.food import FoodSpawner
from term_snake.grid import Grid
from term_snake.snake import Direction, Location, Snake

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    """Lifecycle states of a game."""

    RUNNING = "running"
    PAUSED = "paused"
    QUIT = "quit"
    LOST = "lost"

    @property
    def is_over(self) -> bool:
        return self in (GameStatus.QUIT, GameStatus.LOST)


class GameEngine:
    """Single-snake, step-based game engine.

    The engine owns the grid, snake, food slots, score, and the queue of
    pending direction requests. Each call to :meth:`step` advances the game
    by one tick. Input handlers only ever touch the queue, the pause flag,
    and the quit request.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.grid = Grid(width=self.config.columns, height=self.config.rows)
        self.snake = Snake(
            [(self.config.start_x, self.config.start_y)],
            self.config.start_direction,
        )
        self.spawner = FoodSpawner(
            self.config.columns,
            self.config.rows,
            attempts=self.config.spawn_attempts,
            rng=self.rng,
        )

        self.food: Location | None = None
        self.superfood: Location | None = None
        self.score = 0
        self.tick = 0
        self.status = GameStatus.RUNNING
        self._pending: deque[Direction] = deque()

        self._spawn_food()
        self._maybe_spawn_superfood()
        self.grid.rebuild(self.snake, self.food, self.superfood)

    # -- input-facing controls --------------------------------------------

    @property
    def paused(self) -> bool:
        return self.status == GameStatus.PAUSED

    @property
    def game_over(self) -> bool:
        return self.status.is_over

    @property
    def pending_directions(self) -> list[Direction]:
        """Direction requests not yet consumed, oldest first."""
        return list(self._pending)

    def enqueue_direction(self, direction: Direction) -> bool:
        """Queue a direction request for a later tick.

        Requests are dropped while the game is paused or over. Returns
        whether the request was queued.
        """
        if self.status != GameStatus.RUNNING:
            return False
        self._pending.append(direction)
        return True

    def toggle_pause(self) -> None:
        """Flip between running and paused; no effect once the game ended."""
        if self.status == GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
        elif self.status == GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
        else:
            return
        logger.debug("Game %s at tick %d.", self.status.value, self.tick)

    def quit(self) -> None:
        """End the game at the player's request."""
        if self.game_over:
            return
        self.status = GameStatus.QUIT
        logger.info("Player quit at tick %d with score %d.", self.tick, self.score)

    # -- simulation -------------------------------------------------------

    def step(self) -> dict:
        """Advance the game by one tick.

        Does nothing unless the game is running. Returns the full game state
        as a serializable dict.
        """
        if self.status != GameStatus.RUNNING:
            return self.get_state()

        if self._pending:
            requested = self._pending.popleft()
            if not self.snake.turn(requested):
                logger.debug(
                    "Rejected reversal from %s to %s.",
                    self.snake.direction.name, requested.name,
                )

        # Occupancy before the move, minus the tail that leaves this step.
        blocking = self.snake.blocking_cells()
        new_head = self.snake.next_head()
        if not self.grid.in_bounds(*new_head):
            new_head = self.grid.wrap(*new_head)
        self.snake.advance(new_head)

        if new_head == self.food:
            self.score += self.config.food_points
            self._spawn_food()
            self._maybe_spawn_superfood()
        elif new_head == self.superfood:
            self.score += self.config.superfood_points
            self.superfood = None
        elif new_head in blocking:
            self._lose()
        else:
            self.snake.shrink()

        self.tick += 1
        self.grid.rebuild(self.snake, self.food, self.superfood)
        return self.get_state()

    def frame_interval(self) -> float:
        """Seconds until the next tick given the current heading."""
        return self.config.frame_interval(self.snake.direction)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "status": self.status.value,
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food is not None else None,
            "superfood": (
                list(self.superfood) if self.superfood is not None else None
            ),
            "grid": self.grid.to_dict(),
        }

    def _spawn_food(self) -> None:
        occupied = set(self.snake.body)
        if self.superfood is not None:
            occupied.add(self.superfood)
        self.food = self.spawner.spawn(occupied)
        logger.debug("Food spawned at %s.", self.food)

    def _maybe_spawn_superfood(self) -> None:
        if self.superfood is not None:
            return
        if not self.spawner.chance(self.config.superfood_chance):
            return
        occupied = set(self.snake.body)
        if self.food is not None:
            occupied.add(self.food)
        self.superfood = self.spawner.spawn(occupied)
        logger.debug("Superfood spawned at %s.", self.superfood)

    def _lose(self) -> None:
        """Mark the game as lost after a self-collision."""
        self.status = GameStatus.LOST
        logger.info(
            "Snake collided with itself at tick %d with score %d.",
            self.tick + 1, self.score,
        )
