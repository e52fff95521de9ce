"""Food and superfood spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Collection

import numpy as np

from term_snake.snake import Location

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Picks random unoccupied cells for food placement.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Sampling is uniform rejection sampling bounded to *attempts* tries,
    after which a cell is chosen from the explicitly computed free cells.
    """

    def __init__(
        self,
        width: int,
        height: int,
        attempts: int = 100,
        rng: np.random.Generator | None = None,
    ) -> None:
        if attempts < 0:
            raise ValueError("attempts must be >= 0.")
        self.width = width
        self.height = height
        self.attempts = attempts
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, occupied: Collection[tuple[int, int]]) -> Location | None:
        """Return a random cell not in *occupied*, or ``None`` if the board is full."""
        for _ in range(self.attempts):
            x = int(self.rng.integers(self.width))
            y = int(self.rng.integers(self.height))
            if (x, y) not in occupied:
                return Location(x, y)

        free = self.free_cells(occupied)
        if not free:
            logger.warning("No empty cells available for food spawning.")
            return None
        logger.debug(
            "Rejection sampling exhausted after %d attempts; "
            "choosing among %d free cells.",
            self.attempts, len(free),
        )
        return free[int(self.rng.integers(len(free)))]

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return bool(self.rng.random() < probability)

    def free_cells(self, occupied: Collection[tuple[int, int]]) -> list[Location]:
        """Return every cell on the board not in *occupied*."""
        free = np.ones((self.height, self.width), dtype=bool)
        for x, y in occupied:
            free[y, x] = False
        ys, xs = np.nonzero(free)
        return [
            Location(x, y)
            for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
        ]
