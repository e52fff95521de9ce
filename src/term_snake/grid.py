"""Grid representation for the snake game."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

import numpy as np

from term_snake.snake import Location

if TYPE_CHECKING:
    from term_snake.snake import Snake


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    SUPERFOOD = 3


class Grid:
    """NumPy-backed toroidal game grid.

    The grid is a derived view: it is rebuilt from the snake and food
    positions every tick. Cells are indexed ``cells[y, x]``; the public
    methods take ``(x, y)`` like :class:`~term_snake.snake.Location`.
    """

    def __init__(self, width: int = 100, height: int = 15) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap(self, x: int, y: int) -> Location:
        """Wrap coordinates around the grid edges."""
        return Location(x % self.width, y % self.height)

    def get(self, x: int, y: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[y, x])

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[y, x] = cell_type

    def rebuild(
        self,
        snake: Snake,
        food: Location | None = None,
        superfood: Location | None = None,
    ) -> None:
        """Repaint every cell from the snake body and food locations."""
        self.clear()
        if food is not None:
            self.set(food.x, food.y, CellType.FOOD)
        if superfood is not None:
            self.set(superfood.x, superfood.y, CellType.SUPERFOOD)
        for x, y in snake.body:
            self.set(x, y, CellType.SNAKE)

    def count(self, cell_type: CellType) -> int:
        """Return how many cells hold *cell_type*."""
        return int(np.count_nonzero(self.cells == cell_type))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }
