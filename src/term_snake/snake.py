"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable
from typing import NamedTuple


class Location(NamedTuple):
    """A board cell as (x, y) with x the column and y the row."""

    x: int
    y: int


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction that would cause an instant 180° reversal."""
        return _OPPOSITES[self]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of body segments.

    The tail is ``body[0]``; the head is ``body[-1]``. Movement appends a new
    head and, unless the snake grows, drops the tail.
    """

    def __init__(
        self,
        body: Iterable[tuple[int, int]],
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.body: deque[Location] = deque(Location(*seg) for seg in body)
        if not self.body:
            raise ValueError("Snake body must contain at least 1 segment.")
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Location:
        """Return the head coordinate."""
        return self.body[-1]

    @property
    def tail(self) -> Location:
        """Return the tail coordinate."""
        return self.body[0]

    def turn(self, new_direction: Direction) -> bool:
        """Change direction, ignoring 180° reversals of a multi-segment snake.

        A single-segment snake has nothing to reverse into, so it may turn
        back on itself. Returns whether the new direction was applied.
        """
        if new_direction == self.direction.opposite and len(self.body) > 1:
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> Location:
        """Compute the next head position without moving.

        The result may lie off the board; the grid decides how edges wrap.
        """
        dx, dy = self.direction.value
        x, y = self.head
        return Location(x + dx, y + dy)

    def advance(self, new_head: Location) -> None:
        """Append *new_head* to the body; the tail stays until :meth:`shrink`."""
        self.body.append(new_head)

    def shrink(self) -> Location:
        """Drop and return the tail segment."""
        return self.body.popleft()

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body

    def blocking_cells(self, growing: bool = False) -> set[Location]:
        """Cells the next head may not enter.

        The tail is excluded unless the snake is growing, since it moves out
        of the way in the same step.
        """
        cells = set(self.body)
        if not growing:
            cells.discard(self.tail)
        return cells

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
