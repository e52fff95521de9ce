"""Frame scheduler driving the engine, input, and rendering."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from term_snake.controls import InputHandler
from term_snake.engine import GameEngine, GameStatus
from term_snake.render import render_frame

if TYPE_CHECKING:
    from term_snake.terminal import Terminal

logger = logging.getLogger(__name__)


class GameLoop:
    """Runs a game until it is quit or lost.

    Between ticks the loop waits on input until the next frame deadline, so
    key presses are applied as they arrive while the simulation advances at
    most once per frame. The frame length follows the snake's heading.
    """

    def __init__(
        self,
        engine: GameEngine,
        screen: Terminal,
        highscore: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.engine = engine
        self.screen = screen
        self.highscore = highscore
        self.clock = clock
        self.input = InputHandler(engine)
        self.frames = 0

    def render(self) -> None:
        self.screen.write(render_frame(self.engine, self.highscore))
        self.frames += 1

    def run(self) -> GameStatus:
        """Play until the game ends and return the final status."""
        logger.info("Game started: %s", self.engine.config.to_dict())
        self.render()
        deadline = self.clock() + self.engine.frame_interval()

        while not self.engine.game_over:
            remaining = deadline - self.clock()
            if remaining > 0:
                data = self.screen.read(remaining)
                if data:
                    self.input.feed(data)
                else:
                    self.input.flush()
                continue

            self.engine.step()
            self.render()
            deadline = self.clock() + self.engine.frame_interval()

        logger.info(
            "Game ended (%s) after %d ticks with score %d.",
            self.engine.status.value, self.engine.tick, self.engine.score,
        )
        return self.engine.status
