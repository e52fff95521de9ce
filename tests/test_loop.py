"""Tests for the frame scheduler."""

import pytest

from term_snake.config import GameConfig
from term_snake.engine import GameEngine, GameStatus
from term_snake.loop import GameLoop
from term_snake.render import PAUSED_HELP
from term_snake.snake import Direction, Location, Snake


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class FakeScreen:
    """Returns scripted input chunks, one per wait, advancing a fake clock."""

    def __init__(self, clock: FakeClock, script: list[str]) -> None:
        self.clock = clock
        self.script = list(script)
        self.timeouts: list[float] = []
        self.frames: list[str] = []

    def read(self, timeout: float) -> str:
        self.timeouts.append(timeout)
        self.clock.now += timeout + 1e-9
        # Quit once the script runs out so a faulty loop cannot spin forever.
        return self.script.pop(0) if self.script else "q"

    def write(self, text: str) -> None:
        self.frames.append(text)


def _run(script: list[str], engine: GameEngine | None = None):
    clock = FakeClock()
    screen = FakeScreen(clock, script)
    engine = engine if engine is not None else _quiet_engine()
    loop = GameLoop(engine, screen, highscore=0, clock=clock)
    status = loop.run()
    return status, engine, screen, loop


def _quiet_engine() -> GameEngine:
    engine = GameEngine(GameConfig(), seed=0)
    engine.food = Location(90, 12)
    engine.superfood = None
    engine.grid.rebuild(engine.snake, engine.food, engine.superfood)
    return engine


class TestGameLoop:
    def test_one_step_per_frame(self):
        status, engine, screen, loop = _run(["", "", "q"])
        assert status == GameStatus.QUIT
        assert engine.tick == 2
        assert engine.snake.head == (2, 0)
        assert loop.frames == 3
        assert len(screen.frames) == 3

    def test_quit_is_immediate(self):
        status, engine, _, loop = _run(["q"])
        assert status == GameStatus.QUIT
        assert engine.tick == 0
        assert loop.frames == 1

    def test_vertical_frames_wait_longer(self):
        _, engine, screen, _ = _run(["s", "", "q"])
        assert engine.snake.direction == Direction.DOWN
        assert screen.timeouts[1] == pytest.approx(screen.timeouts[0] * 1.75)

    def test_queued_keys_consumed_one_per_tick(self):
        _, engine, _, _ = _run(["sd", "", "q"])
        # Down on the first tick, right on the second.
        assert engine.snake.head == (1, 1)

    def test_pause_freezes_simulation_but_keeps_rendering(self):
        status, engine, screen, loop = _run([" ", "", "d", " ", "q"])
        assert status == GameStatus.QUIT
        assert engine.tick == 1
        assert loop.frames == 5
        assert PAUSED_HELP in screen.frames[2]
        assert PAUSED_HELP not in screen.frames[-1]

    def test_arrow_split_across_reads(self):
        _, engine, _, _ = _run(["\x1b[", "B", "", "q"])
        # The first tick keeps heading right; the arrow applies on the second.
        assert engine.status == GameStatus.QUIT
        assert engine.snake.head == (1, 2)

    def test_lone_escape_quits_after_quiet_read(self):
        status, engine, _, _ = _run(["\x1b", ""])
        assert status == GameStatus.QUIT
        assert engine.tick == 1

    def test_loss_ends_loop(self):
        engine = _quiet_engine()
        engine.snake = Snake(
            [(4, 5), (5, 5), (5, 6), (6, 6), (6, 5)], Direction.LEFT,
        )
        engine.grid.rebuild(engine.snake, engine.food, engine.superfood)
        status, engine, screen, loop = _run([""], engine)
        assert status == GameStatus.LOST
        assert loop.frames == 2
        assert len(screen.timeouts) == 1
