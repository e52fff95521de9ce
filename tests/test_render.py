"""Tests for frame and summary rendering."""

import re

from term_snake.config import GameConfig
from term_snake.engine import GameEngine, GameStatus
from term_snake.render import (
    ACTIVE_HELP,
    CLEAR_SCREEN,
    CYAN,
    PAUSED_HELP,
    RED,
    YELLOW,
    render_board,
    render_frame,
    render_hud,
    render_summary,
)
from term_snake.snake import Direction, Location, Snake

_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def _plain(text: str) -> str:
    return _ANSI.sub("", text)


def _engine() -> GameEngine:
    engine = GameEngine(GameConfig(columns=10, rows=5), seed=0)
    engine.snake = Snake([(1, 2), (2, 2), (3, 2)], Direction.RIGHT)
    engine.food = Location(6, 0)
    engine.superfood = Location(8, 4)
    engine.grid.rebuild(engine.snake, engine.food, engine.superfood)
    return engine


class TestRenderBoard:
    def test_dimensions(self):
        lines = render_board(_engine())
        assert len(lines) == 5
        assert all(len(_plain(line)) == 10 for line in lines)

    def test_glyphs(self):
        lines = [_plain(line) for line in render_board(_engine())]
        assert lines[0] == "......*..."
        assert lines[2] == ".oo>......"
        assert lines[4] == "........@."

    def test_colors(self):
        lines = render_board(_engine())
        assert f"{YELLOW}*" in lines[0]
        assert f"{RED}@" in lines[4]
        assert f"{CYAN}>" in lines[2]

    def test_head_glyph_follows_direction(self):
        engine = _engine()
        for direction, glyph in [
            (Direction.UP, "^"), (Direction.DOWN, "v"),
            (Direction.LEFT, "<"), (Direction.RIGHT, ">"),
        ]:
            engine.snake.direction = direction
            assert _plain(render_board(engine)[2])[3] == glyph


class TestRenderHud:
    def test_scores(self):
        engine = _engine()
        engine.score = 4
        score_line, help_line = (_plain(s) for s in render_hud(engine, 9))
        assert score_line == "Score: 4   Highscore: 9"
        assert help_line == ACTIVE_HELP

    def test_highscore_shows_current_when_higher(self):
        engine = _engine()
        engine.score = 12
        assert "Highscore: 12" in _plain(render_hud(engine, 9)[0])

    def test_paused_help(self):
        engine = _engine()
        engine.toggle_pause()
        assert _plain(render_hud(engine, 0)[1]) == PAUSED_HELP


class TestRenderFrame:
    def test_full_redraw(self):
        frame = render_frame(_engine(), 0)
        assert frame.startswith(CLEAR_SCREEN)
        lines = _plain(frame).rstrip("\n").split("\n")
        assert len(lines) == 5 + GameConfig().screen_lines - GameConfig().rows

    def test_frame_fits_exact_size_terminal(self):
        engine = _engine()
        frame = render_frame(engine, 0)
        assert not frame.endswith("\n")
        # Lines touched are newlines + 1; they must not exceed the screen.
        assert frame.count("\n") < engine.config.screen_lines
        assert frame.count("\n") + 1 == engine.config.screen_lines

    def test_default_board_fits_required_lines(self):
        engine = GameEngine(seed=0)
        frame = render_frame(engine, 0)
        assert frame.count("\n") + 1 == engine.config.screen_lines

    def test_paused_frame_differs_only_in_status(self):
        engine = _engine()
        running = render_frame(engine, 0)
        engine.toggle_pause()
        paused = render_frame(engine, 0)
        assert running != paused
        assert running.replace(ACTIVE_HELP, PAUSED_HELP) == paused


class TestRenderSummary:
    def test_lost(self):
        engine = _engine()
        engine.status = GameStatus.LOST
        engine.score = 2
        text = _plain(render_summary(engine, 5))
        assert "Game over!" in text
        assert "Final score: 2" in text
        assert "Highscore: 5" in text

    def test_quit_with_new_highscore(self):
        engine = _engine()
        engine.quit()
        engine.score = 7
        text = _plain(render_summary(engine, 5))
        assert "Thanks for playing!" in text
        assert "New highscore!" in text
