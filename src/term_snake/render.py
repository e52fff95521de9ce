"""Text rendering of the board and HUD with ANSI colors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from term_snake.engine import GameStatus
from term_snake.grid import CellType
from term_snake.snake import Direction

if TYPE_CHECKING:
    from term_snake.engine import GameEngine

CLEAR_SCREEN = "\x1b[2J\x1b[H"
RESET = "\x1b[0m"
BOLD = "\x1b[1m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
CYAN = "\x1b[36m"

CELL_GLYPHS: dict[CellType, str] = {
    CellType.EMPTY: ".",
    CellType.SNAKE: f"{CYAN}o{RESET}",
    CellType.FOOD: f"{YELLOW}*{RESET}",
    CellType.SUPERFOOD: f"{RED}@{RESET}",
}

HEAD_GLYPHS: dict[Direction, str] = {
    Direction.UP: f"{CYAN}^{RESET}",
    Direction.DOWN: f"{CYAN}v{RESET}",
    Direction.LEFT: f"{CYAN}<{RESET}",
    Direction.RIGHT: f"{CYAN}>{RESET}",
}

ACTIVE_HELP = "arrows/wasd/hjkl to move, space to pause, q to quit"
PAUSED_HELP = "PAUSED - space to resume, q to quit"


def render_board(engine: GameEngine) -> list[str]:
    """Return one string per board row."""
    head = engine.snake.head
    head_glyph = HEAD_GLYPHS[engine.snake.direction]
    lines = []
    for y, row in enumerate(engine.grid.cells.tolist()):
        glyphs = [CELL_GLYPHS[CellType(cell)] for cell in row]
        if y == head.y:
            glyphs[head.x] = head_glyph
        lines.append("".join(glyphs))
    return lines


def render_hud(engine: GameEngine, highscore: int) -> list[str]:
    """Return the score line and the status/help line."""
    best = max(engine.score, highscore)
    help_text = PAUSED_HELP if engine.paused else ACTIVE_HELP
    return [
        f"{BOLD}Score: {engine.score}   Highscore: {best}{RESET}",
        f"{BOLD}{help_text}{RESET}",
    ]


def render_frame(engine: GameEngine, highscore: int) -> str:
    """Render a full frame, clearing the screen first.

    Every frame is a complete redraw so variable-length color sequences
    never leave stale characters behind. The frame ends on its last line
    so a terminal of exactly the board and HUD height never scrolls.
    """
    lines = render_board(engine)
    lines.append("")
    lines.extend(render_hud(engine, highscore))
    return CLEAR_SCREEN + "\n".join(lines)


def render_summary(engine: GameEngine, previous_best: int) -> str:
    """Return the text printed after the game ends."""
    if engine.status == GameStatus.LOST:
        headline = "Game over!"
    else:
        headline = "Thanks for playing!"
    lines = [
        f"{BOLD}{headline}{RESET}",
        f"Final score: {engine.score}",
    ]
    if engine.score > previous_best:
        lines.append(f"{YELLOW}New highscore!{RESET}")
    else:
        lines.append(f"Highscore: {previous_best}")
    return "\n".join(lines) + "\n"
