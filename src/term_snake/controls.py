"""Keyboard decoding and the mapping from keys to game controls."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from term_snake.snake import Direction

if TYPE_CHECKING:
    from term_snake.engine import GameEngine

logger = logging.getLogger(__name__)

_ESC = "\x1b"
_CONTROL_KEYS = {
    "\x03": "ctrl+c",
    "\x04": "ctrl+d",
    " ": "space",
}
_ARROW_FINALS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


class KeyAction(enum.Enum):
    """What a key press means to the game."""

    QUIT = "quit"
    PAUSE = "pause"
    MOVE = "move"
    IGNORE = "ignore"


QUIT_KEYS = frozenset({"ctrl+c", "ctrl+d", "q", "escape"})
PAUSE_KEYS = frozenset({"space"})

# Arrow keys, WASD, and vi-style hjkl.
MOVE_KEYS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "k": Direction.UP,
    "j": Direction.DOWN,
    "h": Direction.LEFT,
    "l": Direction.RIGHT,
}


def split_keys(data: str) -> tuple[list[str], str]:
    """Split raw terminal input into key names and an unfinished remainder.

    Arrow keys arrive as CSI (``ESC [ A``) or SS3 (``ESC O A``) sequences;
    modifier parameters such as ``ESC [ 1 ; 5 A`` are accepted and dropped.
    An ESC followed by anything but ``[`` or ``O`` is the Escape key itself.
    Other complete escape sequences are discarded. A sequence cut off at the
    end of *data*, including a trailing lone ESC, is returned as the
    remainder so the rest of it can arrive with the next read.
    """
    keys: list[str] = []
    i = 0
    n = len(data)
    while i < n:
        ch = data[i]
        if ch != _ESC:
            keys.append(_CONTROL_KEYS.get(ch, ch.lower()))
            i += 1
            continue

        if i + 1 >= n:
            return keys, data[i:]
        introducer = data[i + 1]
        if introducer not in ("[", "O"):
            keys.append("escape")
            i += 1
            continue

        # Skip parameter and intermediate bytes up to the final byte.
        j = i + 2
        while j < n and introducer == "[" and "\x20" <= data[j] <= "\x3f":
            j += 1
        if j >= n:
            return keys, data[i:]
        name = _ARROW_FINALS.get(data[j])
        if name is not None:
            keys.append(name)
        i = j + 1
    return keys, ""


def decode_keys(data: str) -> list[str]:
    """Decode a complete chunk of input into key names.

    A trailing lone ESC is the Escape key; a truncated sequence is dropped.
    """
    keys, rest = split_keys(data)
    if rest == _ESC:
        keys.append("escape")
    return keys


def classify(key: str) -> tuple[KeyAction, Direction | None]:
    """Return the action for *key* and, for movement keys, its direction."""
    if key in QUIT_KEYS:
        return KeyAction.QUIT, None
    if key in PAUSE_KEYS:
        return KeyAction.PAUSE, None
    direction = MOVE_KEYS.get(key)
    if direction is not None:
        return KeyAction.MOVE, direction
    return KeyAction.IGNORE, None


class InputHandler:
    """Applies key presses to an engine's queue, pause flag, and quit state.

    An escape sequence split across reads is held back until the next
    :meth:`feed`. A held lone ESC only counts as the Escape key once
    :meth:`flush` reports that no more input followed it.
    """

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine
        self._partial = ""

    def handle_key(self, key: str) -> KeyAction:
        """Apply a single decoded key and return its action."""
        action, direction = classify(key)
        if action is KeyAction.QUIT:
            self.engine.quit()
        elif action is KeyAction.PAUSE:
            self.engine.toggle_pause()
        elif action is KeyAction.MOVE:
            if not self.engine.enqueue_direction(direction):
                logger.debug("Dropped %s while not running.", key)
        return action

    def feed(self, data: str) -> list[KeyAction]:
        """Decode a chunk of raw input and apply every complete key in order.

        Keys after a quit are not applied.
        """
        keys, self._partial = split_keys(self._partial + data)
        actions: list[KeyAction] = []
        for key in keys:
            action = self.handle_key(key)
            actions.append(action)
            if action is KeyAction.QUIT:
                self._partial = ""
                break
        return actions

    def flush(self) -> list[KeyAction]:
        """Resolve input held back from the last read after a quiet period."""
        actions = [self.handle_key(key) for key in decode_keys(self._partial)]
        self._partial = ""
        return actions
