"""Highscore persistence: a single integer in a per-user file."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".term_snake_highscore"


class HighscoreStore:
    """Reads and writes the best score as a decimal integer.

    A missing or malformed file counts as a highscore of 0. Write failures
    are not handled here and propagate to the caller.
    """

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path).expanduser()
        # Record as read by load(); None means no record file existed.
        self.best: int | None = None
        self._loaded = False

    def exists(self) -> bool:
        """Return whether a record file is present."""
        return self.path.is_file()

    def load(self) -> int:
        """Read the stored highscore, or 0 if there is none.

        The value read here is what :meth:`record` later compares against.
        """
        self._loaded = True
        if not self.exists():
            self.best = None
            return 0
        text = self.path.read_text(errors="replace").strip()
        try:
            value = int(text)
        except ValueError:
            value = -1
        if value < 0:
            logger.warning("Ignoring unparseable highscore file %s", self.path)
            value = 0
        self.best = value
        return value

    def save(self, score: int) -> None:
        """Overwrite the record with *score*."""
        if score < 0:
            raise ValueError("Highscore must be >= 0.")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(f"{score}\n")
        logger.info("Highscore %d saved to %s", score, self.path)

    def record(self, score: int) -> int:
        """Persist *score* if it beats the record read by :meth:`load`.

        The file is not read again if :meth:`load` already ran. When no
        record existed the score is written unconditionally. Returns the
        resulting highscore.
        """
        if not self._loaded:
            self.load()
        if self.best is None or score > self.best:
            self.save(score)
            self.best = score
        return self.best
