"""Command-line entry point for Term Snake."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    from term_snake.highscore import DEFAULT_PATH

    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play Snake in the terminal.",
        epilog=(
            "Controls: arrows, WASD or hjkl to move; space to pause; "
            "q, Ctrl+C or Ctrl+D to quit."
        ),
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for food placement, for reproducible games.",
    )
    parser.add_argument(
        "--highscore-file", type=str, default=str(DEFAULT_PATH),
        help="Where the highscore is stored (default: %(default)s).",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file instead of stderr.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level used with --log-file (default: %(default)s).",
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    # stdout is the game screen; only warnings go to stderr unless a file is given.
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format=_LOG_FORMAT,
        )
    else:
        logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    from term_snake.config import GameConfig
    from term_snake.engine import GameEngine
    from term_snake.highscore import HighscoreStore
    from term_snake.loop import GameLoop
    from term_snake.render import render_summary
    from term_snake.terminal import Terminal, TerminalTooSmallError, check_size

    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    config = GameConfig()
    try:
        check_size(config.columns, config.screen_lines)
    except TerminalTooSmallError as exc:
        print(exc)  # noqa: T201
        return 1

    store = HighscoreStore(args.highscore_file)
    previous_best = store.load()
    engine = GameEngine(config, seed=args.seed)

    with Terminal() as terminal:
        GameLoop(engine, terminal, highscore=previous_best).run()

    best = store.record(engine.score)
    logger.info("Final score %d, highscore %d.", engine.score, best)
    print(render_summary(engine, previous_best), end="")  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
