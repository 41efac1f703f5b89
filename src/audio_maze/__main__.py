from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .app import run_console
from .config import GameConfig
from .exceptions import InvalidConfiguration
from .logging_config import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="audio-maze",
        description="Audio Maze - turn-based maze adventure played by narration",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default config")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible mazes")
    parser.add_argument("--maze-size", type=int, default=None, help="Maze size (odd, >= 5)")
    parser.add_argument("--show-map", action="store_true", help="Print the maze after every command")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    configure_logging(level)

    try:
        config = GameConfig.from_env(GameConfig.load(args.config))
        if args.maze_size is not None:
            config = GameConfig.from_dict({"maze_size": args.maze_size}, base=config)
        config = config.validated()
    except (InvalidConfiguration, FileNotFoundError) as e:
        parser.error(str(e))

    return run_console(config=config, seed=args.seed, show_map=args.show_map)


if __name__ == "__main__":
    sys.exit(main())
