#!/usr/bin/env python3
"""Play Micemen in the terminal, two players sharing one keyboard."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from micemen import (
    ConfigError,
    GameConfig,
    GameEngine,
    KeyboardHandler,
    MicemenGame,
    TerminalRenderer,
    load_config,
)

DEFAULT_CONFIG = "configs/default.yaml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Micemen in the terminal.")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG, help="YAML game configuration")
    parser.add_argument("--seed", type=int, help="Seed for the board layout")
    parser.add_argument("--width", type=int)
    parser.add_argument("--height", type=int)
    parser.add_argument("--mice-per-player", type=int)
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=str, help="Write log records here instead of stderr")
    return parser


def build_config(args: argparse.Namespace) -> GameConfig:
    cfg = load_config(args.config) if args.config else GameConfig()
    return cfg.with_overrides(
        width=args.width,
        height=args.height,
        mice_per_player=args.mice_per_player,
    )


def configure_logging(level: str, log_file: Optional[str]) -> None:
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(level=level, filename=log_file)
    else:
        logging.basicConfig(level=level)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        config = build_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    game = MicemenGame(config, seed=args.seed)
    renderer = TerminalRenderer(use_color=not args.no_color)
    engine = GameEngine(game, renderer, KeyboardHandler())
    engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
