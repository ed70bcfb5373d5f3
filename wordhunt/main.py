from __future__ import annotations

import argparse
import os
import random
import sys
from typing import Optional, Sequence

import pygame

from .app import App
from .config import CFG, reload_config
from .game import GameController
from .gpio import init_gpio
from .input_queue import InputQueue
from .logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordhunt",
        description="Find the letters of the target word before the grid reshuffles.",
    )
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--seed", type=int, help="Seed the random source for a reproducible game")
    parser.add_argument("--windowed", action="store_true", help="Start in a window even if the config says fullscreen")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return parser


# ============================== MAIN LOOP ============================== #
def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.config:
        reload_config(args.config)
    setup_logging(args.log_level or CFG["logging"]["level"], CFG["logging"].get("file"))

    os.environ.setdefault('SDL_VIDEO_CENTERED', "1")
    pygame.init()
    pygame.key.set_repeat(250, 60)
    screen = pygame.display.set_mode((1, 1))  # tiny placeholder; real size set next

    rng = random.Random(args.seed) if args.seed is not None else None
    game = GameController(rng=rng)
    app = App(screen, game)
    app._set_display_mode(bool(CFG["display"]["fullscreen"]) and not args.windowed)
    iq = InputQueue()
    _ = init_gpio(iq)

    with game:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit(); sys.exit(0)
                app.handle_event(event, iq)
            app.update(iq)
            app.draw()
            app.clock.tick(int(CFG["display"]["fps"]))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pygame.quit(); sys.exit(0)
