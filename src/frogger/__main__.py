from __future__ import annotations

import argparse
import logging
import sys

import pygame

from .constants import MAX_FRAME_DT, RENDER_FPS
from .frogger_client import FroggerClient


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="frogger", description="Frogger-style crossing game")
    parser.add_argument("--assets", default="assets", help="Directory holding images/ and sounds/.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for enemy and gem placement.")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Frame rate cap.")
    parser.add_argument(
        "--max-dt",
        type=float,
        default=MAX_FRAME_DT,
        help="Largest time step a single frame may advance, in seconds (0 disables the clamp).",
    )
    parser.add_argument("--mute", action="store_true", help="Disable music and sound effects.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...).")
    parser.add_argument(
        "--smoke",
        action="store_true",
        help="Run briefly and exit (for quick verification).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        client = FroggerClient(
            assets_dir=args.assets,
            seed=args.seed,
            fps=args.fps,
            max_dt=args.max_dt if args.max_dt > 0 else None,
            sound=not args.mute,
        )
    except pygame.error as e:
        logging.getLogger("frogger").error("Could not open the game window: %s", e)
        sys.exit(1)

    print("Arrows move, Space pauses, Enter starts, Esc quits.")
    client.run(duration=2.0 if args.smoke else None)


if __name__ == "__main__":
    main()
