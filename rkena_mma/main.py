#!/usr/bin/env python3
"""
RKENA MMA CHAMPIONSHIP - Arcade MMA Fighting Game
=================================================
Entry point untuk game.

Jalankan: rkena-mma  (atau python -m rkena_mma.main)
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from rkena_mma import __version__
from rkena_mma.config import GAME_TITLE

CONTROLS = """\
Controls:
  Left / Right  - Move
  Z             - Punch
  X             - Kick
  C             - Block
  V / Down      - Takedown
  M             - Mute
  F1            - Hitbox overlay
  Enter         - Select
  Escape        - Back / Quit
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rkena-mma",
        description="RKENA MMA Championship - Arcade MMA Fighting Game",
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Start with sound muted.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        # String default ikut dikonversi oleh type=int
        default=os.environ.get("RKENA_SEED", "").strip() or None,
        help="Seed AI and effects randomness (default: $RKENA_SEED).",
    )
    parser.add_argument(
        "--debug-hitboxes",
        action="store_true",
        help="Show hitbox/hurtbox overlay (toggle in game with F1).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Verbose logging.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point utama"""
    options = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if options.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"\n{'='*60}")
    print(f"  {GAME_TITLE}  v{__version__}")
    print(f"{'='*60}\n")
    print("Memuat game...")
    if options.seed is not None:
        print(f"Seed: {options.seed}")

    from rkena_mma.core.game import Game

    game = Game(
        seed=options.seed,
        mute=options.mute,
        debug_hitboxes=options.debug_hitboxes,
    )

    print("\nGame siap! ENTER = Fight | ESC = Keluar\n")

    try:
        game.run()
    except KeyboardInterrupt:
        print("\nGame dihentikan oleh user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
