"""Entry point kept minimal by delegating to Engine.

    python src/main.py              # the cat runs away from the cursor
    python src/main.py --mode follow
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from avoider.strategies import STRATEGIES
from config import DEFAULT_MODE, MUTE, SHOW_HUD


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="mouse-avoider",
        description="A cat that runs away from (or chases) your mouse. Click to meow.",
    )
    ap.add_argument(
        "--mode",
        choices=sorted(STRATEGIES),
        default=DEFAULT_MODE,
        help="evade: hop away when the cursor touches the cat; follow: stick to the cursor",
    )
    ap.add_argument(
        "--mute",
        action="store_true",
        default=MUTE,
        help="Do not play the meow on click",
    )
    ap.add_argument(
        "--hud",
        action="store_true",
        default=SHOW_HUD,
        help="Show mode and FPS in the top-left corner",
    )
    return ap


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    # Importing the engine loads OpenGL; keep --help usable without a GL driver
    from core.engine import Engine

    Engine(args.mode, mute=args.mute, show_hud=args.hud).run()


if __name__ == "__main__":
    main()
