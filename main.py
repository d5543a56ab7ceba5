"""Entry point for the Sine Explorer application.

Animates y = A sin(omega x + phi) + B against the reference y = sin(x)
while the four parameters are adjusted from the control panel.
"""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from app_window import AppWindow
from sinewave.animation import AnimationLoop


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Interactive sinusoid explorer",
    )
    parser.add_argument(
        "--fps", type=int, default=AnimationLoop.FPS,
        help=f"Frames per second (default {AnimationLoop.FPS})",
    )
    parser.add_argument(
        "--no-reference", action="store_true",
        help="Start with the y = sin(x) reference curve hidden",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def main():
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    app = QApplication(sys.argv[:1])
    window = AppWindow(fps=args.fps, show_reference=not args.no_reference)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
