"""Command line front end: place points, optionally move them at random, save a PGM."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Sequence

from threepointcircle.canvas import DEFAULT_HEIGHT, DEFAULT_WIDTH
from threepointcircle.editor import DEFAULT_RADIUS, DEFAULT_THICKNESS, CircleEditor

LOOP_REPEATS = 10
LOOP_INTERVAL = 0.5


def _point(text: str) -> tuple[int, int]:
    try:
        x_text, y_text = text.split(",")
        return int(x_text), int(y_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from None


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="threepointcircle",
        description="Draw three points and the circle passing through them.",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--radius", type=int, default=DEFAULT_RADIUS,
                        help="radius of the point markers")
    parser.add_argument("--thickness", type=int, default=DEFAULT_THICKNESS,
                        help="line thickness of the circle")
    parser.add_argument("--click", type=_point, action="append", default=[],
                        metavar="X,Y", help="place a point (repeatable)")
    parser.add_argument("--random", type=int, default=0, metavar="N",
                        help="move the points to random places N times")
    parser.add_argument("--interval", type=float, default=0.0,
                        help="seconds to wait after each random move")
    parser.add_argument("--loop", action="store_true",
                        help=f"move the points at random {LOOP_REPEATS} times, "
                             f"{LOOP_INTERVAL}s apart")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", "-o", default=None, help="write the image as PGM")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = parse_args(argv)
    editor = CircleEditor(args.width, args.height, args.radius, args.thickness,
                          random.Random(args.seed))
    for x, y in args.click:
        editor.press(x, y)
        editor.release()

    moves = [(args.random, args.interval)]
    if args.loop:
        moves.append((LOOP_REPEATS, LOOP_INTERVAL))
    for repeats, interval in moves:
        for _ in range(repeats):
            editor.randomize()
            if interval > 0:
                time.sleep(interval)

    if args.output:
        with open(args.output, "wb") as handle:
            handle.write(editor.canvas.to_pgm())

    for x, y, text in editor.labels():
        sys.stdout.write(f"{text} at {x},{y}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())