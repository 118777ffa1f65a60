"""A small animation that cycles three pixels through colour ramps."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterator

from .color import Color
from .window import Window


def cycle_colors(frames: int | None = None) -> Iterator[tuple[Color, Color, Color]]:
    """Yield (red, green, blue) for each frame, each ramp stepping by one."""
    red = Color(128, 1, 1)
    green = Color(1, 128, 1)
    blue = Color(1, 1, 128)
    counter = itertools.count() if frames is None else range(frames)
    for _ in counter:
        red = red.shifted(1, 0, 0)
        green = green.shifted(0, 1, 0)
        blue = blue.shifted(0, 0, 1)
        yield red, green, blue


def main(argv: list[str] | None = None) -> int:
    """Run the animation until interrupted or the frame count runs out."""
    parser = argparse.ArgumentParser(prog="halfblock")
    parser.add_argument("--frames", type=int, default=None)
    parser.add_argument("--columns", type=int, default=None)
    parser.add_argument("--rows", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        with Window(sys.stdout, columns=args.columns, rows=args.rows) as window:
            for red, green, blue in cycle_colors(args.frames):
                window.put_pixel(0, 0, red)
                window.put_pixel(0, 1, green)
                window.put_pixel(1, 0, blue)
                window.refresh()
    except KeyboardInterrupt:
        return 0
    except Exception as err:  # report any failure the way the loop does
        print(err)
    return 0


if __name__ == "__main__":
    sys.exit(main())