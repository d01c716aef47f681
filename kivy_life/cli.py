import argparse
import logging
import sys
import time

from kivy_life.constants import PATTERNS, Modes
from kivy_life.exceptions import LifeError
from kivy_life.gol import GameState, Generation
from kivy_life.render import clear_screen, render
from kivy_life.utils import parse_cells, parse_point, pattern_cells


def build_parser():
    parser = argparse.ArgumentParser(
        prog="life", description="Run Conway's Game of Life in the terminal")
    parser.add_argument("-w", "--width", type=int, required=True,
                        help="grid width")
    parser.add_argument("-H", "--height", type=int, required=True,
                        help="grid height")
    parser.add_argument("-c", "--cells", default="",
                        help='initial live cells in format "x1,y1;x2,y2;..."')
    parser.add_argument("-p", "--pattern", choices=sorted(PATTERNS),
                        help="named pattern to add to the initial cells")
    parser.add_argument("-o", "--offset", default="0,0",
                        help="top-left corner of --pattern as x,y")
    parser.add_argument("-m", "--mode", default=Modes.ASCII,
                        choices=[Modes.ASCII, Modes.UNICODE],
                        help="output mode")
    parser.add_argument("-g", "--generations", type=int, default=1,
                        help="number of generations to run")
    parser.add_argument("-d", "--delay", type=int, default=100,
                        help="delay between generations in milliseconds")
    parser.add_argument("--no-clear", action="store_true",
                        help="do not clear the screen between generations")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log each step")
    return parser


def initial_generation(args):
    """ Build the starting generation from parsed arguments
    Raises LifeError for malformed or out-of-bounds cells.

    >>> parser = build_parser()
    >>> args = parser.parse_args(["-w", "5", "-H", "5", "-c", "0,0",
    ...                           "-p", "blinker", "-o", "1,2"])
    >>> sorted(initial_generation(args).live_cells)
    [Point(x=0, y=0), Point(x=1, y=2), Point(x=2, y=2), Point(x=3, y=2)]
    """
    cells = parse_cells(args.cells)
    if args.pattern:
        cells |= pattern_cells(PATTERNS[args.pattern],
                               offset=parse_point(args.offset))
    return Generation(cells, args.width, args.height)


def main(argv=None, stream=None):
    if stream is None:
        stream = sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    if args.width < 0 or args.height < 0:
        parser.error("width and height must be non-negative")
    try:
        generation = initial_generation(args)
    except LifeError as e:
        parser.error(str(e))

    state = GameState(generation)
    stream.write(render(generation, args.mode))
    for index in range(args.generations):
        if not args.no_clear:
            clear_screen(stream)
        stream.write("Generation {}:\n".format(index + 1))
        stream.write(render(state.step(), args.mode))
        stream.flush()
        if args.delay > 0:
            time.sleep(args.delay / 1000)
    return 0


if __name__ == "__main__":
    sys.exit(main())
