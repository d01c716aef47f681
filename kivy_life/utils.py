import numpy as np

from kivy_life.exceptions import InvalidCellFormatError
from kivy_life.gol import Point


def parse_point(token):
    """ Parse a single "x,y" cell specification

    >>> parse_point("3,4")
    Point(x=3, y=4)
    >>> parse_point(" 3 , 4 ")
    Point(x=3, y=4)
    >>> parse_point("3")
    Traceback (most recent call last):
    ...
    kivy_life.exceptions.InvalidCellFormatError: Invalid cell format: '3'
    >>> parse_point("-1,2")
    Traceback (most recent call last):
    ...
    kivy_life.exceptions.InvalidCellFormatError: Invalid cell format: '-1,2'
    """
    parts = token.split(",")
    if len(parts) != 2:
        raise InvalidCellFormatError(token)
    coords = []
    for part in parts:
        part = part.strip()
        if not part.isdecimal():
            raise InvalidCellFormatError(token)
        coords.append(int(part))
    return Point(*coords)


def parse_cells(spec):
    """ Parse a semicolon-separated list of cells
    Arguments:
        spec; str; eg. "1,0;2,1;0,2"

    >>> sorted(parse_cells("1,0;2,1;;1,0"))
    [Point(x=1, y=0), Point(x=2, y=1)]
    >>> parse_cells("")
    set()
    """
    return {parse_point(token) for token in spec.split(";") if token.strip()}


def pattern_cells(pattern, offset=(0, 0)):
    """ Convert a pattern matrix into the cells it covers
    Arguments:
        pattern; array_like; Rows are y, columns are x
        offset; tuple; (x, y) of the pattern's top-left corner

    >>> sorted(pattern_cells([[True, True, True]], offset=(1, 2)))
    [Point(x=1, y=2), Point(x=2, y=2), Point(x=3, y=2)]
    """
    pattern = np.asarray(pattern, dtype=bool)
    off_x, off_y = offset
    return {Point(int(x) + off_x, int(y) + off_y)
            for y, x in np.argwhere(pattern)}
