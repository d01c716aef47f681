#!/usr/bin/env python

from collections import namedtuple
import logging
import operator

import numpy as np

from .exceptions import CellOutOfBoundsError

# The eight compass directions around a cell
OFFSETS = tuple((dx, dy)
                for dx in (-1, 0, 1) for dy in (-1, 0, 1)
                if (dx != 0 or dy != 0))


class Point(namedtuple("Point", ["x", "y"])):

    """A grid coordinate. Compared and hashed by value.

    >>> Point(1, 2) == Point(1, 2)
    True
    >>> len({Point(1, 2), Point(1, 2), Point(2, 1)})
    2
    """

    __slots__ = ()


def neighbours(point, x_max, y_max):
    """ Find the in-bounds neighbours of a point
    Arguments:
        point; Point; The cell whose neighbourhood to compute
        x_max; int; Exclusive upper bound for x
        y_max; int; Exclusive upper bound for y

    >>> sorted(neighbours(Point(0, 0), 10, 10))
    [Point(x=0, y=1), Point(x=1, y=0), Point(x=1, y=1)]
    >>> len(neighbours(Point(5, 5), 10, 10))
    8
    >>> len(neighbours(Point(0, 5), 10, 10))
    5
    >>> sorted(neighbours(Point(9, 9), 10, 10))
    [Point(x=8, y=8), Point(x=8, y=9), Point(x=9, y=8)]
    >>> neighbours(Point(0, 0), 1, 1)
    set()
    """
    x, y = point
    result = set()
    for dx, dy in OFFSETS:
        nx = x + dx
        ny = y + dy
        if 0 <= nx < x_max and 0 <= ny < y_max:
            result.add(Point(nx, ny))
    return result


class Generation:

    """An immutable snapshot of the board: live cells plus the grid bounds.

    Bounds are exclusive, so valid cells lie in [0, x_max) x [0, y_max).

    >>> gen = Generation({(1, 1), (2, 1)}, 4, 3)
    >>> len(gen)
    2
    >>> (1, 1) in gen
    True
    >>> Generation({(4, 0)}, 4, 3)
    Traceback (most recent call last):
    ...
    kivy_life.exceptions.CellOutOfBoundsError: Cells outside 4x3 grid: (4, 0)
    """

    __slots__ = ("_live_cells", "_x_max", "_y_max")

    def __init__(self, live_cells, x_max, y_max):
        x_max = operator.index(x_max)
        y_max = operator.index(y_max)
        if x_max < 0 or y_max < 0:
            raise ValueError("Grid bounds must be non-negative, got {}x{}"
                             .format(x_max, y_max))
        cells = frozenset(Point(*map(operator.index, cell))
                          for cell in live_cells)
        outside = [cell for cell in cells
                   if not (0 <= cell.x < x_max and 0 <= cell.y < y_max)]
        if outside:
            raise CellOutOfBoundsError(outside, x_max, y_max)
        self._live_cells = cells
        self._x_max = x_max
        self._y_max = y_max

    @property
    def live_cells(self):
        return self._live_cells

    @property
    def x_max(self):
        return self._x_max

    @property
    def y_max(self):
        return self._y_max

    def __len__(self):
        return len(self._live_cells)

    def __contains__(self, point):
        return point in self._live_cells

    def __iter__(self):
        return iter(self._live_cells)

    def __eq__(self, other):
        if not isinstance(other, Generation):
            return NotImplemented
        return (self._live_cells == other._live_cells
                and self._x_max == other._x_max
                and self._y_max == other._y_max)

    def __hash__(self):
        return hash((self._live_cells, self._x_max, self._y_max))

    def __repr__(self):
        return "{}(live_cells={}, x_max={}, y_max={})".format(
            self.__class__.__name__, sorted(self._live_cells),
            self._x_max, self._y_max)

    @classmethod
    def from_array(cls, X):
        """ Build a generation from a two-dimensional array
        Arguments:
            X; array_like; Board indexed [y, x]; truthy values are live

        >>> gen = Generation.from_array([[0, 1, 0], [0, 0, 1]])
        >>> sorted(gen.live_cells), gen.x_max, gen.y_max
        ([Point(x=1, y=0), Point(x=2, y=1)], 3, 2)
        """
        X = np.asarray(X)
        assert X.ndim == 2
        y_max, x_max = X.shape
        cells = (Point(int(x), int(y)) for y, x in np.argwhere(X))
        return cls(cells, x_max, y_max)

    def to_array(self):
        """ Return the board as a boolean array indexed [y, x]

        >>> Generation({(1, 0)}, 3, 2).to_array()
        array([[False,  True, False],
               [False, False, False]])
        """
        X = np.zeros((self._y_max, self._x_max), dtype=bool)
        for x, y in self._live_cells:
            X[y, x] = True
        return X


class GameState:

    """The simulation engine. Owns the current generation and replaces it
    wholesale on every step.

    >>> state = GameState(Generation({(1, 0), (1, 1), (1, 2)}, 3, 3))
    >>> sorted(state.step().live_cells)
    [Point(x=0, y=1), Point(x=1, y=1), Point(x=2, y=1)]
    >>> sorted(state.generation.live_cells)
    [Point(x=0, y=1), Point(x=1, y=1), Point(x=2, y=1)]
    """

    def __init__(self, generation):
        self._generation = generation

    @property
    def generation(self):
        return self._generation

    @property
    def x_max(self):
        return self._generation.x_max

    @property
    def y_max(self):
        return self._generation.y_max

    @property
    def live_cells(self):
        return self._generation.live_cells

    def points_to_evaluate(self):
        """Live cells plus every in-bounds neighbour of a live cell"""
        points = set(self.live_cells)
        for cell in self.live_cells:
            points |= neighbours(cell, self.x_max, self.y_max)
        return points

    def step(self):
        """ Advance by one generation, returning the new generation

        >>> GameState(Generation((), 5, 5)).step()
        Generation(live_cells=[], x_max=5, y_max=5)
        """
        live = self.live_cells
        survivors = set()
        for point in self.points_to_evaluate():
            count = len(neighbours(point, self.x_max, self.y_max) & live)
            if point in live:
                if count == 2 or count == 3:
                    survivors.add(point)
            elif count == 3:
                survivors.add(point)
        self._generation = Generation(survivors, self.x_max, self.y_max)
        logging.debug("Stepped to population {}".format(len(survivors)))
        return self._generation


def life_animation(generation):
    """Produce a Game of Life Animation

    Parameters
    ----------
    generation : Generation
        the starting board; it is not yielded itself

    >>> anim = life_animation(Generation({(0, 0), (0, 1), (1, 0), (1, 1)}, 4, 4))
    >>> next(anim) == next(anim)
    True
    """
    state = GameState(generation)

    def _iterate():
        while True:
            yield state.step()

    return _iterate()
