"""Flat-array interface to the engine for host environments that exchange
plain numeric buffers rather than Python objects."""

import numpy as np

from kivy_life.gol import GameState, Generation


class Life:

    """A board that hands back its live cells as interleaved x, y values

    >>> life = Life([(1, 0), (1, 1), (1, 2)], 3, 3)
    >>> life.tick()
    array([0, 1, 1, 1, 2, 1], dtype=uint32)
    >>> life.tick()
    array([1, 0, 1, 1, 1, 2], dtype=uint32)
    """

    def __init__(self, initial, width, height):
        self._state = GameState(Generation(initial, width, height))

    @property
    def generation(self):
        return self._state.generation

    def tick(self):
        generation = self._state.step()
        cells = sorted(generation.live_cells)
        return np.array(cells, dtype=np.uint32).reshape(-1)
