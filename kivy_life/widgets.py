from functools import partial
import logging

from kivy.clock import Clock
from kivy.graphics import Color, Rectangle
from kivy.properties import BooleanProperty, NumericProperty, ObjectProperty
from kivy.uix.widget import Widget

from kivy_life.constants import Colours
from kivy_life.gol import Generation, Point, life_animation


class LifeGrid(Widget):

    """Draws a generation with row 0 at the top, and lets touches seed it"""

    rows = NumericProperty(30)
    cols = NumericProperty(30)
    cell_size = NumericProperty(15)
    generation = ObjectProperty(None)
    evolving = BooleanProperty(False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._live_rectangles = []
        self.bind(pos=self.redraw, size=self.redraw, cell_size=self.redraw,
                  rows=self.init_cells, cols=self.init_cells)
        self.init_cells()

    def init_cells(self, *args):
        self.seed(())

    def seed(self, cells):
        """ Replace the board with the given live cells
        Arguments:
            cells; iterable; (x, y) pairs within rows and cols

        >>> grid = LifeGrid(rows=3, cols=4)
        >>> grid.seed([(3, 2)])
        >>> grid.generation
        Generation(live_cells=[Point(x=3, y=2)], x_max=4, y_max=3)
        """
        self.generation = Generation(cells, int(self.cols), int(self.rows))

    def on_generation(self, instance, generation):
        self.redraw()

    def toggle_cell(self, x, y):
        """ Flip a single cell between live and dead

        >>> grid = LifeGrid(rows=3, cols=3)
        >>> grid.toggle_cell(1, 1)
        >>> sorted(grid.generation.live_cells)
        [Point(x=1, y=1)]
        >>> grid.toggle_cell(1, 1)
        >>> len(grid.generation)
        0
        """
        self.seed(self.generation.live_cells ^ {Point(x, y)})

    def cell_coordinates(self, pos):
        """ Find the grid cell under a window position, or None

        >>> grid = LifeGrid(rows=2, cols=2, cell_size=10, pos=(0, 0), size=(20, 20))
        >>> grid.cell_coordinates((5, 15))
        Point(x=0, y=0)
        >>> grid.cell_coordinates((15, 5))
        Point(x=1, y=1)
        >>> grid.cell_coordinates((25, 5)) is None
        True
        """
        x = int((pos[0] - self.x) // self.cell_size)
        y = int((self.top - pos[1]) // self.cell_size)
        if 0 <= x < self.cols and 0 <= y < self.rows:
            return Point(x, y)
        return None

    def redraw(self, *args):
        """ Paint the board background and one rectangle per live cell

        >>> grid = LifeGrid(rows=4, cols=4)
        >>> grid.seed([(0, 0), (1, 1)])
        >>> len(grid._live_rectangles)
        2
        """
        if self.generation is None:
            return
        size = self.cell_size
        self.canvas.clear()
        self._live_rectangles = []
        with self.canvas:
            Color(*Colours.DEAD)
            Rectangle(pos=(self.x, self.top - self.rows * size),
                      size=(self.cols * size, self.rows * size))
            Color(*Colours.LIVE)
            for x, y in self.generation.live_cells:
                self._live_rectangles.append(Rectangle(
                    pos=(self.x + x * size, self.top - (y + 1) * size),
                    size=(size - 1, size - 1)))

    def evolve(self, iterations, speed, callback=None):
        """ Evolve the grid multiple times
        Arguments:
            iterations; int; Number of times to evolve
            speed; int; Generations per second
            callback; function; Function to call after evolving

        >>> import mock
        >>> grid = LifeGrid(rows=5, cols=5)
        >>> grid.seed([(2, 1), (2, 2), (2, 3)])
        >>> callback = mock.Mock()
        >>> with mock.patch("kivy_life.widgets.Clock") as clock:
        ...     clock.schedule_once.side_effect = lambda func, timeout: func()
        ...     grid.evolve(3, 10, callback)
        >>> sorted(grid.generation.live_cells)
        [Point(x=1, y=2), Point(x=2, y=2), Point(x=3, y=2)]
        >>> callback.call_count
        1
        >>> grid.evolving
        False
        """
        if iterations < 1:
            if callback is not None:
                callback()
            return
        anim = life_animation(self.generation)
        self.evolving = True

        def _update(dt=None, remaining=0):
            self.generation = next(anim)
            remaining -= 1
            if remaining:
                Clock.schedule_once(partial(_update, remaining=remaining),
                                    timeout=(1 / speed))
            else:
                self.evolving = False
                if callback is not None:
                    callback()

        _update(remaining=iterations)

    def on_touch_down(self, touch):
        """ Toggle the touched cell; ignore touches while evolving

        >>> import mock
        >>> grid = LifeGrid(rows=2, cols=2, cell_size=10, pos=(0, 0), size=(20, 20))
        >>> grid.on_touch_down(mock.Mock(pos=(5, 15)))
        True
        >>> sorted(grid.generation.live_cells)
        [Point(x=0, y=0)]
        >>> grid.evolving = True
        >>> grid.on_touch_down(mock.Mock(pos=(15, 15)))
        True
        >>> len(grid.generation)
        1
        """
        if self.evolving:
            return True
        if not self.collide_point(*touch.pos):
            return super().on_touch_down(touch)
        point = self.cell_coordinates(touch.pos)
        if point is None:
            logging.debug("Touch at {} is outside the grid".format(touch.pos))
            return False
        self.toggle_cell(*point)
        return True
