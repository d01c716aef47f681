class LifeError(Exception):

    pass


class InvalidCellFormatError(LifeError, ValueError):

    """A cell specification that is not a pair of non-negative integers"""

    def __init__(self, token):
        super().__init__("Invalid cell format: {!r}".format(token))
        self.token = token


class CellOutOfBoundsError(LifeError, ValueError):

    def __init__(self, cells, x_max, y_max):
        cells = sorted(cells)
        super().__init__("Cells outside {}x{} grid: {}".format(
            x_max, y_max,
            ", ".join("({}, {})".format(x, y) for x, y in cells)))
        self.cells = cells
        self.x_max = x_max
        self.y_max = y_max
