import sys

from kivy_life.constants import CLEAR_SCREEN, GLYPHS, Modes


def render(generation, mode=Modes.ASCII):
    """ Draw a generation as text
    Arguments:
        generation; Generation; The board to draw
        mode; str; One of the keys of constants.GLYPHS

    >>> from kivy_life.gol import Generation
    >>> render(Generation({(0, 0), (2, 1)}, 3, 2)).splitlines()
    ['O . . ', '. . O ', '']
    """
    try:
        live, dead = GLYPHS[mode]
    except KeyError:
        raise ValueError("Unknown render mode {!r}".format(mode))
    cells = generation.to_array()
    lines = ["".join(live if cell else dead for cell in row) + "\n"
             for row in cells]
    lines.append("\n")
    return "".join(lines)


def clear_screen(stream=None):
    if stream is None:
        stream = sys.stdout
    stream.write(CLEAR_SCREEN)
    stream.flush()
