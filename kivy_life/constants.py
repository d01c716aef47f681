class Modes:
    ASCII = "ascii"
    UNICODE = "unicode"


# (live, dead) glyph pairs, one pair per column
GLYPHS = {
    Modes.ASCII: ("O ", ". "),
    Modes.UNICODE: ("● ", "○ "),
}

# ANSI: erase display, cursor home
CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"


class Patterns:
    # Rows are y, columns are x
    BLOCK = [[True, True], [True, True]]
    BEEHIVE = [[False, True, True, False],
               [True, False, False, True],
               [False, True, True, False]]
    BLINKER = [[True, True, True]]
    GLIDER = [[False, True, False], [False, False, True], [True, True, True]]


PATTERNS = {
    "block": Patterns.BLOCK,
    "beehive": Patterns.BEEHIVE,
    "blinker": Patterns.BLINKER,
    "glider": Patterns.GLIDER,
}


class Colours:
    LIVE = (1.0, 1.0, 1.0, 1)
    DEAD = (0.15, 0.15, 0.15, 1)
