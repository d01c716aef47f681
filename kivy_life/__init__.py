from kivy_life.gol import GameState, Generation, Point, neighbours

__version__ = "0.1.0"
