import kivy
kivy.require('2.0.0')

from kivy.app import App
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button

from kivy_life.constants import Patterns
from kivy_life.utils import pattern_cells
from kivy_life.widgets import LifeGrid


class ControlBar(BoxLayout):

    """Step, Run and Clear buttons driving a LifeGrid"""

    def __init__(self, grid, app, **kwargs):
        kwargs.setdefault("size_hint_y", None)
        kwargs.setdefault("height", 40)
        super().__init__(**kwargs)
        self.grid = grid
        self.app = app
        self.buttons = []
        for text, handler in (("Step", self.step),
                              ("Run", self.run),
                              ("Clear", self.clear)):
            button = Button(text=text)
            button.bind(on_press=handler)
            self.add_widget(button)
            self.buttons.append(button)

    def disable_interaction(self):
        for button in self.buttons:
            button.disabled = True

    def enable_interaction(self):
        for button in self.buttons:
            button.disabled = False

    def step(self, *args):
        self.grid.evolve(1, self.app.speed)

    def run(self, *args):
        self.disable_interaction()
        self.grid.evolve(self.app.iterations_per_run, self.app.speed,
                         callback=self.enable_interaction)

    def clear(self, *args):
        self.grid.init_cells()


class GameOfLifeApp(App):

    title = "Game of Life"

    def build_config(self, config):
        config.setdefaults("game", {
            "speed": 10,
            "iterations_per_run": 50,
        })
        config.setdefaults("grid", {
            "rows": 30,
            "cols": 30,
            "cell_size": 15,
        })

    def build(self):
        config = self.config

        # Game
        self.speed = config.getint("game", "speed")
        self.iterations_per_run = config.getint("game", "iterations_per_run")

        # Grid
        self.grid = LifeGrid(
            rows=config.getint("grid", "rows"),
            cols=config.getint("grid", "cols"),
            cell_size=config.getint("grid", "cell_size"),
        )

        root = BoxLayout(orientation="vertical")
        root.add_widget(self.grid)
        root.add_widget(ControlBar(self.grid, self))
        return root

    def on_start(self):
        self.grid.seed(pattern_cells(Patterns.GLIDER))


def main():
    GameOfLifeApp().run()


if __name__ == '__main__':
    main()
