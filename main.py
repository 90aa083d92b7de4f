"""
main.py — Bootstrap

1. Load tuning
2. Create the session world (clock, board, crabs)
3. Push the town scene
4. Run
"""

from core import tuning
from core import constants as C
from core.app import App
from core.bootstrap import create_session
from scenes.town_scene import TownScene


def main():
    tuning.load()
    world = create_session()
    app = App(world, title="Crab Town", width=960, height=640,
              fps=int(tuning.get("clock", "fps", C.FPS)))
    app.push_scene(TownScene())
    app.run()


if __name__ == "__main__":
    main()
