"""
main.py — Bootstrap

1. Load tuning constants
2. Snapshot them into a ShowConfig
3. Create the app
4. Push the fireworks scene
5. Run
"""

from core import tuning
from core.app import App
from core.config import ShowConfig
from scenes.fireworks_scene import FireworksScene


def main():
    tuning.load()
    config = ShowConfig.from_tuning()
    disp = config.display

    app = App(title=disp.title, width=disp.width, height=disp.height, fps=disp.fps)
    app.push_scene(FireworksScene(config))
    app.run()


if __name__ == "__main__":
    main()
