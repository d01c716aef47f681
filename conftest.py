import importlib.util
import os

# Kivy parses sys.argv on import unless told not to
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")

collect_ignore = ["main.py", "doctests.py"]
if importlib.util.find_spec("kivy") is None:
    collect_ignore += [
        "kivy_life/app.py",
        "kivy_life/widgets.py",
        "tests/test_app.py",
    ]
