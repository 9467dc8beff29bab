import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Attach one stdout handler to the root logger; later calls only adjust the level."""
    if isinstance(level, str):
        level = level.upper()
    root = logging.getLogger()
    root.setLevel(level)
    if any(getattr(h, "_taskboard", False) for h in root.handlers):
        return
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    h._taskboard = True  # marks our handler so create_app() can run repeatedly
    root.addHandler(h)
