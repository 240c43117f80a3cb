import logging
import sys

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"


def setup_logging(level="INFO"):
    """Attach a console handler to the ``tasktracker`` logger.

    Safe to call more than once (the app lifespan runs on every TestClient
    start); the handler is only installed the first time.
    """
    logger = logging.getLogger("tasktracker")
    logger.setLevel(level)
    if any(getattr(h, "_tasktracker", False) for h in logger.handlers):
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._tasktracker = True
    logger.addHandler(handler)
    return logger
