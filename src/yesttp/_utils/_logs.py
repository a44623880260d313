import logging
import sys

from .constants import LOGGER_NAME

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def setup_logging(should_debug: bool = False) -> None:
    """Configure the library logger.

    Attaches a single stream handler to the ``yesttp`` logger. Calling it
    again does not stack handlers. Debug only ever turns on: once a client
    asked for it, later non-debug clients leave the level alone.
    """
    if not any(getattr(h, "_yesttp_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        handler._yesttp_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    # a non-debug client must not switch off debug output another client enabled
    if should_debug:
        logger.setLevel(logging.DEBUG)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
