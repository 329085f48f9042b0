from __future__ import annotations

import logging
from typing import IO

_HANDLER_NAME = "barparse-stream"


def setup_logging(
    level: str | int = logging.DEBUG, stream: IO[str] | None = None
) -> logging.Logger:
    """Route ``barparse`` log records to a stream (stderr by default).

    Calling this more than once only updates the level and stream; handlers are
    not stacked.
    """
    logger = logging.getLogger("barparse")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(stream)
    stream_handler.set_name(_HANDLER_NAME)
    formatter = logging.Formatter("%(levelname)-8s %(name)s: %(message)s")
    stream_handler.setFormatter(formatter)

    logger.addHandler(stream_handler)
    logger.setLevel(level)
    return logger
