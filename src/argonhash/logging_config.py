"""Opt-in log output for the argonhash loggers.

The package never configures the root logger. Applications that want to see
argonhash's messages (parameter substitution, derivation costs, random source
failures) call configure_logging() once at startup.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "argonhash"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Handler:
    """Attach a stream handler to the argonhash logger and set its level.

    Calling it again replaces the handler from the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_argonhash_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    handler._argonhash_handler = True
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
