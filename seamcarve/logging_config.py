"""
Logging setup for the seamcarve command line.

Library modules only create loggers under the ``seamcarve`` namespace;
handlers are attached here, once per run.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route seamcarve log records to stderr and, optionally, to a file.

    Calling this again replaces the previous handlers rather than adding
    to them, so each record is emitted once.

    Args:
        level: Level for the console handler (e.g. logging.DEBUG)
        log_file: If given, every record down to DEBUG is also written
            here, overwriting any previous log.

    Returns:
        The configured 'seamcarve' logger
    """
    logger = logging.getLogger("seamcarve")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    # stdout is reserved for the CLI's own messages
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(level)

    return logger
