import logging
from typing import Optional


LOGGER_NAME = 'killer_chase'


def setup_logging(log_file: Optional[str] = None, level: str = 'INFO') -> logging.Logger:
    """
    Set up the game logger.

    The terminal belongs to the game while it runs, so records only ever go
    to a file. Without a log file the logger is silenced.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler = logging.FileHandler(log_file, mode='w')
        handler.setFormatter(formatter)
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))

    # Keep game records out of whatever the root logger prints to the screen
    logger.propagate = False
    return logger
