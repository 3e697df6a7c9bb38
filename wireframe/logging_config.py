"""
Logging Configuration
Routes the 'wireframe' loggers to stdout and, optionally, to a file.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Installs the handlers of a command line run.

    Args:
        verbose: Log at DEBUG, which traces every transformed edge.
        log_file: Optional path that receives a copy of the log.

    Raises OSError when log_file cannot be opened; nothing is changed then.
    """
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    logger = logging.getLogger("wireframe")
    # Repeated runs in one process must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
