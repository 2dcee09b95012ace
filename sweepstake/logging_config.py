"""Logging setup for the sweepstake command line."""

import logging
import sys
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(name)s %(levelname)s %(message)s'


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Route the ``sweepstake`` logger hierarchy to stderr and, optionally, a file.

    Draw results and standings go to stdout, so log lines stay on stderr.
    The console shows warnings only unless ``verbose`` is set. A log file,
    when given, records everything down to DEBUG so a match day can be
    replayed point by point afterwards. Calling this again replaces the
    handlers from the previous call.

    Args:
        verbose: Show debug output on the console
        log_file: Optional file that receives the full debug log

    Returns:
        The configured ``sweepstake`` logger
    """
    logger = logging.getLogger('sweepstake')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_level = logging.DEBUG if verbose else logging.WARNING
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    return logger
