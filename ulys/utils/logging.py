"""Gives out a production-ready logger.

This module provides:
- setup_logging: a function to point a logger at the console and, optionally, a rotating file
"""

import logging
import os
from logging.handlers import RotatingFileHandler


def setup_logging(logger, debug=False, log_dir=None):
    """Sets a logger to write to the std stream and, if asked, to a .log file.

    Args:
        logger (logging.Logger): The logger to configure, e.g. ``app.logger``
        debug (bool): Log DEBUG records too
        log_dir (str): A directory for ``ulys.log``, no file logging if empty
    """

    log_level = logging.DEBUG if debug else logging.INFO

    logger.handlers = []

    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "ulys.log"), maxBytes=10_000_000, backupCount=5
        )
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]")
        )
        file_handler.setLevel(log_level)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
    console_handler.setLevel(log_level)

    logger.addHandler(console_handler)
    logger.setLevel(log_level)
