# --- src/pingpong_sim/log_config.py ---
import logging
import sys
from typing import Optional, TextIO, Union


def setup_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None):
    """ Configures basic logging to a single stream (stdout by default). """
    log_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"
    )
    root_logger = logging.getLogger() # Get the root logger

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
    logging.debug("Logging configured.")
