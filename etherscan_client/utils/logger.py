"""
logger.py

This module provides centralized logging functionality for the client. It ensures
that all modules have consistent and structured logging. Logs go to the console and,
when LOG_FILE is configured, to a file as well.
"""

import logging
import os
from etherscan_client.utils.config import LOG_LEVEL, get_config


def get_logger(name: str) -> logging.Logger:
    """
    Configures and returns a logger instance with the specified name.

    :param name: The name of the logger, typically the module name.
    :return: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    # Ensure no duplicate handlers are added
    if not logger.hasHandlers():
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        log_file = get_config().LOG_FILE
        if log_file:
            log_directory = os.path.dirname(log_file)
            if log_directory and not os.path.exists(log_directory):
                os.makedirs(log_directory)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
