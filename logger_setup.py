# Module for setting up logging
import logging
import sys
import os
import constants # Import constants

def setup_logging(log_file=None, level=constants.DEFAULT_LOG_LEVEL):
    """
    Sets up logging to stderr and, optionally, to a file.
    Stdout is left untouched so the CLI result stays machine-readable.
    """
    log_formatter = logging.Formatter(constants.LOG_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(level) # Set root logger level

    # Clear existing handlers (important if this function is called multiple times)
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    # File handler
    if log_file:
        # Ensure directory exists for log file if it's in a subdirectory
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(log_formatter)
        root_logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    logging.debug("Logging setup complete.")
