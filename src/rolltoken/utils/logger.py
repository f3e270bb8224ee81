"""
Logger Module

Provides standardized logging for RollToken using Python's built-in logging module.
Library modules only create named loggers; handlers are installed here, and only
the console script calls setup_logger().
"""

import os
import logging
import datetime

from .. import config

# Default log levels
DEFAULT_CONSOLE_LEVEL = logging.WARNING
DEFAULT_FILE_LEVEL = logging.DEBUG      # File always logs everything (when enabled)

# Global logger instance
logger = None
log_file_path = None


def setup_logger(name='rolltoken',
                 console_level=None,
                 file_level=None,
                 log_to_file=None,
                 log_dir=None):
    """
    Set up the logger with handlers for console and file output.

    Module loggers (rolltoken.rolling.manager, ...) are children of the
    'rolltoken' logger and inherit these handlers.

    Args:
        name (str): Logger name
        console_level (int): Logging level for console output (e.g., logging.DEBUG)
        file_level (int): Logging level for file output
        log_to_file (bool): Whether to log to a file, defaults to ROLLTOKEN_LOG
        log_dir (str): Directory for log files, defaults to ~/.rolltoken/logs

    Returns:
        logging.Logger: Configured logger instance
    """
    global logger, log_file_path

    if console_level is None:
        console_level = logging.DEBUG if config.env_flag(config.ENV_DEBUG) else DEFAULT_CONSOLE_LEVEL
    if file_level is None:
        file_level = DEFAULT_FILE_LEVEL
    if log_to_file is None:
        log_to_file = config.env_flag(config.ENV_LOG)

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)  # Let handlers control the output

    # Remove any existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(
        '%(levelname)s [%(filename)s:%(lineno)d]: %(message)s'
    ))
    logger.addHandler(console_handler)

    # Don't propagate to root logger to avoid duplicate messages
    logger.propagate = False

    log_file_path = None
    if log_to_file:
        if log_dir is None:
            log_dir = config.get_log_directory()
        try:
            os.makedirs(log_dir, exist_ok=True)

            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file_path = os.path.join(log_dir, f"rolltoken_{timestamp}.log")

            file_handler = logging.FileHandler(log_file_path, mode='w', encoding='utf-8')
            file_handler.setLevel(file_level)
            file_handler.setFormatter(logging.Formatter(
                '[%(asctime)s] %(levelname)s [%(name)s:%(lineno)d]: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

            logger.info(f"=== {config.APP_NAME} Log Started at {datetime.datetime.now().isoformat()} ===")
        except OSError as e:
            # Fall back to console-only logging
            log_file_path = None
            logger.warning(f"Error setting up file logging: {e}")

    return logger


def get_logger():
    """
    Get the configured logger instance or set up a new one if not configured.

    Returns:
        logging.Logger: Logger instance
    """
    if logger is None:
        return setup_logger()
    return logger


def set_console_level(level):
    """
    Set the console output log level.

    Args:
        level (int): Logging level (e.g., logging.DEBUG, logging.INFO)
    """
    for handler in get_logger().handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


def get_log_file_path():
    """
    Get the path to the current log file.

    Returns:
        str: Path to the log file or None if file logging is disabled
    """
    return log_file_path
