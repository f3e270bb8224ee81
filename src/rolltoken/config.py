"""
RollToken Configuration

Defaults for the rolling token manager and the console script, with
environment overrides:
- ROLLTOKEN_INTERVAL: seconds per rotation bucket
- ROLLTOKEN_TOLERANCE: buckets accepted on either side of "now"
- ROLLTOKEN_SECRET: shared secret used by the console script
- ROLLTOKEN_DEBUG / ROLLTOKEN_LOG / ROLLTOKEN_LOG_DIR: logging switches

Importing this module has no side effects; the environment is read when
the getters are called.
"""

import os
from typing import Dict, Any, Optional

from .exceptions import ConfigurationError

# Application information
APP_NAME = "RollToken"
APP_VERSION = "0.1.0"

DEFAULT_INTERVAL = 30
DEFAULT_TOLERANCE = 1
# Each accepted bucket costs one HMAC per validation
MAX_TOLERANCE = 1000

ENV_INTERVAL = 'ROLLTOKEN_INTERVAL'
ENV_TOLERANCE = 'ROLLTOKEN_TOLERANCE'
ENV_SECRET = 'ROLLTOKEN_SECRET'
ENV_DEBUG = 'ROLLTOKEN_DEBUG'
ENV_LOG = 'ROLLTOKEN_LOG'
ENV_LOG_DIR = 'ROLLTOKEN_LOG_DIR'

_TRUE_VALUES = ('1', 'true', 'yes')


def env_flag(name):
    """
    Read a boolean switch from the environment.

    Args:
        name (str): Environment variable name

    Returns:
        bool: True for 1/true/yes (case-insensitive)
    """
    return os.environ.get(name, '').lower() in _TRUE_VALUES


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def validate_interval(interval):
    """
    Check a rotation interval.

    Args:
        interval: Candidate interval in seconds

    Returns:
        int: The interval

    Raises:
        ConfigurationError: If the interval is not a positive integer
    """
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise ConfigurationError(f"Interval must be an integer number of seconds, got {interval!r}")
    if interval <= 0:
        raise ConfigurationError(f"Interval must be greater than zero, got {interval}")
    return interval


def validate_tolerance(tolerance):
    """
    Check a validation tolerance.

    Zero is allowed and means only the exact current bucket is accepted.

    Raises:
        ConfigurationError: If the tolerance is not an integer between 0
            and MAX_TOLERANCE
    """
    if isinstance(tolerance, bool) or not isinstance(tolerance, int):
        raise ConfigurationError(f"Tolerance must be an integer number of buckets, got {tolerance!r}")
    if tolerance < 0:
        raise ConfigurationError(f"Tolerance must not be negative, got {tolerance}")
    if tolerance > MAX_TOLERANCE:
        raise ConfigurationError(f"Tolerance must not exceed {MAX_TOLERANCE} buckets, got {tolerance}")
    return tolerance


def get_default_interval():
    """Interval from ROLLTOKEN_INTERVAL, or DEFAULT_INTERVAL."""
    return validate_interval(_env_int(ENV_INTERVAL, DEFAULT_INTERVAL))


def get_default_tolerance():
    """Tolerance from ROLLTOKEN_TOLERANCE, or DEFAULT_TOLERANCE."""
    return validate_tolerance(_env_int(ENV_TOLERANCE, DEFAULT_TOLERANCE))


def get_log_directory():
    """
    Directory for log files.

    Returns:
        str: ROLLTOKEN_LOG_DIR if set, otherwise ~/.rolltoken/logs
    """
    return os.environ.get(ENV_LOG_DIR) or os.path.join(os.path.expanduser('~'), '.rolltoken', 'logs')


def load_settings(interval: Optional[int] = None,
                  tolerance: Optional[int] = None) -> Dict[str, Any]:
    """
    Merge explicit values over the environment defaults.

    Args:
        interval: Explicit interval, or None to use the environment/default
        tolerance: Explicit tolerance, or None to use the environment/default

    Returns:
        dict: Effective 'interval', 'tolerance', 'debug' and 'log_to_file' settings

    Raises:
        ConfigurationError: If any effective value is invalid
    """
    return {
        'interval': validate_interval(interval) if interval is not None else get_default_interval(),
        'tolerance': validate_tolerance(tolerance) if tolerance is not None else get_default_tolerance(),
        'debug': env_flag(ENV_DEBUG),
        'log_to_file': env_flag(ENV_LOG),
    }
