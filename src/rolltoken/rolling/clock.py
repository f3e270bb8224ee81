"""
Clock access and bucket arithmetic.

All reads of "now" go through read_clock() so that a broken clock surfaces
as ClockUnavailable instead of a rejected token.
"""

import math
import numbers
import time
import logging

from ..exceptions import ClockUnavailable

logger = logging.getLogger(__name__)

# Buckets are serialized as signed 64-bit integers
BUCKET_MIN = -(2 ** 63)
BUCKET_MAX = 2 ** 63 - 1


def system_time():
    """
    Read the system wall clock.

    Returns:
        float: Seconds since the unix epoch

    Raises:
        ClockUnavailable: If the platform clock cannot be read
    """
    try:
        return time.time()
    except (OSError, OverflowError, ValueError) as e:
        raise ClockUnavailable(f"System clock unavailable: {e}") from e


def read_clock(clock, interval=None):
    """
    Call a clock and check that it produced a usable timestamp.

    Args:
        clock (callable): Zero-argument callable returning unix seconds
        interval (int): If given, the timestamp must also map to a bucket
            that fits in a signed 64-bit integer

    Returns:
        int or float: The timestamp

    Raises:
        ClockUnavailable: If the clock raises, returns a non-finite value or
            a value whose bucket is out of range
    """
    try:
        now = clock()
    except ClockUnavailable:
        raise
    except Exception as e:
        logger.error(f"Clock read failed: {e}")
        raise ClockUnavailable(f"Clock read failed: {e}") from e

    if isinstance(now, bool) or not isinstance(now, numbers.Real) or not math.isfinite(now):
        logger.error(f"Clock returned an unusable value: {now!r}")
        raise ClockUnavailable(f"Clock returned an unusable value: {now!r}")

    if interval is not None and not BUCKET_MIN <= bucket_for(now, interval) <= BUCKET_MAX:
        logger.error(f"Clock value {now!r} is outside the bucket range")
        raise ClockUnavailable(f"Clock value {now!r} is outside the bucket range")
    return now


def bucket_for(timestamp, interval):
    """
    Map a unix timestamp to its rotation bucket.

    Args:
        timestamp (int or float): Unix seconds
        interval (int): Seconds per bucket

    Returns:
        int: floor(timestamp / interval)
    """
    return math.floor(timestamp) // interval


def seconds_until_rotation(timestamp, interval):
    """Seconds left before the bucket containing ``timestamp`` ends (1..interval)."""
    return interval - (math.floor(timestamp) % interval)
