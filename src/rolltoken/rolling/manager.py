"""
Rolling Token Manager

Generates tokens for the current rotation bucket and validates presented
codes against a window of buckets around the verifier's own clock.

Validation flow:
1. Read the clock once and compute the current bucket
2. Build the window current - tolerance .. current + tolerance
3. Re-derive the code for each bucket and compare in constant time
4. Return True on the first match, False otherwise

Security Notes:
- The secret lives in a SecureBytes holder and is never logged
- Malformed and expired codes are indistinguishable to the caller
- A clock failure raises ClockUnavailable and is never reported as a
  rejected token
- The manager is immutable after construction, so concurrent use from
  multiple threads needs no locking
"""

import logging

from .. import config
from ..exceptions import ConfigurationError
from ..security.secure_bytes import SecureBytes
from ..security.constant_time import constant_time_equals, to_comparable
from .clock import system_time, read_clock, bucket_for, seconds_until_rotation, BUCKET_MIN, BUCKET_MAX
from .deriver import TokenDeriver
from .token import Token

logger = logging.getLogger(__name__)


class RollingTokenManager:
    """
    Shared-secret rolling token generator and validator.

    Usage Flow:
    1. Create a manager with the shared secret, interval and tolerance
    2. Call generate_token() and hand the code to the other party
    3. The other party calls is_valid(code) on its own manager
    """

    def __init__(self, secret, interval, tolerance=None, clock=None):
        """
        Initialize the manager.

        Args:
            secret (str or bytes): Shared secret, UTF-8 encoded if a string
            interval (int): Seconds per rotation bucket, must be > 0
            tolerance (int): Buckets accepted before and after the current
                one. None selects config.DEFAULT_TOLERANCE (1).
            clock (callable): Zero-argument callable returning unix seconds,
                defaults to the system clock

        Raises:
            ConfigurationError: If the secret is empty or not bytes/str,
                the interval is not a positive integer or the tolerance
                is negative or above config.MAX_TOLERANCE
        """
        if not isinstance(secret, (str, bytes, bytearray, memoryview)):
            raise ConfigurationError(f"Secret must be str or bytes, got {type(secret).__name__}")

        self._interval = config.validate_interval(interval)
        if tolerance is None:
            tolerance = config.DEFAULT_TOLERANCE
        self._tolerance = config.validate_tolerance(tolerance)

        try:
            self._secret = SecureBytes(secret)
        except UnicodeEncodeError:
            raise ConfigurationError("Secret string cannot be encoded as UTF-8") from None
        if not self._secret:
            raise ConfigurationError("Secret must not be empty")

        self._clock = clock if clock is not None else system_time
        self._deriver = TokenDeriver(self._secret)

        logger.debug(f"Rolling token manager ready (interval={self._interval}s, tolerance={self._tolerance})")

    @property
    def interval(self):
        return self._interval

    @property
    def tolerance(self):
        return self._tolerance

    def current_bucket(self):
        """
        Read the clock and return the current bucket index.

        Raises:
            ClockUnavailable: If the clock cannot be read
        """
        return bucket_for(read_clock(self._clock, self._interval), self._interval)

    def generate_token(self):
        """
        Generate the token for the current bucket.

        Returns:
            Token: Code and bucket index
        """
        return self.generate_token_with_offset(0)

    def generate_token_with_offset(self, offset):
        """
        Generate the token for a bucket relative to the current one.

        Args:
            offset (int): Bucket offset, negative for past buckets

        Returns:
            Token: Code and bucket index (current bucket + offset)

        Raises:
            OverflowError: If current bucket + offset does not fit in a
                signed 64-bit integer
        """
        bucket = self.current_bucket() + offset
        return Token(code=self._deriver.derive(bucket), bucket=bucket)

    def iter_window(self, current):
        """
        Yield the window buckets from ``current`` outwards.

        Buckets outside the signed 64-bit range are skipped; no token can
        be derived for them.
        """
        yield current
        for distance in range(1, self._tolerance + 1):
            for bucket in (current - distance, current + distance):
                if BUCKET_MIN <= bucket <= BUCKET_MAX:
                    yield bucket

    def acceptable_buckets(self, current=None):
        """
        List the buckets a presented code may belong to.

        The window has exactly 2 * tolerance + 1 entries (fewer only at the
        edges of the 64-bit bucket range) and is ordered from the current
        bucket outwards.

        Args:
            current (int): Current bucket, read from the clock if None

        Returns:
            list: Bucket indices
        """
        if current is None:
            current = self.current_bucket()
        return list(self.iter_window(current))

    def is_valid(self, code):
        """
        Check a presented code against the current window.

        Never raises for the shape of ``code``: wrong length, non-hex text,
        non-string values and undecodable strings all return False.

        Args:
            code (str or bytes): Presented token code

        Returns:
            bool: True if the code matches any bucket in the window

        Raises:
            ClockUnavailable: If the clock cannot be read
        """
        current = self.current_bucket()
        presented = to_comparable(code)
        if presented is None:
            logger.debug("Rejected token: unsupported code type")
            return False

        for bucket in self.iter_window(current):
            expected = self._deriver.derive(bucket).encode('ascii')
            if constant_time_equals(expected, presented):
                logger.debug(f"Accepted token at offset {bucket - current}")
                return True

        logger.debug("Rejected token: no match in window")
        return False

    def offset_of(self, token):
        """
        Bucket offset of a token relative to the current bucket.

        Args:
            token (Token): Previously generated token

        Returns:
            int: token.bucket - current bucket
        """
        return token.offset_from(self.current_bucket())

    def get_remaining_time(self):
        """
        Get seconds until the current token rotates.

        Returns:
            int: Seconds remaining (1..interval)
        """
        return seconds_until_rotation(read_clock(self._clock, self._interval), self._interval)

    def __repr__(self):
        return (f"<RollingTokenManager interval={self._interval} "
                f"tolerance={self._tolerance} secret={self._secret}>")
