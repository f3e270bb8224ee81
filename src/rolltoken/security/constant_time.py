"""
Constant-Time Comparison

Comparison helpers for secret-derived values. The running time depends only
on the length of the expected value, never on where the inputs first differ.
"""


def to_comparable(value):
    """
    Normalize a presented code to bytes for comparison.

    Args:
        value: str, bytes, bytearray or memoryview

    Returns:
        bytes or None: None when the value cannot be a code at all
    """
    if isinstance(value, str):
        try:
            return value.encode('utf-8')
        except UnicodeEncodeError:
            return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return None


def constant_time_equals(expected, presented):
    """
    Compare two byte sequences without early exit.

    Every byte of ``expected`` is visited. A length mismatch still walks the
    full expected value before returning False.

    Args:
        expected (bytes): Value derived from the secret
        presented (bytes): Value supplied by the caller

    Returns:
        bool: True if both sequences are identical
    """
    expected = bytes(expected)
    presented = bytes(presented)

    if len(presented) != len(expected):
        # Keep the work proportional to the expected length
        presented = expected
        result = 1
    else:
        result = 0

    for x, y in zip(expected, presented):
        result |= x ^ y
    return result == 0
