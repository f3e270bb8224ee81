"""Token value type."""

from typing import NamedTuple


class Token(NamedTuple):
    """
    A derived code together with the bucket it was derived for.

    Immutable and holds no reference to the secret, so it is safe to hand
    to transport code.
    """

    code: str
    bucket: int

    def offset_from(self, current_bucket):
        """Bucket distance between this token and ``current_bucket``."""
        return self.bucket - current_bucket

    def __str__(self):
        return self.code
