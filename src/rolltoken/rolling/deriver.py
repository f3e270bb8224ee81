"""
Token Derivation

Derives a token code from a shared secret and a bucket index:

    code = hex(HMAC-SHA256(secret, int64_be(bucket_index)))

The bucket index is serialized to a fixed 8-byte big-endian signed integer so
every party that agrees on the interval feeds the MAC the exact same input for
a given bucket. The MAC comes from the ``cryptography`` package.

The output representation is stable: 64 lowercase hexadecimal characters.
Validators compare codes string-for-string, so generators and validators must
never disagree on this encoding.
"""

from cryptography.hazmat.primitives import hashes, hmac

DIGEST_SIZE = 32           # SHA-256
CODE_LENGTH = DIGEST_SIZE * 2
BUCKET_WIDTH = 8


def encode_bucket(bucket_index):
    """
    Serialize a bucket index for the MAC.

    Args:
        bucket_index (int): Bucket number, negative values allowed

    Returns:
        bytes: 8-byte big-endian two's complement encoding

    Raises:
        TypeError: If bucket_index is not an integer
        OverflowError: If bucket_index does not fit in a signed 64-bit integer
    """
    if isinstance(bucket_index, bool) or not isinstance(bucket_index, int):
        raise TypeError(f"Bucket index must be an integer, got {type(bucket_index).__name__}")
    return bucket_index.to_bytes(BUCKET_WIDTH, 'big', signed=True)


def derive(secret, bucket_index):
    """
    Derive the token code for one bucket.

    Pure and deterministic: the same secret and bucket always produce the
    same code, and nothing can be predicted without the secret.

    Args:
        secret (bytes): MAC key
        bucket_index (int): Bucket number

    Returns:
        str: 64 lowercase hex characters
    """
    mac = hmac.HMAC(bytes(secret), hashes.SHA256())
    mac.update(encode_bucket(bucket_index))
    return mac.finalize().hex()


class TokenDeriver:
    """
    Binds a secret holder to the derivation function.

    The secret stays inside its SecureBytes holder and is only copied out
    for the duration of a single MAC computation.
    """

    def __init__(self, secret_holder):
        """
        Args:
            secret_holder (SecureBytes): Holder of the MAC key
        """
        self._secret = secret_holder

    def derive(self, bucket_index):
        """Derive the code for ``bucket_index`` with the bound secret."""
        return derive(self._secret.get(), bucket_index)

    def __repr__(self):
        return f"<TokenDeriver secret={self._secret}>"
