"""
RollToken: shared-secret rolling authentication tokens.

Tokens are HMAC-SHA256 codes over a time bucket index. A verifier holding
the same secret accepts codes from the current bucket and from ``tolerance``
buckets on either side.

    >>> manager = RollingTokenManager(b"my_secret", interval=3600)
    >>> token = manager.generate_token()
    >>> manager.is_valid(token.code)
    True
"""

from .config import APP_VERSION as __version__
from .exceptions import RollTokenError, ConfigurationError, ClockUnavailable
from .rolling import RollingTokenManager, Token, TokenDeriver, derive, encode_bucket

__all__ = [
    'RollingTokenManager',
    'Token',
    'TokenDeriver',
    'derive',
    'encode_bucket',
    'RollTokenError',
    'ConfigurationError',
    'ClockUnavailable',
]
