"""
Rolling token derivation and validation
"""

from .deriver import TokenDeriver, derive, encode_bucket, CODE_LENGTH
from .token import Token
from .manager import RollingTokenManager

__all__ = [
    'TokenDeriver',
    'derive',
    'encode_bucket',
    'CODE_LENGTH',
    'Token',
    'RollingTokenManager',
]
