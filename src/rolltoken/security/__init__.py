"""
Security helpers for RollToken

- Zeroizable storage for the shared secret
- Constant-time comparison of secret-derived codes
"""

from .secure_bytes import SecureBytes
from .constant_time import constant_time_equals, to_comparable

__all__ = [
    'SecureBytes',
    'constant_time_equals',
    'to_comparable',
]
