"""
Secure Bytes Module

Holds the shared secret in a mutable buffer so it can be zeroed
when the owning manager is dropped.
"""

import time


class SecureBytes:
    """Sensitive bytes that are wiped from memory when no longer needed."""

    def __init__(self, data):
        """
        Initialize a new secure buffer.

        Args:
            data (str or bytes): The sensitive data to protect.
                Strings are encoded as UTF-8.
        """
        if isinstance(data, str):
            data = data.encode('utf-8')
        self.data = bytearray(data)
        self.created_at = time.time()

    def __str__(self):
        """Masked value, safe to print or log."""
        return "****" if self.data else ""

    def __repr__(self):
        return f"<SecureBytes of length {len(self.data)}>"

    def __len__(self):
        return len(self.data)

    def __bool__(self):
        return len(self.data) > 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.clear()

    def get(self):
        """
        Retrieve a copy of the sensitive value.

        Only call this right before a cryptographic operation and do not
        keep the returned object around.

        Returns:
            bytes: The protected data
        """
        return bytes(self.data)

    def clear(self):
        """Securely wipe the data."""
        for i in range(len(self.data)):
            self.data[i] = 0
        self.data = bytearray()

    def age(self):
        """
        Get the age of the buffer in seconds.

        Returns:
            float: Seconds since creation
        """
        return time.time() - self.created_at

    def __del__(self):
        """Automatically clear data when the object is garbage collected."""
        try:
            self.clear()
        except AttributeError:
            pass  # __init__ failed before the buffer existed
