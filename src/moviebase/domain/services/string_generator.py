"""Random string generation for movie external IDs.

The generator is injected wherever external IDs are minted so tests can
substitute a deterministic implementation.
"""

import secrets
from abc import ABC, abstractmethod


class StringGenerator(ABC):
    """Abstract source of random strings."""

    @abstractmethod
    def crypto_string(self, n: int) -> str:
        """Return a random URL-safe string built from ``n`` random bytes."""
        ...


class CryptoStringGenerator(StringGenerator):
    """Cryptographically secure generator backed by :mod:`secrets`."""

    def crypto_string(self, n: int) -> str:
        """Generate a URL-safe base64 string from n random bytes.

        Args:
            n: Number of random bytes (must be positive).

        Returns:
            URL-safe string without padding.
        """
        if n <= 0:
            raise ValueError("n must be greater than zero")
        return secrets.token_urlsafe(n)


# Default string generator instance
string_generator = CryptoStringGenerator()
