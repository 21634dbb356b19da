import time
from typing import Callable, Optional


class TokenCache:
    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic):
        """
        Initialize token cache.

        Args:
            ttl: Seconds a token stays usable after it was issued
            clock: Monotonic time source in seconds
        """
        self.ttl = ttl
        self._clock = clock
        self.token: Optional[str] = None
        self.issued_at: Optional[float] = None

    def store(self, token: str) -> None:
        """Cache a freshly issued token, stamped with the current time."""
        self.token = token
        self.issued_at = self._clock()

    def clear(self) -> None:
        self.token = None
        self.issued_at = None

    def age(self) -> Optional[float]:
        """Seconds since the token was issued, or None without a token."""
        if self.issued_at is None:
            return None
        return self._clock() - self.issued_at

    def is_expired(self) -> bool:
        """True when a token is held but is at least ttl seconds old."""
        age = self.age()
        return self.token is not None and age is not None and age >= self.ttl

    def is_valid(self) -> bool:
        return self.token is not None and not self.is_expired()
