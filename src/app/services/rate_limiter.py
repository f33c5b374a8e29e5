from abc import ABC, abstractmethod


class RateLimiter(ABC):
    """Throttle interface - one counter per key"""

    @abstractmethod
    def allow(self, key: str) -> bool:
        """Record a request for key and return False once it is over the limit"""
        pass
