from abc import ABC, abstractmethod

from pydantic import SecretStr


class IPasswordHasher(ABC):
    """Checks a login password against the hash stored on the customer row"""

    @abstractmethod
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        """False on mismatch and on stored values the hasher cannot parse"""
        pass
