from abc import ABC, abstractmethod

from linecrypt.core.exceptions import EmptyKeyError
from linecrypt.models.schemas import StageType


class CipherStage(ABC):
    """
    Abstract base class for all cipher stages.

    A stage is a pure, length-preserving byte transform with an exact inverse.
    Each stage implementation must provide:
    - encrypt(): Apply the forward transform
    - decrypt(): Apply the inverse transform
    - explain(): Generate human-readable explanation
    """

    # Stage metadata
    name: str
    stage_type: StageType
    description: str

    @abstractmethod
    def encrypt(self, text: bytes, key: bytes) -> bytes:
        """
        Apply the forward transform.

        Args:
            text: The bytes to transform
            key: The non-empty key

        Returns:
            New bytes of the same length as ``text``
        """
        pass

    @abstractmethod
    def decrypt(self, text: bytes, key: bytes) -> bytes:
        """
        Apply the inverse transform.

        Args:
            text: The bytes to transform
            key: The non-empty key

        Returns:
            New bytes of the same length as ``text``
        """
        pass

    @abstractmethod
    def explain(self, key: bytes) -> str:
        """
        Generate human-readable explanation of what the stage does with a key.

        Args:
            key: The key used

        Returns:
            Explanation string
        """
        pass

    def validate_key(self, key: bytes) -> bool:
        """Keys are valid for every stage as long as they are non-empty."""
        return len(key) > 0

    def _require_key(self, key: bytes) -> None:
        if not self.validate_key(key):
            raise EmptyKeyError()
