"""
Cipher pipeline - composes the cipher stages into one transform.

Encryption runs the stages in order:
1. Substitution (printable shift)
2. Transposition (block reverse/rotate)

Decryption runs the inverse of each stage in reverse order.
"""

from functools import lru_cache
from typing import ClassVar, TypeVar

from linecrypt.core.config import get_settings
from linecrypt.core.exceptions import EmptyKeyError, TextEncodingError
from linecrypt.models.schemas import CipherDirection, StageType
from linecrypt.services.engines.base import CipherStage
from linecrypt.services.engines.registry import StageRegistry
from linecrypt.services.engines.transposition.block import (
    BlockParameters,
    derive_block_parameters,
)

TextT = TypeVar("TextT", str, bytes)


class CipherPipeline:
    """
    Applies a fixed sequence of cipher stages with a shared key.

    Text and key may be given as ``bytes`` or ``str``. A ``str`` text is
    mapped to bytes with ``text_encoding`` (one byte per character) and the
    result is returned as ``str``; a ``str`` key is encoded with
    ``key_encoding``.
    """

    DEFAULT_STAGES: ClassVar[list[StageType]] = [
        StageType.SUBSTITUTION,
        StageType.TRANSPOSITION,
    ]

    def __init__(
        self,
        stage_types: list[StageType] | None = None,
        key_encoding: str | None = None,
        text_encoding: str | None = None,
    ):
        settings = get_settings()
        self.registry = StageRegistry()
        self.stages: list[CipherStage] = [
            self.registry.require_stage(stage_type)
            for stage_type in (self.DEFAULT_STAGES if stage_types is None else stage_types)
        ]
        self.key_encoding = key_encoding or settings.key_encoding
        self.text_encoding = text_encoding or settings.text_encoding

    def encrypt(self, text: TextT, key: str | bytes) -> TextT:
        """Encrypt text by running every stage in order."""
        return self.run(text, key, CipherDirection.ENCRYPT)

    def decrypt(self, text: TextT, key: str | bytes) -> TextT:
        """Decrypt text by running every stage's inverse in reverse order."""
        return self.run(text, key, CipherDirection.DECRYPT)

    def run(self, text: TextT, key: str | bytes, direction: CipherDirection) -> TextT:
        """
        Apply the pipeline in the given direction.

        Args:
            text: Plaintext or ciphertext
            key: Non-empty key
            direction: Whether to encrypt or decrypt

        Returns:
            Transformed text of the same type and length as ``text``

        Raises:
            EmptyKeyError: If the key is empty
            TextEncodingError: If ``text`` or ``key`` cannot be encoded
        """
        key_bytes = self.encode_key(key)
        data = self._to_bytes(text, self.text_encoding)

        if direction == CipherDirection.ENCRYPT:
            for stage in self.stages:
                data = stage.encrypt(data, key_bytes)
        else:
            for stage in reversed(self.stages):
                data = stage.decrypt(data, key_bytes)

        if isinstance(text, str):
            return data.decode(self.text_encoding)
        return data

    def describe(self, key: str | bytes) -> BlockParameters:
        """Return the block parameters a key derives."""
        return derive_block_parameters(self.encode_key(key))

    def explain(self, key: str | bytes, direction: CipherDirection) -> str:
        """Generate an explanation of how the key drives each stage."""
        key_bytes = self.encode_key(key)
        stages = self.stages if direction == CipherDirection.ENCRYPT else list(reversed(self.stages))
        lines = [f"{direction.value.capitalize()} with a {len(key_bytes)}-byte key:"]
        for step, stage in enumerate(stages, start=1):
            lines.append(f"{step}. {stage.explain(key_bytes)}")
        return "\n".join(lines)

    def encode_key(self, key: str | bytes) -> bytes:
        """Encode a key to bytes, rejecting empty keys."""
        key_bytes = self._to_bytes(key, self.key_encoding)
        if not key_bytes:
            raise EmptyKeyError()
        return key_bytes

    @staticmethod
    def _to_bytes(value: str | bytes, encoding: str) -> bytes:
        if isinstance(value, str):
            try:
                return value.encode(encoding)
            except UnicodeEncodeError as e:
                raise TextEncodingError(encoding, e.reason) from e
        return bytes(value)


@lru_cache
def get_pipeline() -> CipherPipeline:
    """Get cached default pipeline instance."""
    return CipherPipeline()


def encrypt(text: TextT, key: str | bytes) -> TextT:
    """Encrypt with the default substitution + transposition pipeline."""
    return get_pipeline().encrypt(text, key)


def decrypt(text: TextT, key: str | bytes) -> TextT:
    """Decrypt with the default substitution + transposition pipeline."""
    return get_pipeline().decrypt(text, key)
