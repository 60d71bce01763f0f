from dataclasses import dataclass

from linecrypt.models.schemas import StageType
from linecrypt.services.engines.alphabet import (
    BLOCK_SIZE_BASE,
    BLOCK_SIZE_SPAN,
    DIGEST_MASK,
)
from linecrypt.services.engines.base import CipherStage
from linecrypt.services.engines.registry import StageRegistry


@dataclass(frozen=True)
class BlockParameters:
    """Block size and rotation derived from a key."""

    key_length: int
    block_size: int
    digest: int
    rotation: int


def derive_block_parameters(key: bytes) -> BlockParameters:
    """
    Derive the transposition parameters for a non-empty key.

    block_size = len(key) % 7 + 3, always in [3, 9]
    digest     = sum of key bytes in an unsigned 64-bit accumulator
    rotation   = digest % block_size
    """
    block_size = len(key) % BLOCK_SIZE_SPAN + BLOCK_SIZE_BASE
    digest = sum(key) & DIGEST_MASK
    return BlockParameters(
        key_length=len(key),
        block_size=block_size,
        digest=digest,
        rotation=digest % block_size,
    )


def rotate_right(block: bytes, amount: int) -> bytes:
    """Rotate ``block`` right by ``amount`` positions, reduced modulo its length."""
    if not block:
        return block
    amount %= len(block)
    if amount == 0:
        return block
    return block[-amount:] + block[:-amount]


@StageRegistry.register
class BlockTranspositionStage(CipherStage):
    """
    Key-derived block transposition stage.

    The text is cut into blocks of ``block_size`` bytes (the last block may be
    shorter). Even-numbered blocks are reversed, odd-numbered blocks are
    rotated right by ``rotation``.

    Example with key "KEY" (block_size=6, rotation=5):

        text:    abcdef ghijkl m
        block:   0      1      2
        op:      rev    rot 5  rev
        out:     fedcba hijklg m

    Decryption reverses the even blocks again and rotates the odd blocks right
    by the complement ``len(block) - rotation % len(block)``.
    """

    name = "Block Transposition"
    stage_type = StageType.TRANSPOSITION
    description = (
        "A transposition that splits text into key-sized blocks, reversing "
        "even-numbered blocks and rotating odd-numbered blocks right by a "
        "key-derived amount."
    )

    def encrypt(self, text: bytes, key: bytes) -> bytes:
        """Reverse even blocks and rotate odd blocks right."""
        self._require_key(key)
        params = derive_block_parameters(key)
        return self._transpose(text, params, inverse=False)

    def decrypt(self, text: bytes, key: bytes) -> bytes:
        """Reverse even blocks and undo the right rotation of odd blocks."""
        self._require_key(key)
        params = derive_block_parameters(key)
        return self._transpose(text, params, inverse=True)

    def explain(self, key: bytes) -> str:
        params = derive_block_parameters(key)
        return (
            f"Transposition: text is split into blocks of {params.block_size} "
            f"bytes; even blocks are reversed and odd blocks are rotated right "
            f"by {params.rotation} (key digest {params.digest} mod "
            f"{params.block_size})."
        )

    def _transpose(self, text: bytes, params: BlockParameters, inverse: bool) -> bytes:
        buffer = bytearray(text)
        size = params.block_size

        for index, start in enumerate(range(0, len(buffer), size)):
            end = min(start + size, len(buffer))
            block = bytes(buffer[start:end])

            if index % 2 == 0:
                buffer[start:end] = block[::-1]
            else:
                length = len(block)
                amount = params.rotation % length
                if inverse:
                    amount = (length - amount) % length
                buffer[start:end] = rotate_right(block, amount)

        return bytes(buffer)


def transpose_encrypt(text: bytes, key: bytes) -> bytes:
    return BlockTranspositionStage().encrypt(text, key)


def transpose_decrypt(text: bytes, key: bytes) -> bytes:
    return BlockTranspositionStage().decrypt(text, key)
