from typing import ClassVar

from linecrypt.models.schemas import StageType
from linecrypt.services.engines.alphabet import ALPHABET_SIZE, shift_printable
from linecrypt.services.engines.base import CipherStage
from linecrypt.services.engines.registry import StageRegistry


@StageRegistry.register
class PrintableShiftStage(CipherStage):
    """
    Keyed printable-ASCII substitution stage.

    A Vigenère-style shift over the 95 printable symbols where the shift also
    grows with the position in the text:

        shift_i = (key[i % len(key)] + i) % 95

    Example with key "KEY" (K=75, E=69, Y=89):

        i:      0    1    2
        text:   H    e    l
        shift:  75   70   91
        out:    4    L    h

    Bytes outside the alphabet are copied unchanged, but they still occupy
    position i, so the key schedule advances past them.
    """

    name = "Printable Shift Substitution"
    stage_type = StageType.SUBSTITUTION
    description = (
        "A position-dependent keyed shift over the 95 printable ASCII symbols. "
        "Each symbol is shifted by the key byte at its position plus the "
        "position itself; other bytes pass through unchanged."
    )

    MODULUS: ClassVar[int] = ALPHABET_SIZE

    def encrypt(self, text: bytes, key: bytes) -> bytes:
        """Shift every alphabet byte forward by its positional key shift."""
        self._require_key(key)
        return self._apply(text, key, 1)

    def decrypt(self, text: bytes, key: bytes) -> bytes:
        """Shift every alphabet byte back by its positional key shift."""
        self._require_key(key)
        return self._apply(text, key, -1)

    def explain(self, key: bytes) -> str:
        return (
            f"Substitution: each printable symbol at position i is shifted by "
            f"(key[i mod {len(key)}] + i) mod {self.MODULUS} places within the "
            f"{self.MODULUS}-symbol alphabet; other bytes are left in place."
        )

    def shift_for(self, key: bytes, position: int) -> int:
        """Return the shift applied at ``position`` for ``key``."""
        return (key[position % len(key)] + position) % self.MODULUS

    def _apply(self, text: bytes, key: bytes, sign: int) -> bytes:
        return bytes(
            shift_printable(value, sign * self.shift_for(key, i))
            for i, value in enumerate(text)
        )


def substitute_encrypt(text: bytes, key: bytes) -> bytes:
    return PrintableShiftStage().encrypt(text, key)


def substitute_decrypt(text: bytes, key: bytes) -> bytes:
    return PrintableShiftStage().decrypt(text, key)
