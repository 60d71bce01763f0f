"""Substitution cipher stages."""

from linecrypt.services.engines.substitution.printable_shift import (
    PrintableShiftStage,
    substitute_decrypt,
    substitute_encrypt,
)

__all__ = [
    "PrintableShiftStage",
    "substitute_decrypt",
    "substitute_encrypt",
]
