"""Transposition cipher stages."""

from linecrypt.services.engines.transposition.block import (
    BlockParameters,
    BlockTranspositionStage,
    derive_block_parameters,
    transpose_decrypt,
    transpose_encrypt,
)

__all__ = [
    "BlockParameters",
    "BlockTranspositionStage",
    "derive_block_parameters",
    "transpose_decrypt",
    "transpose_encrypt",
]
