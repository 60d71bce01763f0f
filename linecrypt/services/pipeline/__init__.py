"""
Pipeline services.

This module composes the cipher stages:
1. Substitutes printable symbols with a positional keyed shift
2. Transposes the result in key-sized blocks
"""

from linecrypt.services.pipeline.pipeline import (
    CipherPipeline,
    decrypt,
    encrypt,
    get_pipeline,
)

__all__ = [
    "CipherPipeline",
    "decrypt",
    "encrypt",
    "get_pipeline",
]
