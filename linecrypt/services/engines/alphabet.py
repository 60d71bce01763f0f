"""
Printable ASCII symbol alphabet shared by the cipher stages.

The alphabet is the 95 bytes from space (32) through tilde (126). A byte's
alphabet index is its value minus ``ALPHABET_START``. Every other byte value
is passed through untouched by the substitution stage.
"""

ALPHABET_START = 32
ALPHABET_END = 126
ALPHABET_SIZE = ALPHABET_END - ALPHABET_START + 1

# Transposition parameters
BLOCK_SIZE_BASE = 3
BLOCK_SIZE_SPAN = 7

# Key digest accumulator is an unsigned 64-bit integer
DIGEST_BITS = 64
DIGEST_MASK = (1 << DIGEST_BITS) - 1


def is_printable(value: int) -> bool:
    """Return True if the byte value belongs to the symbol alphabet."""
    return ALPHABET_START <= value <= ALPHABET_END


def shift_printable(value: int, shift: int) -> int:
    """
    Shift an alphabet byte by ``shift`` positions, wrapping within the alphabet.

    Non-alphabet bytes are returned unchanged. Negative shifts are allowed;
    Python's modulo already normalizes the index into ``[0, ALPHABET_SIZE)``.
    """
    if not is_printable(value):
        return value
    index = value - ALPHABET_START
    return (index + shift) % ALPHABET_SIZE + ALPHABET_START
