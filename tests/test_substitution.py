"""Tests for the printable shift substitution stage."""

import pytest

from linecrypt.core.exceptions import EmptyKeyError
from linecrypt.services.engines.alphabet import (
    ALPHABET_END,
    ALPHABET_SIZE,
    ALPHABET_START,
    is_printable,
    shift_printable,
)
from linecrypt.services.engines.substitution import (
    PrintableShiftStage,
    substitute_decrypt,
    substitute_encrypt,
)


class TestAlphabet:
    """Test suite for the printable alphabet helpers."""

    def test_alphabet_bounds(self):
        assert ALPHABET_START == 32
        assert ALPHABET_END == 126
        assert ALPHABET_SIZE == 95

    def test_is_printable(self):
        assert is_printable(ord(" "))
        assert is_printable(ord("~"))
        assert not is_printable(31)
        assert not is_printable(127)

    def test_shift_wraps_around(self):
        """Shifting '~' by one wraps to space."""
        assert shift_printable(ord("~"), 1) == ord(" ")
        assert shift_printable(ord(" "), -1) == ord("~")

    def test_shift_leaves_other_bytes(self):
        for value in (0, 9, 10, 31, 127, 200, 255):
            assert shift_printable(value, 42) == value


class TestPrintableShiftStage:
    """Test suite for the substitution stage."""

    @pytest.fixture
    def stage(self):
        return PrintableShiftStage()

    @pytest.fixture
    def key(self):
        return b"KEY"

    def test_encrypt_single_symbol(self, stage, key):
        """'A' at position 0 is shifted by ord('K') = 75."""
        assert stage.encrypt(b"A", key) == b"-"

    def test_decrypt_single_symbol(self, stage, key):
        """Decryption normalizes the negative index back into the alphabet."""
        assert stage.decrypt(b"-", key) == b"A"

    def test_encrypt_known_example(self, stage, key):
        assert stage.encrypt(b"Hello, World!", key) == b"4Lh[Y+qDqg\\ix"

    def test_decrypt_known_example(self, stage, key):
        assert stage.decrypt(b"4Lh[Y+qDqg\\ix", key) == b"Hello, World!"

    def test_shift_includes_position(self, stage, key):
        assert stage.shift_for(key, 0) == 75
        assert stage.shift_for(key, 1) == 70
        assert stage.shift_for(key, 8) == 2  # (89 + 8) % 95

    def test_non_alphabet_bytes_pass_through(self, stage, key):
        text = b"\x00\x09\x7f\xff"
        assert stage.encrypt(text, key) == text
        assert stage.decrypt(text, key) == text

    def test_non_alphabet_bytes_consume_key_position(self, stage, key):
        """A tab at position 0 still advances the schedule: 'A' gets shift 70."""
        assert stage.encrypt(b"\tA", key) == b"\t("

    def test_roundtrip(self, stage):
        text = bytes(range(256)) * 2
        for key in (b"K", b"KEY", b"a longer key!", b"\x00\xff"):
            assert stage.decrypt(stage.encrypt(text, key), key) == text

    def test_length_preserved(self, stage, key):
        for length in range(20):
            text = b"x" * length
            assert len(stage.encrypt(text, key)) == length
            assert len(stage.decrypt(text, key)) == length

    def test_empty_text(self, stage, key):
        assert stage.encrypt(b"", key) == b""
        assert stage.decrypt(b"", key) == b""

    def test_input_not_mutated(self, stage, key):
        text = bytearray(b"Hello")
        stage.encrypt(text, key)
        assert text == bytearray(b"Hello")

    def test_empty_key_rejected(self, stage):
        with pytest.raises(EmptyKeyError):
            stage.encrypt(b"Hello", b"")
        with pytest.raises(EmptyKeyError):
            stage.decrypt(b"Hello", b"")

    def test_module_functions(self, key):
        assert substitute_encrypt(b"Hello, World!", key) == b"4Lh[Y+qDqg\\ix"
        assert substitute_decrypt(b"4Lh[Y+qDqg\\ix", key) == b"Hello, World!"

    def test_explain(self, stage, key):
        explanation = stage.explain(key)

        assert "95" in explanation
        assert "shift" in explanation.lower()
