"""Tests for line and file processing."""

import pytest

from linecrypt.core.exceptions import (
    EmptyKeyError,
    InputFileError,
    OutputFileError,
    SameFileError,
)
from linecrypt.models.schemas import CipherDirection
from linecrypt.services.processing import LineProcessor


class TestLineProcessor:
    """Test suite for the line processor."""

    @pytest.fixture
    def processor(self):
        return LineProcessor()

    @pytest.fixture
    def source(self, tmp_path):
        path = tmp_path / "plain.txt"
        path.write_bytes(b"Hello, World!\nA\n\nabcdefg\n")
        return path

    def test_process_lines(self, processor):
        lines = [b"Hello, World!\n", b"A"]

        result = list(processor.process_lines(lines, "KEY", CipherDirection.ENCRYPT))

        assert result == [b"+Y[hL4Dqg\\iqx", b"-"]

    def test_process_lines_rejects_empty_key_immediately(self, processor):
        def lines():
            raise AssertionError("lines must not be read")
            yield b""

        with pytest.raises(EmptyKeyError):
            processor.process_lines(lines(), "", CipherDirection.ENCRYPT)

    def test_each_line_starts_a_new_schedule(self, processor):
        result = list(processor.process_lines([b"A\n", b"A\n"], "KEY", CipherDirection.ENCRYPT))

        assert result == [b"-", b"-"]

    def test_encrypt_file(self, processor, source, tmp_path):
        target = tmp_path / "cipher.txt"

        summary = processor.process_file(source, target, "KEY", CipherDirection.ENCRYPT)

        assert summary.lines == 4
        assert summary.bytes_in == len(source.read_bytes())
        assert summary.direction == CipherDirection.ENCRYPT
        assert target.read_bytes().split(b"\n")[:3] == [b"+Y[hL4Dqg\\iqx", b"-", b""]

    def test_file_roundtrip(self, processor, source, tmp_path):
        encrypted = tmp_path / "cipher.txt"
        decrypted = tmp_path / "plain2.txt"

        processor.process_file(source, encrypted, "KEY", CipherDirection.ENCRYPT)
        processor.process_file(encrypted, decrypted, "KEY", CipherDirection.DECRYPT)

        assert decrypted.read_bytes() == source.read_bytes()

    def test_last_line_without_newline(self, processor, tmp_path):
        source = tmp_path / "in.txt"
        target = tmp_path / "out.txt"
        source.write_bytes(b"A")

        summary = processor.process_file(source, target, "KEY", CipherDirection.ENCRYPT)

        assert summary.lines == 1
        assert target.read_bytes() == b"-\n"

    def test_carriage_return_is_data(self, processor, tmp_path):
        """The \\r of a CRLF line is transformed along with the line."""
        source = tmp_path / "in.txt"
        target = tmp_path / "out.txt"
        source.write_bytes(b"A\r\n")

        processor.process_file(source, target, "KEY", CipherDirection.ENCRYPT)

        assert target.read_bytes() == b"\r-\n"

    def test_empty_file(self, processor, tmp_path):
        source = tmp_path / "in.txt"
        target = tmp_path / "out.txt"
        source.write_bytes(b"")

        summary = processor.process_file(source, target, "KEY", CipherDirection.ENCRYPT)

        assert summary.lines == 0
        assert target.read_bytes() == b""

    def test_output_truncated(self, processor, source, tmp_path):
        target = tmp_path / "out.txt"
        target.write_bytes(b"x" * 1000)

        processor.process_file(source, target, "KEY", CipherDirection.ENCRYPT)

        assert len(target.read_bytes()) == len(source.read_bytes())

    def test_same_file_rejected(self, processor, source, tmp_path):
        alias = tmp_path / "." / source.name

        with pytest.raises(SameFileError):
            processor.process_file(source, alias, "KEY", CipherDirection.ENCRYPT)

    def test_empty_key_rejected(self, processor, source, tmp_path):
        target = tmp_path / "out.txt"

        with pytest.raises(EmptyKeyError):
            processor.process_file(source, target, "", CipherDirection.ENCRYPT)

        assert not target.exists()

    def test_missing_input(self, processor, tmp_path):
        target = tmp_path / "out.txt"

        with pytest.raises(InputFileError) as exc_info:
            processor.process_file(tmp_path / "missing.txt", target, "KEY", CipherDirection.ENCRYPT)

        assert "missing.txt" in exc_info.value.message
        assert not target.exists()

    def test_output_cannot_be_created(self, processor, source, tmp_path):
        target = tmp_path / "no" / "such" / "dir" / "out.txt"

        with pytest.raises(OutputFileError):
            processor.process_file(source, target, "KEY", CipherDirection.ENCRYPT)
