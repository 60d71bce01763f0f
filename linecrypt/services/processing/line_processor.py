from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from linecrypt.core.exceptions import InputFileError, OutputFileError, SameFileError
from linecrypt.models.schemas import CipherDirection
from linecrypt.services.pipeline.pipeline import CipherPipeline, get_pipeline


@dataclass
class ProcessingSummary:
    """Result of processing a file."""

    lines: int
    bytes_in: int
    direction: CipherDirection


class LineProcessor:
    """
    Applies the cipher pipeline to a file one line at a time.

    Lines are split on ``\\n`` only; the newline is removed before the line is
    transformed and written back after it. Any ``\\r`` is treated as data.
    """

    NEWLINE = b"\n"

    def __init__(self, pipeline: CipherPipeline | None = None):
        self.pipeline = pipeline or get_pipeline()

    def process_lines(
        self,
        lines: Iterable[bytes],
        key: str | bytes,
        direction: CipherDirection,
    ) -> Iterator[bytes]:
        """
        Transform each line, yielding it without a trailing newline.

        The key is checked when this is called, before any line is read.
        """
        key_bytes = self.pipeline.encode_key(key)
        return (self._transform_line(line, key_bytes, direction) for line in lines)

    def process_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        key: str | bytes,
        direction: CipherDirection,
    ) -> ProcessingSummary:
        """
        Transform ``input_path`` line by line into ``output_path``.

        Args:
            input_path: File to read
            output_path: File to create or truncate
            key: Non-empty key
            direction: Whether to encrypt or decrypt

        Returns:
            ProcessingSummary with line and byte counts

        Raises:
            SameFileError: If both paths point to the same file
            EmptyKeyError: If the key is empty
            InputFileError: If the input cannot be opened
            OutputFileError: If the output cannot be created
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        if input_path.resolve() == output_path.resolve():
            raise SameFileError(str(input_path))

        key_bytes = self.pipeline.encode_key(key)

        try:
            source = input_path.open("rb")
        except OSError as e:
            raise InputFileError(str(input_path), str(e)) from e

        with source:
            try:
                target = output_path.open("wb")
            except OSError as e:
                raise OutputFileError(str(output_path), str(e)) from e

            with target:
                lines = 0
                bytes_in = 0
                for line in source:
                    bytes_in += len(line)
                    lines += 1
                    target.write(self._transform_line(line, key_bytes, direction))
                    target.write(self.NEWLINE)

        return ProcessingSummary(lines=lines, bytes_in=bytes_in, direction=direction)

    def _transform_line(self, line: bytes, key: bytes, direction: CipherDirection) -> bytes:
        if line.endswith(self.NEWLINE):
            line = line[:-1]
        return self.pipeline.run(line, key, direction)
