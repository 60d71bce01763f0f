from typing import Any


class LinecryptError(Exception):
    """Base exception for all linecrypt errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(LinecryptError):
    """Raised when input validation fails."""

    pass


class EmptyKeyError(ValidationError):
    """Raised when a cipher operation is invoked with an empty key."""

    def __init__(self) -> None:
        super().__init__("Key must not be empty")


class TextTooLongError(ValidationError):
    """Raised when text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class TextEncodingError(ValidationError):
    """Raised when text cannot be mapped to bytes with the configured encoding."""

    def __init__(self, encoding: str, reason: str):
        super().__init__(
            f"Text is not representable in {encoding}: {reason}",
            {"encoding": encoding},
        )


class StageError(LinecryptError):
    """Base exception for cipher stage errors."""

    pass


class StageNotFoundError(StageError):
    """Raised when requested cipher stage is not registered."""

    def __init__(self, stage_name: str):
        super().__init__(
            f"Cipher stage '{stage_name}' not found",
            {"stage_name": stage_name},
        )


class FileProcessingError(LinecryptError):
    """Base exception for line/file processing errors."""

    pass


class SameFileError(FileProcessingError):
    """Raised when input and output refer to the same file."""

    def __init__(self, path: str):
        super().__init__(
            "Input and output file names must differ",
            {"path": path},
        )


class InputFileError(FileProcessingError):
    """Raised when the input file cannot be opened."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Failed to open input file: {path}",
            {"path": path, "reason": reason},
        )


class OutputFileError(FileProcessingError):
    """Raised when the output file cannot be created."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Failed to create output file: {path}",
            {"path": path, "reason": reason},
        )
