"""Line and file processing."""

from linecrypt.services.processing.line_processor import LineProcessor, ProcessingSummary

__all__ = ["LineProcessor", "ProcessingSummary"]
