#!/usr/bin/env python3
"""
Centralized error handling for bugcheck detectors.
"""

import logging
from contextlib import contextmanager
from pathlib import Path


class BugCheckError(Exception):
    """Base exception for bugcheck errors."""

    pass


class InvalidInputError(BugCheckError):
    """Source text is empty or otherwise unusable."""

    pass


class ConfigurationError(BugCheckError):
    """Configuration could not be loaded or is invalid."""

    pass


class SourceReadError(BugCheckError):
    """Error reading source text."""

    pass


class ErrorHandler:
    """Centralized error handling with consistent logging."""

    def __init__(self, logger_name: str = "bugcheck"):
        """Initialize error handler with logger."""
        self.logger = logging.getLogger(logger_name)
        root = logging.getLogger("bugcheck")
        if not root.handlers:
            # Set up basic logging configuration if none exists
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            root.addHandler(handler)
            root.setLevel(logging.WARNING)

    @contextmanager
    def handle_file_operation(self, file_path: str, operation: str = "reading"):
        """Context manager for file operations with consistent error handling."""
        try:
            yield
        except UnicodeDecodeError as e:
            self.logger.warning("Encoding error in %s: %s", file_path, e)
            raise SourceReadError(f"Encoding error in {file_path}: {e}") from e
        except OSError as e:
            self.logger.warning("Failed %s %s: %s", operation, file_path, e)
            raise SourceReadError(f"Cannot {operation} {file_path}: {e}") from e

    def read_source(self, file_path: str, encoding: str = "utf-8") -> str:
        """Read a source file, raising SourceReadError on failure."""
        with self.handle_file_operation(file_path, "read"):
            return Path(file_path).read_text(encoding=encoding)

    def write_text(self, file_path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text to a file, raising SourceReadError on failure."""
        with self.handle_file_operation(file_path, "write"):
            Path(file_path).write_text(content, encoding=encoding)

    def log_detector_start(self, detector_name: str) -> None:
        """Log the start of a detector run."""
        self.logger.debug("Starting %s detector", detector_name)

    def log_detector_complete(self, detector_name: str, issue_count: int) -> None:
        """Log the completion of a detector run."""
        self.logger.debug(
            "Completed %s detector: %s issues", detector_name, issue_count
        )

    def log_detector_skipped(self, detector_name: str, reason: str) -> None:
        """Log when a detector is skipped."""
        self.logger.debug("Skipping %s detector: %s", detector_name, reason)
