"""Exceptions raised while building a Salix site."""

from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Error during site build with file context.

    Attributes:
        source_path: Path to the file or directory that caused the error.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        source_path: Path,
        message: str,
        original_error: Exception | None = None,
    ):
        self.source_path = source_path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_path}: {message}")


def format_error_message(exc: Exception) -> str:
    """Format an exception into a user-friendly error message.

    Args:
        exc: The exception to format.

    Returns:
        A human-readable error message.
    """
    error_type = type(exc).__name__
    if isinstance(exc, OSError) and exc.strerror:
        return f"{error_type}: {exc.strerror}"
    return f"{error_type}: {exc}"
