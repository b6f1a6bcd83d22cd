"""
Error taxonomy: every failure the generator can raise.

All of them are fatal for the generation run. Nothing here is retried:
a bad file name or a clash is an authoring mistake and the run must
stop before any partial output reaches disk.
"""

from __future__ import annotations

from pathlib import Path


class MimicError(Exception):
    """Base class for all generator errors."""


class InvalidFileNameError(MimicError):
    """Raised when ``add`` receives a path instead of a bare file name."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(
            f"invalid file name {file_name!r}: expected a bare name, "
            "use with_path() to place files in sub-directories"
        )


class InvalidPathError(MimicError):
    """Raised when a sub-path segment is absolute or walks upward."""

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"invalid path segment {segment!r}")


class EncodingError(MimicError):
    """Raised when an encoder's output cannot be fully read."""

    def __init__(self, message: str, file_name: str = "") -> None:
        self.file_name = file_name
        super().__init__(f"failed to output {file_name}: {message}" if file_name else message)


class FilenameClashError(MimicError):
    """Raised when two ``add`` calls resolve to the same output path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"filename clash: {path}")


class DirectoryCreationError(MimicError):
    """Raised when the write pass cannot create an output directory."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        super().__init__(f"create directory {path}: {cause}")


class FileWriteError(MimicError):
    """Raised when the write pass cannot write an output file."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        super().__init__(f"write file to {path}: {cause}")


class ConfigError(MimicError):
    """Raised when generator configuration is invalid or unreadable."""
