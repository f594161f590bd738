from __future__ import annotations

from typing import Optional


class FileReportError(Exception):
    """Base class for every error raised while building a file report."""


class NotFoundError(FileReportError):
    """The input folder does not exist or is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"Directory not found: {path}")
        self.path = path


class AccessError(FileReportError):
    """A directory or file could not be read during the scan.

    These are not fatal: the enumerator and aggregator log them as warnings,
    skip the offending path and keep going.
    """

    def __init__(self, path: str, cause: Optional[OSError] = None):
        reason = cause.strerror if cause is not None and cause.strerror else str(cause or "unreadable")
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.cause = cause


class WriteError(FileReportError):
    """The output report could not be created or written."""

    def __init__(self, path: str, cause: Optional[Exception] = None):
        reason = getattr(cause, "strerror", None) or str(cause or "write failed")
        super().__init__(f"Cannot write report to {path}: {reason}")
        self.path = path
        self.cause = cause


class ConfigError(FileReportError):
    """A YAML config file is missing, malformed, or holds invalid values."""
