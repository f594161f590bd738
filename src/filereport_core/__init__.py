"""File Report Core Module

Configuration, the error taxonomy, logging setup and the byte-size formatter
shared by the scanning, rendering and CLI packages.
"""

from filereport_core.config import ReportConfig, load_config
from filereport_core.errors import (
    AccessError,
    ConfigError,
    FileReportError,
    NotFoundError,
    WriteError,
)
from filereport_core.logging_utils import setup_logging
from filereport_core.sizes import format_byte_size

__all__ = [
    # Config
    "ReportConfig",
    "load_config",
    # Errors
    "AccessError",
    "ConfigError",
    "FileReportError",
    "NotFoundError",
    "WriteError",
    # Utilities
    "format_byte_size",
    "setup_logging",
]
