"""File Report Data Module

This module walks the input tree and aggregates file counts and sizes per
extension.
"""

from filereport_data.aggregate import (
    NO_EXTENSION,
    ExtensionGroup,
    Report,
    aggregate,
    group_key,
    sort_groups,
)
from filereport_data.sources import FileRecord, FileWalker, enumerate_files, extension_of

__all__ = [
    "NO_EXTENSION",
    "ExtensionGroup",
    "FileRecord",
    "FileWalker",
    "Report",
    "aggregate",
    "enumerate_files",
    "extension_of",
    "group_key",
    "sort_groups",
]
