from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from filereport_core.errors import AccessError
from filereport_data.sources import ErrorHandler, FileRecord

logger = logging.getLogger(__name__)

NO_EXTENSION = "no extension"


@dataclass
class ExtensionGroup:
    """Running count and byte total for one extension."""

    extension: str
    count: int = 0
    total_bytes: int = 0

    def add(self, size: int) -> None:
        self.count += 1
        self.total_bytes += size


@dataclass
class Report:
    """Aggregated scan results, groups ordered largest first.

    Attributes:
        groups: One ExtensionGroup per extension, sorted by total_bytes descending
        skipped: Paths that could not be read, in the order they were met
        root: Folder the report was built from, if known
    """

    groups: List[ExtensionGroup] = field(default_factory=list)
    skipped: List[AccessError] = field(default_factory=list)
    root: Optional[str] = None

    @property
    def total_files(self) -> int:
        return sum(g.count for g in self.groups)

    @property
    def total_bytes(self) -> int:
        return sum(g.total_bytes for g in self.groups)


def group_key(extension: str) -> str:
    return extension or NO_EXTENSION


def sort_groups(groups: Iterable[ExtensionGroup]) -> List[ExtensionGroup]:
    """Order groups by total size, largest first; equal sizes by extension."""
    return sorted(groups, key=lambda g: (-g.total_bytes, g.extension))


def aggregate(
    paths: Iterable[str],
    progress_interval: int = 0,
    on_error: Optional[ErrorHandler] = None,
) -> Report:
    """Group files by extension in a single pass.

    Each path is stat'ed once. Files whose size cannot be read are skipped
    with a warning and listed in ``Report.skipped``; they are not counted.

    Args:
        paths: File paths, typically from ``enumerate_files``
        progress_interval: Log progress every N files (0 = never)
        on_error: Called with an AccessError for each unreadable file

    Returns:
        Report with groups sorted by total size descending
    """
    groups: Dict[str, ExtensionGroup] = {}
    skipped: List[AccessError] = []
    seen = 0

    for path in paths:
        try:
            record = FileRecord.from_path(path)
        except OSError as exc:
            error = AccessError(path, exc)
            logger.warning("Skipping %s", error)
            skipped.append(error)
            if on_error is not None:
                on_error(error)
            continue

        key = group_key(record.extension)
        group = groups.get(key)
        if group is None:
            group = groups[key] = ExtensionGroup(key)
        group.add(record.size)

        seen += 1
        if progress_interval and seen % progress_interval == 0:
            logger.info(f"  Processed {seen} files...")

    logger.debug(f"Aggregated {seen} files into {len(groups)} extension groups")
    return Report(groups=sort_groups(groups.values()), skipped=skipped)
