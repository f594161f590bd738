from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from filereport_core.errors import AccessError, NotFoundError

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[AccessError], None]


def extension_of(name: str) -> str:
    """Return the lowercase extension of a file name, including the dot.

    The extension is the text from the last ``.`` onwards. Names without a
    dot, dot-files such as ``.bashrc`` and names ending in a dot have no
    extension and return an empty string. Treating ``.bashrc`` as having no
    extension follows ``os.path.splitext`` and deliberately differs from
    .NET's ``FileInfo.Extension``, which would report ``.bashrc``.

    Bytes that are not valid in the filesystem encoding are replaced with
    U+FFFD so the result can always be written as UTF-8.
    """
    name = os.fsencode(os.path.basename(name)).decode("utf-8", errors="replace")
    idx = name.rfind(".")
    if idx <= 0 or idx == len(name) - 1:
        return ""
    return name[idx:].lower()


@dataclass
class FileRecord:
    """A scanned file and the metadata needed to classify it.

    Attributes:
        path: Path of the file as produced by the walker
        extension: Normalized extension ("" when the file has none)
        size: File length in bytes
    """

    path: str
    extension: str
    size: int

    @classmethod
    def from_path(cls, path: str) -> "FileRecord":
        """Stat ``path`` and build a record. Raises OSError if it cannot be read."""
        st = os.stat(path)
        return cls(path=path, extension=extension_of(path), size=st.st_size)


class FileWalker:
    """Lazy depth-first walk over every file below a root directory.

    The root is checked on construction, so a missing folder fails before
    any traversal. Iteration uses an explicit directory stack and yields
    file paths one at a time; a walker can be consumed only once.

    Directories that cannot be listed are skipped: each failure is logged
    as a warning, appended to ``errors`` and passed to ``on_error``.
    """

    def __init__(
        self,
        root: str,
        follow_symlinks: bool = False,
        on_error: Optional[ErrorHandler] = None,
    ):
        root = os.fspath(root)
        if not os.path.isdir(root):
            raise NotFoundError(root)

        self.root = root
        self.follow_symlinks = follow_symlinks
        self.on_error = on_error
        self.errors: List[AccessError] = []
        self._consumed = False

    def __iter__(self) -> Iterator[str]:
        if self._consumed:
            raise RuntimeError(f"FileWalker for {self.root} has already been consumed")
        self._consumed = True
        return self._walk()

    def _walk(self) -> Iterator[str]:
        stack = [self.root]
        while stack:
            directory = stack.pop()
            try:
                with os.scandir(directory) as it:
                    entries = list(it)
            except OSError as exc:
                self._skip(directory, exc)
                continue

            subdirs = []
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=self.follow_symlinks):
                        subdirs.append(entry.path)
                    elif entry.is_file():
                        yield entry.path
                except OSError as exc:
                    self._skip(entry.path, exc)

            # Reversed so subdirectories are visited in listing order
            stack.extend(reversed(subdirs))

    def _skip(self, path: str, exc: OSError) -> None:
        error = AccessError(path, exc)
        logger.warning("Skipping %s", error)
        self.errors.append(error)
        if self.on_error is not None:
            self.on_error(error)

    def __repr__(self) -> str:
        return f"FileWalker(root={self.root}, follow_symlinks={self.follow_symlinks}, errors={len(self.errors)})"


def enumerate_files(
    root: str,
    follow_symlinks: bool = False,
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[str]:
    """Iterate over every file path below ``root``.

    Args:
        root: Directory to scan
        follow_symlinks: Descend into symlinked directories
        on_error: Called with an AccessError for each unreadable directory

    Returns:
        Single-use iterator of file paths

    Raises:
        NotFoundError: If ``root`` is missing or not a directory
    """
    return iter(FileWalker(root, follow_symlinks=follow_symlinks, on_error=on_error))
