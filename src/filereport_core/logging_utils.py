from __future__ import annotations

import logging
import sys
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """Setup logging to stderr and, optionally, to a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
