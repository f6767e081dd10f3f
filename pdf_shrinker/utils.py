"""Utility helpers for :mod:`pdf_shrinker`."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Sequence

_LOGGER = logging.getLogger("pdf_shrinker")


def configure_logging(verbose: bool = False) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def to_path(path: os.PathLike[str] | str) -> Path:
    """Normalize *path* into a :class:`~pathlib.Path` with ``~`` expanded."""

    return Path(path).expanduser()


def which(executables: Sequence[str]) -> str | None:
    """Return the first executable from *executables* found on ``PATH``."""

    for candidate in executables:
        found = shutil.which(candidate)
        if found:
            _LOGGER.debug("Detected external tool: %s -> %s", candidate, found)
            return found
    return None


def format_megabytes(size_bytes: int) -> str:
    """Format *size_bytes* as megabytes with two decimals, e.g. ``10.00 MB``."""

    return f"{size_bytes / 1024 / 1024:.2f} MB"

