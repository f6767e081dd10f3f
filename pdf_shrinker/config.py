"""Runtime settings for :mod:`pdf_shrinker`."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

ENV_EXECUTABLE = "PDF_SHRINKER_GS"
ENV_PROGRESS_INTERVAL = "PDF_SHRINKER_PROGRESS_INTERVAL"

DEFAULT_EXECUTABLES: Tuple[str, ...] = ("gs", "gswin64c", "gswin32c")


@dataclass(frozen=True)
class ShrinkerSettings:
    """Settings for locating Ghostscript and animating the progress bar."""

    # Explicit engine path; searched on PATH when unset
    executable: Optional[str] = None
    executable_candidates: Tuple[str, ...] = DEFAULT_EXECUTABLES

    # Simulated progress
    progress_interval: float = 0.2
    progress_step: float = 5
    progress_ceiling: float = 99

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.progress_interval <= 0:
            raise ValueError("Progress interval must be positive")
        if self.progress_step <= 0:
            raise ValueError("Progress step must be positive")
        if not 1 <= self.progress_ceiling <= 99:
            raise ValueError("Progress ceiling must be between 1 and 99")
        if not self.executable and not self.executable_candidates:
            raise ValueError("At least one Ghostscript executable name is required")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ShrinkerSettings":
        """Create settings from ``PDF_SHRINKER_*`` environment variables."""
        env = os.environ if environ is None else environ
        kwargs = {}
        executable = env.get(ENV_EXECUTABLE, "").strip()
        if executable:
            kwargs["executable"] = executable
        interval = env.get(ENV_PROGRESS_INTERVAL, "").strip()
        if interval:
            try:
                kwargs["progress_interval"] = float(interval)
            except ValueError as exc:
                raise ValueError(f"{ENV_PROGRESS_INTERVAL} must be a number, got {interval!r}") from exc
        return cls(**kwargs)
