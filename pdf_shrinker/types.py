"""
Type definitions and dataclasses for PDF Shrinker.

This module defines the values passed between the option resolver, the
Ghostscript engine and the command-line interface.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class CompressionRequest:
    """
    A validated compression request.

    Attributes:
        input_path: Source PDF file
        output_path: Destination file, derived from the input when not given
        level: Compression level, 1 (lightest) to 5 (most aggressive)
        verbose: Whether engine output and diagnostics should be echoed
    """
    input_path: Path
    output_path: Path
    level: int = 3
    verbose: bool = False


@dataclass(frozen=True)
class CompressionResult:
    """
    Outcome of a successful compression run.

    Attributes:
        input_path: Source PDF file
        output_path: File written by Ghostscript
        level: Compression level that was applied
        input_size_bytes: Size of the source file
        output_size_bytes: Size of the written file
    """
    input_path: Path
    output_path: Path
    level: int
    input_size_bytes: int
    output_size_bytes: int

    @property
    def ratio(self) -> float:
        """Input size divided by output size."""
        if self.output_size_bytes == 0:
            return float("inf")
        return self.input_size_bytes / self.output_size_bytes

    @property
    def percent_saved(self) -> float:
        """Share of the input size removed, in percent."""
        if self.input_size_bytes == 0:
            return 0.0
        return (1 - self.output_size_bytes / self.input_size_bytes) * 100

    @property
    def bytes_saved(self) -> int:
        return self.input_size_bytes - self.output_size_bytes


class EngineState(str, Enum):
    """Lifecycle of a single Ghostscript child process."""

    STARTING = "starting"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    NOT_FOUND = "not_found"

    @property
    def is_terminal(self) -> bool:
        return self in (EngineState.SUCCEEDED, EngineState.FAILED, EngineState.NOT_FOUND)
