"""
PDF Shrinker - compress PDF files by delegating to Ghostscript.

A compression level from 1 (light) to 5 (maximum) selects one of five fixed
Ghostscript profiles. The tool itself never parses PDF data.

Quick Start:
    >>> from pdf_shrinker import GhostscriptEngine, resolve_request
    >>> request = resolve_request('input.pdf', level=4)
    >>> result = GhostscriptEngine().compress(request)
    >>> print(f"{result.ratio:.2f}x")

For CLI usage, use the 'pdf-shrinker' command after installation.
"""

__version__ = "1.0.0"
__author__ = "PDF Shrinker Contributors"
__license__ = "MIT"

# Core
from pdf_shrinker.engine import GhostscriptEngine, compress_pdf
from pdf_shrinker.options import derive_output_path, parse_level, resolve_request
from pdf_shrinker.profiles import LEVEL_PROFILES, LevelProfile, build_engine_arguments, get_profile

# Configuration and data types
from pdf_shrinker.config import ShrinkerSettings
from pdf_shrinker.types import CompressionRequest, CompressionResult, EngineState

# Exceptions
from pdf_shrinker.exceptions import (
    PDFShrinkerException,
    InputNotFoundError,
    InvalidInputTypeError,
    InvalidLevelError,
    EngineNotFoundError,
    EngineFailureError,
    OutputMissingError,
)

__all__ = [
    "GhostscriptEngine",
    "compress_pdf",
    "derive_output_path",
    "parse_level",
    "resolve_request",
    "LEVEL_PROFILES",
    "LevelProfile",
    "build_engine_arguments",
    "get_profile",
    "ShrinkerSettings",
    "CompressionRequest",
    "CompressionResult",
    "EngineState",
    "PDFShrinkerException",
    "InputNotFoundError",
    "InvalidInputTypeError",
    "InvalidLevelError",
    "EngineNotFoundError",
    "EngineFailureError",
    "OutputMissingError",
    "__version__",
]
