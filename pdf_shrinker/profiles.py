"""Ghostscript directive profiles for each compression level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from .exceptions import InvalidLevelError
from .types import CompressionRequest

MIN_LEVEL = 1
MAX_LEVEL = 5
DEFAULT_LEVEL = 3

# Shared by every level: write a PDF, never prompt, suppress banners, exit
# after the last page, and forbid file/device operations from the document.
BASE_OPTIONS: Tuple[str, ...] = (
    "-sDEVICE=pdfwrite",
    "-dNOPAUSE",
    "-dQUIET",
    "-dBATCH",
    "-dSAFER",
)


@dataclass(frozen=True)
class LevelProfile:
    """Fixed Ghostscript configuration for one compression level."""

    level: int
    name: str
    pdf_settings: str
    compatibility: str
    color_dpi: int
    gray_dpi: int
    mono_dpi: int
    color_downsample: str
    gray_downsample: str
    mono_downsample: str
    auto_filter: bool
    jpeg_quality: int
    image_filter: str = "/DCTEncode"
    extra: Tuple[str, ...] = ()

    def to_arguments(self) -> list[str]:
        """Render this profile as Ghostscript command-line directives."""

        auto_filter = "true" if self.auto_filter else "false"
        return [
            *BASE_OPTIONS,
            f"-dPDFSETTINGS={self.pdf_settings}",
            f"-dCompatibilityLevel={self.compatibility}",
            f"-dColorImageResolution={self.color_dpi}",
            f"-dGrayImageResolution={self.gray_dpi}",
            f"-dMonoImageResolution={self.mono_dpi}",
            f"-dColorImageDownsampleType={self.color_downsample}",
            f"-dGrayImageDownsampleType={self.gray_downsample}",
            f"-dMonoImageDownsampleType={self.mono_downsample}",
            f"-dAutoFilterColorImages={auto_filter}",
            f"-dAutoFilterGrayImages={auto_filter}",
            f"-dColorImageFilter={self.image_filter}",
            f"-dGrayImageFilter={self.image_filter}",
            f"-dJPEGQ={self.jpeg_quality}",
            *self.extra,
        ]


LEVEL_PROFILES: Mapping[int, LevelProfile] = {
    1: LevelProfile(
        1, "light", "/prepress", "1.7",
        color_dpi=300, gray_dpi=300, mono_dpi=300,
        color_downsample="/Bicubic", gray_downsample="/Bicubic", mono_downsample="/Bicubic",
        auto_filter=False, jpeg_quality=95,
    ),
    2: LevelProfile(
        2, "medium", "/printer", "1.6",
        color_dpi=150, gray_dpi=150, mono_dpi=200,
        color_downsample="/Bicubic", gray_downsample="/Bicubic", mono_downsample="/Bicubic",
        auto_filter=True, jpeg_quality=85,
    ),
    3: LevelProfile(
        3, "balanced", "/ebook", "1.5",
        color_dpi=110, gray_dpi=110, mono_dpi=150,
        color_downsample="/Average", gray_downsample="/Average", mono_downsample="/Bicubic",
        auto_filter=True, jpeg_quality=80,
    ),
    4: LevelProfile(
        4, "high", "/ebook", "1.5",
        color_dpi=96, gray_dpi=96, mono_dpi=150,
        color_downsample="/Average", gray_downsample="/Average", mono_downsample="/Subsample",
        auto_filter=True, jpeg_quality=75,
    ),
    5: LevelProfile(
        5, "maximum", "/screen", "1.4",
        color_dpi=72, gray_dpi=72, mono_dpi=72,
        color_downsample="/Average", gray_downsample="/Average", mono_downsample="/Subsample",
        auto_filter=True, jpeg_quality=50,
        extra=(
            "-dEmbedAllFonts=false",
            "-dSubsetFonts=true",
            "-dCompressFonts=true",
            "-dConvertCMYKImagesToRGB=true",
            "-dDetectDuplicateImages=true",
            "-dOptimize=true",
        ),
    ),
}


def get_profile(level: int) -> LevelProfile:
    """Return the :class:`LevelProfile` for *level*."""

    try:
        return LEVEL_PROFILES[level]
    except (KeyError, TypeError):
        raise InvalidLevelError(
            f"Compression level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level!r}"
        ) from None


def build_engine_arguments(request: CompressionRequest) -> list[str]:
    """Build the Ghostscript arguments for *request*; the input path comes last."""

    arguments = get_profile(request.level).to_arguments()
    arguments.append(f"-sOutputFile={request.output_path}")
    arguments.append(str(request.input_path))
    return arguments
