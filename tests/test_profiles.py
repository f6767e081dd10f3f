from __future__ import annotations

from pathlib import Path

import pytest

from pdf_shrinker.exceptions import InvalidLevelError
from pdf_shrinker.profiles import BASE_OPTIONS, LEVEL_PROFILES, build_engine_arguments, get_profile
from pdf_shrinker.types import CompressionRequest


def _request(level: int) -> CompressionRequest:
    return CompressionRequest(Path("in dir/input.pdf"), Path("out dir/output.pdf"), level=level)


def test_every_level_has_a_profile() -> None:
    assert sorted(LEVEL_PROFILES) == [1, 2, 3, 4, 5]
    for level, profile in LEVEL_PROFILES.items():
        assert profile.level == level


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
def test_arguments_are_deterministic(level: int) -> None:
    assert build_engine_arguments(_request(level)) == build_engine_arguments(_request(level))


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
def test_arguments_start_with_base_and_end_with_paths(level: int) -> None:
    arguments = build_engine_arguments(_request(level))

    assert tuple(arguments[: len(BASE_OPTIONS)]) == BASE_OPTIONS
    assert "-dSAFER" in arguments
    assert arguments[-2] == f"-sOutputFile={Path('out dir/output.pdf')}"
    assert arguments[-1] == str(Path("in dir/input.pdf"))


def test_default_level_profile() -> None:
    arguments = get_profile(3).to_arguments()

    assert "-dPDFSETTINGS=/ebook" in arguments
    assert "-dCompatibilityLevel=1.5" in arguments
    assert "-dColorImageResolution=110" in arguments
    assert "-dGrayImageResolution=110" in arguments
    assert "-dMonoImageResolution=150" in arguments
    assert "-dColorImageDownsampleType=/Average" in arguments
    assert "-dMonoImageDownsampleType=/Bicubic" in arguments
    assert "-dJPEGQ=80" in arguments


def test_light_profile_disables_auto_filter() -> None:
    arguments = get_profile(1).to_arguments()

    assert "-dPDFSETTINGS=/prepress" in arguments
    assert "-dCompatibilityLevel=1.7" in arguments
    assert "-dAutoFilterColorImages=false" in arguments
    assert "-dAutoFilterGrayImages=false" in arguments
    assert "-dJPEGQ=95" in arguments


def test_only_maximum_level_carries_font_and_duplicate_flags() -> None:
    maximum = get_profile(5).to_arguments()

    assert "-dPDFSETTINGS=/screen" in maximum
    assert maximum[-6:] == [
        "-dEmbedAllFonts=false",
        "-dSubsetFonts=true",
        "-dCompressFonts=true",
        "-dConvertCMYKImagesToRGB=true",
        "-dDetectDuplicateImages=true",
        "-dOptimize=true",
    ]
    for level in (1, 2, 3, 4):
        assert not any("Fonts" in arg for arg in get_profile(level).to_arguments())


@pytest.mark.parametrize(
    ("level", "color", "mono", "mono_filter", "quality"),
    [
        (2, 150, 200, "/Bicubic", 85),
        (4, 96, 150, "/Subsample", 75),
        (5, 72, 72, "/Subsample", 50),
    ],
)
def test_profile_table(level: int, color: int, mono: int, mono_filter: str, quality: int) -> None:
    profile = get_profile(level)

    assert profile.color_dpi == profile.gray_dpi == color
    assert profile.mono_dpi == mono
    assert profile.mono_downsample == mono_filter
    assert profile.jpeg_quality == quality


@pytest.mark.parametrize("level", [0, 6, "3", None])
def test_get_profile_rejects_unknown_levels(level) -> None:
    with pytest.raises(InvalidLevelError):
        get_profile(level)
