"""Validation of user-supplied compression options."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Union

from .exceptions import InputNotFoundError, InvalidInputTypeError, InvalidLevelError
from .profiles import DEFAULT_LEVEL, MAX_LEVEL, MIN_LEVEL
from .types import CompressionRequest
from .utils import to_path

_LOGGER = logging.getLogger("pdf_shrinker")

OUTPUT_SUFFIX = "-compressed"


def derive_output_path(input_path: os.PathLike[str] | str) -> Path:
    """Return ``<input-dir>/<input-stem>-compressed.pdf`` for *input_path*."""

    source = Path(input_path)
    return source.with_name(f"{source.stem}{OUTPUT_SUFFIX}.pdf")


def parse_level(level: Union[int, str]) -> int:
    """Parse *level* into an integer compression level between 1 and 5."""

    if isinstance(level, bool):
        raise InvalidLevelError(f"Invalid compression level: {level!r}")
    if isinstance(level, int):
        value = level
    else:
        try:
            value = int(str(level).strip())
        except ValueError:
            raise InvalidLevelError(
                f"Compression level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level!r}"
            ) from None
    if not MIN_LEVEL <= value <= MAX_LEVEL:
        raise InvalidLevelError(
            f"Compression level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {value}"
        )
    return value


def resolve_request(
    input_path: os.PathLike[str] | str,
    output_path: os.PathLike[str] | str | None = None,
    level: Union[int, str] = DEFAULT_LEVEL,
    verbose: bool = False,
    notify: Optional[Callable[[str], None]] = None,
) -> CompressionRequest:
    """
    Validate raw options and build a :class:`CompressionRequest`.

    Args:
        input_path: Source PDF; must be an existing file ending in ``.pdf``
        output_path: Destination; derived from the input when omitted
        level: Compression level, as an int or a decimal string
        verbose: Carried through to the request unchanged
        notify: Receives the informational notice naming a derived output path

    Raises:
        InputNotFoundError: The input path is missing or not a regular file
        InvalidInputTypeError: The input does not have a ``.pdf`` extension
        InvalidLevelError: The level is not an integer between 1 and 5
    """
    source = to_path(input_path)
    if not source.is_file():
        raise InputNotFoundError(f"Input file not found: {input_path}")

    if source.suffix.lower() != ".pdf":
        raise InvalidInputTypeError(f"Input file must be a PDF: {input_path}")

    if output_path:
        destination = to_path(output_path)
    else:
        destination = derive_output_path(source)
        notice = f"No output specified, using: {destination}"
        _LOGGER.info(notice)
        if notify is not None:
            notify(notice)

    request = CompressionRequest(
        input_path=source,
        output_path=destination,
        level=parse_level(level),
        verbose=verbose,
    )
    _LOGGER.debug("Resolved request: %s", request)
    return request
