"""
Custom exceptions for PDF Shrinker.

Every failure of a compression run maps onto one of these types. None of
them are retried; the CLI reports them and exits with a non-zero status.
"""

from typing import Optional


class PDFShrinkerException(Exception):
    """Base exception for all PDF Shrinker errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF shrinker error occurred."


class InputNotFoundError(PDFShrinkerException):
    """Raised when the input path does not reference an existing file."""

    @property
    def default_message(self) -> str:
        return "Input file not found."


class InvalidInputTypeError(PDFShrinkerException):
    """Raised when the input file does not carry a .pdf extension."""

    @property
    def default_message(self) -> str:
        return "Input file must be a PDF."


class InvalidLevelError(PDFShrinkerException):
    """Raised when the compression level is not an integer in 1-5."""

    @property
    def default_message(self) -> str:
        return "Compression level must be between 1 and 5."


class EngineNotFoundError(PDFShrinkerException):
    """Raised when the Ghostscript executable cannot be located or started."""

    @property
    def default_message(self) -> str:
        return (
            "Ghostscript (gs) executable not found. "
            "Please make sure Ghostscript is installed on your system."
        )


class EngineFailureError(PDFShrinkerException):
    """Raised when Ghostscript runs but does not finish successfully."""

    def __init__(
        self,
        message: str = "",
        exit_code: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        if not message and exit_code is not None:
            message = f"Ghostscript exited with code {exit_code}"
            if stderr.strip():
                message = f"{message}: {stderr.strip()}"
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Ghostscript compression failed."


class OutputMissingError(PDFShrinkerException):
    """Raised when Ghostscript reports success but wrote no output file."""

    @property
    def default_message(self) -> str:
        return "Output file was not created despite successful Ghostscript execution."
