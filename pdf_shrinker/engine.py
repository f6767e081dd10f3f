"""Ghostscript invocation for :mod:`pdf_shrinker`."""

from __future__ import annotations

import logging
import os
import subprocess
import threading
from typing import IO, Callable, List, Optional

from .config import ShrinkerSettings
from .exceptions import EngineFailureError, EngineNotFoundError, InputNotFoundError, OutputMissingError
from .profiles import build_engine_arguments
from .progress import ProgressCallback, SimulatedProgress
from .types import CompressionRequest, CompressionResult, EngineState
from .utils import which

_LOGGER = logging.getLogger("pdf_shrinker")

OutputCallback = Callable[[str, str], None]


class GhostscriptEngine:
    """
    Run Ghostscript once per request and report the outcome.

    The engine moves through :class:`EngineState`: ``STARTING`` until the
    child process is spawned, ``RUNNING`` until it exits, then one of
    ``SUCCEEDED``, ``FAILED`` or ``NOT_FOUND``. Nothing is retried and there
    is no timeout; a hung Ghostscript blocks :meth:`compress` indefinitely.
    """

    def __init__(self, settings: Optional[ShrinkerSettings] = None) -> None:
        self.settings = settings or ShrinkerSettings()
        self.state: Optional[EngineState] = None

    def _transition(self, state: EngineState) -> None:
        _LOGGER.debug("Engine state: %s -> %s", self.state.value if self.state else None, state.value)
        self.state = state

    def locate(self) -> str:
        """Return the Ghostscript executable to run."""

        if self.settings.executable:
            return self.settings.executable
        executable = which(self.settings.executable_candidates)
        if executable is None:
            raise EngineNotFoundError()
        return executable

    def build_command(self, request: CompressionRequest) -> List[str]:
        """Return the full command line for *request*, executable first."""

        return [self.locate(), *build_engine_arguments(request)]

    def compress(
        self,
        request: CompressionRequest,
        progress_callback: Optional[ProgressCallback] = None,
        output_callback: Optional[OutputCallback] = None,
    ) -> CompressionResult:
        """
        Compress ``request.input_path`` into ``request.output_path``.

        Args:
            request: Validated compression request
            progress_callback: Receives the simulated progress percentage
            output_callback: Receives ``(stream_name, text)`` for every line
                Ghostscript writes to stdout or stderr; when omitted and ``request.verbose`` is set, lines are logged at INFO

        Raises:
            InputNotFoundError: The input file disappeared before the run
            EngineNotFoundError: Ghostscript could not be found or started
            EngineFailureError: Ghostscript exited with a non-zero status
            OutputMissingError: Ghostscript exited with 0 but did not write the output
        """
        self.state = None
        self._transition(EngineState.STARTING)
        try:
            input_size = request.input_path.stat().st_size
        except FileNotFoundError as exc:
            self._transition(EngineState.FAILED)
            raise InputNotFoundError(f"Input file not found: {request.input_path}") from exc

        try:
            command = self.build_command(request)
        except EngineNotFoundError:
            self._transition(EngineState.NOT_FOUND)
            raise

        if output_callback is None and request.verbose:
            output_callback = _log_output
        previous_output = _snapshot(request.output_path)

        _LOGGER.info("Running Ghostscript at level %s", request.level)
        _LOGGER.debug("Executing command: %s", " ".join(command))
        try:
            process = subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except FileNotFoundError as exc:
            self._transition(EngineState.NOT_FOUND)
            raise EngineNotFoundError() from exc
        except OSError as exc:
            self._transition(EngineState.FAILED)
            raise EngineFailureError(f"Failed to start Ghostscript process: {exc}") from exc

        self._transition(EngineState.RUNNING)
        progress = SimulatedProgress(
            progress_callback,
            interval=self.settings.progress_interval,
            step=self.settings.progress_step,
            ceiling=self.settings.progress_ceiling,
        )
        stdout_chunks: List[str] = []
        stderr_chunks: List[str] = []
        readers = [
            threading.Thread(
                target=_pump, args=(process.stdout, "stdout", stdout_chunks, output_callback), daemon=True
            ),
            threading.Thread(
                target=_pump, args=(process.stderr, "stderr", stderr_chunks, output_callback), daemon=True
            ),
        ]

        succeeded = False
        try:
            progress.start()
            for reader in readers:
                reader.start()
            exit_code = process.wait()
            for reader in readers:
                reader.join()
            _LOGGER.debug(
                "Ghostscript finished with exit code %s\nstdout: %s\nstderr: %s",
                exit_code,
                "".join(stdout_chunks),
                "".join(stderr_chunks),
            )

            if exit_code != 0:
                self._transition(EngineState.FAILED)
                raise EngineFailureError(exit_code=exit_code, stderr="".join(stderr_chunks))

            current_output = _snapshot(request.output_path)
            if current_output is None or current_output == previous_output:
                self._transition(EngineState.FAILED)
                raise OutputMissingError(
                    f"Output file was not written despite successful Ghostscript execution: "
                    f"{request.output_path}"
                )

            result = CompressionResult(
                input_path=request.input_path,
                output_path=request.output_path,
                level=request.level,
                input_size_bytes=input_size,
                output_size_bytes=request.output_path.stat().st_size,
            )
            succeeded = True
            self._transition(EngineState.SUCCEEDED)
            return result
        finally:
            progress.finish(success=succeeded)
            if not self.state.is_terminal:
                self._transition(EngineState.FAILED)


def _snapshot(path: os.PathLike[str]) -> Optional[tuple[int, int, int]]:
    """Return (inode, mtime, size) for *path*, or None when it does not exist."""

    try:
        stat = os.stat(path)
    except FileNotFoundError:
        return None
    return stat.st_ino, stat.st_mtime_ns, stat.st_size


def _log_output(name: str, text: str) -> None:
    _LOGGER.info("GS %s: %s", name, text.rstrip())


def _pump(
    stream: Optional[IO[str]],
    name: str,
    sink: List[str],
    callback: Optional[OutputCallback],
) -> None:
    if stream is None:
        return
    with stream:
        for line in iter(stream.readline, ""):
            sink.append(line)
            if callback is None:
                continue
            try:
                callback(name, line)
            except Exception as exc:
                _LOGGER.warning("Output callback failed for %s: %s", name, exc)


def compress_pdf(
    request: CompressionRequest,
    settings: Optional[ShrinkerSettings] = None,
    progress_callback: Optional[ProgressCallback] = None,
    output_callback: Optional[OutputCallback] = None,
) -> CompressionResult:
    """Compress *request* with a fresh :class:`GhostscriptEngine`."""

    engine = GhostscriptEngine(settings)
    return engine.compress(request, progress_callback=progress_callback, output_callback=output_callback)
