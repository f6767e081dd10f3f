from __future__ import annotations

import stat
import sys
from pathlib import Path
from typing import Callable

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_shrinker.config import ShrinkerSettings  # noqa: E402

# Stand-in for Ghostscript. Behaviour is selected through FAKE_GS_MODE:
#   ok        write an output a quarter of the input size and exit 0
#   no-output exit 0 without writing anything
#   fail      write to stderr and exit 3
FAKE_GS_SOURCE = """\
#!{python}
import os
import sys

args = sys.argv[1:]
log = os.environ.get("FAKE_GS_ARGS_LOG")
if log:
    with open(log, "w") as fh:
        fh.write("\\n".join(args))

print("Processing pages 1 through 1.", flush=True)
mode = os.environ.get("FAKE_GS_MODE", "ok")
if mode == "fail":
    sys.stderr.write("Error: /undefined in --showpage--\\n")
    sys.exit(3)
if mode == "ok":
    output = [a for a in args if a.startswith("-sOutputFile=")][0][len("-sOutputFile="):]
    size = os.path.getsize(args[-1])
    with open(output, "wb") as fh:
        fh.write(b"%PDF-1.5\\n" + b"0" * max(size // 4 - 9, 0))
sys.exit(0)
"""


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.add_metadata({
        "/Title": "Sample Document",
        "/Author": "pdf-shrinker",
    })
    path = tmp_path / "sample.pdf"
    with path.open("wb") as fh:
        writer.write(fh)
    return path


@pytest.fixture()
def sized_pdf(tmp_path: Path) -> Callable[[str, int], Path]:
    def _create(filename: str, size: int) -> Path:
        path = tmp_path / filename
        with path.open("wb") as fh:
            fh.write(b"%PDF-1.4\n")
            fh.write(b"0" * (size - 9))
        return path

    return _create


@pytest.fixture()
def fake_gs(tmp_path: Path) -> Path:
    if sys.platform == "win32":
        pytest.skip("fake Ghostscript relies on a shebang")
    path = tmp_path / "bin" / "gs"
    path.parent.mkdir()
    path.write_text(FAKE_GS_SOURCE.format(python=sys.executable))
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture()
def args_log(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    log = tmp_path / "gs-args.txt"
    monkeypatch.setenv("FAKE_GS_ARGS_LOG", str(log))
    return log


@pytest.fixture()
def fast_settings(fake_gs: Path) -> ShrinkerSettings:
    return ShrinkerSettings(executable=str(fake_gs), progress_interval=0.01)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PDF_SHRINKER_GS", "PDF_SHRINKER_PROGRESS_INTERVAL", "FAKE_GS_MODE", "FAKE_GS_ARGS_LOG"):
        monkeypatch.delenv(name, raising=False)
