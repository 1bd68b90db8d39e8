"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

PDF_REPORT = (
    "\r\n"
    "TrID/32 - File Identifier v2.24 - (C) 2003-16 By M.Pontello\r\n"
    "Definitions found:  17935\r\n"
    "Analyzing...\r\n"
    "\r\n"
    "Collecting data from file: sample.pdf\r\n"
    " 85.50% (.PDF) Adobe Portable Document Format (5000/1)\r\n"
    "        Mime type: application/pdf\r\n"
    "      Related URL: http://www.adobe.com/\r\n"
    "       Definition: adobe-pdf.trid.xml\r\n"
    "\r\n"
    " 10.00% (.PS) PostScript (1000/2)\r\n"
    "       Definition: ps.trid.xml\r\n"
)


class FakeProcess:
    """Stand-in for subprocess.Popen objects."""

    def __init__(self, output=b"", returncode=0, hang=False, partial=b"", stuck=False):
        self.pid = 2**22 + 7
        self.args = ["trid"]
        self.output = output
        self.partial = partial
        self.hang = hang
        self.stuck = stuck
        self.killed = False
        self.stdout = None
        self.returncode = None
        self._final_returncode = returncode
        self.communicate_calls = []

    def communicate(self, timeout=None):
        self.communicate_calls.append(timeout)
        if self.hang and (self.stuck or not self.killed):
            raise subprocess.TimeoutExpired(self.args, timeout, output=self.partial)
        self.returncode = -9 if self.killed else self._final_returncode
        return self.output, None

    def kill(self):
        self.killed = True


class FakePopen:
    """Callable replacing subprocess.Popen, recording every launch."""

    def __init__(self, process=None, error=None):
        self.process = process or FakeProcess()
        self.error = error
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        if self.error is not None:
            raise self.error
        return self.process


@pytest.fixture
def pdf_report() -> str:
    return PDF_REPORT


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.pdf"
    path.write_bytes(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n%%EOF\n")
    return path


@pytest.fixture
def fake_popen():
    def _make(output=b"", returncode=0, hang=False, partial=b"", error=None, stuck=False):
        process = FakeProcess(
            output=output, returncode=returncode, hang=hang, partial=partial, stuck=stuck
        )
        return FakePopen(process=process, error=error)

    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TRIDINSPECT_CMD", "TRIDINSPECT_DEFINITIONS", "TRIDINSPECT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
