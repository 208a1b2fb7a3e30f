"""Shared fixtures for the Photo Print Station tests."""

from __future__ import annotations

import base64
import struct
import zlib
from pathlib import Path
from typing import List, Optional

import pytest

from core.backend import PrintBackend
from core.exceptions import SubmissionError
from models.print_result import PrinterInfo
from modules.capabilities import parse_capability_listing


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def make_png(width: int = 10, height: int = 10) -> bytes:
    """Build a minimal 8-bit grayscale PNG."""
    header = struct.pack(">IIBBBBB", width, height, 8, 0, 0, 0, 0)
    rows = b"".join(b"\x00" + b"\x80" * width for _ in range(height))
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(rows))
        + _png_chunk(b"IEND", b"")
    )


class FakeBackend(PrintBackend):
    """
    In-memory PrintBackend.

    Returns a canned capability listing and records every submission,
    including whether the transient file existed when lp would have read it.
    """

    def __init__(
        self,
        listing: str = "",
        job: str = "request id is HP_LaserJet-1 (1 file(s))",
        supported: bool = True,
        submit_error: Optional[Exception] = None,
        printers: Optional[List[PrinterInfo]] = None,
    ):
        self.listing = listing
        self.job = job
        self.supported = supported
        self.submit_error = submit_error
        self.printers = printers or []
        self.probe_calls: List[str] = []
        self.submissions: List[dict] = []

    def is_supported(self) -> bool:
        return self.supported

    def probe(self, device_name: str):
        self.probe_calls.append(device_name)
        return parse_capability_listing(self.listing)

    def submit(self, device_name: str, file_path: Path, options, title=None) -> str:
        self.submissions.append({
            "device_name": device_name,
            "file_path": file_path,
            "file_existed": file_path.exists(),
            "file_bytes": file_path.read_bytes() if file_path.exists() else b"",
            "options": list(options),
            "title": title,
        })
        if self.submit_error is not None:
            raise self.submit_error
        return self.job

    def list_printers(self):
        return list(self.printers)


@pytest.fixture
def png_bytes():
    """A valid 10x10 PNG."""
    return make_png(10, 10)


@pytest.fixture
def png_data_url(png_bytes):
    """The 10x10 PNG as a data URL."""
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def jpeg_data_url():
    """A JPEG-signed payload as a data URL."""
    payload = b"\xff\xd8\xff\xe0" + b"\x00" * 16 + b"\xff\xd9"
    return "data:image/jpeg;base64," + base64.b64encode(payload).decode("ascii")


@pytest.fixture
def fake_backend():
    """Supported backend with no capability data."""
    return FakeBackend()


@pytest.fixture
def failing_backend():
    """Backend whose submissions are rejected by lp."""
    return FakeBackend(
        submit_error=SubmissionError("lp: The printer or class does not exist.")
    )
