"""
Core module for the Photo Print Station.

Contains the OS-facing infrastructure:
- exceptions: Custom exception hierarchy
- backend: PrintBackend interface used by the dispatcher
- cups_backend: CUPS command-line implementation (lp, lpoptions, lpstat)
"""

from .exceptions import (
    PrintStationError,
    ValidationError,
    UnsupportedPlatformError,
    ProbeUnavailableError,
    SubmissionError,
    SubmissionTimeoutError,
)
from .backend import PrintBackend
from .cups_backend import CupsBackend

__all__ = [
    "PrintStationError",
    "ValidationError",
    "UnsupportedPlatformError",
    "ProbeUnavailableError",
    "SubmissionError",
    "SubmissionTimeoutError",
    "PrintBackend",
    "CupsBackend",
]
