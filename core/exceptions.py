"""
Custom exceptions for the Photo Print Station.

Exception Hierarchy:
    PrintStationError (base)
    ├── ValidationError          - Missing printer or bad image payload (surfaced)
    ├── UnsupportedPlatformError - No OS print pathway available (surfaced)
    ├── ProbeUnavailableError    - Capability query failed (absorbed, never surfaced)
    └── SubmissionError          - OS print command failed (surfaced verbatim)
        └── SubmissionTimeoutError - OS print command exceeded its time limit

Usage:
    ValidationError and UnsupportedPlatformError are raised before any OS
    interaction. SubmissionError carries the print command's own message so
    the kiosk can show it as-is. ProbeUnavailableError is caught inside the
    dispatcher and converted into "no capability data".
"""

from typing import Optional, Dict, Any


class PrintStationError(Exception):
    """
    Base exception for all Photo Print Station errors.

    All custom exceptions inherit from this class, allowing callers to catch
    all application-specific errors with a single except clause if needed.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# =============================================================================
# REQUEST ERRORS - Raised before any OS interaction
# =============================================================================

class ValidationError(PrintStationError):
    """
    The print request is not usable.

    Raised when no printer is selected or the image payload is not a
    PNG/JPEG data URL. No temp file is written and no command is run.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, details)
        self.field = field


class UnsupportedPlatformError(PrintStationError):
    """
    There is no command-line print pathway on this system.

    Typical causes:
    - Running on Windows (no CUPS)
    - CUPS client tools (lp, lpoptions) not installed
    """

    def __init__(self, message: str = "Native CUPS printing is not supported on this platform"):
        details = {
            "resolution": "Install the CUPS client tools or run on a POSIX system"
        }
        super().__init__(message, details)


# =============================================================================
# RUNTIME ERRORS - Attempt fails or degrades gracefully
# =============================================================================

class ProbeUnavailableError(PrintStationError):
    """
    The printer's capability listing could not be read.

    Many drivers do not answer long-form option queries at all. This is a
    normal condition: the dispatcher falls back to generic grayscale options.
    """

    def __init__(self, device_name: str, reason: str):
        message = f"Capability query unavailable for '{device_name}': {reason}"
        super().__init__(message, {"device_name": device_name})
        self.device_name = device_name
        self.reason = reason


class SubmissionError(PrintStationError):
    """
    The OS print command failed.

    The message is the command's own diagnostic (bad destination name,
    stopped queue, permission denied, ...) and is passed to the caller
    verbatim.
    """

    def __init__(
        self,
        message: str,
        device_name: Optional[str] = None,
        returncode: Optional[int] = None,
    ):
        details: Dict[str, Any] = {}
        if device_name:
            details["device_name"] = device_name
        if returncode is not None:
            details["returncode"] = returncode
        super().__init__(message, details)
        self.device_name = device_name
        self.returncode = returncode


class SubmissionTimeoutError(SubmissionError):
    """The OS print command did not return within the configured limit."""

    def __init__(self, device_name: str, timeout_seconds: float):
        message = f"Print submission to '{device_name}' timed out after {timeout_seconds:.1f}s"
        super().__init__(message, device_name=device_name)
        self.timeout_seconds = timeout_seconds
