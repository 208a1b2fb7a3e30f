"""
Print result data models.

These models describe the outcome of one print attempt and the printers the
kiosk can choose from. They are what the HTTP layer serializes back to the
kiosk shell.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional


@dataclass(frozen=True)
class GraySelection:
    """
    The option/value pair chosen to force monochrome output.

    At most one selection exists per print attempt. It is either a matched
    option from the printer's capability listing or the IPP fallback
    (print-color-mode=monochrome), never both.
    """

    key: str
    """Base key of the chosen option (or 'print-color-mode')."""

    value: str
    """Value to assign to the option."""

    def as_lp_option(self) -> str:
        """Render as a 'key=value' print command option."""
        return f"{self.key}={self.value}"

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "value": self.value}


@dataclass
class PrintResult:
    """
    Result of a single print attempt.

    Exactly one PrintResult is produced per attempt. On success it carries
    the submission id returned by the print system; on failure it carries
    the error message (print command messages are kept verbatim).
    """

    success: bool
    """Whether the image was accepted by the print system."""

    job: Optional[str] = None
    """Submission id reported by the print command (success only)."""

    applied_gray: Optional[GraySelection] = None
    """Targeted grayscale selection, or None if generic fallbacks were sent."""

    error: Optional[str] = None
    """Failure message (failure only)."""

    options: List[str] = field(default_factory=list)
    """Option strings passed to the print command, for diagnostics."""

    @classmethod
    def succeeded(
        cls,
        job: str,
        applied_gray: Optional[GraySelection],
        options: Optional[List[str]] = None
    ) -> "PrintResult":
        """
        Create a result for an accepted submission.

        Args:
            job: Submission id from the print command
            applied_gray: Selection that was applied, if any
            options: Options that were sent

        Returns:
            Successful PrintResult
        """
        return cls(
            success=True,
            job=job,
            applied_gray=applied_gray,
            options=list(options or []),
        )

    @classmethod
    def failed(cls, error: str, options: Optional[List[str]] = None) -> "PrintResult":
        """
        Create a result for a failed attempt.

        Args:
            error: Description of the failure
            options: Options that were sent before the failure, if any

        Returns:
            Failed PrintResult
        """
        return cls(success=False, error=error, options=list(options or []))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the wire format expected by the kiosk shell.

        Success: {"success": True, "job": ..., "appliedGray": {...} | None}
        Failure: {"success": False, "error": ...}
        """
        if self.success:
            return {
                "success": True,
                "job": self.job,
                "appliedGray": self.applied_gray.to_dict() if self.applied_gray else None,
            }
        return {"success": False, "error": self.error}


@dataclass
class PrinterInfo:
    """A printer registered with the OS print system."""

    name: str
    display_name: str = ""
    description: str = ""
    status: str = ""
    is_default: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the printer picker."""
        return {
            "name": self.name,
            "displayName": self.display_name or self.name,
            "description": self.description,
            "status": self.status,
            "isDefault": self.is_default,
        }
