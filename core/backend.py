"""
Print backend interface.

The dispatcher talks to the operating system only through a PrintBackend.
Production uses CupsBackend (command-line CUPS tools); tests substitute a
fake or a MagicMock so no real print command is ever run.

Contract:
    is_supported()                          -> bool
    probe(device_name)                      -> List[CapabilityOption] (never raises)
    submit(device_name, file_path, options, title) -> job id (raises SubmissionError)
    list_printers()                         -> List[PrinterInfo] (never raises)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from models.capability import CapabilityOption
from models.print_result import PrinterInfo


class PrintBackend(ABC):
    """Abstract OS print pathway."""

    @abstractmethod
    def is_supported(self) -> bool:
        """True if this system can submit print jobs through this backend."""

    @abstractmethod
    def probe(self, device_name: str) -> List[CapabilityOption]:
        """
        Read a printer's advertised options.

        Returns an empty list when the printer does not support
        introspection or the query fails. Must not raise for that reason.
        """

    @abstractmethod
    def submit(
        self,
        device_name: str,
        file_path: Path,
        options: List[str],
        title: Optional[str] = None
    ) -> str:
        """
        Submit a file for printing.

        Args:
            device_name: Destination printer
            file_path: File to print
            options: 'key=value' or flag options, in order
            title: Optional job title

        Returns:
            Submission id reported by the print system

        Raises:
            SubmissionError: If the print system rejects the job
        """

    @abstractmethod
    def list_printers(self) -> List[PrinterInfo]:
        """Printers registered with the OS, default flagged. Never raises."""
