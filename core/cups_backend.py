"""
CUPS command-line print backend.

Wraps the CUPS client tools:

    lpoptions -p DEVICE -l                  capability listing
    lp [-t TITLE] -d DEVICE -o OPT... FILE  submission
    lpstat -l -p / lpstat -d                printer enumeration

Every command runs with a bounded timeout and the C locale, so output can be
parsed regardless of the kiosk's language settings.

FAILURE BEHAVIOR:
    - probe() and list_printers() never raise; failures are logged and an
      empty list is returned
    - submit() raises SubmissionError with lp's own message, or
      SubmissionTimeoutError if lp does not return in time
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from .backend import PrintBackend
from .exceptions import ProbeUnavailableError, SubmissionError, SubmissionTimeoutError
from models.capability import CapabilityOption
from models.print_result import PrinterInfo
from modules.capabilities import parse_capability_listing


PRINTER_LINE_PATTERN = re.compile(r"^printer\s+(\S+)")
DEFAULT_DESTINATION_PATTERN = re.compile(r"system default destination:\s*(.+)")
DESCRIPTION_PATTERN = re.compile(r"^\s+Description:\s*(.*)$")


class CupsBackend(PrintBackend):
    """
    PrintBackend implementation using the CUPS client tools.

    Attributes:
        probe_timeout: Seconds allowed for lpoptions
        submit_timeout: Seconds allowed for lp
        list_timeout: Seconds allowed for each lpstat call
    """

    def __init__(
        self,
        probe_timeout: float = 5.0,
        submit_timeout: float = 30.0,
        list_timeout: float = 5.0,
        lp_command: str = "lp",
        lpoptions_command: str = "lpoptions",
        lpstat_command: str = "lpstat",
        logger: Optional[logging.Logger] = None
    ):
        self.probe_timeout = probe_timeout
        self.submit_timeout = submit_timeout
        self.list_timeout = list_timeout
        self._lp = lp_command
        self._lpoptions = lpoptions_command
        self._lpstat = lpstat_command
        self._logger = logger or logging.getLogger("photo_print_station.core.cups_backend")

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None) -> "CupsBackend":
        """Build a backend from a Flask config mapping."""
        return cls(
            probe_timeout=float(config.get("PROBE_TIMEOUT_SECONDS", 5.0)),
            submit_timeout=float(config.get("SUBMIT_TIMEOUT_SECONDS", 30.0)),
            list_timeout=float(config.get("LIST_TIMEOUT_SECONDS", 5.0)),
            lp_command=config.get("LP_COMMAND", "lp"),
            lpoptions_command=config.get("LPOPTIONS_COMMAND", "lpoptions"),
            lpstat_command=config.get("LPSTAT_COMMAND", "lpstat"),
            logger=logger,
        )

    def _run(self, args: List[str], timeout: float) -> subprocess.CompletedProcess:
        """Run a CUPS tool with captured text output and the C locale."""
        env = dict(os.environ, LC_ALL="C", LANG="C")
        return subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=timeout,
            env=env,
            check=False,
        )

    # =========================================================================
    # PLATFORM
    # =========================================================================

    def is_supported(self) -> bool:
        """True on POSIX systems with the lp command installed."""
        return os.name == "posix" and shutil.which(self._lp) is not None

    # =========================================================================
    # CAPABILITY PROBE
    # =========================================================================

    def query_capabilities(self, device_name: str) -> str:
        """
        Fetch the raw long-form option listing for a printer.

        Returns:
            lpoptions output

        Raises:
            ProbeUnavailableError: If lpoptions is missing, fails, times out,
                or reports nothing
        """
        args = [self._lpoptions, "-p", device_name, "-l"]
        try:
            completed = self._run(args, self.probe_timeout)
        except subprocess.TimeoutExpired:
            raise ProbeUnavailableError(
                device_name, f"timed out after {self.probe_timeout:.1f}s"
            )
        except OSError as e:
            raise ProbeUnavailableError(device_name, str(e))

        if completed.returncode != 0:
            reason = (completed.stderr or "").strip() or f"exit status {completed.returncode}"
            raise ProbeUnavailableError(device_name, reason)

        if not (completed.stdout or "").strip():
            raise ProbeUnavailableError(device_name, "empty listing")

        return completed.stdout

    def probe(self, device_name: str) -> List[CapabilityOption]:
        """
        Read and parse a printer's options.

        Many drivers do not support long-form listings; that is expected and
        results in an empty list rather than an error.
        """
        try:
            listing = self.query_capabilities(device_name)
        except ProbeUnavailableError as e:
            self._logger.warning(f"{e}; continuing without capability data")
            return []

        options = parse_capability_listing(listing)
        self._logger.debug(f"Probed {len(options)} options for '{device_name}'")
        return options

    # =========================================================================
    # SUBMISSION
    # =========================================================================

    def build_lp_args(
        self,
        device_name: str,
        file_path: Path,
        options: List[str],
        title: Optional[str] = None
    ) -> List[str]:
        """Assemble the lp command line."""
        args = [self._lp]
        if title:
            args.extend(["-t", str(title)])
        args.extend(["-d", device_name])
        for option in options:
            args.extend(["-o", option])
        args.append(str(file_path))
        return args

    def submit(
        self,
        device_name: str,
        file_path: Path,
        options: List[str],
        title: Optional[str] = None
    ) -> str:
        """
        Submit a file through lp.

        Returns:
            lp's request line, e.g. "request id is HP_LaserJet-12 (1 file(s))"

        Raises:
            SubmissionTimeoutError: If lp does not return in time
            SubmissionError: If lp cannot be run or exits non-zero
        """
        args = self.build_lp_args(device_name, file_path, options, title)
        self._logger.info(f"Running: {' '.join(args[:-1])} <file>")

        try:
            completed = self._run(args, self.submit_timeout)
        except subprocess.TimeoutExpired:
            raise SubmissionTimeoutError(device_name, self.submit_timeout)
        except OSError as e:
            raise SubmissionError(str(e), device_name=device_name)

        if completed.returncode != 0:
            message = (
                (completed.stderr or "").strip()
                or (completed.stdout or "").strip()
                or f"{self._lp} exited with status {completed.returncode}"
            )
            raise SubmissionError(message, device_name=device_name, returncode=completed.returncode)

        return (completed.stdout or "").strip()

    # =========================================================================
    # PRINTER ENUMERATION
    # =========================================================================

    def list_printers(self) -> List[PrinterInfo]:
        """
        List printers known to CUPS, flagging the system default.

        Returns:
            Printers in lpstat order, or an empty list on any failure
        """
        try:
            completed = self._run([self._lpstat, "-l", "-p"], self.list_timeout)
        except (subprocess.TimeoutExpired, OSError) as e:
            self._logger.error(f"Printer enumeration failed: {e}")
            return []

        if completed.returncode != 0:
            self._logger.warning(
                f"lpstat -p exited with status {completed.returncode}: "
                f"{(completed.stderr or '').strip()}"
            )
            return []

        printers = parse_printer_listing(completed.stdout or "")

        default_name = self.default_printer()
        if default_name:
            for printer in printers:
                if printer.name == default_name:
                    printer.is_default = True

        return printers

    def default_printer(self) -> Optional[str]:
        """System default destination, or None if unset or unavailable."""
        try:
            completed = self._run([self._lpstat, "-d"], self.list_timeout)
        except (subprocess.TimeoutExpired, OSError) as e:
            self._logger.debug(f"Default printer lookup failed: {e}")
            return None

        match = DEFAULT_DESTINATION_PATTERN.search(completed.stdout or "")
        if match:
            return match.group(1).strip()
        return None


def _printer_status(line: str) -> str:
    """Map an lpstat printer line to a short state word."""
    if "disabled" in line:
        return "disabled"
    if "now printing" in line:
        return "printing"
    if "is idle" in line:
        return "idle"
    return "unknown"


def parse_printer_listing(text: str) -> List[PrinterInfo]:
    """
    Parse `lpstat -l -p` output.

    Printer lines start with 'printer NAME'; indented 'Description:' lines
    that follow belong to the preceding printer.
    """
    printers: List[PrinterInfo] = []
    for line in text.splitlines():
        match = PRINTER_LINE_PATTERN.match(line)
        if match:
            name = match.group(1)
            printers.append(PrinterInfo(
                name=name,
                display_name=name,
                status=_printer_status(line),
            ))
            continue

        description = DESCRIPTION_PATTERN.match(line)
        if description and printers:
            printers[-1].description = description.group(1).strip()

    return printers
