"""
Monochrome print dispatch service.

Takes a rendered capture from the kiosk shell and prints it in grayscale:

Flow (one attempt, blocking for the caller):
    1. Validate device name and image data URL (no side effects on failure)
    2. Fail fast if the OS has no print pathway
    3. Serialize on the target printer (one attempt per device at a time)
    4. Write the image to a transient file
    5. Probe capabilities (empty on failure), select a gray option
    6. Submit with the selected option, or every generic fallback, plus
       fit-to-page
    7. Release the transient file whatever happened

Thread Safety:
    - Attempts against the same printer are serialized with a per-device lock
    - Attempts against different printers run concurrently
    - The transient path is local to one attempt and never shared

Usage:
    dispatcher = PrintDispatcher(CupsBackend())
    result = dispatcher.print_image("HP_LaserJet", data_url, job_title="Booth")
    if result.success:
        print(result.job, result.applied_gray)
"""

from __future__ import annotations

import shutil
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from core.backend import PrintBackend
from core.exceptions import UnsupportedPlatformError, ValidationError
from models.capability import CapabilityOption
from models.print_request import PrintRequest
from models.print_result import PrintResult, PrinterInfo
from modules.gray_policy import build_print_options, select_gray_option
from logging_config import get_logger


logger = get_logger(__name__)

DEFAULT_TEMP_PREFIX = "photo-print-"


class _DeviceLock:
    """Lock for one printer plus the number of attempts holding or waiting on it."""

    def __init__(self):
        self.lock = threading.Lock()
        self.users = 0


class PrintDispatcher:
    """
    Prints captures in monochrome through a PrintBackend.

    Every call returns exactly one PrintResult. Validation, platform and
    submission failures become failed results; nothing is raised to the
    caller.

    Attributes:
        backend: OS print pathway
    """

    def __init__(
        self,
        backend: PrintBackend,
        temp_dir: Optional[str] = None,
        temp_prefix: str = DEFAULT_TEMP_PREFIX
    ):
        """
        Initialize the dispatcher.

        Args:
            backend: Print backend (CupsBackend in production)
            temp_dir: Parent directory for transient files (system default if None)
            temp_prefix: Prefix for transient directories
        """
        self.backend = backend
        self._temp_dir = temp_dir
        self._temp_prefix = temp_prefix

        self._device_locks: Dict[str, _DeviceLock] = {}
        self._locks_guard = threading.Lock()

        logger.info(f"PrintDispatcher initialized with {type(backend).__name__}")

    @contextmanager
    def _device_slot(self, device_name: str) -> Iterator[None]:
        """
        Hold the printer's lock for one attempt.

        The registry entry is dropped once no attempt holds or waits on it,
        so arbitrary device names do not accumulate.
        """
        with self._locks_guard:
            entry = self._device_locks.get(device_name)
            if entry is None:
                entry = _DeviceLock()
                self._device_locks[device_name] = entry
            entry.users += 1

        try:
            with entry.lock:
                yield
        finally:
            with self._locks_guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._device_locks[device_name]

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def list_printers(self) -> List[PrinterInfo]:
        """Printers registered with the OS; empty if unavailable."""
        if not self.backend.is_supported():
            logger.info("Printer enumeration skipped: no print pathway on this platform")
            return []
        try:
            return self.backend.list_printers()
        except Exception as e:
            logger.error(f"Printer enumeration failed: {e}", exc_info=True)
            return []

    def print_image(
        self,
        device_name: Optional[str],
        data_url: Optional[str],
        job_title: Optional[str] = None
    ) -> PrintResult:
        """
        Validate a capture and print it.

        Args:
            device_name: Destination printer (resolved by the caller)
            data_url: PNG or JPEG base64 data URL
            job_title: Optional job title

        Returns:
            PrintResult (never raises)
        """
        try:
            request = PrintRequest.from_data_url(device_name, data_url, job_title)
        except ValidationError as e:
            logger.warning(f"Rejected print request: {e.message}")
            return PrintResult.failed(e.message)

        return self.dispatch(request)

    def dispatch(self, request: PrintRequest) -> PrintResult:
        """
        Print an already-validated request.

        Args:
            request: Validated capture

        Returns:
            PrintResult (never raises)
        """
        if not self.backend.is_supported():
            error = UnsupportedPlatformError()
            logger.error(error.message)
            return PrintResult.failed(error.message)

        with self._device_slot(request.device_name):
            return self._run_attempt(request)

    # =========================================================================
    # ATTEMPT
    # =========================================================================

    def _probe(self, device_name: str) -> List[CapabilityOption]:
        """Capability data for the printer, or an empty list if the query fails."""
        try:
            return self.backend.probe(device_name)
        except Exception as e:
            logger.warning(f"[{device_name}] Capability probe failed: {e}; continuing without it")
            return []

    def _run_attempt(self, request: PrintRequest) -> PrintResult:
        """One serialized print attempt: write, probe, select, submit, release."""
        device = request.device_name
        tmp_dir: Optional[Path] = None
        options: List[str] = []

        try:
            tmp_dir = Path(tempfile.mkdtemp(prefix=self._temp_prefix, dir=self._temp_dir))
            file_path = tmp_dir / f"capture.{request.file_extension}"
            file_path.write_bytes(request.image_bytes)
            logger.debug(f"[{device}] Wrote {len(request.image_bytes)} bytes to {file_path}")

            capabilities = self._probe(device)
            logger.info(f"[{device}] Probed {len(capabilities)} capability options")

            applied_gray = select_gray_option(capabilities)
            if applied_gray:
                logger.info(f"[{device}] Forcing grayscale with {applied_gray.as_lp_option()}")
            else:
                logger.info(f"[{device}] No targeted gray option; sending generic fallbacks")

            options = build_print_options(applied_gray)

            job = self.backend.submit(device, file_path, options, request.job_title)
            logger.info(f"[{device}] Submitted: {job}")
            return PrintResult.succeeded(job, applied_gray, options)

        except Exception as e:
            logger.error(f"[{device}] Print failed: {e}", exc_info=True)
            return PrintResult.failed(str(e), options)

        finally:
            self._release(device, tmp_dir)

    def _release(self, device: str, tmp_dir: Optional[Path]) -> None:
        """
        Best-effort removal of the transient directory.

        Failures are logged as warnings and never change the attempt's result.
        """
        if tmp_dir is None:
            return
        try:
            shutil.rmtree(tmp_dir)
        except OSError as e:
            logger.warning(f"[{device}] Could not remove transient files at {tmp_dir}: {e}")
