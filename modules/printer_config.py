"""
Printer Selection Settings

Holds the kiosk's "currently selected printer". The value is owned by the
coordinating layer (the Flask app stores one PrinterSelection in its config)
and is only changed through the settings endpoint. The print dispatcher never
reads it: routes resolve the device name here and pass it explicitly into
every print call.
"""

import threading
from typing import Optional

from logging_config import get_logger


logger = get_logger(__name__)


class PrinterSelection:
    """
    Thread-safe holder for the selected printer name.

    Priority order when resolving a device for one print:
    1. Device name given with the print request
    2. Printer chosen in settings (picked from the list or typed manually)
    3. None - the print is rejected with "No printer selected"
    """

    def __init__(self, initial: Optional[str] = None):
        self._lock = threading.Lock()
        self._selected: Optional[str] = None
        if initial:
            self.select(initial)

    @property
    def selected(self) -> Optional[str]:
        """Currently selected printer name, or None."""
        with self._lock:
            return self._selected

    def select(self, device_name: Optional[str]) -> Optional[str]:
        """
        Change the selected printer.

        Args:
            device_name: Printer name; blank clears the selection

        Returns:
            The new selection
        """
        name = (device_name or "").strip() or None
        with self._lock:
            self._selected = name

        if name:
            logger.info(f"Selected printer: {name}")
        else:
            logger.info("Printer selection cleared")
        return name

    def clear(self) -> None:
        """Forget the selected printer."""
        self.select(None)

    def resolve(self, requested: Optional[str] = None) -> Optional[str]:
        """
        Device name to use for one print.

        Args:
            requested: Device name sent with the print request, if any

        Returns:
            The requested name if given, else the selected printer
        """
        requested = (requested or "").strip()
        return requested or self.selected
