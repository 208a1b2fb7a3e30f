"""
Print request data model.

A PrintRequest is created once per capture event from the data URL the kiosk
shell renders, and is immutable from then on. It lives only as long as the
print attempt that consumes it.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Optional

from core.exceptions import ValidationError


DATA_URL_PATTERN = re.compile(r"^data:image/(png|jpeg);base64,")

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"

NO_PRINTER_MESSAGE = "No printer selected"
INVALID_IMAGE_MESSAGE = "Invalid image data URL"


@dataclass(frozen=True)
class PrintRequest:
    """
    One capture to print.

    Thread Safety:
        Frozen - safe to hand to whichever thread runs the print attempt.
    """

    device_name: str
    """Print system destination name."""

    image_bytes: bytes
    """Encoded bitmap (PNG or JPEG)."""

    mime_type: str
    """'image/png' or 'image/jpeg'."""

    job_title: Optional[str] = None
    """Optional title shown in the print queue."""

    @property
    def file_extension(self) -> str:
        """Extension used for the transient file."""
        return "jpg" if self.mime_type == "image/jpeg" else "png"

    @classmethod
    def from_data_url(
        cls,
        device_name: Optional[str],
        data_url: Optional[str],
        job_title: Optional[str] = None
    ) -> "PrintRequest":
        """
        Validate and decode a capture.

        Args:
            device_name: Selected printer (required)
            data_url: 'data:image/png;base64,...' or 'data:image/jpeg;base64,...'
            job_title: Optional job title

        Returns:
            PrintRequest ready for dispatch

        Raises:
            ValidationError: If the printer is missing or the image is not a
                decodable PNG/JPEG data URL
        """
        device_name = (device_name or "").strip()
        if not device_name:
            raise ValidationError(NO_PRINTER_MESSAGE, field="deviceName")

        if not data_url or not isinstance(data_url, str):
            raise ValidationError(INVALID_IMAGE_MESSAGE, field="dataUrl")

        match = DATA_URL_PATTERN.match(data_url)
        if not match:
            raise ValidationError(INVALID_IMAGE_MESSAGE, field="dataUrl")

        encoded = data_url[match.end():]
        try:
            image_bytes = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError):
            raise ValidationError(INVALID_IMAGE_MESSAGE, field="dataUrl")

        subtype = match.group(1)
        signature = PNG_SIGNATURE if subtype == "png" else JPEG_SIGNATURE
        if not image_bytes.startswith(signature):
            raise ValidationError(INVALID_IMAGE_MESSAGE, field="dataUrl")

        return cls(
            device_name=device_name,
            image_bytes=image_bytes,
            mime_type=f"image/{subtype}",
            job_title=job_title or None,
        )
