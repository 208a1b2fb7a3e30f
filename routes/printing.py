"""
Print route.

Handles capture submission from the kiosk shell. The shell has already
cropped, scaled and grayscale-converted the frame; this route resolves the
printer, sanitizes the job title and hands everything to the dispatcher.
"""

import html
from typing import Optional

import bleach
from flask import Blueprint, current_app, jsonify, request

from logging_config import get_logger


# Module logger
logger = get_logger(__name__)

printing_bp = Blueprint("printing", __name__, url_prefix="/api")

DEFAULT_MAX_JOB_TITLE_LENGTH = 200


def _sanitize_title(text: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Sanitize a job title before it reaches the print queue.

    Args:
        text: Raw title
        max_length: Optional maximum length to enforce

    Returns:
        Title with HTML tags removed, trimmed and truncated. Entities bleach
        escapes are decoded again since lp takes plain text.
    """
    if not text:
        return ""

    text = bleach.clean(str(text).strip(), tags=[], strip=True)
    text = html.unescape(text).strip()

    if max_length and len(text) > max_length:
        text = text[:max_length]

    return text


@printing_bp.route("/print", methods=["POST"])
def print_capture():
    """
    Print one capture in monochrome.

    Body:
        {"dataUrl": "data:image/png;base64,...",
         "deviceName": "HP_LaserJet",     (optional, defaults to selection)
         "jobTitle": "Booth capture"}     (optional)

    Returns:
        {"success": true, "job": "...", "appliedGray": {...} | null}
        {"success": false, "error": "..."}
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"success": False, "error": "Expected a JSON object"}), 400

    selection = current_app.config["PRINTER_SELECTION"]
    dispatcher = current_app.config["PRINT_DISPATCHER"]

    requested = payload.get("deviceName")
    device_name = selection.resolve(requested if isinstance(requested, str) else None)
    job_title = _sanitize_title(
        payload.get("jobTitle"),
        current_app.config.get("MAX_JOB_TITLE_LENGTH", DEFAULT_MAX_JOB_TITLE_LENGTH),
    )

    result = dispatcher.print_image(device_name, payload.get("dataUrl"), job_title or None)

    if result.success:
        logger.info(f"Printed on {device_name}: {result.job}")
    else:
        logger.warning(f"Print failed on {device_name or '<none>'}: {result.error}")

    return jsonify(result.to_dict())
