"""
API routes (monitoring).

Handles:
- /health - Health check endpoint
"""

from flask import Blueprint, current_app, jsonify

from logging_config import get_logger


# Module logger
logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.route("/health", methods=["GET"])
def health():
    """
    Health check for kiosk supervisors.

    Reports whether this machine has a usable print pathway. It does not
    contact any printer.
    """
    dispatcher = current_app.config.get("PRINT_DISPATCHER")
    supported = bool(dispatcher and dispatcher.backend.is_supported())
    return jsonify({"status": "ok", "supported": supported})
