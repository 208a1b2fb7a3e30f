"""
Printer routes.

Handles:
- GET  /api/printers - Printers registered with the OS
- GET  /api/printer  - Currently selected printer
- POST /api/printer  - Change the selected printer (list pick or manual entry)
"""

from flask import Blueprint, current_app, jsonify, request

from logging_config import get_logger


# Module logger
logger = get_logger(__name__)

printers_bp = Blueprint("printers", __name__, url_prefix="/api")


@printers_bp.route("/printers", methods=["GET"])
def list_printers():
    """Return the printer picker entries, default printer flagged."""
    dispatcher = current_app.config["PRINT_DISPATCHER"]
    printers = dispatcher.list_printers()
    logger.debug(f"Listing {len(printers)} printers")
    return jsonify([printer.to_dict() for printer in printers])


@printers_bp.route("/printer", methods=["GET"])
def get_selected_printer():
    """Return the selected printer name (null if none)."""
    selection = current_app.config["PRINTER_SELECTION"]
    return jsonify({"deviceName": selection.selected})


@printers_bp.route("/printer", methods=["POST"])
def set_selected_printer():
    """
    Change the selected printer.

    Body: {"deviceName": "HP_LaserJet"}. Names not in the OS list are
    accepted so printers can be entered manually; an empty name clears the
    selection.
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"success": False, "error": "Expected a JSON object"}), 400

    device_name = payload.get("deviceName")
    if device_name is not None and not isinstance(device_name, str):
        return jsonify({"success": False, "error": "deviceName must be a string"}), 400

    selection = current_app.config["PRINTER_SELECTION"]
    selected = selection.select(device_name)
    return jsonify({"success": True, "deviceName": selected})
