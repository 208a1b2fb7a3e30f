"""
Photo Print Station - Flask Application Entry Point.

A slim app factory that:
1. Loads configuration and sets up logging
2. Creates the print backend (CUPS command-line tools)
3. Creates the print dispatcher and the selected-printer setting
4. Registers route blueprints and JSON error handlers

ARCHITECTURE:
    Kiosk shell (camera, window, click cooldown)
    └── HTTP JSON  ->  routes  ->  PrintDispatcher  ->  CupsBackend  ->  lp / lpoptions

The selected printer lives in app.config["PRINTER_SELECTION"]. Routes
resolve it and pass the device name explicitly to the dispatcher.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from logging_config import setup_logging, get_logger
from core.backend import PrintBackend
from core.cups_backend import CupsBackend
from services.print_service import PrintDispatcher
from modules.printer_config import PrinterSelection
from routes import register_blueprints


# Module logger (configured after setup_logging)
logger = get_logger(__name__)


def _get_base_path() -> Path:
    """
    Get the base path for the application.

    In a frozen bundle: Returns the directory containing the executable
    In development: Returns the directory containing app.py
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    else:
        return Path(__file__).parent


def create_app(
    config_object: str = "config.Config",
    backend: Optional[PrintBackend] = None
) -> Flask:
    """
    Application factory - creates and configures the Flask app.

    Args:
        config_object: Dotted path of the config class to load
        backend: Print backend to use (CupsBackend built from config if None)

    Returns:
        Configured Flask application
    """
    env_file = _get_base_path() / '.env'
    if env_file.exists():
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    app = Flask(__name__)
    app.config.from_object(config_object)

    # Configure logging
    log_level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    enable_file_logging = app.config.get("ENVIRONMENT") == "production"

    root_logger = setup_logging(
        log_level=log_level,
        enable_file_logging=enable_file_logging
    )
    app.logger.handlers = root_logger.handlers
    app.logger.setLevel(log_level)

    logger.info(f"Starting Photo Print Station in {app.config.get('ENVIRONMENT')} mode")

    # =========================================================================
    # PRINT PATHWAY
    # =========================================================================

    if backend is None:
        backend = CupsBackend.from_config(app.config)

    if not backend.is_supported():
        # Keep serving: the kiosk shell still needs the "unsupported" result
        logger.warning("No command-line print pathway found; prints will be rejected")

    dispatcher = PrintDispatcher(
        backend,
        temp_dir=app.config.get("TEMP_DIR"),
        temp_prefix=app.config.get("TEMP_FILE_PREFIX", "photo-print-"),
    )
    app.config["PRINT_DISPATCHER"] = dispatcher
    app.config["PRINTER_SELECTION"] = PrinterSelection(app.config.get("DEFAULT_PRINTER") or None)

    register_blueprints(app)

    # =========================================================================
    # ERROR HANDLERS
    # =========================================================================

    @app.errorhandler(RequestEntityTooLarge)
    def handle_capture_too_large(e):
        max_mb = app.config.get("MAX_CONTENT_LENGTH", 16 * 1024 * 1024) / (1024 * 1024)
        return jsonify({
            "success": False,
            "error": f"Capture too large. Maximum size is {max_mb:.0f} MB."
        }), 413

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"success": False, "error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_server_error(e):
        logger.error(f"Unhandled error: {e}", exc_info=True)
        return jsonify({"success": False, "error": "An unexpected error occurred"}), 500

    logger.info("Application initialized successfully")
    return app


if __name__ == "__main__":
    app = create_app()
    debug_mode = os.environ.get("FLASK_DEBUG", "1") == "1"
    app.run(host=os.environ.get("HOST", "127.0.0.1"), port=int(os.environ.get("PORT", "5000")), debug=debug_mode)
