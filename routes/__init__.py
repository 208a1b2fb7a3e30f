"""
Flask route blueprints for the Photo Print Station.

The kiosk shell talks to the station through these JSON endpoints:
- printers: Printer list and the selected-printer setting
- printing: Capture submission
- api: Health check

Each blueprint is registered with the Flask app in create_app().
"""

from flask import Blueprint

from .printers import printers_bp
from .printing import printing_bp
from .api import api_bp

__all__ = [
    "printers_bp",
    "printing_bp",
    "api_bp",
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(printers_bp)
    app.register_blueprint(printing_bp)
    app.register_blueprint(api_bp)
