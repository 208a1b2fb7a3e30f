"""
Configuration for the Photo Print Station.

All settings can be overridden from the environment or a .env file next
to the application.
"""

import os

from dotenv import load_dotenv

# Load .env file early so environment variables are available for Config class
load_dotenv(override=True)


class Config:
    """Default configuration for the Flask application."""

    # Flask settings
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16 MB captures
    ENVIRONMENT = os.environ.get("FLASK_ENV", "development")
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"
    TESTING = False

    # Printer selected at startup (can be changed from the settings screen)
    DEFAULT_PRINTER = os.environ.get("DEFAULT_PRINTER", "")

    # ==========================================================================
    # Print command timeouts (seconds)
    # ==========================================================================
    # PROBE_TIMEOUT_SECONDS: lpoptions capability query. On timeout the print
    #   continues without capability data.
    # SUBMIT_TIMEOUT_SECONDS: lp submission. On timeout the print fails.
    # LIST_TIMEOUT_SECONDS: each lpstat call used for the printer list.
    # ==========================================================================
    PROBE_TIMEOUT_SECONDS = float(os.environ.get("PROBE_TIMEOUT_SECONDS", "5"))
    SUBMIT_TIMEOUT_SECONDS = float(os.environ.get("SUBMIT_TIMEOUT_SECONDS", "30"))
    LIST_TIMEOUT_SECONDS = float(os.environ.get("LIST_TIMEOUT_SECONDS", "5"))

    # Transient capture files (system temp dir if TEMP_DIR is empty)
    TEMP_DIR = os.environ.get("TEMP_DIR") or None
    TEMP_FILE_PREFIX = os.environ.get("TEMP_FILE_PREFIX", "photo-print-")

    # CUPS client tools
    LP_COMMAND = os.environ.get("LP_COMMAND", "lp")
    LPOPTIONS_COMMAND = os.environ.get("LPOPTIONS_COMMAND", "lpoptions")
    LPSTAT_COMMAND = os.environ.get("LPSTAT_COMMAND", "lpstat")

    # Job titles longer than this are truncated
    MAX_JOB_TITLE_LENGTH = 200


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    ENVIRONMENT = "production"


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    TESTING = True
    ENVIRONMENT = "testing"
    DEFAULT_PRINTER = ""
