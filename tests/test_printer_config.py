"""
Unit tests for the selected-printer setting and logging helpers.
"""

import logging

from logging_config import get_logger, setup_logging
from modules.printer_config import PrinterSelection


class TestPrinterSelection:

    def test_starts_empty(self):
        assert PrinterSelection().selected is None

    def test_initial_value(self):
        assert PrinterSelection("HP_LaserJet").selected == "HP_LaserJet"

    def test_select_and_clear(self):
        selection = PrinterSelection()

        assert selection.select("  Brother_HL ") == "Brother_HL"
        assert selection.selected == "Brother_HL"

        selection.clear()
        assert selection.selected is None

    def test_resolve_prefers_requested(self):
        selection = PrinterSelection("HP_LaserJet")

        assert selection.resolve("Brother_HL") == "Brother_HL"
        assert selection.resolve("  ") == "HP_LaserJet"
        assert selection.resolve(None) == "HP_LaserJet"

    def test_resolve_without_selection(self):
        assert PrinterSelection().resolve(None) is None


class TestLoggingHelpers:

    def test_get_logger_namespaces_module(self):
        assert get_logger("services.print_service").name == (
            "photo_print_station.services.print_service"
        )
        assert get_logger("photo_print_station.app").name == "photo_print_station.app"

    def test_setup_logging_writes_files(self, tmp_path):
        logger = setup_logging(
            app_name="photo_print_station_test",
            log_level=logging.DEBUG,
            log_dir=tmp_path,
            enable_file_logging=True,
        )
        logger.error("printer on fire")
        for handler in logger.handlers:
            handler.flush()

        assert "printer on fire" in (tmp_path / "photo_print_station_test_error.log").read_text()
        assert len(logger.handlers) == 3

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
