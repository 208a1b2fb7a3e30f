"""
Tests for the JSON endpoints used by the kiosk shell.
"""

import pytest

from app import create_app
from conftest import FakeBackend
from models.print_result import PrinterInfo


@pytest.fixture
def backend():
    return FakeBackend(
        listing="ColorModel/Color Mode: *Color Gray",
        printers=[
            PrinterInfo(name="HP_LaserJet", display_name="HP_LaserJet", status="idle", is_default=True),
            PrinterInfo(name="Brother_HL", display_name="Brother_HL", status="idle"),
        ],
    )


@pytest.fixture
def app(backend):
    return create_app("config.TestingConfig", backend=backend)


@pytest.fixture
def client(app):
    return app.test_client()


class TestPrinterRoutes:

    def test_list_printers(self, client):
        response = client.get("/api/printers")

        assert response.status_code == 200
        assert [p["name"] for p in response.get_json()] == ["HP_LaserJet", "Brother_HL"]
        assert response.get_json()[0]["isDefault"] is True

    def test_no_printer_selected_initially(self, client):
        assert client.get("/api/printer").get_json() == {"deviceName": None}

    def test_select_printer(self, client):
        response = client.post("/api/printer", json={"deviceName": " Brother_HL "})

        assert response.get_json() == {"success": True, "deviceName": "Brother_HL"}
        assert client.get("/api/printer").get_json() == {"deviceName": "Brother_HL"}

    def test_manual_printer_name_is_accepted(self, client):
        response = client.post("/api/printer", json={"deviceName": "Lab_Printer_2"})

        assert response.get_json()["deviceName"] == "Lab_Printer_2"

    def test_empty_name_clears_selection(self, client):
        client.post("/api/printer", json={"deviceName": "HP_LaserJet"})
        client.post("/api/printer", json={"deviceName": ""})

        assert client.get("/api/printer").get_json() == {"deviceName": None}

    def test_select_rejects_non_json(self, client):
        response = client.post("/api/printer", data="HP", content_type="text/plain")

        assert response.status_code == 400

    def test_select_rejects_non_string(self, client):
        response = client.post("/api/printer", json={"deviceName": 42})

        assert response.status_code == 400


class TestPrintRoute:

    def test_prints_on_selected_printer(self, client, backend, png_data_url):
        client.post("/api/printer", json={"deviceName": "HP_LaserJet"})

        response = client.post("/api/print", json={"dataUrl": png_data_url})

        assert response.status_code == 200
        assert response.get_json() == {
            "success": True,
            "job": "request id is HP_LaserJet-1 (1 file(s))",
            "appliedGray": {"key": "ColorModel", "value": "Gray"},
        }
        assert backend.submissions[0]["device_name"] == "HP_LaserJet"
        assert backend.submissions[0]["options"] == ["ColorModel=Gray", "fit-to-page"]

    def test_request_device_overrides_selection(self, client, backend, png_data_url):
        client.post("/api/printer", json={"deviceName": "HP_LaserJet"})

        client.post("/api/print", json={"dataUrl": png_data_url, "deviceName": "Brother_HL"})

        assert backend.submissions[0]["device_name"] == "Brother_HL"

    def test_no_printer_selected(self, client, backend, png_data_url):
        response = client.post("/api/print", json={"dataUrl": png_data_url})

        assert response.get_json() == {"success": False, "error": "No printer selected"}
        assert backend.probe_calls == []
        assert backend.submissions == []

    def test_invalid_image(self, client, backend):
        response = client.post(
            "/api/print", json={"dataUrl": "data:image/gif;base64,AAAA", "deviceName": "HP"}
        )

        assert response.get_json() == {"success": False, "error": "Invalid image data URL"}
        assert backend.submissions == []

    def test_job_title_is_sanitized(self, client, backend, png_data_url):
        client.post("/api/print", json={
            "dataUrl": png_data_url,
            "deviceName": "HP_LaserJet",
            "jobTitle": "  <b>Booth</b> capture  ",
        })

        assert backend.submissions[0]["title"] == "Booth capture"

    def test_job_title_keeps_plain_text_characters(self, client, backend, png_data_url):
        client.post("/api/print", json={
            "dataUrl": png_data_url,
            "deviceName": "HP_LaserJet",
            "jobTitle": "B&W Booth <3",
        })

        assert backend.submissions[0]["title"] == "B&W Booth <3"

    def test_long_job_title_is_truncated(self, client, backend, png_data_url):
        client.post("/api/print", json={
            "dataUrl": png_data_url,
            "deviceName": "HP_LaserJet",
            "jobTitle": "x" * 500,
        })

        assert len(backend.submissions[0]["title"]) == 200

    def test_blank_job_title_is_omitted(self, client, backend, png_data_url):
        client.post("/api/print", json={
            "dataUrl": png_data_url, "deviceName": "HP_LaserJet", "jobTitle": "   "
        })

        assert backend.submissions[0]["title"] is None

    def test_rejects_non_json(self, client):
        response = client.post("/api/print", data="not json", content_type="text/plain")

        assert response.status_code == 400
        assert response.get_json()["success"] is False


class TestHealth:

    def test_supported(self, client):
        assert client.get("/health").get_json() == {"status": "ok", "supported": True}

    def test_unsupported(self):
        app = create_app("config.TestingConfig", backend=FakeBackend(supported=False))

        assert app.test_client().get("/health").get_json() == {
            "status": "ok",
            "supported": False,
        }

    def test_unknown_route_is_json(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.get_json()["success"] is False
