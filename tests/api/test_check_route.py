"""
Dieser Test überprüft die Endpoints /check, /report und /health.

Die Routen laufen gegen den echten GrammarService (keine externen
Abhängigkeiten). Für den Fehlerpfad wird GrammarService.check gepatcht, um
die Abbildung auf HTTP 500 zu prüfen.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from app.api.routes import router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_check_returns_findings(client):
    resp = client.post("/check", json={"text": "dirumah saya"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["enabled"] is True
    assert data["num_findings"] == 1

    f = data["findings"][0]
    assert f["index"] == 0
    assert f["length"] == 7
    assert f["severity"] == "error"
    assert f["category"] == "kata-depan"
    assert f["suggestion"] == "di rumah"


def test_check_empty_text(client):
    resp = client.post("/check", json={"text": ""})

    assert resp.status_code == 200
    assert resp.json()["findings"] == []


def test_check_utf16_offsets(client):
    resp = client.post("/check", json={"text": "😀 dirumah", "offset_unit": "utf16"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["offset_unit"] == "utf16"
    assert data["findings"][0]["index"] == 3


def test_check_rejects_unknown_offset_unit(client):
    resp = client.post("/check", json={"text": "dirumah", "offset_unit": "bytes"})

    assert resp.status_code == 422


def test_report_groups_by_category(client):
    resp = client.post(
        "/report",
        json={
            "texts": [
                {"text": "saya akan akan pergi", "element_context": "p dalam div"},
                {"text": "ini  adalah"},
            ]
        },
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["total_errors"] == 2
    assert data["error_count"] == 1
    assert data["warning_count"] == 1
    assert set(data["by_category"]) == {"efektivitas", "format"}
    assert data["errors"][0]["element_context"] == "p dalam div"


def test_check_service_failure_is_500(monkeypatch, client):
    def fake_check(self, req):
        raise RuntimeError("engine down")

    from app.services.grammar_service import GrammarService

    monkeypatch.setattr(GrammarService, "check", fake_check)

    resp = client.post("/check", json={"text": "dirumah"})

    assert resp.status_code == 500
    assert resp.json()["detail"] == "engine down"


def test_report_utf16_positions(client):
    resp = client.post(
        "/report",
        json={"texts": [{"text": "😀 saya akan akan pergi"}], "offset_unit": "utf16"},
    )

    assert resp.status_code == 200
    assert resp.json()["errors"][0]["position"] == 8
