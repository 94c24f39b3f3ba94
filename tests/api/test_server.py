import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.server import app, validate_startup_config


def test_root_and_lifespan():
    with TestClient(app) as client:
        resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json() == {"message": "Grammar Check API running"}


def test_startup_rejects_unknown_offset_unit(monkeypatch):
    monkeypatch.setattr(settings, "offset_unit", "bytes")

    with pytest.raises(ValueError, match="OFFSET_UNIT"):
        validate_startup_config()


def test_startup_rejects_negative_min_length(monkeypatch):
    monkeypatch.setattr(settings, "min_text_length", -1)

    with pytest.raises(ValueError, match="MIN_TEXT_LENGTH"):
        validate_startup_config()
