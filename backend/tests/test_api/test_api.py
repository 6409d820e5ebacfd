"""Tests for API endpoints (LLM calls are faked)."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from iconfactory.config import settings
from iconfactory.main import app
from tests.conftest import FILLED_RECT_SVG, HOME_SVG, SMILEY_SVG


client = TestClient(app)

STYLE = {"value": "modern", "desc": "Modern flat icons"}


def _icon(name: str = "home", svg: str = HOME_SVG) -> dict:
    return {"name": name, "description": "d", "svg": svg, "category": "ui"}


@pytest.fixture
def fake_llm(monkeypatch):
    """Replace the model call with a canned answer; returns a setter for it."""
    answer = {"text": ""}
    calls: list[dict] = []

    async def _fake(prompt: str, style: str = "modern", count: int = 6) -> str:
        calls.append({"prompt": prompt, "style": style, "count": count})
        return answer["text"]

    monkeypatch.setattr("iconfactory.llm.client.get_icon_set_response", _fake)

    def _set(text: str) -> list[dict]:
        answer["text"] = text
        return calls

    return _set


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_ai_health(monkeypatch):
    monkeypatch.setattr(settings, "anthropic_api_key", "")
    response = client.get("/api/ai/health")
    assert response.status_code == 200
    data = response.json()
    assert data["ai_service"]["configured"] is False
    assert data["ai_service"]["model"] == settings.model_generate


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

def test_generate_strict(fake_llm):
    calls = fake_llm(json.dumps({"icons": [_icon("a"), _icon("b"), {"svg": "nope"}]}))
    response = client.post("/api/ai/generate", json={"prompt": "house icons", "style": STYLE, "count": 4})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["extraction"] == "strict"
    assert data["count"] == 2
    assert [i["name"] for i in data["icons"]] == ["a", "b"]
    assert data["icons"][0]["isEdited"] is False
    assert "\n" not in data["icons"][0]["svg"]
    assert calls == [{"prompt": "house icons", "style": "modern", "count": 4}]


def test_generate_truncates_to_count(fake_llm):
    fake_llm(json.dumps({"icons": [_icon(str(i)) for i in range(5)]}))
    response = client.post("/api/ai/generate", json={"prompt": "house icons", "style": STYLE, "count": 2})
    assert response.json()["data"]["count"] == 2


def test_generate_fallback(fake_llm):
    fake_llm(f"Here are your icons:\n{SMILEY_SVG}\nand\n{FILLED_RECT_SVG}")
    response = client.post("/api/ai/generate", json={"prompt": "faces", "style": STYLE})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["extraction"] == "fallback"
    assert [i["name"] for i in data["icons"]] == ["Icon 1", "Icon 2"]


def test_generate_nothing_usable(fake_llm):
    fake_llm("I cannot draw that.")
    response = client.post("/api/ai/generate", json={"prompt": "faces", "style": STYLE})
    assert response.status_code == 422


def test_generate_without_api_key(monkeypatch):
    monkeypatch.setattr(settings, "anthropic_api_key", "")
    response = client.post("/api/ai/generate", json={"prompt": "faces", "style": STYLE})
    assert response.status_code == 503


@pytest.mark.parametrize(
    "body",
    [
        {"prompt": "ab", "style": STYLE},
        {"prompt": "x" * 501, "style": STYLE},
        {"prompt": "faces"},
        {"prompt": "faces", "style": STYLE, "count": 9},
    ],
)
def test_generate_request_validation(body):
    assert client.post("/api/ai/generate", json=body).status_code == 422


# ---------------------------------------------------------------------------
# Validation + editing
# ---------------------------------------------------------------------------

def test_validate():
    response = client.post("/api/icons/validate", json={"svg": SMILEY_SVG})
    assert response.json()["data"] == {"is_valid": True, "size": len(SMILEY_SVG), "element_count": 4}


def test_validate_invalid():
    response = client.post("/api/icons/validate", json={"svg": "<svg><path/>"})
    data = response.json()["data"]
    assert data["is_valid"] is False
    assert data["element_count"] == 1


def test_edit_applies_all_steps():
    response = client.post(
        "/api/icons/edit",
        json={"icon": _icon(), "color": "#ff0000", "size": 48, "stroke_width": 1.5, "name": "house"},
    )
    assert response.status_code == 200
    icon = response.json()["data"]
    assert icon["isEdited"] is True
    assert icon["name"] == "house"
    assert 'stroke="#ff0000"' in icon["svg"]
    assert 'viewBox="0 0 48 48"' in icon["svg"]
    assert 'stroke-width="1.5"' in icon["svg"]


def test_edit_rejects_invalid_code():
    response = client.post("/api/icons/edit", json={"icon": _icon(), "svg_code": "<svg>"})
    assert response.status_code == 422
    assert "MalformedMarkup" in response.json()["detail"]


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

def test_export_svg():
    response = client.post("/api/icons/export", json={"svg": HOME_SVG, "format": "svg", "size": 32, "filename": "home"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert 'filename="home.svg"' in response.headers["content-disposition"]
    assert response.content == HOME_SVG.encode("utf-8")


def test_export_filename_is_slugged():
    response = client.post(
        "/api/icons/export",
        json={"svg": HOME_SVG, "format": "svg", "size": 32, "filename": "My \"Home\"\r\nIcon!"},
    )
    assert response.status_code == 200
    assert response.headers["content-disposition"] == 'attachment; filename="my-home-icon.svg"'


def test_export_filename_falls_back_when_nothing_survives():
    response = client.post("/api/icons/export", json={"svg": HOME_SVG, "format": "svg", "size": 32, "filename": "!!!"})
    assert response.headers["content-disposition"] == 'attachment; filename="icon.svg"'


def test_export_invalid_svg():
    response = client.post("/api/icons/export", json={"svg": "<svg>", "format": "png", "size": 32})
    assert response.status_code == 422


def test_export_unsupported_size():
    response = client.post("/api/icons/export", json={"svg": HOME_SVG, "format": "png", "size": 20})
    assert response.status_code == 422


def test_export_bundle():
    response = client.post("/api/icons/export/bundle", json={"icons": [_icon("a"), _icon("b")]})
    assert response.status_code == 200
    assert response.text.startswith("<!-- a -->\n<svg")
    assert "\n\n<!-- b -->\n" in response.text


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

def test_save_get_delete():
    response = client.post("/api/icons/save", json={"icons": [_icon("a"), _icon("b")], "collection_name": "homes"})
    assert response.status_code == 200
    saved = response.json()["data"]
    assert saved["name"] == "homes"
    assert saved["icon_count"] == 2
    assert "\n" not in saved["icons"][0]["svg"]

    fetched = client.get(f"/api/icons/{saved['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["id"] == saved["id"]

    deleted = client.delete(f"/api/icons/{saved['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["data"]["deleted_collection"]["id"] == saved["id"]
    assert client.get(f"/api/icons/{saved['id']}").status_code == 404


def test_save_default_name():
    response = client.post("/api/icons/save", json={"icons": [_icon()]})
    assert response.json()["data"]["name"] == "Untitled Collection"


def test_save_rejects_invalid_icons():
    response = client.post("/api/icons/save", json={"icons": [_icon(), _icon("broken", "<svg>")]})
    assert response.status_code == 422
    assert client.get("/api/icons/library").json()["data"]["total"] == 0


def test_library_pagination():
    for i in range(3):
        client.post("/api/icons/save", json={"icons": [_icon()], "collection_name": f"c{i}"})
    data = client.get("/api/icons/library", params={"page": 2, "limit": 2}).json()["data"]
    assert data["total"] == 3
    assert data["pages"] == 2
    assert [c["name"] for c in data["collections"]] == ["c2"]


def test_unknown_collection():
    assert client.get("/api/icons/nope").status_code == 404
    assert client.delete("/api/icons/nope").status_code == 404
