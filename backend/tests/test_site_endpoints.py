"""Tests for layout listing and site rendering endpoints."""
from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

# Conftest adds backend dir to path: use direct imports (no backend. prefix)
from main import app
from models import PressRelease
from routes.sites import get_site_repository
from site_store import SiteRecord, _theme_from_row


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_site_repository] = lambda: repository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _preview_payload(**overrides) -> dict:
    payload = {
        "company": {
            "name": "Bluewater Utilities",
            "logoUrl": "https://example.com/bluewater.png",
            "primaryFontFamily": "Inter",
            "pressReleases": [{"title": "Bluewater joins RE100"}],
        },
    }
    payload.update(overrides)
    return payload


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "X-Request-Id" in response.headers


def test_layouts_lists_esg_guardian(client):
    response = client.get("/layouts")
    assert response.status_code == 200
    layouts = response.json()
    assert [layout["slug"] for layout in layouts] == ["esg-guardian"]
    assert layouts[0]["primary_color"] == "#065F46"
    assert layouts[0]["primary_font"] == "Lora"


def test_layout_detail_and_unknown_layout(client):
    assert client.get("/layouts/esg-guardian").json()["name"] == "ESG Guardian"
    assert client.get("/layouts/nope").status_code == 404


def test_preview_renders_full_page_with_defaults(client):
    response = client.post("/sites/preview", json=_preview_payload())
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Bluewater Utilities · Investor Relations</title>" in html
    assert 'class="ir-site esg-guardian"' in html
    assert "--primary-color: #065F46;" in html
    assert "--primary-font: Inter;" in html
    assert 'alt="Bluewater Utilities Logo"' in html
    assert "Bluewater joins RE100" in html


def test_preview_applies_theme_and_template(client):
    payload = _preview_payload(
        theme={"colors": {"primary": "#000000"}, "typography": {"secondaryFont": "Merriweather"}},
        template={"hiddenComponents": ["news"]},
    )
    html = client.post("/sites/preview", json=payload).text
    assert "--primary-color: #000000;" in html
    assert "--secondary-font: Merriweather;" in html
    assert "Bluewater joins RE100" not in html


def test_preview_with_null_template_and_theme(client):
    response = client.post("/sites/preview", json=_preview_payload(template=None, theme=None))
    assert response.status_code == 200
    assert "--accent-color: #10B981;" in response.text


def test_preview_requires_company_name(client):
    response = client.post("/sites/preview", json={"company": {"name": "   "}})
    assert response.status_code == 422
    response = client.post("/sites/preview", json={"company": {"logoUrl": "https://example.com/x.png"}})
    assert response.status_code == 422


def test_preview_unknown_layout_400(client):
    response = client.post("/sites/preview", json=_preview_payload(template={"layout": "retro-ticker"}))
    assert response.status_code == 400


def test_stored_site_renders_cms_content(client):
    response = client.get("/sites/greenfield")
    assert response.status_code == 200
    html = response.text
    assert "Greenfield Renewables" in html
    assert "Dana Whitfield" in html
    assert "Record Q2 generation" in html
    assert '<img src="https://example.com/logo.svg"' in html


def test_stored_site_template_and_theme_overrides(client):
    response = client.get("/sites/greenfield", params={"template_id": "tpl-lean", "theme_id": "theme-ocean"})
    assert response.status_code == 200
    assert "--primary-color: #0B3C5D;" in response.text
    assert "Record Q2 generation" not in response.text


def test_stored_site_unknown_slug_template_or_theme_404(client):
    assert client.get("/sites/unknown").status_code == 404
    assert client.get("/sites/greenfield", params={"template_id": "missing"}).status_code == 404
    assert client.get("/sites/greenfield", params={"theme_id": "missing"}).status_code == 404


def test_cms_failure_returns_503(client, repository):
    repository.fail_cms = True
    response = client.get("/sites/greenfield")
    assert response.status_code == 503
    assert "temporarily unavailable" in response.json()["detail"]


def test_stored_site_with_malformed_theme_renders_defaults(client, repository):
    repository.themes["theme-broken"] = _theme_from_row(
        SimpleNamespace(id="theme-broken", name="Broken", colors={"primary": 123}, typography=["Inter"])
    )
    response = client.get("/sites/greenfield", params={"theme_id": "theme-broken"})
    assert response.status_code == 200
    assert "--primary-color: #065F46;" in response.text
    assert "--primary-font: Lora;" in response.text


def test_cms_disabled_uses_embedded_press_releases(client, repository, company, monkeypatch):
    monkeypatch.setattr("routes.sites.CMS_ENABLED", False)
    embedded = company.model_copy(update={"press_releases": [PressRelease(title="Greenfield joins RE100")]})
    repository.sites["greenfield"] = SiteRecord(company=embedded, template=None, theme=None)
    response = client.get("/sites/greenfield")
    assert response.status_code == 200
    assert repository.calls == []
    assert "Greenfield joins RE100" in response.text
    assert "Record Q2 generation" not in response.text
    assert "Dana Whitfield" not in response.text


def test_preview_without_company_id_skips_cms(client, repository):
    repository.fail_cms = True
    response = client.post("/sites/preview", json=_preview_payload())
    assert response.status_code == 200
    assert repository.calls == []
    assert "Bluewater joins RE100" in response.text


def test_preview_with_company_id_reads_cms(client, repository):
    payload = _preview_payload()
    payload["company"]["id"] = "cmp-1"
    response = client.post("/sites/preview", json=payload)
    assert response.status_code == 200
    assert ("press_releases", "cmp-1") in repository.calls
    assert "Record Q2 generation" in response.text
