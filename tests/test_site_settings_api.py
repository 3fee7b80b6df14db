"""Tests for site settings endpoints and service."""

from fastapi.testclient import TestClient

from portfolio_cms.api.app import create_app
from portfolio_cms.domain.site_settings import SiteSettings


def test_get_settings_defaults_before_first_save(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/settings")

    assert response.status_code == 200
    data = response.json()
    assert data["siteName"] == "MTP Collective"
    assert data["primaryColor"] == "#000000"
    assert data["secondaryColor"] == "#ffffff"
    assert data["socialMedia"] == {"instagram": "", "twitter": "", "facebook": ""}
    assert data["metaTags"]["keywords"] == "photography, portfolio, art"
    assert data["updatedAt"] is None


def test_update_settings_merges_over_current(
    container, admin_headers, settings_repository
) -> None:
    settings_repository.stored = SiteSettings(
        site_name="Studio", contact_email="hello@studio.test"
    )
    client = TestClient(create_app(container))

    response = client.put(
        "/api/settings",
        json={
            "siteDescription": "  Film and digital  ",
            "socialMedia": {"instagram": "@studio"},
            "metaTags": {"title": "Studio"},
        },
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Settings updated successfully"
    settings = response.json()["settings"]
    assert settings["siteName"] == "Studio"
    assert settings["siteDescription"] == "Film and digital"
    assert settings["contactEmail"] == "hello@studio.test"
    assert settings["socialMedia"] == {
        "instagram": "@studio",
        "twitter": "",
        "facebook": "",
    }
    assert settings["metaTags"]["title"] == "Studio"
    assert settings["metaTags"]["description"] == "Photography portfolio website"
    assert settings["updatedAt"] == "2024-05-01T12:00:00+00:00"
    assert client.get("/api/settings").json() == settings


def test_update_settings_requires_admin(
    container, editor_headers, settings_repository
) -> None:
    client = TestClient(create_app(container))

    anonymous = client.put("/api/settings", json={"siteName": "Mine"})
    editor = client.put(
        "/api/settings", json={"siteName": "Mine"}, headers=editor_headers
    )

    assert anonymous.status_code == 401
    assert editor.status_code == 403
    assert settings_repository.saves == 0


def test_update_settings_rejects_blank_site_name(
    container, admin_headers, settings_repository
) -> None:
    client = TestClient(create_app(container))

    response = client.put(
        "/api/settings", json={"siteName": "   "}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Site name is required"}
    assert settings_repository.saves == 0


def test_update_settings_accepts_snake_case_names(
    container, admin_headers
) -> None:
    client = TestClient(create_app(container))

    response = client.put(
        "/api/settings", json={"primary_color": "#123456"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["settings"]["primaryColor"] == "#123456"
