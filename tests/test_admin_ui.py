"""Tests for the admin shell pages."""

from fastapi.testclient import TestClient

from portfolio_cms.api.admin import ADMIN_TITLE, render_admin_header
from portfolio_cms.api.app import create_app


def test_header_marks_active_section() -> None:
    header = render_admin_header("/admin/photos")

    assert ADMIN_TITLE in header
    assert '<a href="/admin/photos" class="active">Photos</a>' in header
    assert '<a href="/admin/users">Users</a>' in header
    assert 'id="logout"' in header


def test_header_prefix_match_for_nested_paths() -> None:
    header = render_admin_header("/admin/categories/3/edit")

    assert '<a href="/admin/categories" class="active">' in header
    assert header.count('class="active"') == 1


def test_admin_root_redirects_to_dashboard(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/admin/dashboard"


def test_section_page_contains_logout_contract(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/users")

    assert response.status_code == 200
    body = response.text
    assert "MTP Collective Admin" in body
    assert "fetch('/api/users'" in body
    assert "localStorage.removeItem('auth_token')" in body
    assert "localStorage.removeItem('user')" in body
    assert "expires=Thu, 01 Jan 1970 00:00:00 GMT" in body
    assert "SameSite=Strict" in body
    assert "window.location.href = '/admin/login'" in body


def test_login_page(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/login")

    assert response.status_code == 200
    assert "/api/auth/login" in response.text


def test_unknown_section_not_found(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/contact")

    assert response.status_code == 404


def test_articles_and_settings_sections(container) -> None:
    client = TestClient(create_app(container))

    articles = client.get("/admin/articles")
    settings = client.get("/admin/settings")

    assert articles.status_code == 200
    assert "fetch('/api/articles'" in articles.text
    assert '<a href="/admin/articles" class="active">Articles</a>' in articles.text
    assert settings.status_code == 200
    assert "fetch('/api/settings'" in settings.text
