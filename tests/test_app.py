"""Tests for the application factory and lifecycle."""

import pytest
from fastapi.testclient import TestClient

from portfolio_cms.api.app import create_app, run_startup_tasks
from tests.conftest import InMemoryUserRepository


def test_health_reports_database(container, sql_client) -> None:
    client = TestClient(create_app(container))

    assert client.get("/health").json() == {"status": "ok", "database": "ok"}

    sql_client.healthy = False
    assert client.get("/health").json() == {
        "status": "ok",
        "database": "unavailable",
    }


def test_malformed_body_is_bad_request(container, admin_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/photos",
        content="not json",
        headers={**admin_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request"}


def test_lifespan_bootstraps_and_closes(container, sql_client) -> None:
    empty = InMemoryUserRepository()
    container.auth_service.repository = empty
    container.settings.bootstrap_admin_password = "first-pass"

    with TestClient(create_app(container)) as client:
        assert client.get("/health").status_code == 200
        assert empty.count_users() == 1

    assert sql_client.closed


def test_startup_applies_schema_when_enabled(container, sql_client) -> None:
    container.settings.db_apply_schema = True

    run_startup_tasks(container)

    assert any("CREATE TABLE" in sql for sql, _ in sql_client.statements)


def test_startup_failure_is_raised(container) -> None:
    def broken(*args: object) -> None:
        raise RuntimeError("db down")

    container.auth_service.bootstrap_admin = broken

    with pytest.raises(RuntimeError, match="db down"):
        run_startup_tasks(container)
