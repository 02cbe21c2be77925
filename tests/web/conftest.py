from __future__ import annotations

import pytest

from src.hrms_portal.hrms_portal.main import create_app


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app()


@pytest.fixture
def container(app):
    return app.extensions["hrms_container"]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(client):
    def _login(user_id: str, name: str, role: str):
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
            sess["name"] = name
            sess["role"] = role
        return client

    return _login
