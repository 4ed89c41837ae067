import pytest

from bumptrack import create_app
from bumptrack.extensions import db

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256",
    "DEVELOPMENT_EARLY_WEEK_FLOOR": 4,
}


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Register a user and return bearer headers for it."""
    def _login(email="ana@example.com", password="secret123"):
        client.post("/api/v1/auth/register", json={
            "first_name": "Ana",
            "last_name": "Silva",
            "email": email,
            "password": password,
        })
        resp = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        token = resp.get_json()["access_token"]
        return {"Authorization": f"Bearer {token}"}
    return _login


@pytest.fixture
def auth_headers(login):
    return login()


@pytest.fixture
def pregnancy(client, auth_headers):
    resp = client.post("/api/v1/pregnancies", headers=auth_headers, json={
        "lastMenstrualPeriod": "2024-01-01",
        "prePregnancyWeight": 60,
    })
    assert resp.status_code == 201
    return resp.get_json()["data"]
