import pytest
from fastapi.testclient import TestClient
from taskdesk.main import create_app


@pytest.fixture
def app(tmp_path):
    return create_app(f"sqlite:///{tmp_path / 'taskdesk_test.db'}")


@pytest.fixture
def client(app):
    # entering the client runs the lifespan, which creates the schema
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client):
    def _register(email="a@x.com", password="secret", name=None):
        """Register a user and return the id handed back by /signin."""
        r = client.post("/signup", json={"name": name, "emailid": email, "password": password})
        assert r.status_code == 201
        r = client.post("/signin", json={"emailid": email, "password": password})
        assert r.status_code == 200
        return r.json()["user"]

    return _register
