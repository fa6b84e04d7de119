import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import app
from codec import IdCodec
from encoding import get_codec

TEST_CODEC = IdCodec(salt="this is my salt")


@pytest.fixture
def client():
    """
    Pytest fixture to provide a test client whose endpoints use a known codec.
    The TestClient context manager runs the application's lifespan events.
    """
    app.dependency_overrides[get_codec] = lambda: TEST_CODEC
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health_check(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "services": {"codec": "ok"}}


def test_encode_and_decode(client: TestClient):
    response = client.post("/api/v1/encode", json={"numbers": [1, 2, 3]})
    assert response.status_code == 200
    hashid = response.json()["hashid"]
    assert hashid == TEST_CODEC.encode(1, 2, 3)

    response = client.post("/api/v1/decode", json={"hashid": hashid})
    assert response.status_code == 200
    assert response.json() == {"numbers": [1, 2, 3]}


def test_encode_negative_numbers(client: TestClient):
    response = client.post("/api/v1/encode", json={"numbers": [1, 4, 5, -3]})
    assert response.status_code == 200
    assert response.json() == {"hashid": ""}


def test_decode_foreign_hash(client: TestClient):
    response = client.post("/api/v1/decode", json={"hashid": "13-37"})
    assert response.status_code == 200
    assert response.json() == {"numbers": []}


def test_decode_narrow_width(client: TestClient):
    hashid = TEST_CODEC.encode(2**31)

    response = client.post("/api/v1/decode", json={"hashid": hashid, "width": 64})
    assert response.json() == {"numbers": [2**31]}

    response = client.post("/api/v1/decode", json={"hashid": hashid, "width": 32})
    assert response.status_code == 400
    assert "32-bit" in response.json()["detail"]


def test_invalid_payloads(client: TestClient):
    assert client.post("/api/v1/encode", json={"numbers": "1,2"}).status_code == 422
    assert client.post("/api/v1/decode", json={"hashid": "abc", "width": 16}).status_code == 422
    assert client.post("/api/v1/hex/encode", json={}).status_code == 422


def test_hex_endpoints(client: TestClient):
    response = client.post("/api/v1/hex/encode", json={"hex": "DEADBEEF"})
    assert response.status_code == 200
    assert response.json() == {"hashid": "kRNrpKlJ"}

    response = client.post("/api/v1/hex/decode", json={"hashid": "kRNrpKlJ"})
    assert response.status_code == 200
    assert response.json() == {"hex": "DEADBEEF"}

    response = client.post("/api/v1/hex/encode", json={"hex": "not hex"})
    assert response.json() == {"hashid": ""}


def test_resolve_single_id(client: TestClient):
    hashid = TEST_CODEC.encode(12345)
    response = client.get(f"/api/v1/ids/{hashid}")
    assert response.status_code == 200
    assert response.json() == {"id": 12345}


def test_resolve_unknown_id(client: TestClient):
    response = client.get(f"/api/v1/ids/{TEST_CODEC.encode(1, 2)}")
    assert response.status_code == 404

    response = client.get("/api/v1/ids/abcd")
    assert response.status_code == 404
