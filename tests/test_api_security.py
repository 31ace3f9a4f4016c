import pytest
from fastapi.testclient import TestClient

from freshora.api.security import RATE_LIMIT_MESSAGE
from freshora.main import create_app


@pytest.fixture
def limited_client(database):
    app = create_app(database, rate_limit="3 per minute")
    app.state.limiter.enabled = True
    app.state.limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.state.limiter.reset()


def test_requests_over_the_limit_get_429(limited_client):
    for _ in range(3):
        assert limited_client.get("/api/services").status_code == 200

    res = limited_client.get("/api/services")

    assert res.status_code == 429
    assert res.json() == {"success": False, "error": RATE_LIMIT_MESSAGE}
    assert res.headers["X-Content-Type-Options"] == "nosniff"


def test_limit_is_shared_across_routes(limited_client):
    limited_client.get("/health")
    limited_client.get("/api/cart")
    limited_client.get("/api/services")

    assert limited_client.get("/api/orders").status_code == 429


def test_disabled_limiter_lets_requests_through(limited_client):
    limited_client.app.state.limiter.enabled = False

    for _ in range(5):
        assert limited_client.get("/health").status_code == 200


def test_security_headers_on_success_and_error(client):
    for res in (client.get("/health"), client.get("/api/services/nope")):
        assert res.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert res.headers["X-Content-Type-Options"] == "nosniff"
        assert res.headers["Referrer-Policy"] == "no-referrer"
        assert "default-src 'self'" in res.headers["Content-Security-Policy"]
