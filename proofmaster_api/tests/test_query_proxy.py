"""
Query proxy tests.

The upstream engine is replaced by a FakeUpstream; these tests pin the HTTP
contract of /api/query.
"""

import requests

from proofmaster_api.core.config import Settings, get_settings
from proofmaster_api.main import app


def test_answer_is_passed_through(client, upstream):
    """Test a successful upstream answer"""
    upstream.respond(200, "{{}, {1}, {2}, {1, 2}}")

    response = client.get("/api/query", params={"q": "power set of {1,2}"})

    assert response.status_code == 200
    assert response.json() == {"result": "{{}, {1}, {2}, {1, 2}}"}
    assert response.headers["cache-control"] == "s-maxage=300, stale-while-revalidate"
    assert response.headers["access-control-allow-origin"] == "*"


def test_upstream_parameters(client, upstream, test_settings):
    """Test the query is trimmed and sent with app id and metric units"""
    client.get("/api/query", params={"q": "  integrate x^2  "})

    assert len(upstream.calls) == 1
    call = upstream.calls[0]
    assert call["url"] == test_settings.WOLFRAM_API_URL
    assert call["params"] == {"appid": "test-app-id", "i": "integrate x^2", "units": "metric"}
    assert call["timeout"] == 30.0


def test_upstream_miss_is_not_an_error(client, upstream):
    """Test a non-success upstream status becomes a null result"""
    upstream.respond(501, "Wolfram|Alpha did not understand your input")

    response = client.get("/api/query", params={"q": "asdkjashdkj"})

    assert response.status_code == 200
    data = response.json()
    assert data["result"] is None
    assert "asdkjashdkj" in data["error"]
    assert "cache-control" not in response.headers


def test_missing_query(client, upstream):
    """Test absent and blank q are rejected before any upstream call"""
    for params in ({}, {"q": ""}, {"q": "   "}):
        response = client.get("/api/query", params=params)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing query parameter"}
    assert upstream.calls == []


def test_not_configured(client, upstream):
    """Test a missing app id is a server error"""
    app.dependency_overrides[get_settings] = lambda: Settings(WOLFRAM_APP_ID=None)

    response = client.get("/api/query", params={"q": "1+1"})

    assert response.status_code == 500
    assert "WOLFRAM_APP_ID" in response.json()["error"]
    assert upstream.calls == []


def test_transport_failure(client, upstream):
    """Test a connection failure surfaces as a proxy error"""
    upstream.error = requests.ConnectionError("connection refused")

    response = client.get("/api/query", params={"q": "1+1"})

    assert response.status_code == 500
    assert response.json() == {"error": "Proxy error: connection refused"}


def test_unexpected_upstream_failure(client, upstream):
    """Test a non-transport exception from the upstream call is still a proxy error"""
    upstream.error = RuntimeError("boom")

    response = client.get("/api/query", params={"q": "1+1"})

    assert response.status_code == 500
    assert response.json() == {"error": "Proxy error: boom"}


class UnreadableResponse:
    status_code = 200
    ok = True

    @property
    def text(self):
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")


def test_unreadable_upstream_body(client, upstream):
    """Test a failure while reading the answer body is a proxy error"""
    upstream.response = UnreadableResponse()

    response = client.get("/api/query", params={"q": "1+1"})

    assert response.status_code == 500
    assert response.json()["error"].startswith("Proxy error: ")
    assert "cache-control" not in response.headers


def test_post_not_allowed(client, upstream):
    """Test only GET is accepted"""
    response = client.post("/api/query", params={"q": "1+1"})

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}
    assert "GET" in response.headers["allow"]
    assert upstream.calls == []
