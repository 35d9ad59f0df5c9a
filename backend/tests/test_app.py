import asyncio
import logging

import pytest
from fastapi import Request
from fastapi.routing import APIRoute

from agroflow.core.logging_setup import log_requests
from agroflow.main import app


def test_root(client):
    body = client.get("/").json()
    assert body["status"] == "running"
    assert body["message"] == "AgroFlow API"


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_health_detailed_pings_database(client):
    response = client.get("/health/detailed")
    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_request_id_is_generated(client):
    assert client.get("/health").headers["X-Request-ID"]


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"statusCode": 404, "message": "Not Found"}


def test_malformed_json_is_a_bad_request(client):
    response = client.post("/crops", content="{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json()["statusCode"] == 400


def test_property_collection_routes_are_mounted():
    methods = {
        (route.path, method)
        for route in app.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    }
    assert ("/properties", "GET") in methods
    assert ("/properties", "POST") in methods
    assert ("/properties/{property_id}/harvest-crop", "POST") in methods


def test_crashing_request_is_still_logged(caplog):
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/boom",
        "query_string": b"",
        "headers": [(b"x-request-id", b"req-42")],
    }

    async def call_next(request):
        raise RuntimeError("boom")

    http_logger = logging.getLogger("agroflow.http")
    http_logger.addHandler(caplog.handler)
    try:
        with pytest.raises(RuntimeError):
            asyncio.run(log_requests(Request(scope), call_next))
    finally:
        http_logger.removeHandler(caplog.handler)

    [record] = [r for r in caplog.records if r.name == "agroflow.http"]
    assert record.levelno == logging.ERROR
    assert "GET /boom -> 500" in record.getMessage()
    assert "request_id=req-42" in record.getMessage()
