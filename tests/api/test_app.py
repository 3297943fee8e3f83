"""Application shell: health checks, API info, error envelopes and rate limiting."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from slowapi.errors import RateLimitExceeded

from app.api.middleware.error_handling import format_validation_errors
from app.main import create_application

pytestmark = pytest.mark.integration


class TestHealth:
    """/api/health"""

    def test_basic_health(self, client) -> None:
        body = client.get("/api/health").json()
        assert body["success"] is True
        assert body["message"] == "API is running successfully"
        assert "timestamp" in body

    def test_detailed_health_without_database(self, client) -> None:
        response = client.get("/api/health/detailed")

        assert response.status_code == 503
        body = response.json()
        assert body["success"] is False
        assert body["data"]["components"]["database"]["status"] == "unhealthy"
        ai = body["data"]["components"]["ai"]
        assert ai["status"] == "configured"
        assert ai["total_requests"] == 0


class TestApiInfo:
    """GET /api/"""

    def test_lists_endpoints_and_vocabularies(self, client) -> None:
        data = client.get("/api/").json()["data"]
        assert data["endpoints"]["marketplace"]["search"].startswith("GET /api/marketplace/search")
        assert "Copper-based" in data["supportedMedicineTypes"]
        assert "Tomato" in data["supportedPlants"]


class TestErrorEnvelopes:
    """Exception handlers and middleware"""

    def test_unknown_route(self, client) -> None:
        response = client.get("/api/nowhere")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Route not found",
            "path": "/api/nowhere",
        }

    def test_request_id_is_echoed(self, client) -> None:
        response = client.get("/api/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.headers["X-Response-Time"].endswith("s")

    def test_request_id_is_generated(self, client) -> None:
        assert client.get("/api/health").headers["X-Request-ID"]

    def test_malformed_json_body(self, client) -> None:
        response = client.post(
            "/api/marketplace",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"

    def test_format_validation_errors(self) -> None:
        errors = [
            {"loc": ("body", "seller", "email"), "msg": "value is not a valid email address"},
            {"loc": ("query", "limit"), "msg": "Input should be less than or equal to 100"},
            {"loc": ("body",), "msg": "Value error, Fields cannot be null: name"},
        ]
        assert format_validation_errors(errors) == [
            {"field": "seller.email", "message": "value is not a valid email address"},
            {"field": "limit", "message": "Input should be less than or equal to 100"},
            {"field": "body", "message": "Fields cannot be null: name"},
        ]


class TestRateLimiting:
    """429 envelope for the AI endpoints"""

    def test_exceeded_limit_renders_envelope(self) -> None:
        application = create_application()

        @application.get("/limited")
        async def limited():
            raise RateLimitExceeded(_ExceededLimit())

        response = TestClient(application).get("/limited")

        assert response.status_code == 429
        assert response.json() == {
            "success": False,
            "message": "Rate limit exceeded",
            "details": {"limit": "20 per 1 minute"},
        }


class _ExceededLimit:
    """The two attributes RateLimitExceeded reads from a slowapi Limit."""

    error_message = None
    limit = "20 per 1 minute"


class TestCors:
    """Cross-origin headers"""

    def test_server_error_envelope_keeps_cors_headers(self, client, medicine_repository) -> None:
        medicine_repository.find = AsyncMock(side_effect=RuntimeError("store exploded"))

        response = client.get("/api/marketplace", headers={"Origin": "https://shop.example"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Internal server error"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_success_response_has_cors_headers(self, client) -> None:
        response = client.get("/api/health", headers={"Origin": "https://shop.example"})
        assert response.headers["access-control-allow-origin"] == "*"
