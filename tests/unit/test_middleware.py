"""Tests for CORS and request logging middleware."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from loguru import logger

from comuni_api.api.middleware import RequestLoggingMiddleware, setup_cors
from comuni_api.core.config import Settings


def _create_test_app() -> FastAPI:
    """Create a minimal FastAPI app for middleware testing."""
    app = FastAPI()

    @app.get("/test")
    async def test_route() -> dict:
        return {"ok": True}

    return app


class TestRequestLoggingMiddleware:
    """Tests for RequestLoggingMiddleware."""

    @pytest.fixture
    def client(self) -> TestClient:
        app = _create_test_app()
        app.add_middleware(RequestLoggingMiddleware)
        return TestClient(app)

    def test_adds_response_time_header(self, client: TestClient) -> None:
        response = client.get("/test")
        assert response.status_code == 200
        assert float(response.headers["X-Response-Time-Ms"]) >= 0

    def test_logs_request_line(self, client: TestClient) -> None:
        messages: list[str] = []
        sink_id = logger.add(lambda message: messages.append(str(message)), level="INFO")
        try:
            client.get("/test")
        finally:
            logger.remove(sink_id)
        assert any("GET /test -> 200" in m for m in messages)


class TestSetupCors:
    """Tests for setup_cors."""

    def _client(self, **overrides: str) -> TestClient:
        settings = Settings(database_url="sqlite+aiosqlite:///:memory:", _env_file=None, **overrides)  # type: ignore[call-arg]
        app = _create_test_app()
        setup_cors(app, settings)
        return TestClient(app)

    def test_allowed_origin_is_echoed(self) -> None:
        client = self._client(cors_origins="http://localhost:3000")
        response = client.get("/test", headers={"Origin": "http://localhost:3000"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_unknown_origin_not_allowed(self) -> None:
        client = self._client(cors_origins="http://localhost:3000")
        response = client.get("/test", headers={"Origin": "http://evil.example"})
        assert "access-control-allow-origin" not in response.headers

    def test_origin_regex(self) -> None:
        client = self._client(cors_origin_regex=r"https://.*\.comuni\.example")
        response = client.get("/test", headers={"Origin": "https://app.comuni.example"})
        assert response.headers["access-control-allow-origin"] == "https://app.comuni.example"
