# tests/test_server/test_server.py
import pytest
from httpx import AsyncClient, ASGITransport

from server.middleware import SECURE_HEADERS
from server.server import create_app


@pytest.mark.asyncio
class TestServer:
    """Тесты корневых endpoint'ов и обработчиков ошибок"""

    async def test_root(self, async_client: AsyncClient):
        response = await async_client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Store API"
        assert body["status"] == "running"

    async def test_health_check(self, async_client: AsyncClient):
        response = await async_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    async def test_security_headers(self, async_client: AsyncClient):
        response = await async_client.get("/api/categories")

        for header_name, header_value in SECURE_HEADERS.items():
            assert response.headers[header_name] == header_value

    async def test_unknown_route_uses_envelope(self, async_client: AsyncClient):
        response = await async_client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"msg": "Not Found"}

    async def test_method_not_allowed_uses_envelope(self, async_client: AsyncClient):
        response = await async_client.patch("/api/categories")

        assert response.status_code == 405
        assert response.json() == {"msg": "Method Not Allowed"}

    async def test_unexpected_error_hides_details(self):
        """Необработанное исключение дает 500 без деталей"""
        app = create_app(testing=True)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("secret connection string")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"msg": "Internal server error"}
        assert "secret" not in response.text
