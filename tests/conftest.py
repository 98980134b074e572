import httpx
import pytest
from httpx import AsyncClient, ASGITransport

from stock_relay.main import app
from stock_relay.routers.stock import get_http_client


@pytest.fixture
def provider():
    """Stub the TWSE provider with a handler(request) -> httpx.Response.

    Returns the list of requests the stub received.
    """
    received = []

    def install(handler):
        def recording(request):
            received.append(request)
            return handler(request)

        async def override():
            async with httpx.AsyncClient(transport=httpx.MockTransport(recording)) as client:
                yield client

        app.dependency_overrides[get_http_client] = override
        return received

    yield install
    app.dependency_overrides.clear()


@pytest.fixture
def api():
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")
