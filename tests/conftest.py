import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from tiktok_downloader.main import app
from tiktok_downloader.config.settings import config
from tiktok_downloader.core.state import state
from tiktok_downloader.infra.http import get_http_client


class UpstreamRecorder:
    """Mock upstream: records every outbound request and answers via a handler"""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(404)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def anyio_backend():
    return 'asyncio'


@pytest.fixture
def upstream():
    recorder = UpstreamRecorder()
    mock_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    app.dependency_overrides[get_http_client] = lambda: mock_client
    yield recorder
    app.dependency_overrides.pop(get_http_client, None)


@pytest.fixture
def no_ssrf():
    original = config.security.enable_ssrf_protection
    config.security.enable_ssrf_protection = False
    yield
    config.security.enable_ssrf_protection = original


@pytest.fixture(autouse=True)
def reset_relay_state():
    original_passthrough = config.relay.stream_passthrough
    original_max = config.relay.max_concurrent
    state.active_relays = 0
    yield
    config.relay.stream_passthrough = original_passthrough
    config.relay.max_concurrent = original_max
    state.active_relays = 0


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
