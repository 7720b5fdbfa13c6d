import io
import logging
import pytest
from types import SimpleNamespace
from tiktok_downloader.config.settings import config
from tiktok_downloader.core.logging import RequestIdFilter, log_info, logger


@pytest.fixture
def captured():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(config.logging.format))
    handler.addFilter(RequestIdFilter())
    logger.addHandler(handler)
    yield stream
    logger.removeHandler(handler)


def test_request_id_in_output(captured):
    request = SimpleNamespace(state=SimpleNamespace(request_id="req-42"))

    log_info(request, "Resolved video: Funny Cat")

    assert "[req-42] Resolved video: Funny Cat" in captured.getvalue()


def test_records_outside_requests_get_placeholder(captured):
    logging.getLogger("tiktok_downloader.i18n").error("Locale xx unavailable")

    assert "[-] Locale xx unavailable" in captured.getvalue()


@pytest.mark.asyncio
async def test_request_id_reaches_handler_logs(client, upstream, captured):
    await client.post(
        "/download",
        content=b"{not json",
        headers={"Content-Type": "application/json", "X-Request-ID": "trace-8"},
    )

    assert "[trace-8] Rejected request body" in captured.getvalue()


def test_installed_handler_adds_request_id():
    assert any(
        isinstance(f, RequestIdFilter)
        for handler in logger.handlers
        for f in handler.filters
    )
