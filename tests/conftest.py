"""Shared fixtures: a recording mock transport and ready-made clients."""

import httpx
import pytest

from binance_sdk import BinanceClient, ClientConfig, NoopLogger, SignedClient

API_KEY = "test_key"
API_SECRET = "test_secret"
BASE_URL = "https://api.binance.test"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that records requests and answers with a fixed response.

    With ``echo_query=True`` the response body is the request's raw query
    string, like an endpoint echoing what it received.
    """

    def __init__(self, status_code: int = 200, body: bytes = b"{}", echo_query: bool = False):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        self.echo_query = echo_query
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        content = request.url.query if self.echo_query else self.body
        return httpx.Response(self.status_code, content=content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_params(self) -> list[tuple[str, str]]:
        """Query pairs of the last request, in wire order."""
        return list(self.last.url.params.multi_items())


@pytest.fixture
def config():
    return ClientConfig(api_key=API_KEY, api_secret=API_SECRET, base_url=BASE_URL)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def echo_transport():
    return RecordingTransport(echo_query=True)


@pytest.fixture
def make_transport():
    """Factory for transports with a custom status, body or handler."""
    return RecordingTransport


@pytest.fixture
def client(config, transport):
    """Signed client wired to the recording transport."""
    with SignedClient(config, logger=NoopLogger(), transport=transport) as signed:
        yield signed


@pytest.fixture
def sdk(transport):
    """Unified client wired to the recording transport."""
    with BinanceClient(
        api_key=API_KEY,
        api_secret=API_SECRET,
        base_url=BASE_URL,
        logger=NoopLogger(),
        transport=transport,
    ) as unified:
        yield unified


@pytest.fixture
def frozen_time(monkeypatch):
    """Pin the request timestamp to 1700000000000 ms."""
    monkeypatch.setattr("binance_sdk.client.current_timestamp_ms", lambda: 1700000000000)
    return 1700000000000
