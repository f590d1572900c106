# tests/conftest.py
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import json
from typing import Callable, List

import httpx
import pytest
import pytest_asyncio

from products_client.config import Config
from products_client.services.product_service import ProductService
from products_client.services.transport import HttpxTransport

BASE_URL = "http://api.test"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, content: bytes = b"{}") -> None:
        self.status_code = status_code
        self.content = content
        self.requests: List[httpx.Request] = []

    def respond_json(self, payload, status_code: int = 200) -> None:
        self.status_code = status_code
        self.content = json.dumps(payload).encode()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config() -> Config:
    return Config(api_base_url=BASE_URL)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest_asyncio.fixture
async def product_service(config: Config, handler: RecordingHandler):
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        yield ProductService(config, transport=HttpxTransport(client=client))


@pytest_asyncio.fixture
async def make_service(config: Config):
    """Build a service around an arbitrary MockTransport handler."""
    clients: List[httpx.AsyncClient] = []

    def _make(fn: Callable[[httpx.Request], httpx.Response]) -> ProductService:
        client = httpx.AsyncClient(transport=httpx.MockTransport(fn))
        clients.append(client)
        return ProductService(config, transport=HttpxTransport(client=client))

    yield _make
    for client in clients:
        await client.aclose()
