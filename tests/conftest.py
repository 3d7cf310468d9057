"""Shared fixtures for gateway tests."""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

import httpx
import pytest

from market_tracker.api import MarketplaceApi
from market_tracker.services.client import GatewayClient
from market_tracker.services.credentials import SessionCredentials

BASE_URL = "https://market.test/api"


class TokenMint:
    """Mints numbered tokens so tests can tell fresh tokens apart."""

    def __init__(self) -> None:
        self.count = 0

    async def __call__(self) -> str:
        self.count += 1
        return f"token-{self.count}"


class GatedBackend:
    """MockTransport handler that holds every request until released."""

    def __init__(
        self,
        respond: Callable[[httpx.Request], httpx.Response],
        offline_for: int = 0,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self.released = asyncio.Event()
        self._respond = respond
        self._offline_for = offline_for

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self.requests) <= self._offline_for:
            raise httpx.ConnectError("network unreachable", request=request)
        await self.released.wait()
        return self._respond(request)

    def release(self) -> None:
        self.released.set()


async def wait_until(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
    """Yield to the event loop until predicate() holds."""

    async def _poll() -> None:
        while not predicate():
            await asyncio.sleep(0)

    await asyncio.wait_for(_poll(), timeout)


@pytest.fixture
def session() -> SessionCredentials:
    return SessionCredentials()


@pytest.fixture
async def gateway(session: SessionCredentials) -> AsyncIterator[GatewayClient]:
    """Gateway with a real httpx client for respx mocking and no retry delay."""
    async with httpx.AsyncClient() as http_client:
        yield GatewayClient(
            base_url=BASE_URL,
            credentials=session,
            retry_delay=0,
            http_client=http_client,
        )


@pytest.fixture
def api(gateway: GatewayClient) -> MarketplaceApi:
    return MarketplaceApi(gateway)


@pytest.fixture
async def gated_api() -> AsyncIterator[
    Callable[..., Awaitable[tuple[MarketplaceApi, GatedBackend]]]
]:
    """Factory for an API whose backend blocks until the test releases it."""
    clients: list[httpx.AsyncClient] = []

    async def _make(
        respond: Callable[[httpx.Request], httpx.Response] | None = None,
        offline_for: int = 0,
        retry_delay: float = 0,
        timeout: float = 30.0,
    ) -> tuple[MarketplaceApi, GatedBackend]:
        backend = GatedBackend(
            respond or (lambda request: httpx.Response(200, json={"path": request.url.path})),
            offline_for=offline_for,
        )
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(backend))
        clients.append(http_client)
        client = GatewayClient(
            base_url=BASE_URL,
            timeout=timeout,
            retry_delay=retry_delay,
            http_client=http_client,
        )
        return MarketplaceApi(client), backend

    yield _make

    for http_client in clients:
        await http_client.aclose()


def json_body(request: httpx.Request) -> Any:
    return json.loads(request.content)
