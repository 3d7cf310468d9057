"""
GatewayClient - Async HTTP client in front of the Local Market Tracker backend.

Applies to every call:
- Bearer token from the credential provider, minted fresh per dispatch
- One retry after a fixed delay on transport-level failure
- Optional in-flight deduplication for by-identifier reads
"""

import asyncio
from typing import Any

import httpx
from loguru import logger

from market_tracker.services.credentials import AnonymousCredentials, CredentialProvider
from market_tracker.services.deduplicator import RequestDeduplicator
from market_tracker.services.errors import (
    ApiResponseError,
    AuthTokenError,
    NetworkError,
    RequestTimeoutError,
    ServiceError,
)

READ_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class GatewayClient:
    """
    Uniform call surface over the marketplace REST API.

    Usage:
        async with GatewayClient(
            base_url="https://backend.example.com/api",
            credentials=session,
        ) as client:
            products = await client.get("/products")
            user = await client.get(
                "/users/uid/abc123", dedup_key="getUserByUid:abc123"
            )
    """

    def __init__(
        self,
        base_url: str,
        credentials: CredentialProvider | None = None,
        timeout: float = 30.0,
        retry_delay: float = 2.0,
        retry_writes: bool = False,
        http_client: httpx.AsyncClient | None = None,
        debug: bool = False,
    ):
        self._base_url = base_url.rstrip("/")
        self._credentials = credentials or AnonymousCredentials()
        self._timeout = timeout
        self._retry_delay = retry_delay
        self._retry_writes = retry_writes
        self._deduplicator = RequestDeduplicator(debug=debug)
        self._retries = 0

        # Injected clients belong to the caller and are not closed here
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def deduplicator(self) -> RequestDeduplicator:
        return self._deduplicator

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
            )
        return self._http_client

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
        dedup_key: str | None = None,
        retry: bool | None = None,
    ) -> Any:
        """
        Make an HTTP request to the backend.

        Args:
            method: HTTP method (GET, POST, ...)
            path: Path relative to the base URL, e.g. "/products/p1"
            params: Query parameters
            json_data: JSON body
            dedup_key: Collapse concurrent calls sharing this key into one
            retry: Override retry eligibility (default: reads always,
                writes only when retry_writes is enabled)

        Returns:
            Decoded JSON body; None for an empty body

        Raises:
            AuthTokenError: If the session token could not be minted
            NetworkError: If the transport failed (after the single retry)
            ApiResponseError: If the backend answered with a non-2xx status
        """
        method = method.upper()
        url = self.url_for(path)
        should_retry = retry if retry is not None else self._retry_allowed(method)

        async def do_request() -> Any:
            return await self._request_with_retry(
                method=method,
                url=url,
                params=params,
                json_data=json_data,
                should_retry=should_retry,
            )

        if dedup_key is not None:
            return await self._deduplicator.dedupe(dedup_key, do_request)
        return await do_request()

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, json_data: Any = None, **kwargs: Any) -> Any:
        return await self.request("POST", path, json_data=json_data, **kwargs)

    async def put(self, path: str, json_data: Any = None, **kwargs: Any) -> Any:
        return await self.request("PUT", path, json_data=json_data, **kwargs)

    async def delete(self, path: str, json_data: Any = None, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, json_data=json_data, **kwargs)

    def _retry_allowed(self, method: str) -> bool:
        return method in READ_METHODS or self._retry_writes

    async def _request_with_retry(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None,
        json_data: Any,
        should_retry: bool,
    ) -> Any:
        """Dispatch once, and once more after a transport failure."""
        try:
            return await self._execute_request(method, url, params, json_data)
        except NetworkError as e:
            if not should_retry:
                raise
            self._retries += 1
            logger.warning(
                f"Retrying {method} {url} due to network error in "
                f"{self._retry_delay}s: {e}"
            )
            await asyncio.sleep(self._retry_delay)
            return await self._execute_request(method, url, params, json_data)

    async def _build_headers(self) -> dict[str, str]:
        """Attach a freshly minted bearer token when a session is active."""
        headers = {"Accept": "application/json"}
        if self._credentials.current_principal() is None:
            return headers

        try:
            token = await self._credentials.get_token()
        except AuthTokenError:
            raise
        except Exception as e:
            raise AuthTokenError(f"Failed to mint session token: {e}") from e

        headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _execute_request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None,
        json_data: Any,
    ) -> Any:
        """Execute the actual HTTP request."""
        headers = await self._build_headers()
        client = self._get_http_client()

        try:
            # httpx timeouts are per phase; wait_for caps the whole exchange
            response = await asyncio.wait_for(
                client.request(
                    method=method,
                    url=url,
                    params=params,
                    headers=headers,
                    json=json_data,
                    timeout=self._timeout,
                ),
                timeout=self._timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise RequestTimeoutError(method, url, self._timeout) from e

        except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
            # Misconfigured request; resending it cannot succeed
            raise ServiceError(f"{method} {url} rejected by client: {e}") from e

        except httpx.TransportError as e:
            raise NetworkError(
                f"{method} {url} failed: {e}", method=method, url=url
            ) from e

        except httpx.RequestError as e:
            raise ServiceError(f"{method} {url} failed: {e}") from e

        body = _decode_body(response)
        if not response.is_success:
            raise ApiResponseError(method, url, response.status_code, body)
        return body

    def get_stats(self) -> dict[str, Any]:
        """Get deduplication and retry counters."""
        return {
            "deduplicator": self._deduplicator.get_stats().to_dict(),
            "retries": self._retries,
        }

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        self._deduplicator.cancel_all()
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("GatewayClient closed")

    async def __aenter__(self) -> "GatewayClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
