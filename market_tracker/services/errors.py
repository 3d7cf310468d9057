"""
Gateway exceptions.
"""

from typing import Any


class ServiceError(Exception):
    """Base exception for gateway errors."""

    pass


class NetworkError(ServiceError):
    """Transport could not complete (connection refused, reset, DNS, ...)."""

    def __init__(
        self,
        message: str,
        method: str,
        url: str,
    ):
        self.method = method
        self.url = url
        super().__init__(message)


class RequestTimeoutError(NetworkError):
    """Request timed out at the transport layer."""

    def __init__(self, method: str, url: str, timeout: float):
        self.timeout = timeout
        super().__init__(
            f"{method} {url} timed out after {timeout}s",
            method=method,
            url=url,
        )


class ApiResponseError(ServiceError):
    """Backend answered with a non-2xx status."""

    def __init__(self, method: str, url: str, status_code: int, body: Any):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code} for {method} {url}: {str(body)[:200]}")


class AuthTokenError(ServiceError):
    """Bearer token could not be minted for the current session."""

    pass
