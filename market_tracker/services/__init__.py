"""
Gateway infrastructure between the UI layer and the marketplace backend.

Provides:
- GatewayClient: credential attachment, single retry on network failure
- RequestDeduplicator: collapses concurrent identical reads
- Credential providers: anonymous, static token, sign-in session
"""

from market_tracker.services.errors import (
    ServiceError,
    NetworkError,
    RequestTimeoutError,
    ApiResponseError,
    AuthTokenError,
)
from market_tracker.services.credentials import (
    CredentialProvider,
    AnonymousCredentials,
    StaticTokenCredentials,
    SessionCredentials,
)
from market_tracker.services.deduplicator import RequestDeduplicator
from market_tracker.services.client import GatewayClient

__all__ = [
    # Errors
    "ServiceError",
    "NetworkError",
    "RequestTimeoutError",
    "ApiResponseError",
    "AuthTokenError",
    # Credentials
    "CredentialProvider",
    "AnonymousCredentials",
    "StaticTokenCredentials",
    "SessionCredentials",
    # Deduplicator
    "RequestDeduplicator",
    # Client
    "GatewayClient",
]
