"""
Credential providers for bearer-token attachment.

The gateway asks the provider for the current principal before every
dispatch and, when one exists, for a freshly minted token. Providers are
passed to the client at construction; nothing here is global.
"""

from typing import Awaitable, Callable, Protocol, runtime_checkable

from loguru import logger

from market_tracker.services.errors import AuthTokenError

TokenMinter = Callable[[], Awaitable[str]]


@runtime_checkable
class CredentialProvider(Protocol):
    """External identity/session provider as seen by the gateway."""

    def current_principal(self) -> str | None:
        """Identifier of the signed-in principal, or None without a session."""
        ...

    async def get_token(self) -> str:
        """Mint a short-lived token for the current principal."""
        ...


class AnonymousCredentials:
    """No session, ever. Requests go out unauthenticated."""

    def current_principal(self) -> str | None:
        return None

    async def get_token(self) -> str:
        raise AuthTokenError("No active session to mint a token for")


class StaticTokenCredentials:
    """Fixed principal and token, e.g. a service account for scripted runs."""

    def __init__(self, principal: str, token: str):
        self._principal = principal
        self._token = token

    def current_principal(self) -> str | None:
        return self._principal

    async def get_token(self) -> str:
        return self._token


class SessionCredentials:
    """
    Mutable session driven by the sign-in layer.

    The minting callable is invoked on every get_token() call; tokens are
    never stored here.

    Usage:
        session = SessionCredentials()
        session.sign_in("uid-123", firebase_user.get_id_token)
        ...
        session.sign_out()
    """

    def __init__(self):
        self._principal: str | None = None
        self._mint: TokenMinter | None = None

    def sign_in(self, principal: str, mint: TokenMinter) -> None:
        self._principal = principal
        self._mint = mint
        logger.debug(f"Session started for principal: {principal}")

    def sign_out(self) -> None:
        if self._principal is not None:
            logger.debug(f"Session ended for principal: {self._principal}")
        self._principal = None
        self._mint = None

    def current_principal(self) -> str | None:
        return self._principal

    async def get_token(self) -> str:
        if self._principal is None or self._mint is None:
            raise AuthTokenError("No active session to mint a token for")
        return await self._mint()
