"""
Marketplace API surface consumed by the UI layer.

Usage:
    async with MarketplaceApi.from_settings(credentials=session) as api:
        products = await api.products.get_approved_products()
        me = await api.users.get_user_by_uid(session.current_principal())
"""

from market_tracker.api.advertisements import AdvertisementsResource
from market_tracker.api.orders import OrdersResource
from market_tracker.api.products import ProductsResource
from market_tracker.api.users import UsersResource
from market_tracker.api.watchlist import WatchlistResource
from market_tracker.services.client import GatewayClient
from market_tracker.services.credentials import CredentialProvider
from market_tracker.settings import Settings, global_settings


class MarketplaceApi:
    """All resource groups bound to one GatewayClient."""

    def __init__(self, client: GatewayClient):
        self.client = client
        self.products = ProductsResource(client)
        self.advertisements = AdvertisementsResource(client)
        self.orders = OrdersResource(client)
        self.watchlist = WatchlistResource(client)
        self.users = UsersResource(client)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        credentials: CredentialProvider | None = None,
    ) -> "MarketplaceApi":
        settings = settings or global_settings
        client = GatewayClient(
            base_url=settings.api_base,
            credentials=credentials,
            timeout=settings.request_timeout,
            retry_delay=settings.retry_delay,
            retry_writes=settings.retry_writes,
            debug=settings.debug,
        )
        return cls(client)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "MarketplaceApi":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


__all__ = [
    "MarketplaceApi",
    "ProductsResource",
    "AdvertisementsResource",
    "OrdersResource",
    "WatchlistResource",
    "UsersResource",
]
