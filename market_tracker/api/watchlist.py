"""
Watchlist operations.
"""

from typing import Any

from market_tracker.api.base import BaseResource


class WatchlistResource(BaseResource):
    prefix = "/watchlist"

    async def get_all_watchlist(self) -> Any:
        return await self.client.get(self.path())

    async def get_watchlist_item(self, item_id: str) -> Any:
        return await self.client.get(self.path(item_id))

    async def create_watchlist_item(self, item: dict[str, Any]) -> Any:
        return await self.client.post(self.path(), json_data=item)

    async def delete_watchlist_item(self, item_id: str) -> Any:
        return await self.client.delete(self.path(item_id))

    async def get_user_watchlist(self, uid: str) -> Any:
        return await self.client.get(self.path("user", uid))
