"""
Advertisement operations.
"""

from typing import Any

from market_tracker.api.base import BaseResource


class AdvertisementsResource(BaseResource):
    prefix = "/advertisements"

    async def get_all_ads(self) -> Any:
        return await self.client.get(self.path())

    async def get_approved_ads(self) -> Any:
        return await self.client.get(self.path("approved"))

    async def get_ad(self, ad_id: str) -> Any:
        return await self.client.get(self.path(ad_id), dedup_key=f"getAdById:{ad_id}")

    async def create_ad(self, ad: dict[str, Any]) -> Any:
        return await self.client.post(self.path(), json_data=ad)

    async def update_ad(self, ad_id: str, ad: dict[str, Any]) -> Any:
        return await self.client.put(self.path(ad_id), json_data=ad)

    async def delete_ad(self, ad_id: str) -> Any:
        return await self.client.delete(self.path(ad_id))
