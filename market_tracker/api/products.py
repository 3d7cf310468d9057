"""
Product and review operations.
"""

from typing import Any

from market_tracker.api.base import BaseResource


class ProductsResource(BaseResource):
    prefix = "/products"

    async def get_all_products(self) -> Any:
        return await self.client.get(self.path())

    async def get_approved_products(self) -> Any:
        return await self.client.get(self.path("approved"))

    async def get_product(self, product_id: str) -> Any:
        return await self.client.get(
            self.path(product_id), dedup_key=f"getProductById:{product_id}"
        )

    async def create_product(self, product: dict[str, Any]) -> Any:
        return await self.client.post(self.path(), json_data=product)

    async def update_product(self, product_id: str, product: dict[str, Any]) -> Any:
        return await self.client.put(self.path(product_id), json_data=product)

    async def delete_product(self, product_id: str) -> Any:
        return await self.client.delete(self.path(product_id))

    async def get_price_history(self, product_id: str) -> Any:
        return await self.client.get(self.path(product_id, "prices"))

    async def get_vendor_products(self, vendor_uid: str) -> Any:
        return await self.client.get(self.path("vendor", vendor_uid))

    # Reviews are addressed by their position in the product's review list

    async def get_reviews(self, product_id: str) -> Any:
        return await self.client.get(self.path(product_id, "reviews"))

    async def add_review(self, product_id: str, review: dict[str, Any]) -> Any:
        return await self.client.post(
            self.path(product_id, "reviews"), json_data=review
        )

    async def update_review(
        self, product_id: str, review_idx: int, data: dict[str, Any]
    ) -> Any:
        return await self.client.put(
            self.path(product_id, "reviews", review_idx), json_data=data
        )

    async def delete_review(
        self, product_id: str, review_idx: int, data: dict[str, Any] | None = None
    ) -> Any:
        return await self.client.delete(
            self.path(product_id, "reviews", review_idx), json_data=data
        )
