"""
Order and checkout operations.
"""

from typing import Any

from market_tracker.api.base import BaseResource


class OrdersResource(BaseResource):
    prefix = "/orders"

    async def get_all_orders(self) -> Any:
        return await self.client.get(self.path())

    async def get_order(self, order_id: str) -> Any:
        return await self.client.get(
            self.path(order_id), dedup_key=f"getOrderById:{order_id}"
        )

    async def create_order(self, order: dict[str, Any]) -> Any:
        return await self.client.post(self.path(), json_data=order)

    async def update_order(self, order_id: str, order: dict[str, Any]) -> Any:
        return await self.client.put(self.path(order_id), json_data=order)

    async def delete_order(self, order_id: str) -> Any:
        return await self.client.delete(self.path(order_id))

    async def get_order_by_session(self, session_id: str) -> Any:
        """Look up the order created for a completed checkout session."""
        return await self.client.get(self.path("session", session_id))

    async def get_user_orders(self, uid: str) -> Any:
        return await self.client.get(self.path("user", uid))

    async def create_checkout_session(self, data: dict[str, Any]) -> Any:
        """Start a hosted checkout; the backend answers with the session URL."""
        return await self.client.post(
            "/checkout/create-checkout-session", json_data=data
        )
