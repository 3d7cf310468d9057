"""
User operations: identity sync, profile, and role requests.

Role changes go through a request/response workflow: a user asks to become
a vendor (or admin), and an admin approves or rejects the pending request.
"""

from typing import Any, Literal

from market_tracker.api.base import BaseResource

RequestAction = Literal["approve", "reject"]


class UsersResource(BaseResource):
    prefix = "/users"

    async def sync_user(self, user: dict[str, Any]) -> Any:
        """Create or refresh the backend record for a signed-in identity."""
        return await self.client.post(self.path("sync"), json_data=user)

    async def get_user_by_uid(self, uid: str) -> Any:
        return await self.client.get(
            self.path("uid", uid), dedup_key=f"getUserByUid:{uid}"
        )

    async def update_profile(self, profile: dict[str, Any]) -> Any:
        return await self.client.put(self.path("profile", "update"), json_data=profile)

    async def change_password(self, new_password: str) -> Any:
        return await self.client.post(
            self.path("change-password"), json_data={"newPassword": new_password}
        )

    async def get_all_users(self) -> Any:
        return await self.client.get(self.path())

    async def update_user(self, user_id: str, data: dict[str, Any]) -> Any:
        return await self.client.put(self.path(user_id), json_data=data)

    async def request_vendor(self, uid: str) -> Any:
        return await self.client.post(self.path("request-vendor"), json_data={"uid": uid})

    async def get_vendor_requests(self) -> Any:
        return await self.client.get(self.path("vendor-requests"))

    async def respond_vendor_request(self, request_id: str, action: RequestAction) -> Any:
        return await self.client.post(
            self.path("vendor-requests", request_id), json_data={"action": action}
        )

    async def request_admin(self, uid: str) -> Any:
        return await self.client.post(self.path("request-admin"), json_data={"uid": uid})

    async def get_admin_requests(self) -> Any:
        return await self.client.get(self.path("admin-requests"))

    async def respond_admin_request(self, request_id: str, action: RequestAction) -> Any:
        return await self.client.post(
            self.path("admin-requests", request_id), json_data={"action": action}
        )
