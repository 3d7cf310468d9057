"""
Local Market Tracker gateway smoke run.
Fetches the public catalogue and, with MARKET_API_TOKEN set, the caller's profile.
"""

import asyncio
import sys

from loguru import logger

from market_tracker.api import MarketplaceApi
from market_tracker.services import (
    AnonymousCredentials,
    ServiceError,
    StaticTokenCredentials,
)
from market_tracker.settings import global_settings


async def main() -> int:
    settings = global_settings
    if settings.api_token:
        credentials = StaticTokenCredentials(settings.api_principal, settings.api_token)
    else:
        credentials = AnonymousCredentials()

    logger.info(f"Connecting to {settings.api_base}...")

    async with MarketplaceApi.from_settings(settings, credentials) as api:
        try:
            products, ads = await asyncio.gather(
                api.products.get_approved_products(),
                api.advertisements.get_approved_ads(),
            )
            logger.info(f"Approved products: {len(products or [])}")
            logger.info(f"Approved advertisements: {len(ads or [])}")

            principal = credentials.current_principal()
            if principal is not None:
                user = await api.users.get_user_by_uid(principal)
                logger.info(f"Signed in as {principal} (role: {user.get('role', 'user')})")
        except ServiceError as e:
            logger.error(f"Smoke run failed: {e}")
            return 1
        finally:
            logger.debug(f"Gateway stats: {api.client.get_stats()}")

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
