"""
Example usage of Market SDK against a real campaign.

Credentials are read from MARKET_API_* environment variables (or a .env file);
set MARKET_API_OAUTH_TOKEN, MARKET_API_OAUTH_CLIENT_ID and MARKET_CAMPAIGN_ID
before running it.
"""

import asyncio
import logging
import os

from market_sdk import MarketAPISettings
from market_sdk import YandexMarketClient
from market_sdk.exceptions import MarketAPIError
from market_sdk.exceptions import MarketResponseError
from market_sdk.logging_middleware import LoggingMiddleware
from market_sdk.models import ExploreOptions
from market_sdk.models import HiddenOffer
from market_sdk.models import HiddenOffersOptions
from market_sdk.models import OfferToUnhide

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def demonstrate_feeds_and_offers(client: YandexMarketClient, campaign_id: int):
    """
    List feeds, look at a few offers and hide one of them for an hour.
    """
    feeds = await client.list_feeds(campaign_id)
    logger.info(f"Campaign {campaign_id} has {len(feeds)} feeds")
    if not feeds:
        return

    explored = await client.explore_offers(
        campaign_id, ExploreOptions().with_feed_id(feeds[0].id).with_page(1, 5)
    )
    for offer in explored.offers:
        logger.info(f"Offer {offer.id}: {offer.name} ({offer.price} {offer.currency})")
    if not explored.offers:
        return

    first = explored.offers[0]
    await client.hide_offers(
        campaign_id,
        [HiddenOffer(feed_id=first.feed_id, offer_id=first.id, comment="demo", ttl_in_hours=1)],
    )
    hidden = await client.get_hidden_offers(
        campaign_id, HiddenOffersOptions().with_feed_id(first.feed_id)
    )
    logger.info(f"Hidden offers in feed {first.feed_id}: {hidden.total}")

    await client.unhide_offers(
        campaign_id, [OfferToUnhide(feed_id=first.feed_id, offer_id=first.id)]
    )


async def demonstrate_regions(client: YandexMarketClient):
    """
    Region lookup returns each match with its parents, which tells apart
    cities sharing a name.
    """
    for region in await client.find_regions("Кировск"):
        path = " / ".join(r.name for r in [region, *region.ancestors()])
        logger.info(f"{region.id}: {path}")


async def main():
    campaign_id = int(os.environ.get("MARKET_CAMPAIGN_ID", "0"))
    options = MarketAPISettings().to_client_options(logger=logger)

    async with YandexMarketClient(
        options, middlewares=[LoggingMiddleware()]
    ) as client:
        try:
            await demonstrate_regions(client)
            if campaign_id:
                await demonstrate_feeds_and_offers(client, campaign_id)
        except MarketResponseError as e:
            logger.error(f"Marketplace rejected the call ({e.codes}): {e}")
        except MarketAPIError as e:
            logger.error(f"Call failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
