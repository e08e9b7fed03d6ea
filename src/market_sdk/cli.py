"""
Command-line interface for Market SDK.

A thin front-end over YandexMarketClient for manual checks against a campaign.
Credentials come from MarketAPISettings (MARKET_API_* environment variables or
a .env file). Results are printed as JSON.

Available commands:
- list-feeds: List campaign feeds
- refresh-feed: Trigger a feed refresh
- get-prices: List prices set through the API
- hidden-offers: List hidden offers
- explore: Explore campaign offers
- find-regions: Look up regions by name
- list-outlets: List points of sale
"""

import asyncio
import json
import logging

import click

from market_sdk.client import YandexMarketClient
from market_sdk.config import MarketAPISettings
from market_sdk.exceptions import MarketAPIError
from market_sdk.logging_middleware import LoggingMiddleware
from market_sdk.models import ExploreOptions
from market_sdk.models import HiddenOffersOptions
from market_sdk.models import OfferPricesOptions
from market_sdk.models import PointsOfSaleOptions

logger = logging.getLogger("market_sdk.cli")


def build_client(verbose: bool = False) -> YandexMarketClient:
    settings = MarketAPISettings()
    middlewares = [LoggingMiddleware(log_bodies=True)] if verbose else []
    return YandexMarketClient(
        settings.to_client_options(logger=logger), middlewares=middlewares
    )


def _dump(value) -> str:
    if isinstance(value, list):
        data = [item.to_dict() for item in value]
    else:
        data = value.to_dict()
    return json.dumps(data, ensure_ascii=False, indent=2)


def _run(ctx: click.Context, call):
    """Run ``call(client)`` on a fresh client and print its result as JSON."""

    async def _main():
        client = build_client(ctx.obj["verbose"])
        try:
            return await call(client)
        finally:
            await client.aclose()

    try:
        result = asyncio.run(_main())
    except MarketAPIError as exc:
        logger.debug("command failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc

    if result is not None:
        click.echo(_dump(result))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP traffic")
@click.pass_context
def cli(ctx, verbose):
    """Market SDK CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.option("--campaign-id", required=True, type=int, help="Campaign ID")
@click.pass_context
def list_feeds(ctx, campaign_id):
    """List feeds placed for a campaign."""
    _run(ctx, lambda client: client.list_feeds(campaign_id))


@cli.command()
@click.option("--campaign-id", required=True, type=int, help="Campaign ID")
@click.option("--feed-id", required=True, type=int, help="Feed ID")
@click.pass_context
def refresh_feed(ctx, campaign_id, feed_id):
    """Tell the marketplace that a feed was updated."""
    _run(ctx, lambda client: client.refresh_feed(campaign_id, feed_id))
    click.echo(f"Feed {feed_id} refresh requested")


@cli.command()
@click.option("--campaign-id", required=True, type=int, help="Campaign ID")
@click.option("--page", type=int, default=0, help="Page number")
@click.option("--page-size", type=int, default=0, help="Page size")
@click.pass_context
def get_prices(ctx, campaign_id, page, page_size):
    """List prices set through the API."""
    options = OfferPricesOptions().with_page(page, page_size)
    _run(ctx, lambda client: client.get_offer_prices(campaign_id, options))


@cli.command()
@click.option("--campaign-id", required=True, type=int, help="Campaign ID")
@click.option("--page-token", default="", help="Continuation token")
@click.option("--limit", type=int, default=0, help="Page limit")
@click.option("--feed-id", type=int, default=0, help="Only offers of this feed")
@click.pass_context
def hidden_offers(ctx, campaign_id, page_token, limit, feed_id):
    """List hidden offers."""
    options = (
        HiddenOffersOptions()
        .with_page_token(page_token)
        .with_limit(limit)
        .with_feed_id(feed_id)
    )
    _run(ctx, lambda client: client.get_hidden_offers(campaign_id, options))


@cli.command()
@click.option("--campaign-id", required=True, type=int, help="Campaign ID")
@click.option("--query", default="", help="Search phrase")
@click.option("--page", type=int, default=1, help="Page number")
@click.option("--page-size", type=int, default=20, help="Page size")
@click.pass_context
def explore(ctx, campaign_id, query, page, page_size):
    """Explore campaign offers."""
    options = ExploreOptions().with_query(query).with_page(page, page_size)
    _run(ctx, lambda client: client.explore_offers(campaign_id, options))


@cli.command()
@click.argument("name")
@click.pass_context
def find_regions(ctx, name):
    """Find regions by NAME."""
    _run(ctx, lambda client: client.find_regions(name))


@cli.command()
@click.option("--campaign-id", required=True, type=int, help="Campaign ID")
@click.option("--region-id", type=int, default=0, help="Only outlets of this region")
@click.pass_context
def list_outlets(ctx, campaign_id, region_id):
    """List points of sale."""
    options = PointsOfSaleOptions().with_region_id(region_id)
    _run(ctx, lambda client: client.list_points_of_sale(campaign_id, options))


if __name__ == "__main__":
    cli()
