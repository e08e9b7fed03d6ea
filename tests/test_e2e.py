"""
End-to-end scenarios against an in-memory marketplace.

FakeMarketplace keeps state between calls, so these tests check that the
client's writes are visible to its reads the way they are on the real API.
"""

import pytest

from market_sdk.exceptions import MarketResponseError
from market_sdk.models import Address
from market_sdk.models import Currency
from market_sdk.models import Day
from market_sdk.models import DeliveryRule
from market_sdk.models import FeedRef
from market_sdk.models import HiddenOffer
from market_sdk.models import Offer
from market_sdk.models import OfferToUnhide
from market_sdk.models import OutletType
from market_sdk.models import OutletVisibility
from market_sdk.models import PointOfSale
from market_sdk.models import Price
from market_sdk.models import ScheduleItem
from market_sdk.models import WorkingSchedule

CAMPAIGN = 21000000
FEED_ID = 820450
OFFER_ID = "169690W424150"


@pytest.mark.asyncio
async def test_set_then_get_offer_prices(market_client):
    discount_base = 300.0
    value = 250.0

    await market_client.set_offer_prices(
        CAMPAIGN,
        [
            Offer(
                feed=FeedRef(id=FEED_ID),
                id=OFFER_ID,
                price=Price(currency_id=Currency.RUR, value=value, discount_base=discount_base),
            )
        ],
    )
    prices = await market_client.get_offer_prices(CAMPAIGN)

    assert len(prices) == 1, "there should be only 1 product set"
    assert prices[0].id == OFFER_ID
    assert prices[0].price.discount_base == discount_base
    assert prices[0].price.value == value


@pytest.mark.asyncio
async def test_delete_all_offer_prices(market_client):
    await market_client.set_offer_prices(
        CAMPAIGN, [Offer(feed=FeedRef(id=FEED_ID), id=OFFER_ID, price=Price(value=1.0))]
    )

    await market_client.delete_all_offer_prices(CAMPAIGN)

    assert await market_client.get_offer_prices(CAMPAIGN) == []


@pytest.mark.asyncio
async def test_hide_then_unhide_restores_total(market_client):
    to_hide = [
        HiddenOffer(feed_id=FEED_ID, offer_id=OFFER_ID, comment="Временно закончился", ttl_in_hours=12),
        HiddenOffer(feed_id=FEED_ID, offer_id="SECOND", comment="", ttl_in_hours=1),
    ]

    initial = await market_client.get_hidden_offers(CAMPAIGN)

    await market_client.hide_offers(CAMPAIGN, to_hide)
    hidden = await market_client.get_hidden_offers(CAMPAIGN)
    assert hidden.total == initial.total + len(to_hide)

    await market_client.unhide_offers(
        CAMPAIGN, [OfferToUnhide(feed_id=o.feed_id, offer_id=o.offer_id) for o in to_hide]
    )
    restored = await market_client.get_hidden_offers(CAMPAIGN)
    assert restored.total == initial.total


@pytest.mark.asyncio
async def test_point_of_sale_lifecycle(market_client):
    outlet = PointOfSale(
        name="Pickup point",
        visibility=OutletVisibility.HIDDEN,
        type=OutletType.DEPOT,
        working_schedule=WorkingSchedule(
            schedule_items=[
                ScheduleItem(
                    start_day=Day.MONDAY, end_day=Day.FRIDAY, start_time="09:00", end_time="20:00"
                )
            ]
        ),
        address=Address(region_id=43, street="ул. Петербургская", number="1"),
        phones=["+7 (401) 212-22-32"],
        delivery_rules=[DeliveryRule(min_delivery_days=1, max_delivery_days=2, price_free_pickup=100)],
        emails=["test@mail.test"],
        shop_outlet_code="PVZ-test-1",
    )

    initial = await market_client.list_points_of_sale(CAMPAIGN)

    created = await market_client.create_point_of_sale(CAMPAIGN, outlet)
    after_create = await market_client.list_points_of_sale(CAMPAIGN)
    assert len(after_create) == len(initial) + 1

    fetched = await market_client.get_point_of_sale(CAMPAIGN, created.outlet_id)
    assert fetched.id == created.outlet_id
    assert fetched.shop_outlet_code == "PVZ-test-1"
    assert fetched.delivery_rules[0].price_free_pickup == 100

    renamed = outlet.model_copy(update={"name": "Renamed point"})
    await market_client.update_point_of_sale(CAMPAIGN, created.outlet_id, renamed)
    fetched = await market_client.get_point_of_sale(CAMPAIGN, created.outlet_id)
    assert fetched.name == "Renamed point"

    await market_client.delete_point_of_sale(CAMPAIGN, created.outlet_id)
    after_delete = await market_client.list_points_of_sale(CAMPAIGN)
    assert len(after_delete) == len(initial)

    with pytest.raises(MarketResponseError) as exc_info:
        await market_client.get_point_of_sale(CAMPAIGN, created.outlet_id)
    assert exc_info.value.codes == ["NOT_FOUND"]


@pytest.mark.asyncio
async def test_campaigns_are_isolated(market_client):
    await market_client.hide_offers(CAMPAIGN, [HiddenOffer(feed_id=FEED_ID, offer_id=OFFER_ID)])

    other = await market_client.get_hidden_offers(CAMPAIGN + 1)

    assert other.total == 0
