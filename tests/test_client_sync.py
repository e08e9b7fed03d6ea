"""
Tests for the synchronous client wrapper.
"""

import pytest

from market_sdk.client_sync import YandexMarketClientSync
from market_sdk.exceptions import MarketResponseError
from market_sdk.models import HiddenOffer
from market_sdk.models import OfferToUnhide
from tests.fakes import error
from tests.fakes import ok

CAMPAIGN = 21000000


def test_sync_client_calls_through(options, transport):
    transport.handler = lambda call: ok(
        regions=[{"id": 213, "name": "Москва", "type": "CITY"}]
    )

    with YandexMarketClientSync(options) as client:
        regions = client.find_regions("Москва")

    assert [r.name for r in regions] == ["Москва"]
    assert transport.last_call["method"] == "GET"
    assert transport.closed


def test_sync_client_reuses_its_loop(marketplace):
    client = YandexMarketClientSync(api_endpoint="https://api.test", transport=marketplace)
    try:
        client.hide_offers(CAMPAIGN, [HiddenOffer(feed_id=1, offer_id="a")])
        assert client.get_hidden_offers(CAMPAIGN).total == 1
        client.unhide_offers(CAMPAIGN, [OfferToUnhide(feed_id=1, offer_id="a")])
        assert client.get_hidden_offers(CAMPAIGN).total == 0
    finally:
        client.close()


def test_sync_client_raises_envelope_errors(options, transport):
    transport.handler = lambda call: error(("FEED_NOT_FOUND", "no such feed"))
    client = YandexMarketClientSync(options)

    with pytest.raises(MarketResponseError, match="failed to refresh feed"):
        client.refresh_feed(CAMPAIGN, 1)
    client.close()


def test_sync_client_overrides(options):
    client = YandexMarketClientSync(options, user_agent="agent/2.0")
    assert client.options.user_agent == "agent/2.0"
    assert options.user_agent != "agent/2.0"
    client.close()


def test_sync_close_is_idempotent(options, transport):
    client = YandexMarketClientSync(options)
    client.close()
    client.close()
    assert transport.closed
