import pytest

from market_sdk.client import YandexMarketClient
from market_sdk.config import ClientOptions
from tests.fakes import FakeMarketplace
from tests.fakes import MockTransport


@pytest.fixture
def transport():
    return MockTransport()


@pytest.fixture
def options(transport):
    return ClientOptions(
        oauth_token="test-token",
        oauth_client_id="test-client",
        api_endpoint="https://api.test/",
        transport=transport,
    )


@pytest.fixture
def client(options):
    return YandexMarketClient(options)


@pytest.fixture
def marketplace():
    return FakeMarketplace()


@pytest.fixture
def market_client(marketplace):
    return YandexMarketClient(
        oauth_token="test-token",
        oauth_client_id="test-client",
        api_endpoint="https://api.test",
        transport=marketplace,
    )
