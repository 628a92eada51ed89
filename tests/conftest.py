"""Shared fixtures: in-memory repositories and a recording AI provider."""

import time
from unittest.mock import MagicMock

import pytest

from trader_insights.exceptions import FetchError
from trader_insights.models import Market, Trade, Trader
from trader_insights.providers.base import AIProvider


class FakeMarketsRepository:
    def __init__(self, markets=None, error=None):
        self.markets = markets or []
        self.error = error
        self.calls = 0

    def get_active_markets(self, limit=20):
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.markets)


class FakeHoldersRepository:
    """Holders keyed by condition id; ids listed in ``failing`` raise FetchError."""

    def __init__(self, holders_by_market=None, failing=()):
        self.holders_by_market = holders_by_market or {}
        self.failing = set(failing)
        self.requested = []

    def get_holders(self, condition_id, limit=20):
        self.requested.append(condition_id)
        if condition_id in self.failing:
            raise FetchError("HTTP 500", status_code=500)
        return list(self.holders_by_market.get(condition_id, []))


class FakeTradesRepository:
    """Trades keyed by wallet; wallets listed in ``failing`` raise FetchError."""

    def __init__(self, trades_by_wallet=None, failing=()):
        self.trades_by_wallet = trades_by_wallet or {}
        self.failing = set(failing)
        self.requested = []

    def get_by_wallet(self, wallet, limit=500):
        self.requested.append(wallet)
        if wallet in self.failing:
            raise FetchError("HTTP 500", status_code=500)
        return list(self.trades_by_wallet.get(wallet, []))


class RecordingProvider(AIProvider):
    def __init__(self, reply="They buy favourites and sell into strength.", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    @property
    def call_count(self):
        return len(self.prompts)

    def get_name(self):
        return "Recording"

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


def make_trade(side="BUY", price=0.5, size=10.0, age_seconds=3600, market="Will it rain?"):
    return Trade(
        market=market,
        side=side,
        price=price,
        size=size,
        timestamp=int(time.time()) - age_seconds
    )


def make_response(status_code=200, payload=None, json_error=None):
    """A stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = "" if payload is None else str(payload)
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def provider():
    return RecordingProvider()


@pytest.fixture
def market():
    return Market(condition_id="0xabc", name="Big market", volume=150_000)


@pytest.fixture
def trader_a():
    return Trader(wallet_address="0xA", name="alice")


@pytest.fixture
def trader_b():
    return Trader(wallet_address="0xB", name="bob")
