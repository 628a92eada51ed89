"""Tests for the console presentation."""

from unittest.mock import patch

import analyzer
from conftest import RecordingProvider, make_trade
from trader_insights.exceptions import FetchError
from trader_insights.models import Trader, TraderProfitSummary


def ranked_summary():
    return TraderProfitSummary(
        trader=Trader("0xA", "alice"),
        profit=1234.5,
        trade_count=2,
        trades=[make_trade("SELL", 0.6, 100), make_trade("BUY", 0.3, 50)],
        rank=1
    )


def test_prints_ranked_traders_with_strategy(capsys):
    provider = RecordingProvider(reply="Sells favourites late.")
    with patch.object(analyzer, "create_provider", return_value=provider), \
            patch.object(analyzer, "get_top_weekly_profit_traders", return_value=[ranked_summary()]):
        exit_code = analyzer.main(["analyze"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "RANK #1 - TOP WEEKLY PROFIT TRADER" in out
    assert "Name: alice" in out
    assert "Address: 0xA" in out
    assert "Weekly Profit: $1234.50" in out
    assert "1,234" not in out
    assert "Trades (7 days): 2" in out
    assert "Sells favourites late." in out
    assert "Analysis complete!" in out
    assert provider.call_count == 1


def test_no_active_traders(capsys):
    provider = RecordingProvider()
    with patch.object(analyzer, "create_provider", return_value=provider), \
            patch.object(analyzer, "get_top_weekly_profit_traders", return_value=[]):
        exit_code = analyzer.main([])

    assert exit_code == 0
    assert "No traders with recent activity found." in capsys.readouterr().out
    assert provider.call_count == 0


def test_discovery_failure_prints_short_error(capsys):
    with patch.object(analyzer, "create_provider", return_value=RecordingProvider()), \
            patch.object(analyzer, "get_top_weekly_profit_traders",
                         side_effect=FetchError("GET /markets returned HTTP 503", status_code=503)):
        exit_code = analyzer.main(["analyze"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "Error fetching active traders: GET /markets returned HTTP 503" in out
    assert "Traceback" not in out
