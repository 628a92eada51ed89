"""
Weekly profit ranking of active Polymarket traders.

Traders are discovered among the holders of the highest-volume active
markets. For each of them, the trailing week of trades is reduced to a
signed notional sum (SELL value minus BUY value). This is a proxy metric:
it ignores fees, open positions and settlement payouts.
"""
import logging
import time
from typing import Callable, Dict, List, Optional

from .exceptions import DiscoveryError, FetchError
from .models import SELL, BUY, StrategyResult, Trader, TraderProfitSummary
from .narrator import explain_strategy
from .providers import AIProvider
from .repositories import HoldersRepository, MarketsRepository, TradesRepository

logger = logging.getLogger(__name__)

MARKET_SCAN_LIMIT = 20
MIN_MARKET_VOLUME = 100_000
TOP_MARKET_COUNT = 5
HOLDERS_PER_MARKET = 20
MAX_CANDIDATES = 50
TRADES_PER_TRADER = 500
LOOKBACK_SECONDS = 7 * 24 * 60 * 60
TOP_TRADER_COUNT = 5

# (analyzed, total, with_activity)
ProgressCallback = Callable[[int, int, int], None]


def lookback_start(now: Optional[float] = None) -> int:
    """Start of the trailing 7-day window, in epoch seconds."""
    if now is None:
        now = time.time()
    return int(now - LOOKBACK_SECONDS)


def discover_traders(
    markets_repo: Optional[MarketsRepository] = None,
    holders_repo: Optional[HoldersRepository] = None
) -> List[Trader]:
    """
    Find candidate traders among holders of the biggest active markets.

    Takes the 20 most recent active markets, keeps those with volume above
    100k, and scans the holders of the top 5 by volume. Wallets are
    deduplicated keeping the first-seen name, capped at 50 in discovery order.

    Raises:
        FetchError: if the market listing cannot be fetched
        DiscoveryError: if holders could not be fetched for any market
    """
    markets_repo = markets_repo or MarketsRepository()
    holders_repo = holders_repo or HoldersRepository()

    markets = markets_repo.get_active_markets(limit=MARKET_SCAN_LIMIT)
    top_markets = sorted(
        (m for m in markets if m.volume > MIN_MARKET_VOLUME),
        key=lambda m: m.volume,
        reverse=True
    )[:TOP_MARKET_COUNT]

    logger.info(f"Scanning {len(top_markets)} high-volume markets for active traders...")

    all_traders: Dict[str, Trader] = {}
    attempted = 0
    failed = 0

    for market in top_markets:
        if not market.condition_id:
            logger.warning(f"Skipping market without condition id: {market.name}")
            continue

        attempted += 1
        try:
            holders = holders_repo.get_holders(market.condition_id, limit=HOLDERS_PER_MARKET)
        except FetchError as e:
            failed += 1
            logger.warning(f"Skipping holders of '{market.name}': {e}")
            continue

        for trader in holders:
            if trader.wallet_address not in all_traders:
                all_traders[trader.wallet_address] = trader

    if attempted and failed == attempted:
        raise DiscoveryError(f"Could not fetch holders for any of {attempted} markets")

    return list(all_traders.values())[:MAX_CANDIDATES]


def calculate_weekly_profit(
    trader: Trader,
    since: Optional[int] = None,
    trades_repo: Optional[TradesRepository] = None
) -> TraderProfitSummary:
    """
    Reduce a trader's trailing-week trades to a signed profit figure.

    SELL trades add price*size, BUY trades subtract it, other sides count
    as trades but contribute nothing. Fetch failures yield an empty summary
    (profit 0, no trades) instead of raising.

    Args:
        trader: Trader to analyze
        since: Window start in epoch seconds (default: 7 days before now)
        trades_repo: Trades repository to use
    """
    trades_repo = trades_repo or TradesRepository()
    if since is None:
        since = lookback_start()

    try:
        trades = trades_repo.get_by_wallet(trader.wallet_address, limit=TRADES_PER_TRADER)
    except FetchError as e:
        logger.debug(f"Could not fetch trades for {trader.wallet_address}: {e}")
        return TraderProfitSummary(trader=trader)

    recent_trades = [t for t in trades if t.timestamp >= since]

    total_profit = 0.0
    for trade in recent_trades:
        if trade.side == SELL:
            total_profit += trade.value
        elif trade.side == BUY:
            total_profit -= trade.value

    return TraderProfitSummary(
        trader=trader,
        profit=total_profit,
        trade_count=len(recent_trades),
        trades=recent_trades
    )


def rank_traders(summaries: List[TraderProfitSummary], limit: int = TOP_TRADER_COUNT) -> List[TraderProfitSummary]:
    """
    Rank traders with activity by weekly profit, highest first.

    Ties keep their input (discovery) order. Returns at most ``limit``
    entries, each with its 1-based rank set.
    """
    active = [s for s in summaries if s.trade_count > 0]
    active.sort(key=lambda s: s.profit, reverse=True)

    ranked = active[:min(limit, TOP_TRADER_COUNT)]
    for i, summary in enumerate(ranked, 1):
        summary.rank = i
    return ranked


def get_top_weekly_profit_traders(
    markets_repo: Optional[MarketsRepository] = None,
    holders_repo: Optional[HoldersRepository] = None,
    trades_repo: Optional[TradesRepository] = None,
    on_progress: Optional[ProgressCallback] = None
) -> List[TraderProfitSummary]:
    """
    Discover, aggregate and rank: the top 5 traders by weekly profit.

    The lookback window is pinned once for the whole batch. An empty list
    means no candidates or no trader with activity.

    Raises:
        FetchError, DiscoveryError: see ``discover_traders``
    """
    active_traders = discover_traders(markets_repo, holders_repo)

    if not active_traders:
        logger.info("No active traders found")
        return []

    logger.info(f"Found {len(active_traders)} active traders. Calculating weekly profits...")

    since = lookback_start()
    summaries = []
    with_activity = 0

    for i, trader in enumerate(active_traders, 1):
        summary = calculate_weekly_profit(trader, since=since, trades_repo=trades_repo)
        summaries.append(summary)
        if summary.trade_count > 0:
            with_activity += 1
        if on_progress:
            on_progress(i, len(active_traders), with_activity)

    return rank_traders(summaries)


def run_analysis(
    provider: AIProvider,
    markets_repo: Optional[MarketsRepository] = None,
    holders_repo: Optional[HoldersRepository] = None,
    trades_repo: Optional[TradesRepository] = None
) -> List[StrategyResult]:
    """Full run: rank the top traders and explain each one's strategy."""
    top_traders = get_top_weekly_profit_traders(markets_repo, holders_repo, trades_repo)

    results = []
    for summary in top_traders:
        logger.info(f"Explaining strategy of #{summary.rank} {summary.name}")
        strategy = explain_strategy(summary.trades, summary.profit, provider)
        results.append(StrategyResult.from_summary(summary, strategy))

    return results
