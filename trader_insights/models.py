"""Data model for markets, traders, trades and ranking results."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .fields import first_present, to_float

UNKNOWN_MARKET = 'Unknown Market'
ANONYMOUS = 'Anonymous'

BUY = 'BUY'
SELL = 'SELL'


@dataclass
class Market:
    """A listed market."""
    condition_id: str
    name: str
    volume: float

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Market':
        return cls(
            condition_id=first_present(data, ['conditionId'], '', types=str),
            name=str(first_present(data, ['question', 'slug'], UNKNOWN_MARKET)),
            volume=to_float(first_present(data, ['volumeNum', 'volume'], 0)),
        )


@dataclass
class Trader:
    """A trader identified by proxy wallet."""
    wallet_address: str
    name: str = ANONYMOUS

    @classmethod
    def from_holder(cls, holder: Dict[str, Any]) -> Optional['Trader']:
        """Build a trader from a holder entry, or None if it has no wallet."""
        wallet = first_present(holder, ['proxyWallet'], types=str)
        if not wallet:
            return None
        return cls(
            wallet_address=wallet,
            name=str(first_present(holder, ['name', 'displayName', 'pseudonym'], ANONYMOUS)),
        )


@dataclass
class Trade:
    """A single fill from a trader's history."""
    market: str
    side: str
    price: float
    size: float
    timestamp: int

    @property
    def value(self) -> float:
        return self.price * self.size

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Trade':
        return cls(
            market=str(first_present(data, ['title', 'slug'], UNKNOWN_MARKET)),
            side=str(first_present(data, ['side'], '')),
            price=to_float(data.get('price')),
            size=to_float(data.get('size')),
            timestamp=int(to_float(data.get('timestamp'))),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'market': self.market,
            'side': self.side,
            'price': self.price,
            'size': self.size,
            'value': self.value,
            'timestamp': self.timestamp,
        }


@dataclass
class TraderProfitSummary:
    """Weekly profit figure for one trader within a single ranking run."""
    trader: Trader
    profit: float = 0.0
    trade_count: int = 0
    trades: List[Trade] = field(default_factory=list)
    rank: int = 0

    @property
    def wallet_address(self) -> str:
        return self.trader.wallet_address

    @property
    def name(self) -> str:
        return self.trader.name


@dataclass
class StrategyResult:
    """Final output row: a ranked trader with its strategy narrative."""
    rank: int
    name: str
    wallet_address: str
    weekly_profit: float
    trade_count: int
    strategy: str

    @classmethod
    def from_summary(cls, summary: TraderProfitSummary, strategy: str) -> 'StrategyResult':
        return cls(
            rank=summary.rank,
            name=summary.name,
            wallet_address=summary.wallet_address,
            weekly_profit=summary.profit,
            trade_count=summary.trade_count,
            strategy=strategy,
        )
