from typing import List

from .base import BaseRepository
from ..config import Settings
from ..models import Trader


class HoldersRepository(BaseRepository):
    """Repository for market holder listings (Data API)."""
    
    DATA_URL = "https://data-api.polymarket.com"
    
    def __init__(self, base_url: str = DATA_URL, timeout: float = 10):
        super().__init__(base_url, timeout)
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "HoldersRepository":
        return cls(settings.data_api_url, settings.request_timeout)
    
    def get_holders(self, condition_id: str, limit: int = 20) -> List[Trader]:
        """
        Get top holders of a market, flattened across its outcome tokens.
        
        The API answers with one entry per outcome token, each carrying its
        own ``holders`` array. Malformed entries are skipped. The same wallet
        may appear more than once (one per token it holds).
        
        Raises:
            FetchError: if the listing could not be fetched
        """
        token_entries = self._get_list("/holders", params={
            'market': condition_id,
            'limit': limit
        })
        
        traders = []
        for token_data in token_entries:
            holders = token_data.get('holders') if isinstance(token_data, dict) else None
            if not isinstance(holders, list):
                continue
            for holder in holders:
                trader = Trader.from_holder(holder)
                if trader:
                    traders.append(trader)
        return traders
