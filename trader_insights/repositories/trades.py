from typing import List

from .base import BaseRepository
from ..config import Settings
from ..fields import resolve_trade_list
from ..models import Trade


class TradesRepository(BaseRepository):
    """Repository for trade history (Data API)."""
    
    DATA_URL = "https://data-api.polymarket.com"
    
    def __init__(self, base_url: str = DATA_URL, timeout: float = 10):
        super().__init__(base_url, timeout)
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "TradesRepository":
        return cls(settings.data_api_url, settings.request_timeout)
    
    def get_by_wallet(self, wallet: str, limit: int = 500) -> List[Trade]:
        """
        Get recent trades for a specific wallet.
        
        Args:
            wallet: Wallet address
            limit: Maximum number of trades to return
        
        Returns:
            List of trades, newest first as returned by the API
        
        Raises:
            FetchError: if the history could not be fetched
        """
        payload = self._get("/trades", params={'user': wallet, 'limit': limit})
        return [Trade.from_api(t) for t in resolve_trade_list(payload) if isinstance(t, dict)]
