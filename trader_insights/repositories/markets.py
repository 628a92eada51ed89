from typing import List

from .base import BaseRepository
from ..config import Settings
from ..models import Market


class MarketsRepository(BaseRepository):
    """Repository for market listings (Gamma API)."""
    
    GAMMA_URL = "https://gamma-api.polymarket.com"
    
    def __init__(self, base_url: str = GAMMA_URL, timeout: float = 10):
        super().__init__(base_url, timeout)
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "MarketsRepository":
        return cls(settings.gamma_api_url, settings.request_timeout)
    
    def get_active_markets(self, limit: int = 20) -> List[Market]:
        """
        Get active, non-closed markets.
        
        Args:
            limit: Maximum number of markets to request
        
        Returns:
            List of markets in API order
        
        Raises:
            FetchError: if the listing could not be fetched
        """
        raw_markets = self._get_list("/markets", params={
            'limit': limit,
            'active': 'true',
            'closed': 'false'
        })
        return [Market.from_api(m) for m in raw_markets if isinstance(m, dict)]
