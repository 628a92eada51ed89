import logging
import requests
from typing import Optional, Dict, Any

from ..exceptions import FetchError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base repository with common request handling."""
    
    def __init__(self, base_url: str, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
    
    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make GET request and return the decoded JSON body.
        
        Raises:
            FetchError: on network errors, non-2xx statuses or undecodable bodies
        """
        url = f"{self.base_url}{endpoint}"
        try:
            response = requests.get(
                url,
                params=params,
                headers={'Accept': 'application/json'},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise FetchError(f"GET {endpoint} failed: {e}", url=url) from e
        
        if not response.ok:
            raise FetchError(
                f"GET {endpoint} returned HTTP {response.status_code}",
                url=url,
                status_code=response.status_code
            )
        
        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"GET {endpoint} returned invalid JSON", url=url,
                             status_code=response.status_code) from e
    
    def _get_list(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> list:
        """Make GET request and return list response."""
        result = self._get(endpoint, params)
        if not isinstance(result, list):
            logger.debug(f"GET {endpoint} did not return a list, got {type(result).__name__}")
            return []
        return result
