"""Custom exceptions for the strategy analyzer."""
from typing import Optional


class AnalyzerError(Exception):
    """Base exception for analyzer errors."""
    pass


class FetchError(AnalyzerError):
    """Upstream HTTP request failed or returned an unusable body."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DiscoveryError(AnalyzerError):
    """No holder data could be fetched for any selected market."""
    pass


class ProviderError(AnalyzerError):
    """Text generation call failed."""
    pass


class AnalysisInProgressError(AnalyzerError):
    """A run was requested while another one is still active."""
    pass
