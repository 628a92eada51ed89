"""Repository pattern for Polymarket data access."""
from .markets import MarketsRepository
from .holders import HoldersRepository
from .trades import TradesRepository

__all__ = ['MarketsRepository', 'HoldersRepository', 'TradesRepository']
