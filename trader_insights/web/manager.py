"""
Analysis run lifecycle for the web server.

Holds the only shared state of the served form: whether a run is active,
and the results of the last successful run. Overlapping run requests are
rejected, not queued.
"""

import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional

from ..analysis import run_analysis
from ..config import get_settings
from ..exceptions import AnalysisInProgressError
from ..models import StrategyResult
from ..providers import create_provider
from ..repositories import HoldersRepository, MarketsRepository, TradesRepository

logger = logging.getLogger(__name__)

Runner = Callable[[], List[StrategyResult]]


class AnalysisState(str, Enum):
    """Analysis lifecycle states."""
    IDLE = "idle"
    RUNNING = "running"


def default_runner() -> List[StrategyResult]:
    """Run the full pipeline against the live APIs using the global settings."""
    settings = get_settings()
    provider = create_provider(settings)
    return run_analysis(
        provider,
        markets_repo=MarketsRepository.from_settings(settings),
        holders_repo=HoldersRepository.from_settings(settings),
        trades_repo=TradesRepository.from_settings(settings),
    )


class AnalysisManager:
    """
    Runs the analysis on demand and caches the latest results.

    State moves IDLE -> RUNNING when a run starts and back to IDLE when it
    completes or fails. The check-and-set happens on the event loop with
    no await in between, so two requests cannot both start a run.
    """

    def __init__(self, runner: Optional[Runner] = None):
        self._runner = runner or default_runner
        self._state = AnalysisState.IDLE
        self._last_results: Optional[List[StrategyResult]] = None
        self._last_run_time: Optional[str] = None

    @property
    def state(self) -> AnalysisState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == AnalysisState.RUNNING

    @property
    def last_results(self) -> Optional[List[StrategyResult]]:
        return self._last_results

    @property
    def last_run_time(self) -> Optional[str]:
        return self._last_run_time

    def _start(self) -> None:
        if self._state == AnalysisState.RUNNING:
            raise AnalysisInProgressError("Analysis already in progress")
        self._state = AnalysisState.RUNNING

    def _finish(self) -> None:
        self._state = AnalysisState.IDLE

    async def run(self) -> List[StrategyResult]:
        """
        Run one analysis and replace the cached results.

        Raises:
            AnalysisInProgressError: if a run is already active
        """
        self._start()
        logger.info("Analysis run started")
        try:
            results = await asyncio.to_thread(self._runner)
        finally:
            self._finish()

        self._last_results = results
        self._last_run_time = datetime.now(timezone.utc).isoformat()
        logger.info(f"Analysis run finished with {len(results)} ranked traders")
        return results


# Global manager instance
_analysis_manager: Optional[AnalysisManager] = None


def get_analysis_manager() -> AnalysisManager:
    """Get the global analysis manager instance."""
    global _analysis_manager
    if _analysis_manager is None:
        _analysis_manager = AnalysisManager()
    return _analysis_manager
