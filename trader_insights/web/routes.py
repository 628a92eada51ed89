"""REST API routes for the strategy analyzer."""

import logging
from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends

from ..exceptions import AnalyzerError
from ..models import StrategyResult
from .manager import AnalysisManager, get_analysis_manager
from .models import ResultsResponse, RunResponse, StatusResponse, StrategyResultOut

logger = logging.getLogger(__name__)
router = APIRouter()


def _to_out(results: Optional[List[StrategyResult]]) -> Optional[List[StrategyResultOut]]:
    if results is None:
        return None
    return [StrategyResultOut(**asdict(r)) for r in results]


@router.get("/run", response_model=RunResponse, response_model_exclude_none=True)
async def run_analysis(manager: AnalysisManager = Depends(get_analysis_manager)):
    """Run a full analysis and wait for its results."""
    try:
        results = await manager.run()
    except AnalyzerError as e:
        logger.warning(f"Analysis failed: {e}")
        return RunResponse(error=str(e))
    except Exception as e:
        logger.exception("Unexpected error during analysis")
        return RunResponse(error=f"Analysis failed: {e}")

    return RunResponse(success=True, results=_to_out(results))


@router.get("/results", response_model=ResultsResponse)
async def get_results(manager: AnalysisManager = Depends(get_analysis_manager)):
    """Get the results of the last completed run."""
    return ResultsResponse(
        results=_to_out(manager.last_results),
        last_run_time=manager.last_run_time,
        is_running=manager.is_running
    )


@router.get("/status", response_model=StatusResponse)
async def get_status(manager: AnalysisManager = Depends(get_analysis_manager)):
    """Get run status."""
    return StatusResponse(
        is_running=manager.is_running,
        has_results=manager.last_results is not None,
        last_run_time=manager.last_run_time
    )
