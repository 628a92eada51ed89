"""Pydantic models for API responses (camelCase on the wire)."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StrategyResultOut(ApiModel):
    """One ranked trader with its strategy narrative."""
    rank: int
    name: str
    wallet_address: str
    weekly_profit: float
    trade_count: int
    strategy: str


class RunResponse(ApiModel):
    """Outcome of a triggered run: results on success, error otherwise."""
    success: Optional[bool] = None
    results: Optional[List[StrategyResultOut]] = None
    error: Optional[str] = None


class ResultsResponse(ApiModel):
    """Cached results of the last run."""
    results: Optional[List[StrategyResultOut]] = None
    last_run_time: Optional[str] = None
    is_running: bool


class StatusResponse(ApiModel):
    is_running: bool
    has_results: bool
    last_run_time: Optional[str] = None
