"""Polymarket weekly profit ranking and AI strategy analysis."""
from .analysis import (
    discover_traders,
    calculate_weekly_profit,
    rank_traders,
    get_top_weekly_profit_traders,
    run_analysis
)
from .narrator import explain_strategy
from .providers import AIProvider, ChatGPTProvider, ClaudeProvider, GeminiProvider, create_provider

__all__ = [
    'discover_traders',
    'calculate_weekly_profit',
    'rank_traders',
    'get_top_weekly_profit_traders',
    'run_analysis',
    'explain_strategy',
    'AIProvider',
    'ChatGPTProvider',
    'ClaudeProvider',
    'GeminiProvider',
    'create_provider'
]
