"""Natural-language strategy explanations for ranked traders."""
import json
import logging
from typing import List

from .models import Trade
from .prompts import format_profit_status, get_strategy_prompt
from .providers import AIProvider

logger = logging.getLogger(__name__)

MAX_PROMPT_TRADES = 50

NO_DATA_MESSAGE = 'No trade data available to analyze.'
EMPTY_RESPONSE_MESSAGE = 'Unable to generate strategy explanation.'
ERROR_MESSAGE = 'Error analyzing trade data with AI.'


def build_strategy_prompt(trades: List[Trade], weekly_profit: float) -> str:
    """Embed the first trades and the profit phrase into the analyst prompt."""
    trades_summary = json.dumps([t.to_dict() for t in trades[:MAX_PROMPT_TRADES]], indent=2)
    return get_strategy_prompt(trades_summary, format_profit_status(weekly_profit))


def explain_strategy(trades: List[Trade], weekly_profit: float, provider: AIProvider) -> str:
    """
    Ask the AI provider for a one-paragraph explanation of a trader's strategy.

    Never raises: an empty trade list short-circuits without calling the
    provider, and provider failures are replaced by a fixed message. The
    provider is called at most once.
    """
    if not trades:
        return NO_DATA_MESSAGE

    prompt = build_strategy_prompt(trades, weekly_profit)

    try:
        text = provider.generate(prompt)
    except Exception as e:
        logger.warning(f"Error generating strategy explanation: {e}")
        return ERROR_MESSAGE

    text = (text or '').strip()
    return text or EMPTY_RESPONSE_MESSAGE
