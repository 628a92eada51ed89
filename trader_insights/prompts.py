def format_profit_status(weekly_profit: float) -> str:
    """Human-readable profit/loss phrase, e.g. 'profit of $45.00'."""
    if weekly_profit >= 0:
        return f"profit of ${weekly_profit:.2f}"
    return f"loss of ${abs(weekly_profit):.2f}"


def get_strategy_prompt(trades_summary: str, profit_status: str) -> str:
    return f"""You are an expert prediction market analyst. Analyze the following raw trade data from a top-performing Polymarket trader who made a weekly {profit_status}.

Trade Data (last 7 days):
{trades_summary}

Based on this trade history, provide a one-paragraph strategy explanation suitable for a novice trader. Focus on:
- What types of markets they trade
- Their entry/exit patterns (buy low, sell high?)
- Risk management approach
- Any notable patterns in timing or pricing
- Why this strategy might be profitable

Return ONLY the strategy explanation paragraph, nothing else."""
