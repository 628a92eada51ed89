#!/usr/bin/env python3
"""
Polymarket Top Weekly Profit Trader Analyzer - CLI Entry Point
"""
import argparse
import sys
from typing import List, Optional

from trader_insights.analysis import get_top_weekly_profit_traders
from trader_insights.config import get_settings
from trader_insights.exceptions import AnalyzerError
from trader_insights.logger import setup_logging
from trader_insights.models import StrategyResult
from trader_insights.narrator import explain_strategy
from trader_insights.providers import create_provider
from trader_insights.repositories import HoldersRepository, MarketsRepository, TradesRepository


def _print_progress(analyzed: int, total: int, with_activity: int):
    sys.stdout.write(f"\rAnalyzed {analyzed}/{total} traders... Found {with_activity} with activity")
    sys.stdout.flush()


def run_analysis(args) -> int:
    """Rank top weekly profit traders and print their AI strategy analysis."""
    settings = get_settings()

    print("=" * 60)
    print("POLYMARKET TOP WEEKLY PROFIT TRADER ANALYZER")
    print("=" * 60)
    print()

    try:
        provider = create_provider(settings)
    except AnalyzerError as e:
        print(f"Error: {e}")
        return 1

    print(f"AI Provider: {provider.get_name()}")
    print("Fetching active traders from high-volume markets...")
    print("(This may take a moment as we analyze each trader's history)\n")

    try:
        top_traders = get_top_weekly_profit_traders(
            markets_repo=MarketsRepository.from_settings(settings),
            holders_repo=HoldersRepository.from_settings(settings),
            trades_repo=TradesRepository.from_settings(settings),
            on_progress=_print_progress
        )
    except AnalyzerError as e:
        print(f"\nError fetching active traders: {e}")
        return 1

    print("\n")

    if not top_traders:
        print("No traders with recent activity found.")
        return 0

    print(f"Found {len(top_traders)} top profit traders from the last 7 days.\n")

    results: List[StrategyResult] = []
    for trader in top_traders:
        print("-" * 60)
        print(f"RANK #{trader.rank} - TOP WEEKLY PROFIT TRADER")
        print(f"Name: {trader.name}")
        print(f"Address: {trader.wallet_address}")
        print(f"Weekly Profit: ${trader.profit:.2f}")
        print(f"Trades (7 days): {trader.trade_count}")
        print()
        print("Analyzing trading strategy with AI...\n")

        strategy = explain_strategy(trader.trades, trader.profit, provider)
        results.append(StrategyResult.from_summary(trader, strategy))

        print("STRATEGY ANALYSIS:")
        print(strategy)
        print()

    print("=" * 60)
    print("Analysis complete!")
    print("=" * 60)

    if args.plot:
        from trader_insights.visualization import create_visualizations
        create_visualizations(results, output_dir=args.output_dir)

    return 0


def run_server(args) -> int:
    """Serve the analyzer over HTTP."""
    import uvicorn

    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port

    print(f"Polymarket Strategy Analyzer running at http://{host}:{port}")
    uvicorn.run("trader_insights.web.app:app", host=host, port=port, log_level=settings.log_level.lower())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Rank Polymarket traders by weekly profit and explain their strategies with AI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the top 5 weekly profit traders
  %(prog)s analyze

  # Also save a chart of their weekly profit
  %(prog)s analyze --plot

  # Serve the web page on port 5000
  %(prog)s serve --port 5000
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    analyze_parser = subparsers.add_parser('analyze', help='Analyze top weekly profit traders')
    analyze_parser.add_argument(
        '--plot',
        action='store_true',
        help='Save a chart of the ranked traders (requires matplotlib)'
    )
    analyze_parser.add_argument(
        '--output-dir',
        default=None,
        help='Directory for the chart image (default: current directory)'
    )

    serve_parser = subparsers.add_parser('serve', help='Run the web server')
    serve_parser.add_argument('--host', default=None, help='Bind address (default: HOST or 0.0.0.0)')
    serve_parser.add_argument('--port', type=int, default=None, help='Port (default: PORT or 5000)')

    args = parser.parse_args(argv)

    setup_logging(get_settings().log_level)

    # Default to analyze if no command specified
    if not args.command:
        args.command = 'analyze'
        args.plot = False
        args.output_dir = None

    if args.command == 'serve':
        return run_server(args)
    return run_analysis(args)


if __name__ == "__main__":
    sys.exit(main())
