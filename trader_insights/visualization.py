import matplotlib.pyplot as plt
import numpy as np
from pathlib import Path
from typing import List, Optional
from datetime import datetime

from .models import StrategyResult


def create_visualizations(results: List[StrategyResult], output_dir: Optional[str] = None,
                          show: bool = True) -> Path:
    """
    Chart weekly profit and trade activity of the ranked traders.

    Args:
        results: Ranked strategy results
        output_dir: Directory for the PNG (default: current directory)
        show: Open an interactive window after saving

    Returns:
        Path of the saved image
    """
    print("\nGenerating visualizations...")

    fig, axes = plt.subplots(1, 2, figsize=(16, 6))
    fig.suptitle('Polymarket Top Weekly Profit Traders', fontsize=18, fontweight='bold')

    colors = plt.cm.viridis(np.linspace(0, 1, max(len(results), 1)))

    _plot_weekly_profit(axes[0], results)
    _plot_trade_counts(axes[1], results, colors)

    plt.tight_layout(rect=[0, 0, 1, 0.95])

    filename = f'polymarket_weekly_profit_{datetime.now().strftime("%Y%m%d_%H%M%S")}.png'
    path = Path(output_dir or '.') / filename
    plt.savefig(path, dpi=150, bbox_inches='tight', facecolor='white')
    print(f"✓ Visualizations saved to: {path}")

    if show:
        plt.show()
    plt.close(fig)

    return path


def _labels(results: List[StrategyResult]) -> List[str]:
    return [f"#{r.rank} {r.name[:15]}" for r in results]


def _plot_weekly_profit(ax, results: List[StrategyResult]):
    """Plot weekly profit per trader, green for gains and red for losses."""
    if not results:
        ax.text(0.5, 0.5, 'No ranked traders', ha='center', va='center',
                fontsize=12, transform=ax.transAxes)
        ax.set_title('Weekly Profit', fontsize=14, fontweight='bold')
        return

    profits = np.array([r.weekly_profit for r in results])
    bar_colors = np.where(profits >= 0, 'seagreen', 'indianred')

    ax.barh(range(len(results)), profits, color=bar_colors, edgecolor='black', linewidth=1.5)
    ax.set_yticks(range(len(results)))
    ax.set_yticklabels(_labels(results), fontsize=9)
    ax.invert_yaxis()
    ax.set_xlabel('Weekly Profit ($)', fontsize=12, fontweight='bold')
    ax.set_title('Weekly Profit (SELL value - BUY value)', fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3, axis='x')
    ax.axvline(x=0, color='black', linestyle='--', linewidth=1, alpha=0.7)
    ax.ticklabel_format(style='plain', axis='x')


def _plot_trade_counts(ax, results: List[StrategyResult], colors):
    """Plot number of trades in the last 7 days."""
    if not results:
        ax.text(0.5, 0.5, 'No ranked traders', ha='center', va='center',
                fontsize=12, transform=ax.transAxes)
        ax.set_title('Trades (7 days)', fontsize=14, fontweight='bold')
        return

    counts = [r.trade_count for r in results]
    bars = ax.bar(range(len(results)), counts, color=colors, edgecolor='black', linewidth=1.5)
    ax.set_xticks(range(len(results)))
    ax.set_xticklabels(_labels(results), fontsize=9, rotation=20, ha='right')
    ax.set_ylabel('Trades', fontsize=12, fontweight='bold')
    ax.set_title('Trades (7 days)', fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3, axis='y')

    for bar in bars:
        height = bar.get_height()
        ax.text(bar.get_x() + bar.get_width()/2., height, f'{int(height)}',
                ha='center', va='bottom', fontweight='bold')
