"""
Visualization utilities for ROC curves.
"""

from typing import Dict, Optional
import matplotlib.pyplot as plt
import seaborn as sns

from ..roc.roc_builder import RocResult


def plot_roc_curve(
    result: RocResult,
    title: str = "ROC Curve",
    save_path: Optional[str] = None
):
    """
    Plot the step coordinates of one ROC curve.

    Args:
        result: Curve from RocCurveBuilder
        title: Plot title
        save_path: Path to save figure
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    ax.plot(result.x, result.y, 'o-', linewidth=2, markersize=4,
            label=f'AUC = {result.auc:.4f}')
    ax.fill_between(result.x, result.y, alpha=0.2)

    # Chance line
    ax.plot([0, 1], [0, 1], '--', color='gray', label='Random')

    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1.02)
    ax.set_xlabel('False Positive Rate', fontsize=12)
    ax.set_ylabel('True Positive Rate', fontsize=12)
    ax.set_title(title, fontsize=14)
    ax.legend(loc='lower right')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
    else:
        plt.show()

    plt.close()


def plot_one_vs_all_curves(
    results: Dict[str, RocResult],
    title: str = "Class-vs-All ROC Curves",
    save_path: Optional[str] = None
):
    """
    Plot one ROC curve per class on shared axes.

    Args:
        results: Dictionary mapping class names to curves
        title: Plot title
        save_path: Path to save figure
    """
    colors = sns.color_palette("husl", len(results))

    fig, ax = plt.subplots(figsize=(8, 6))

    for color, (name, result) in zip(colors, results.items()):
        ax.plot(result.x, result.y, '-', linewidth=2, color=color,
                label=f'{name} (AUC = {result.auc:.4f})')

    ax.plot([0, 1], [0, 1], '--', color='gray', label='Random')

    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1.02)
    ax.set_xlabel('False Positive Rate', fontsize=12)
    ax.set_ylabel('True Positive Rate', fontsize=12)
    ax.set_title(title, fontsize=14)
    ax.legend(loc='lower right')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
    else:
        plt.show()

    plt.close()
