"""Utility functions."""

from .visualization import plot_roc_curve, plot_one_vs_all_curves
from .logging_utils import setup_logger, log_metrics, save_results

__all__ = [
    "plot_roc_curve",
    "plot_one_vs_all_curves",
    "setup_logger",
    "log_metrics",
    "save_results",
]
