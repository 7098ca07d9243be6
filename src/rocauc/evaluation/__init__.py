"""Evaluation metrics and framework."""

from .metrics import (
    compute_auc_roc,
    compute_reference_auc,
    compute_one_vs_all_rocs,
    compute_macro_auc,
    evaluate_roc,
    compare_methods
)
from .evaluator import RocEvaluator

__all__ = [
    "compute_auc_roc",
    "compute_reference_auc",
    "compute_one_vs_all_rocs",
    "compute_macro_auc",
    "evaluate_roc",
    "compare_methods",
    "RocEvaluator",
]
