"""
Evaluation metrics built on ROC curves.
"""

from typing import Dict, Optional, Sequence
import numpy as np
from sklearn.metrics import roc_auc_score
from tqdm import tqdm

from ..roc.inputs import as_score_matrix, as_labels
from ..roc.roc_builder import COMPETING_SCORE_COLUMN, RocCurveBuilder, RocResult


def compute_auc_roc(
    confidences: np.ndarray,
    labels: np.ndarray
) -> float:
    """
    Compute Area Under ROC Curve with scikit-learn.

    Ties in the confidences get half credit here, whereas the step sweep
    credits them in sorted order, so the two agree only on tie-free scores.

    Args:
        confidences: Confidence scores (N,), higher means more positive
        labels: Binary labels (N,)

    Returns:
        AUC-ROC score
    """
    return float(roc_auc_score(labels, confidences))


def compute_reference_auc(
    scores,
    labels: Sequence,
    builder: Optional[RocCurveBuilder] = None
) -> float:
    """
    Reference AUC for two-class input, scored the way the sweep ranks rows.

    Rows with a lower competing score rank as more positive, so the
    confidence handed to scikit-learn is the negated competing score.
    Rows with unrecognized labels are left out.

    Args:
        scores: Score matrix (N, K)
        labels: Positive/negative sentinel labels (N,)
        builder: Builder whose config names the sentinels

    Returns:
        AUC-ROC score
    """
    builder = builder or RocCurveBuilder()
    matrix = as_score_matrix(scores)
    labels = as_labels(labels, matrix.shape[0])

    sort_col = COMPETING_SCORE_COLUMN if matrix.shape[1] > 1 else 0
    config = builder.config
    known = np.array([
        label in (config.positive_label, config.negative_label) for label in labels
    ])
    binary = np.array([label == config.positive_label for label in labels], dtype=int)

    return compute_auc_roc(-matrix[known, sort_col], binary[known])


def compute_one_vs_all_rocs(
    scores,
    labels: Sequence,
    class_catalog: Sequence,
    builder: Optional[RocCurveBuilder] = None,
    show_progress: bool = False
) -> Dict:
    """
    Compute one class-vs-all ROC curve per class.

    Args:
        scores: Score matrix (N, K)
        labels: True class of each row (N,)
        class_catalog: Distinct class identifiers (K,)
        builder: Curve builder (default configuration if None)
        show_progress: Show progress bar

    Returns:
        Dictionary mapping each class to its RocResult
    """
    builder = builder or RocCurveBuilder()
    class_catalog = list(class_catalog)

    indices = range(len(class_catalog))
    iterator = tqdm(indices, desc="class-vs-all") if show_progress else indices

    results = {}
    for target_class_index in iterator:
        results[class_catalog[target_class_index]] = builder.build_class_vs_all_roc(
            scores, labels, class_catalog, target_class_index
        )

    return results


def compute_macro_auc(results: Dict[str, RocResult]) -> float:
    """Unweighted mean of per-class AUCs."""
    if not results:
        raise ValueError("No ROC results to average")
    return float(np.mean([result.auc for result in results.values()]))


def evaluate_roc(
    scores,
    labels: Sequence,
    class_catalog: Optional[Sequence] = None,
    builder: Optional[RocCurveBuilder] = None,
    show_progress: bool = False
) -> Dict:
    """
    ROC evaluation of one classifier's scores.

    Without a class catalog the labels must be the two-class sentinels;
    with one, every class is evaluated against all others.

    Args:
        scores: Score matrix (N, K)
        labels: Labels (N,)
        class_catalog: Distinct class identifiers for multi-class input
        builder: Curve builder (default configuration if None)
        show_progress: Show progress bar over classes

    Returns:
        Dictionary with AUC, coordinates and reference metrics
    """
    builder = builder or RocCurveBuilder()
    results = {}

    if class_catalog is None:
        roc = builder.build_two_class_roc(scores, labels)
        results.update(roc.to_dict())
        results['reference_auc'] = compute_reference_auc(scores, labels, builder)
        return results

    per_class = compute_one_vs_all_rocs(
        scores, labels, class_catalog, builder, show_progress=show_progress
    )
    results['per_class'] = {
        str(name): roc.to_dict() for name, roc in per_class.items()
    }
    results['macro_auc'] = compute_macro_auc(per_class)

    # One-vs-rest reference on the raw scores
    matrix = as_score_matrix(scores, min_columns=2)
    labels = as_labels(labels, matrix.shape[0])
    results['reference_macro_auc'] = float(np.mean([
        compute_auc_roc(
            matrix[:, i],
            np.array([label == name for label in labels], dtype=int)
        )
        for i, name in enumerate(class_catalog)
    ]))

    return results


def compare_methods(
    method_results: Dict[str, Dict]
) -> Dict:
    """
    Compare ROC evaluations of multiple classifiers.

    Args:
        method_results: Dictionary mapping method names to evaluate_roc results

    Returns:
        Comparison summary
    """
    comparison = {}

    for metric in ['auc', 'macro_auc']:
        comparison[metric] = {
            name: results[metric]
            for name, results in method_results.items()
            if metric in results
        }

        # Higher is better
        ranked = sorted(comparison[metric].items(), key=lambda x: x[1], reverse=True)
        comparison[f'{metric}_ranking'] = [name for name, _ in ranked]

    return comparison
