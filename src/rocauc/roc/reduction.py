"""
Class-vs-all reduction of a multi-class score matrix to a two-class one.
"""

from typing import List, Sequence, Tuple
import logging
import numpy as np

from ..config import MIDPOINT
from .errors import InvalidColumnIndex, InvalidScoreMatrix
from .inputs import as_score_matrix, as_labels
from .normalization import bounded_max, normalize_row

logger = logging.getLogger(__name__)


def build_class_vs_all_scores(
    scores,
    labels: Sequence,
    class_catalog: Sequence,
    target_class_index: int,
    positive_label="positive",
    negative_label="negative",
    degenerate_policy: str = MIDPOINT
) -> Tuple[np.ndarray, List]:
    """
    Pit one target class against the best-scoring competitor per instance.

    Each row becomes (target score, max score of the other classes),
    normalized per row so the pair sums to 1. Labels become the positive
    sentinel when they equal the target class and the negative one otherwise.

    Args:
        scores: Score matrix (N, K), K >= 2
        labels: True class of each row (N,)
        class_catalog: Distinct class identifiers (K,), indexed like the columns
        target_class_index: Column of the target class
        positive_label: Label written for target-class rows
        negative_label: Label written for all other rows
        degenerate_policy: Policy for rows whose two scores cannot be rescaled

    Returns:
        Tuple of (reduced scores (N, 2), reduced labels (N,))
    """
    matrix = as_score_matrix(scores, min_columns=2)
    labels = as_labels(labels, matrix.shape[0])
    class_catalog = list(class_catalog)
    n_classes = matrix.shape[1]

    if len(class_catalog) != n_classes:
        raise InvalidScoreMatrix(
            f"Class catalog has {len(class_catalog)} entries for {n_classes} score columns"
        )
    if not 0 <= target_class_index < n_classes:
        raise InvalidColumnIndex(target_class_index, n_classes)

    target_class = class_catalog[target_class_index]
    competitors = np.delete(matrix, target_class_index, axis=1)

    reduced = np.empty((matrix.shape[0], 2), dtype=np.float64)
    reduced_labels = []

    for i, row in enumerate(matrix):
        pair = [row[target_class_index], bounded_max(competitors[i])]
        reduced[i] = normalize_row(pair, degenerate_policy=degenerate_policy, row=i)
        reduced_labels.append(
            positive_label if labels[i] == target_class else negative_label
        )

    logger.debug(
        f"Reduced {n_classes}-class scores to {target_class!r} vs all "
        f"({reduced_labels.count(positive_label)} positive rows)"
    )

    return reduced, reduced_labels
