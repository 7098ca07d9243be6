"""
Joint sorting of score rows and their labels.
"""

from typing import List, Sequence, Tuple
import numpy as np

from .errors import InvalidColumnIndex
from .inputs import as_score_matrix, as_labels


def exchange_sort_order(keys: np.ndarray) -> np.ndarray:
    """
    Row order produced by a pairwise exchange sort.

    For every i < j the entries at i and j are swapped whenever
    key[i] > key[j]. The result is ascending, but equal keys end up in
    whatever order the swaps leave them, which legacy reports depend on.

    Args:
        keys: Sort keys (N,)

    Returns:
        Permutation of row indices (N,)
    """
    keys = np.array(keys, dtype=np.float64)
    order = np.arange(len(keys))

    for i in range(len(keys)):
        for j in range(i + 1, len(keys)):
            if keys[i] > keys[j]:
                keys[i], keys[j] = keys[j], keys[i]
                order[i], order[j] = order[j], order[i]

    return order


def sort_by_column(
    scores,
    labels: Sequence,
    col: int,
    legacy_compat: bool = False
) -> Tuple[np.ndarray, List]:
    """
    Sort rows ascending by one score column, permuting labels alongside.

    Inputs are not modified.

    Args:
        scores: Score matrix (N, K)
        labels: One label per row (N,)
        col: Column holding the sort key
        legacy_compat: Reproduce the legacy exchange sort, and return the
            input unchanged instead of raising when col is out of range

    Returns:
        Tuple of (sorted scores, sorted labels)
    """
    matrix = as_score_matrix(scores)
    labels = as_labels(labels, matrix.shape[0])

    if col < 0 or col >= matrix.shape[1]:
        if legacy_compat:
            return matrix, labels
        raise InvalidColumnIndex(col, matrix.shape[1])

    if legacy_compat:
        order = exchange_sort_order(matrix[:, col])
    else:
        order = np.argsort(matrix[:, col], kind="stable")

    return matrix[order], [labels[i] for i in order]
