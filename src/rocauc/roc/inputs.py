"""
Input coercion and validation shared by the sorter, reducer and builder.
"""

from typing import List, Sequence
import numpy as np

from .errors import InvalidScoreMatrix


def as_score_matrix(scores, min_columns: int = 1) -> np.ndarray:
    """
    Convert scores to a 2-D float64 array and check its invariants.

    Args:
        scores: Nested sequence or array of shape (N, K)
        min_columns: Minimum number of columns K

    Returns:
        Copy of the scores as an (N, K) array
    """
    try:
        matrix = np.array(scores, dtype=np.float64)
    except ValueError as e:
        # Ragged or non-numeric input
        raise InvalidScoreMatrix(
            f"Scores must form a rectangular numeric matrix: {e}"
        ) from e

    if matrix.ndim != 2:
        raise InvalidScoreMatrix(
            f"Score matrix must be 2-D (rows x classes), got {matrix.ndim}-D"
        )
    if matrix.shape[0] == 0:
        raise InvalidScoreMatrix("Score matrix has no rows")
    if matrix.shape[1] < min_columns:
        raise InvalidScoreMatrix(
            f"Score matrix needs at least {min_columns} column(s), got {matrix.shape[1]}"
        )
    if not np.all(np.isfinite(matrix)):
        raise InvalidScoreMatrix("Scores must be finite")
    if np.any(matrix < 0):
        raise InvalidScoreMatrix("Scores must be non-negative")

    return matrix


def as_labels(labels: Sequence, n_rows: int) -> List:
    """Copy labels to a list and check they pair up with the score rows."""
    labels = list(labels)
    if len(labels) != n_rows:
        raise InvalidScoreMatrix(
            f"Got {len(labels)} labels for {n_rows} score rows"
        )
    return labels
