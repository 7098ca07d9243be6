"""
ROC step coordinates and AUC for two-class and class-vs-all problems.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
import logging
import numpy as np

from ..config import RocConfig
from .errors import DegenerateClassCount, UnrecognizedLabel
from .inputs import as_score_matrix, as_labels
from .reduction import build_class_vs_all_scores
from .sorting import sort_by_column

logger = logging.getLogger(__name__)

# Column holding the competing (negative-class) score in two-class input
COMPETING_SCORE_COLUMN = 1

POSITIVE_STEP = "P"
NEGATIVE_STEP = "N"

PERFECT_COORDINATES = ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0))
PERFECT_COORDINATES_STRING = "coordinates { (0,0)(0,1)(1,1)};"

# Substrings the legacy tool searched its coordinate text for
LEGACY_PERFECT_MARKERS = ("(0.0,1.0)", "(0.0,1.00")


def format_coordinates(
    coordinates: Sequence[Tuple[float, float]],
    legacy_format: bool = False
) -> str:
    """
    Render step coordinates as ``coordinates { (x0,y0)(x1,y1)... };``.

    Args:
        coordinates: Points of the curve, the first one being the origin
        legacy_format: Render numbers as Python float reprs (``0.5``, ``1.0``)
            instead of the shortest trimmed form (``0.5``, ``1``)

    Returns:
        Coordinate string
    """
    # The origin is always written as a literal
    points = ["(0,0)"]
    for x, y in coordinates[1:]:
        points.append(
            f"({_format_number(x, legacy_format)},{_format_number(y, legacy_format)})"
        )

    return "coordinates { " + "".join(points) + " };"


def _format_number(value: float, legacy_format: bool) -> str:
    if legacy_format:
        return repr(float(value))
    return np.format_float_positional(value, trim='-')


@dataclass(frozen=True)
class RocResult:
    """ROC curve of one two-class problem."""
    coordinates: Tuple[Tuple[float, float], ...]
    auc: float
    n_positive: int
    n_negative: int
    perfect: bool = False
    legacy_format: bool = field(default=False, repr=False)

    @property
    def coordinate_string(self) -> str:
        if self.perfect:
            return PERFECT_COORDINATES_STRING
        return format_coordinates(self.coordinates, self.legacy_format)

    @property
    def x(self) -> np.ndarray:
        """False-positive rates along the curve."""
        return np.array([x for x, _ in self.coordinates])

    @property
    def y(self) -> np.ndarray:
        """True-positive rates along the curve."""
        return np.array([y for _, y in self.coordinates])

    def to_dict(self) -> Dict:
        return {
            'auc': self.auc,
            'coordinates': self.coordinate_string,
            'n_positive': self.n_positive,
            'n_negative': self.n_negative,
            'perfect': self.perfect
        }


class RocCurveBuilder:
    """
    Builds ROC curves from probability matrices.

    The builder only reads its configuration, so one instance can serve
    any number of calls; every call returns a fresh RocResult.
    """

    def __init__(self, config: Optional[RocConfig] = None):
        """
        Initialize builder.

        Args:
            config: Labels, compatibility mode and edge-case policies
        """
        self.config = config or RocConfig()

    def build_two_class_roc(self, scores, labels: Sequence) -> RocResult:
        """
        Sweep sorted instances into ROC step coordinates and AUC.

        Rows are sorted ascending by the competing score (column 1, or the
        only column of a one-column matrix). Each negative row moves the
        curve right by 1/n, each positive row moves it up by 1/p, and a point
        is recorded after every row. Every move to the right adds a
        rectangle of its width times the current height to the AUC.

        Args:
            scores: Score matrix (N, K), K >= 1
            labels: Positive/negative sentinel labels (N,)

        Returns:
            RocResult
        """
        matrix = as_score_matrix(scores)
        labels = as_labels(labels, matrix.shape[0])
        steps = self._classify(labels)

        n_positive = steps.count(POSITIVE_STEP)
        n_negative = steps.count(NEGATIVE_STEP)
        if n_positive == 0 or n_negative == 0:
            raise DegenerateClassCount(n_positive, n_negative)

        sort_col = COMPETING_SCORE_COLUMN if matrix.shape[1] > 1 else 0
        _, steps = sort_by_column(
            matrix, steps, sort_col, legacy_compat=self.config.legacy_compat
        )

        if self.config.legacy_compat:
            coordinates, auc, perfect = self._legacy_sweep(steps, n_positive, n_negative)
        else:
            coordinates, auc, perfect = self._sweep(steps, n_positive, n_negative)

        logger.debug(
            f"Swept {len(steps)} rows ({n_positive} positive, {n_negative} negative): "
            f"AUC={auc:.4f}, perfect={perfect}"
        )

        if perfect:
            return RocResult(
                coordinates=PERFECT_COORDINATES,
                auc=1.0,
                n_positive=n_positive,
                n_negative=n_negative,
                perfect=True
            )

        return RocResult(
            coordinates=tuple(coordinates),
            auc=auc,
            n_positive=n_positive,
            n_negative=n_negative,
            legacy_format=self.config.legacy_compat
        )

    def build_class_vs_all_roc(
        self,
        scores,
        labels: Sequence,
        class_catalog: Sequence,
        target_class_index: int
    ) -> RocResult:
        """
        ROC curve of one class against all others.

        Args:
            scores: Score matrix (N, K), K >= 2
            labels: True class of each row (N,)
            class_catalog: Distinct class identifiers (K,)
            target_class_index: Column of the target class

        Returns:
            RocResult
        """
        reduced_scores, reduced_labels = build_class_vs_all_scores(
            scores,
            labels,
            class_catalog,
            target_class_index,
            positive_label=self.config.positive_label,
            negative_label=self.config.negative_label,
            degenerate_policy=self.config.degenerate_row_policy
        )
        return self.build_two_class_roc(reduced_scores, reduced_labels)

    def _classify(self, labels: List) -> List[Optional[str]]:
        """Map labels to P/N steps; anything else is a no-op step (None)."""
        steps = []
        for row, label in enumerate(labels):
            if label == self.config.positive_label:
                steps.append(POSITIVE_STEP)
            elif label == self.config.negative_label:
                steps.append(NEGATIVE_STEP)
            elif self.config.reject_unrecognized_labels:
                raise UnrecognizedLabel(label, row)
            else:
                steps.append(None)
        return steps

    @staticmethod
    def _sweep(
        steps: List[Optional[str]],
        n_positive: int,
        n_negative: int
    ) -> Tuple[List[Tuple[float, float]], float, bool]:
        tp = 0
        fp = 0
        # Rectangle sum in units of 1/(p*n)
        area = 0
        perfect = False
        coordinates = [(0.0, 0.0)]

        for step in steps:
            if step == NEGATIVE_STEP:
                fp += 1
                area += tp
            elif step == POSITIVE_STEP:
                tp += 1

            if tp == n_positive and fp == 0:
                perfect = True
            coordinates.append((fp / n_negative, tp / n_positive))

        return coordinates, area / (n_positive * n_negative), perfect

    @staticmethod
    def _legacy_sweep(
        steps: List[Optional[str]],
        n_positive: int,
        n_negative: int
    ) -> Tuple[List[Tuple[float, float]], float, bool]:
        move_x = 1.0 / n_negative
        move_y = 1.0 / n_positive
        x = 0.0
        y = 0.0
        auc = 0.0
        width_accumulated = 0.0
        coordinates = [(0.0, 0.0)]

        for step in steps:
            if step == NEGATIVE_STEP:
                x += move_x
                width = x - width_accumulated
                width_accumulated += width
                auc += width * y
            elif step == POSITIVE_STEP:
                y += move_y
            coordinates.append((x, y))

        text = format_coordinates(coordinates, legacy_format=True)
        perfect = any(marker in text for marker in LEGACY_PERFECT_MARKERS)

        return coordinates, auc, perfect


def build_two_class_roc(
    scores,
    labels: Sequence,
    config: Optional[RocConfig] = None
) -> RocResult:
    """Two-class ROC curve with a one-off builder."""
    return RocCurveBuilder(config).build_two_class_roc(scores, labels)


def build_class_vs_all_roc(
    scores,
    labels: Sequence,
    class_catalog: Sequence,
    target_class_index: int,
    config: Optional[RocConfig] = None
) -> RocResult:
    """Class-vs-all ROC curve with a one-off builder."""
    return RocCurveBuilder(config).build_class_vs_all_roc(
        scores, labels, class_catalog, target_class_index
    )
