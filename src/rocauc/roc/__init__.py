"""ROC curve construction."""

from .errors import (
    RocError,
    InvalidScoreMatrix,
    InvalidColumnIndex,
    DegenerateClassCount,
    DegenerateRowNormalization,
    UnrecognizedLabel
)
from .normalization import bounded_min, bounded_max, normalize_row
from .sorting import sort_by_column
from .reduction import build_class_vs_all_scores
from .roc_builder import (
    RocResult,
    RocCurveBuilder,
    build_two_class_roc,
    build_class_vs_all_roc,
    format_coordinates
)

__all__ = [
    "RocError",
    "InvalidScoreMatrix",
    "InvalidColumnIndex",
    "DegenerateClassCount",
    "DegenerateRowNormalization",
    "UnrecognizedLabel",
    "bounded_min",
    "bounded_max",
    "normalize_row",
    "sort_by_column",
    "build_class_vs_all_scores",
    "RocResult",
    "RocCurveBuilder",
    "build_two_class_roc",
    "build_class_vs_all_roc",
    "format_coordinates",
]
