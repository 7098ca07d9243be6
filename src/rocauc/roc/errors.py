"""
Errors raised while building ROC curves.
"""


class RocError(ValueError):
    """Base class for invalid ROC input."""


class InvalidScoreMatrix(RocError):
    """Score matrix is ragged, empty, negative, non-finite or mismatched with its labels."""


class InvalidColumnIndex(RocError):
    """Requested column is outside [0, n_columns)."""

    def __init__(self, col: int, n_columns: int):
        self.col = col
        self.n_columns = n_columns
        super().__init__(f"Column {col} out of range for {n_columns} column(s)")


class DegenerateClassCount(RocError):
    """No positive or no negative instances to sweep over."""

    def __init__(self, n_positive: int, n_negative: int):
        self.n_positive = n_positive
        self.n_negative = n_negative
        super().__init__(
            f"Need at least one positive and one negative instance "
            f"(got {n_positive} positive, {n_negative} negative)"
        )


class DegenerateRowNormalization(RocError):
    """A row has max == min, so min-max rescaling is undefined."""

    def __init__(self, row: int):
        self.row = row
        super().__init__(f"Row {row} has equal min and max; cannot rescale")


class UnrecognizedLabel(RocError):
    """A label is neither the positive nor the negative sentinel."""

    def __init__(self, label, row: int):
        self.label = label
        self.row = row
        super().__init__(f"Unrecognized label {label!r} at row {row}")
