"""
Configuration for ROC curve building.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union
import yaml

MIDPOINT = "midpoint"
ERROR = "error"
DEGENERATE_ROW_POLICIES = (MIDPOINT, ERROR)


@dataclass(frozen=True)
class RocConfig:
    """
    Settings shared by every curve a builder produces.

    Attributes:
        positive_label: Label marking positive instances in two-class input
        negative_label: Label marking negative instances in two-class input
        legacy_compat: Reproduce the legacy tool's output exactly (float
            accumulation, text-based perfect detection, exchange sort,
            silent no-op on an out-of-range sort column)
        degenerate_row_policy: 'midpoint' maps a row whose scores cannot be
            rescaled to equal shares, 'error' raises
        reject_unrecognized_labels: Raise on labels that are neither
            sentinel instead of passing them through as no-op steps
    """
    positive_label: str = "positive"
    negative_label: str = "negative"
    legacy_compat: bool = False
    degenerate_row_policy: str = MIDPOINT
    reject_unrecognized_labels: bool = False

    def __post_init__(self):
        if self.degenerate_row_policy not in DEGENERATE_ROW_POLICIES:
            raise ValueError(
                f"degenerate_row_policy must be one of {DEGENERATE_ROW_POLICIES}, "
                f"got {self.degenerate_row_policy!r}"
            )
        if self.positive_label == self.negative_label:
            raise ValueError("positive_label and negative_label must differ")

    @classmethod
    def from_dict(cls, config: Optional[dict]) -> "RocConfig":
        config = config or {}
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown ROC config keys: {sorted(unknown)}")
        return cls(**config)


def load_config(config_path: Union[str, Path]) -> RocConfig:
    """Load ROC configuration from the `roc` section of a YAML file."""
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}
    return RocConfig.from_dict(config.get('roc'))
