"""
ROC curve builder

Computes ROC step coordinates and AUC from classifier probability outputs,
for two-class problems and class-vs-all reductions of multi-class ones.
"""

__version__ = "0.1.0"
__author__ = "Research Team"

from .config import RocConfig, load_config
from .roc import *
from .evaluation import *
