"""
Evaluator running ROC analyses over one or more classifiers.
"""

from typing import Dict, Optional, Sequence
import logging

from .metrics import evaluate_roc, compare_methods
from ..config import RocConfig
from ..roc.roc_builder import RocCurveBuilder
from ..utils.logging_utils import log_metrics, save_results


class RocEvaluator:
    """
    Evaluate classifier probability outputs with ROC curves.
    """

    def __init__(
        self,
        config: Optional[RocConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize evaluator.

        Args:
            config: ROC configuration shared by every evaluation
            logger: Logger for metrics (module logger if None)
        """
        self.builder = RocCurveBuilder(config)
        self.logger = logger or logging.getLogger(__name__)

    def evaluate(
        self,
        scores,
        labels: Sequence,
        class_catalog: Optional[Sequence] = None,
        name: str = "classifier",
        show_progress: bool = False
    ) -> Dict:
        """
        Evaluate one classifier's scores.

        Args:
            scores: Score matrix (N, K)
            labels: Labels (N,)
            class_catalog: Distinct class identifiers for multi-class input
            name: Name used in log messages
            show_progress: Show progress bar over classes

        Returns:
            Evaluation results
        """
        results = evaluate_roc(
            scores,
            labels,
            class_catalog=class_catalog,
            builder=self.builder,
            show_progress=show_progress
        )

        log_metrics(
            {key: value for key, value in results.items() if key != 'per_class'},
            self.logger,
            prefix=f"{name} - "
        )
        for class_name, class_results in results.get('per_class', {}).items():
            self.logger.info(f"{name} - {class_name} vs all: AUC={class_results['auc']:.4f}")

        return results

    def compare_all_methods(
        self,
        method_scores: Dict[str, object],
        labels: Sequence,
        class_catalog: Optional[Sequence] = None,
        save_path: Optional[str] = None
    ) -> Dict:
        """
        Evaluate and rank several classifiers on the same labels.

        Args:
            method_scores: Dictionary mapping method names to score matrices
            labels: Labels shared by all methods (N,)
            class_catalog: Distinct class identifiers for multi-class input
            save_path: Optional JSON file for the results

        Returns:
            Individual results and comparison
        """
        all_results = {}

        for method_name, scores in method_scores.items():
            self.logger.info(f"Evaluating: {method_name}")
            all_results[method_name] = self.evaluate(
                scores, labels, class_catalog=class_catalog, name=method_name
            )

        comparison = compare_methods(all_results)

        output = {
            'individual_results': all_results,
            'comparison': comparison
        }

        if save_path:
            save_results(output, save_path, self.logger)

        return output
