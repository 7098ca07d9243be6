"""
Quick start example for the ROC curve builder.

This script demonstrates the basic workflow:
1. Build a two-class ROC curve
2. Build class-vs-all curves for a three-class problem
3. Compare two classifiers
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np

from rocauc import RocCurveBuilder, RocEvaluator, load_config
from rocauc.evaluation import compute_one_vs_all_rocs
from rocauc.utils import setup_logger, plot_one_vs_all_curves


def main():
    """Run quick start example."""

    logger = setup_logger("quick_start")
    config = load_config(Path(__file__).parent.parent / "config" / "roc.yaml")
    builder = RocCurveBuilder(config)

    # 1. Two-class problem: column 1 is the negative-class probability
    logger.info("1. Two-class ROC curve")
    scores = np.array([
        [0.9, 0.1],
        [0.6, 0.4],
        [0.4, 0.6],
        [0.1, 0.9],
    ])
    labels = ["negative", "positive", "negative", "positive"]

    result = builder.build_two_class_roc(scores, labels)
    logger.info(f"   {result.coordinate_string}")
    logger.info(f"   AUC: {result.auc:.4f}")

    # 2. Three-class problem
    logger.info("2. Class-vs-all ROC curves")
    rng = np.random.default_rng(0)
    classes = ["cat", "dog", "bird"]
    true_classes = rng.integers(0, len(classes), size=60)
    probabilities = rng.dirichlet(np.ones(len(classes)), size=60)
    # Nudge the true class up so the classifier is better than chance
    probabilities[np.arange(60), true_classes] += 0.5
    probabilities /= probabilities.sum(axis=1, keepdims=True)
    multi_labels = [classes[i] for i in true_classes]

    curves = compute_one_vs_all_rocs(probabilities, multi_labels, classes, builder)
    for name, curve in curves.items():
        logger.info(f"   {name} vs all: AUC={curve.auc:.4f}")

    plot_one_vs_all_curves(curves, save_path="class_vs_all_roc.png")
    logger.info("   Saved plot to class_vs_all_roc.png")

    # 3. Compare against a random classifier
    logger.info("3. Comparing classifiers")
    evaluator = RocEvaluator(config, logger=logger)
    comparison = evaluator.compare_all_methods(
        {
            'nudged': probabilities,
            'random': rng.dirichlet(np.ones(len(classes)), size=60),
        },
        multi_labels,
        class_catalog=classes
    )
    logger.info(f"   Ranking: {comparison['comparison']['macro_auc_ranking']}")


if __name__ == '__main__':
    main()
