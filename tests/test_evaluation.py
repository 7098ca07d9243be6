"""
Unit tests for the evaluation layer, configuration and logging utilities.
"""

import json
import logging

import numpy as np
import pytest
from rocauc import RocConfig, load_config
from rocauc.evaluation import (
    compute_auc_roc,
    compute_reference_auc,
    compute_one_vs_all_rocs,
    compute_macro_auc,
    evaluate_roc,
    compare_methods,
    RocEvaluator
)
from rocauc.roc import DegenerateClassCount, RocCurveBuilder
from rocauc.utils import setup_logger, save_results, plot_roc_curve, plot_one_vs_all_curves
from rocauc.utils.logging_utils import make_serializable

CLASSES = ["cat", "dog", "bird"]


def three_class_problem(seed: int = 0, n_rows: int = 45, signal: float = 0.6):
    """Probabilities where the true class gets a boost."""
    rng = np.random.default_rng(seed)
    true_classes = np.arange(n_rows) % len(CLASSES)
    probabilities = rng.dirichlet(np.ones(len(CLASSES)), size=n_rows)
    probabilities[np.arange(n_rows), true_classes] += signal
    probabilities /= probabilities.sum(axis=1, keepdims=True)
    return probabilities, [CLASSES[i] for i in true_classes]


class TestMetrics:
    """Test evaluation metrics."""

    def test_compute_auc_roc(self):
        assert compute_auc_roc(np.array([0.1, 0.9]), np.array([0, 1])) == 1.0

    def test_reference_auc_matches_sweep(self):
        """Reference AUC ranks rows like the sweep does."""
        scores = [[0.1], [0.4], [0.6], [0.9]]
        labels = ["negative", "positive", "negative", "positive"]

        assert compute_reference_auc(scores, labels) == pytest.approx(0.25)

    def test_reference_auc_skips_unknown_labels(self):
        scores = [[0.1], [0.4], [0.5], [0.9]]
        labels = ["positive", "other", "negative", "negative"]

        assert compute_reference_auc(scores, labels) == pytest.approx(1.0)

    def test_one_vs_all_per_class(self):
        """One curve per class, keyed by class name."""
        scores, labels = three_class_problem()
        results = compute_one_vs_all_rocs(scores, labels, CLASSES)

        assert list(results) == CLASSES
        for result in results.values():
            assert 0.0 <= result.auc <= 1.0
            assert result.n_positive == 15
            assert result.n_negative == 30

    def test_separable_classes(self):
        """Strong signal separates every class."""
        scores, labels = three_class_problem(signal=5.0)
        results = compute_one_vs_all_rocs(scores, labels, CLASSES, show_progress=True)

        assert compute_macro_auc(results) == 1.0

    def test_class_without_instances(self):
        """A catalog class with no rows cannot be swept."""
        scores, labels = three_class_problem()
        labels = ["cat" if label == "bird" else label for label in labels]

        with pytest.raises(DegenerateClassCount):
            compute_one_vs_all_rocs(scores, labels, CLASSES)

    def test_macro_auc_empty(self):
        with pytest.raises(ValueError):
            compute_macro_auc({})

    def test_evaluate_two_class(self):
        results = evaluate_roc(
            [[0.1], [0.4], [0.6], [0.9]],
            ["negative", "positive", "negative", "positive"]
        )

        assert results['auc'] == pytest.approx(0.25)
        assert results['reference_auc'] == pytest.approx(0.25)
        assert results['coordinates'] == "coordinates { (0,0)(0.5,0)(0.5,0.5)(1,0.5)(1,1) };"

    def test_evaluate_multi_class(self):
        scores, labels = three_class_problem()
        results = evaluate_roc(scores, labels, class_catalog=CLASSES)

        assert set(results['per_class']) == set(CLASSES)
        assert results['macro_auc'] == pytest.approx(
            np.mean([r['auc'] for r in results['per_class'].values()])
        )
        assert 0.0 <= results['reference_macro_auc'] <= 1.0

    def test_compare_methods(self):
        comparison = compare_methods({
            'weak': {'auc': 0.6},
            'strong': {'auc': 0.9},
        })

        assert comparison['auc_ranking'] == ['strong', 'weak']
        assert comparison['macro_auc_ranking'] == []


class TestRocEvaluator:
    """Test the evaluator."""

    def test_evaluate_logs_metrics(self, caplog):
        evaluator = RocEvaluator()
        scores, labels = three_class_problem()

        with caplog.at_level(logging.INFO):
            evaluator.evaluate(scores, labels, class_catalog=CLASSES, name="model")

        assert "model - cat vs all" in caplog.text

    def test_compare_all_methods_saves_json(self, tmp_path):
        evaluator = RocEvaluator(RocConfig())
        strong, labels = three_class_problem(signal=5.0)
        weak, _ = three_class_problem(seed=1, signal=0.0)
        save_path = tmp_path / "results" / "comparison.json"

        output = evaluator.compare_all_methods(
            {'weak': weak, 'strong': strong},
            labels,
            class_catalog=CLASSES,
            save_path=str(save_path)
        )

        assert output['comparison']['macro_auc_ranking'][0] == 'strong'
        saved = json.loads(save_path.read_text())
        assert saved['individual_results']['strong']['macro_auc'] == 1.0

    def test_errors_propagate(self):
        evaluator = RocEvaluator()

        with pytest.raises(DegenerateClassCount):
            evaluator.evaluate([[0.1], [0.2]], ["positive", "positive"])


class TestConfig:
    """Test configuration loading."""

    def test_defaults(self):
        config = RocConfig()

        assert config.positive_label == "positive"
        assert config.negative_label == "negative"
        assert not config.legacy_compat
        assert config.degenerate_row_policy == "midpoint"

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "roc.yaml"
        path.write_text("roc:\n  legacy_compat: true\n  positive_label: pos\n")

        config = load_config(path)

        assert config.legacy_compat
        assert config.positive_label == "pos"
        assert config.negative_label == "negative"

    def test_missing_section_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == RocConfig()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "roc.yaml"
        path.write_text("roc:\n  threshold: 0.5\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            RocConfig(degenerate_row_policy="skip")

    def test_equal_sentinels(self):
        with pytest.raises(ValueError):
            RocConfig(positive_label="x", negative_label="x")


class TestUtils:
    """Test logging and plotting utilities."""

    def test_setup_logger_writes_file(self, tmp_path):
        logger = setup_logger("rocauc_test", log_dir=str(tmp_path))
        logger.info("hello")

        for handler in logger.handlers:
            handler.flush()
        log_files = list(tmp_path.glob("rocauc_test_*.log"))
        assert len(log_files) == 1
        assert "hello" in log_files[0].read_text()

    def test_make_serializable(self):
        result = RocCurveBuilder().build_two_class_roc([[0.1], [0.9]], ["negative", "positive"])

        converted = make_serializable({
            'curve': result,
            'array': np.array([1, 2]),
            'value': np.float64(0.5),
            'count': np.int64(3),
        })

        assert converted['curve']['auc'] == 0.0
        assert converted['array'] == [1, 2]
        assert isinstance(converted['value'], float)
        assert isinstance(converted['count'], int)
        json.dumps(converted)

    def test_save_results(self, tmp_path):
        path = tmp_path / "out.json"
        save_results({'auc': np.float64(0.75)}, str(path))

        assert json.loads(path.read_text()) == {'auc': 0.75}

    def test_plot_roc_curve(self, tmp_path):
        result = RocCurveBuilder().build_two_class_roc(
            [[0.1], [0.4], [0.6], [0.9]],
            ["negative", "positive", "negative", "positive"]
        )
        path = tmp_path / "roc.png"

        plot_roc_curve(result, save_path=str(path))

        assert path.exists()

    def test_plot_one_vs_all(self, tmp_path):
        scores, labels = three_class_problem()
        path = tmp_path / "ova.png"

        plot_one_vs_all_curves(compute_one_vs_all_rocs(scores, labels, CLASSES), save_path=str(path))

        assert path.exists()


if __name__ == '__main__':
    pytest.main([__file__])
