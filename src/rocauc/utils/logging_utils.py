"""
Logging utilities for ROC evaluations.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional
import json
from datetime import datetime

import numpy as np


def setup_logger(
    name: str = "rocauc",
    log_dir: Optional[str] = None,
    level: int = logging.INFO
) -> logging.Logger:
    """
    Setup logger with file and console handlers.

    Args:
        name: Logger name
        log_dir: Directory to save log files
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers = []

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = log_dir / f'{name}_{timestamp}.log'

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_metrics(
    metrics: Dict,
    logger: Optional[logging.Logger] = None,
    prefix: str = ""
):
    """
    Log metrics in a formatted way.

    Args:
        metrics: Dictionary of metrics
        logger: Logger instance
        prefix: Prefix for log messages
    """
    if logger is None:
        logger = logging.getLogger()

    logger.info(f"{prefix}Metrics:")
    for key, value in metrics.items():
        if isinstance(value, float):
            logger.info(f"  {key}: {value:.4f}")
        elif isinstance(value, dict):
            logger.info(f"  {key}:")
            for sub_key, sub_value in value.items():
                if isinstance(sub_value, float):
                    logger.info(f"    {sub_key}: {sub_value:.4f}")
                else:
                    logger.info(f"    {sub_key}: {sub_value}")
        else:
            logger.info(f"  {key}: {value}")


def save_results(
    results: Dict,
    save_path: str,
    logger: Optional[logging.Logger] = None
):
    """
    Save results to JSON file.

    Args:
        results: Results dictionary
        save_path: Path to save file
        logger: Logger instance
    """
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    serializable_results = make_serializable(results)

    with open(save_path, 'w') as f:
        json.dump(serializable_results, f, indent=2)

    if logger:
        logger.info(f"Results saved to {save_path}")


def make_serializable(obj):
    """
    Convert objects to JSON-serializable format.

    Args:
        obj: Object to convert

    Returns:
        Serializable version
    """
    if isinstance(obj, dict):
        return {str(key): make_serializable(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    elif hasattr(obj, 'to_dict'):
        return make_serializable(obj.to_dict())
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.bool_):
        return bool(obj)
    else:
        return obj
