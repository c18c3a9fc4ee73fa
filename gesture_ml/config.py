"""
Configuration and constants for gesture feature extraction and training
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable

import yaml


class Filter(str, Enum):
    """Named statistical reducers applied to each axis of a recording."""

    MAX = "max"
    MIN = "min"
    MEAN = "mean"
    STD = "std"
    PEAKS = "peaks"
    ACC = "acc"
    ZCR = "zcr"
    RMS = "rms"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DataWindow:
    """Sampling window of a recording."""

    duration_ms: int = 1800
    min_samples: int = 80


# Accelerometer range in g
MAX_ACCELERATION = 2.048

AXES = ("x", "y", "z")

DEFAULT_FILTERS = (
    Filter.MAX,
    Filter.MEAN,
    Filter.MIN,
    Filter.STD,
    Filter.PEAKS,
    Filter.ACC,
    Filter.ZCR,
    Filter.RMS,
)

DEFAULT_DATA_WINDOW = DataWindow()

# Fraction held out by split_data when the caller does not pass one
DEFAULT_SPLIT_TEST_FRACTION = 0.2


def parse_filters(filters: Iterable[Filter | str]) -> tuple[Filter, ...]:
    """Turn filter names or members into an ordered tuple without duplicates.

    Args:
        filters: Filter members or their string values

    Returns:
        Tuple of filters in first-seen order
    """
    parsed = []
    for item in filters:
        try:
            member = Filter(item)
        except ValueError:
            msg = f"Unknown filter: {item!r}"
            raise ValueError(msg) from None
        if member not in parsed:
            parsed.append(member)
    return tuple(parsed)


def create_ml_settings(
    enabled_filters: Iterable[Filter | str] = DEFAULT_FILTERS,
    num_epochs: int = 160,
    learning_rate: float = 0.5,
    batch_size: int = 16,
    test_fraction: float = 0.0,
    normalize_features: bool = False,
    verbose: bool = False,
) -> dict:
    """Create the settings dictionary threaded through training and prediction.

    Args:
        enabled_filters: Filters used to build feature vectors, in order
        num_epochs: Number of training epochs
        learning_rate: SGD learning rate
        batch_size: Mini-batch size
        test_fraction: Per-class fraction held out for testing
        normalize_features: Whether model features are rescaled to [0, 1]
        verbose: Whether to show progress bars and status lines

    Returns:
        Settings dictionary
    """
    if num_epochs < 1:
        msg = f"num_epochs must be at least 1, got {num_epochs}"
        raise ValueError(msg)
    if batch_size < 1:
        msg = f"batch_size must be at least 1, got {batch_size}"
        raise ValueError(msg)
    if not 0.0 <= test_fraction < 1.0:
        msg = f"test_fraction must be in [0, 1), got {test_fraction}"
        raise ValueError(msg)

    filters = parse_filters(enabled_filters)
    if not filters:
        msg = "At least one filter must be enabled"
        raise ValueError(msg)

    return {
        "enabled_filters": filters,
        "num_epochs": num_epochs,
        "learning_rate": learning_rate,
        "batch_size": batch_size,
        "test_fraction": test_fraction,
        "normalize_features": normalize_features,
        "verbose": verbose,
    }


def load_config(config_path: str | Path) -> tuple[dict, DataWindow]:
    """Load settings and data window from a YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Tuple of (settings, data_window)
    """
    config_path = Path(config_path)
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    with open(config_path) as f:
        config = yaml.safe_load(f) or {}

    return settings_from_config(config), data_window_from_config(config)


def settings_from_config(config: dict[str, Any]) -> dict:
    """Build settings from the ``ml`` section of a parsed config."""
    ml = config.get("ml", {})
    return create_ml_settings(
        enabled_filters=ml.get("enabled_filters", DEFAULT_FILTERS),
        num_epochs=ml.get("num_epochs", 160),
        learning_rate=ml.get("learning_rate", 0.5),
        batch_size=ml.get("batch_size", 16),
        test_fraction=ml.get("test_fraction", 0.0),
        normalize_features=ml.get("normalize_features", False),
        verbose=ml.get("verbose", False),
    )


def data_window_from_config(config: dict[str, Any]) -> DataWindow:
    """Build a data window from the ``data_window`` section of a parsed config."""
    window = config.get("data_window", {})
    return DataWindow(
        duration_ms=window.get("duration_ms", DEFAULT_DATA_WINDOW.duration_ms),
        min_samples=window.get("min_samples", DEFAULT_DATA_WINDOW.min_samples),
    )
