from __future__ import annotations

from typing import Sequence

import numpy as np
import torch
from torch.utils.data import Dataset

from .config import DEFAULT_SPLIT_TEST_FRACTION
from .features import one_hot


class FeatureDataset(Dataset):
    """Dataset of feature vectors with one-hot labels."""

    def __init__(
        self,
        features: Sequence[Sequence[float]],
        labels: Sequence[Sequence[int]],
    ):
        """Initialize feature dataset.

        Args:
            features: Feature vectors, one per sample
            labels: One-hot labels aligned with ``features``
        """
        if len(features) != len(labels):
            msg = f"Got {len(features)} feature vectors but {len(labels)} labels"
            raise ValueError(msg)

        self.features = torch.tensor(np.asarray(features, dtype=np.float32))
        self.labels = torch.tensor(np.asarray(labels, dtype=np.float32))

    def __len__(self) -> int:
        return len(self.features)

    def __getitem__(self, idx: int) -> dict[str, torch.Tensor]:
        return {
            "features": self.features[idx],
            "label": self.labels[idx],
        }

    @property
    def num_features(self) -> int:
        return self.features.shape[1] if self.features.ndim == 2 else 0


def select_test_indices(
    num_samples: int,
    test_count: int,
    rng: np.random.Generator,
) -> list[int]:
    """Pick ``test_count`` distinct indices with a partial Fisher-Yates shuffle."""
    indices = list(range(num_samples))
    for i in range(test_count):
        swap = i + int(rng.integers(num_samples - i))
        indices[i], indices[swap] = indices[swap], indices[i]
    return indices[:test_count]


def split_data(
    features: Sequence[Sequence[Sequence[float]]],
    test_fraction: float = DEFAULT_SPLIT_TEST_FRACTION,
    random_state: int | None = None,
) -> dict[str, list]:
    """Create a stratified train/test split with one-hot labels.

    Every action is split on its own so each keeps the same share of
    samples in the test set.

    Args:
        features: Feature vectors grouped per action
        test_fraction: Fraction of each action's samples used for testing
        random_state: Random seed for reproducibility

    Returns:
        Dictionary with ``train_features``, ``train_labels``,
        ``test_features`` and ``test_labels``, ordered by action and then
        by position within the action
    """
    if not 0.0 <= test_fraction <= 1.0:
        msg = f"test_fraction must be in [0, 1], got {test_fraction}"
        raise ValueError(msg)

    rng = np.random.default_rng(random_state)
    num_classes = len(features)

    split = {
        "train_features": [],
        "train_labels": [],
        "test_features": [],
        "test_labels": [],
    }

    for action_index, action_features in enumerate(features):
        test_count = int(len(action_features) * test_fraction)
        test_indices = set(select_test_indices(len(action_features), test_count, rng))

        for idx, sample in enumerate(action_features):
            target = "test" if idx in test_indices else "train"
            split[f"{target}_features"].append(list(sample))
            split[f"{target}_labels"].append(one_hot(action_index, num_classes))

    return split
