from __future__ import annotations

from typing import Iterable, Sequence

from torch import nn

from .config import AXES, DEFAULT_FILTERS, Filter, parse_filters
from .data_types import ActionData

HIDDEN_UNITS = 16


class GestureClassifier(nn.Module):
    """Baseline dense classifier over per-axis filter features.

    The network is ``BatchNorm1d -> Linear(16) -> ReLU -> Linear -> Softmax``
    and outputs class probabilities. It keeps the filters and normalization
    mode its input features were built with.
    """

    def __init__(
        self,
        num_classes: int,
        filters: Sequence[Filter] = DEFAULT_FILTERS,
        normalize_features: bool = False,
        hidden_units: int = HIDDEN_UNITS,
    ):
        super().__init__()
        if num_classes < 1:
            msg = f"num_classes must be at least 1, got {num_classes}"
            raise ValueError(msg)

        self.filters = parse_filters(filters)
        self.normalize_features = normalize_features
        self.num_classes = num_classes
        self.input_dim = len(self.filters) * len(AXES)

        self.normalizer = nn.BatchNorm1d(self.input_dim)
        self.hidden = nn.Sequential(
            nn.Linear(self.input_dim, hidden_units),
            nn.ReLU(),
        )
        self.classifier = nn.Sequential(
            nn.Linear(hidden_units, num_classes),
            nn.Softmax(dim=-1),
        )

    def forward(self, x):
        """Forward pass.

        Args:
            x: Feature vectors (batch_size, input_dim)

        Returns:
            Class probabilities (batch_size, num_classes)
        """
        x = self.normalizer(x)
        x = self.hidden(x)
        return self.classifier(x)


def create_model(
    actions: Sequence[ActionData],
    enabled_filters: Iterable[Filter | str] = DEFAULT_FILTERS,
    normalize_features: bool = False,
) -> GestureClassifier:
    """Create a classifier with one output per action."""
    return GestureClassifier(
        num_classes=len(actions),
        filters=parse_filters(enabled_filters),
        normalize_features=normalize_features,
    )
