"""Exceptions and tagged result types."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .model import GestureClassifier


class GestureMLError(Exception):
    """Base class for errors raised by gesture_ml."""


class EmptyDataError(GestureMLError, ValueError):
    """An axis series has no samples."""


class ShortSampleError(GestureMLError, ValueError):
    """A series is too short for the peak detector."""


@dataclass
class TrainingSuccess:
    """A trained model, plus the held-out split when one was requested."""

    model: GestureClassifier
    test_features: list[list[float]] | None = None
    test_labels: list[list[int]] | None = None
    history: dict[str, list[float]] = field(default_factory=dict)
    error: bool = field(default=False, init=False)


@dataclass
class TrainingFailure:
    """Fitting raised; ``detail`` holds the underlying exception."""

    detail: Any = None
    error: bool = field(default=True, init=False)


@dataclass
class PredictionSuccess:
    """Per-class confidences keyed by action id."""

    confidences: dict[int, float]
    error: bool = field(default=False, init=False)


@dataclass
class PredictionFailure:
    """Evaluating the model raised; ``detail`` holds the underlying exception."""

    detail: Any = None
    error: bool = field(default=True, init=False)


TrainingResult = TrainingSuccess | TrainingFailure
PredictionResult = PredictionSuccess | PredictionFailure
