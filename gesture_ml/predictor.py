from __future__ import annotations

from typing import Any, Sequence

import numpy as np
import torch
from sklearn.metrics import accuracy_score, confusion_matrix

from .config import DataWindow
from .data_types import XYZData
from .errors import PredictionFailure, PredictionResult, PredictionSuccess
from .features import apply_filters
from .model import GestureClassifier


def extract_model_input(
    model: GestureClassifier,
    data: XYZData,
    data_window: DataWindow,
) -> list[float]:
    """Feature vector of ``data`` built the same way as the model's training data."""
    return list(
        apply_filters(
            data,
            data_window,
            normalize_values=model.normalize_features,
            enabled_filters=model.filters,
        ).values()
    )


def predict(
    model: GestureClassifier,
    data: XYZData,
    classification_ids: Sequence[int],
    data_window: DataWindow,
) -> PredictionResult:
    """Per-class confidences for one sample.

    Outputs are matched to ``classification_ids`` by position, so the ids must
    be in the order the actions were passed to training. Feature extraction
    errors are raised; errors evaluating the model are returned as a
    ``PredictionFailure``.

    Args:
        model: Trained classifier
        data: Triaxial sample
        classification_ids: Action ids in training order
        data_window: Window the sample was recorded with

    Returns:
        ``PredictionSuccess`` with confidences keyed by action id, or
        ``PredictionFailure``
    """
    features = extract_model_input(model, data, data_window)

    try:
        model.eval()
        with torch.no_grad():
            output = model(torch.tensor([features], dtype=torch.float32))
        confidences = output[0].tolist()
        if len(confidences) != len(classification_ids):
            msg = (
                f"Model has {len(confidences)} outputs but "
                f"{len(classification_ids)} classification ids were given"
            )
            raise ValueError(msg)
    except Exception as e:
        return PredictionFailure(detail=e)

    return PredictionSuccess(
        confidences={
            action_id: float(confidence)
            for action_id, confidence in zip(classification_ids, confidences)
        },
    )


def evaluate_model(
    model: GestureClassifier,
    test_features: Sequence[Sequence[float]],
    test_labels: Sequence[Sequence[int]],
) -> dict[str, Any]:
    """Accuracy and confusion matrix on a held-out split.

    Args:
        model: Trained classifier
        test_features: Feature vectors from ``split_data``
        test_labels: One-hot labels aligned with ``test_features``

    Returns:
        Dictionary with evaluation metrics
    """
    if len(test_features) == 0:
        msg = "No test samples to evaluate"
        raise ValueError(msg)

    model.eval()
    with torch.no_grad():
        probabilities = model(
            torch.tensor(np.asarray(test_features, dtype=np.float32)),
        ).numpy()

    predictions = probabilities.argmax(axis=1)
    labels = np.asarray(test_labels).argmax(axis=1)

    return {
        "accuracy": accuracy_score(labels, predictions),
        "confusion_matrix": confusion_matrix(
            labels,
            predictions,
            labels=list(range(model.num_classes)),
        ),
        "predictions": predictions.tolist(),
        "true_labels": labels.tolist(),
        "probabilities": probabilities.tolist(),
    }
