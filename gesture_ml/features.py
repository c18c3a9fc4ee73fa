"""
Feature extraction from triaxial recordings
"""
from __future__ import annotations

from typing import Iterable, Sequence

import polars as pl

from .config import AXES, DEFAULT_FILTERS, DataWindow, Filter, parse_filters
from .data_types import ActionData, XYZData
from .filters import get_ml_filters


def normalize(value: float, min_value: float, max_value: float) -> float:
    """Rescale ``value`` linearly from [min_value, max_value] to [0, 1].

    Values outside the bounds are not clamped.
    """
    return (value - min_value) / (max_value - min_value)


def apply_filter(
    filter: Filter | str,
    data: XYZData,
    data_window: DataWindow,
    *,
    normalize_values: bool,
) -> dict[str, float]:
    """Reduce each axis of ``data`` with one filter.

    Args:
        filter: Filter to apply
        data: Triaxial sample
        data_window: Window the sample was recorded with
        normalize_values: Whether to rescale with the filter's static bounds

    Returns:
        Dictionary with keys ``x``, ``y`` and ``z``
    """
    data.validate()
    strategy, min_value, max_value = get_ml_filters(data_window)[Filter(filter)]

    result = {}
    for axis, values in data.axes().items():
        value = strategy(values, data_window)
        result[axis] = (
            normalize(value, min_value, max_value) if normalize_values else value
        )
    return result


def apply_filters(
    data: XYZData,
    data_window: DataWindow,
    *,
    normalize_values: bool,
    enabled_filters: Iterable[Filter | str] = DEFAULT_FILTERS,
) -> dict[str, float]:
    """Build the feature vector of one sample.

    Args:
        data: Triaxial sample
        data_window: Window the sample was recorded with
        normalize_values: Whether to rescale with each filter's static bounds
        enabled_filters: Filters to apply, in output order

    Returns:
        Feature vector keyed ``{filter}-{axis}``
    """
    data.validate()

    features = {}
    for filter in parse_filters(enabled_filters):
        values = apply_filter(
            filter, data, data_window, normalize_values=normalize_values
        )
        for axis in AXES:
            features[f"{filter}-{axis}"] = values[axis]
    return features


def get_features_from_action(
    action: ActionData,
    data_window: DataWindow,
    *,
    normalize_values: bool,
    enabled_filters: Iterable[Filter | str] = DEFAULT_FILTERS,
) -> dict[str, dict[str, list[float]]]:
    """Collect each filter's per-axis values across all recordings of an action.

    Returns:
        ``{filter: {axis: [value per recording]}}`` in recording order
    """
    filters = parse_filters(enabled_filters)
    features = {str(f): {axis: [] for axis in AXES} for f in filters}

    for recording in action.recordings:
        for filter in filters:
            values = apply_filter(
                filter,
                recording.data,
                data_window,
                normalize_values=normalize_values,
            )
            for axis in AXES:
                features[str(filter)][axis].append(values[axis])

    return features


def prepare_features_by_action(
    actions: Sequence[ActionData],
    data_window: DataWindow,
    enabled_filters: Iterable[Filter | str] = DEFAULT_FILTERS,
    *,
    normalize_values: bool = False,
) -> list[list[list[float]]]:
    """Feature vectors grouped per action, one list of samples per action."""
    filters = parse_filters(enabled_filters)
    return [
        [
            list(
                apply_filters(
                    recording.data,
                    data_window,
                    normalize_values=normalize_values,
                    enabled_filters=filters,
                ).values()
            )
            for recording in action.recordings
        ]
        for action in actions
    ]


def one_hot(index: int, num_classes: int) -> list[int]:
    label = [0] * num_classes
    label[index] = 1
    return label


def prepare_features_and_labels(
    actions: Sequence[ActionData],
    data_window: DataWindow,
    enabled_filters: Iterable[Filter | str] = DEFAULT_FILTERS,
    *,
    normalize_values: bool = False,
) -> tuple[list[list[float]], list[list[int]]]:
    """Flat feature vectors with aligned one-hot labels.

    Returns:
        Tuple of (features, labels)
    """
    grouped = prepare_features_by_action(
        actions,
        data_window,
        enabled_filters,
        normalize_values=normalize_values,
    )
    features = []
    labels = []
    for action_index, action_features in enumerate(grouped):
        features.extend(action_features)
        labels.extend(one_hot(action_index, len(grouped)) for _ in action_features)
    return features, labels


def features_to_frame(
    actions: Sequence[ActionData],
    data_window: DataWindow,
    *,
    normalize_values: bool,
    enabled_filters: Iterable[Filter | str] = DEFAULT_FILTERS,
) -> pl.DataFrame:
    """Feature table with one row per recording.

    Columns are ``action_id``, ``action_name``, ``recording_id``,
    ``is_generated`` followed by one column per ``{filter}-{axis}`` feature.
    """
    filters = parse_filters(enabled_filters)
    feature_columns = [f"{f}-{axis}" for f in filters for axis in AXES]

    rows = []
    for action in actions:
        for recording in action.recordings:
            row = {
                "action_id": action.id,
                "action_name": action.name,
                "recording_id": recording.id,
                "is_generated": recording.is_generated,
            }
            row.update(
                apply_filters(
                    recording.data,
                    data_window,
                    normalize_values=normalize_values,
                    enabled_filters=filters,
                )
            )
            rows.append(row)

    schema = {
        "action_id": pl.Int64,
        "action_name": pl.Utf8,
        "recording_id": pl.Int64,
        "is_generated": pl.Boolean,
        **{column: pl.Float64 for column in feature_columns},
    }
    return pl.DataFrame(rows, schema=schema)
