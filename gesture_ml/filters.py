"""
Filter registry: reducer and static normalization bounds per filter
"""
from __future__ import annotations

from typing import Callable, NamedTuple, Sequence

import numpy as np

from .config import MAX_ACCELERATION, DataWindow, Filter
from .statistics import (
    as_series,
    mean,
    peak_indices,
    root_mean_square,
    stddev,
    zero_crossing_rate,
)

Reducer = Callable[[Sequence[float], DataWindow], float]


class FilterSpec(NamedTuple):
    """How one filter reduces a series and the range it is normalized from."""

    strategy: Reducer
    min: float
    max: float


def _max(values, data_window):
    return float(np.max(as_series(values)))


def _min(values, data_window):
    return float(np.min(as_series(values)))


def _mean(values, data_window):
    return mean(values)


def _std(values, data_window):
    return stddev(values)


def _peaks(values, data_window):
    return float(len(peak_indices(values)))


def _total_acceleration(values, data_window):
    return float(np.sum(np.abs(as_series(values))))


def _zcr(values, data_window):
    return zero_crossing_rate(values)


def _rms(values, data_window):
    return root_mean_square(values)


def get_ml_filters(data_window: DataWindow) -> dict[Filter, FilterSpec]:
    """Return the spec of every filter for ``data_window``.

    Bounds are fixed per filter and do not depend on observed values, so a
    normalized feature may fall outside [0, 1].
    """
    return {
        Filter.MAX: FilterSpec(_max, -MAX_ACCELERATION, MAX_ACCELERATION),
        Filter.MIN: FilterSpec(_min, -MAX_ACCELERATION, MAX_ACCELERATION),
        Filter.MEAN: FilterSpec(_mean, -MAX_ACCELERATION, MAX_ACCELERATION),
        Filter.STD: FilterSpec(_std, 0.0, MAX_ACCELERATION),
        Filter.PEAKS: FilterSpec(_peaks, 0.0, 10.0),
        Filter.ACC: FilterSpec(
            _total_acceleration,
            0.0,
            data_window.min_samples * MAX_ACCELERATION,
        ),
        Filter.ZCR: FilterSpec(_zcr, 0.0, 1.0),
        Filter.RMS: FilterSpec(_rms, 0.0, MAX_ACCELERATION),
    }
