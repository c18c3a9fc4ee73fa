"""
Scalar statistics over a single axis series
"""
from __future__ import annotations

from functools import reduce
from typing import NamedTuple, Sequence

import numpy as np

from .errors import EmptyDataError, ShortSampleError

# Smoothed z-score peak detector parameters
PEAK_LAG = 5
PEAK_THRESHOLD = 3.5
PEAK_INFLUENCE = 0.5
# Absolute deviation below which a point is never a signal
PEAK_MIN_DEVIATION = 0.1

SMOOTHING_FACTOR = 0.25


def as_series(values: Sequence[float]) -> np.ndarray:
    series = np.asarray(values, dtype=float)
    if series.size == 0:
        msg = "Series has no samples"
        raise EmptyDataError(msg)
    return series


def mean(values: Sequence[float]) -> float:
    return float(np.mean(as_series(values)))


def stddev(values: Sequence[float], mean_value: float | None = None) -> float:
    """Population standard deviation around ``mean_value``.

    Args:
        values: Axis series
        mean_value: Precomputed mean; computed from ``values`` when omitted

    Returns:
        Standard deviation
    """
    series = as_series(values)
    if mean_value is None:
        mean_value = float(np.mean(series))
    return float(np.sqrt(np.mean((series - mean_value) ** 2)))


def root_mean_square(values: Sequence[float]) -> float:
    series = as_series(values)
    return float(np.sqrt(np.mean(series**2)))


def max_index(values: Sequence[float]) -> int:
    """Index of the first maximum."""
    return int(np.argmax(as_series(values)))


def min_index(values: Sequence[float]) -> int:
    """Index of the first minimum."""
    return int(np.argmin(as_series(values)))


def zero_crossing(values: Sequence[float], index: int) -> bool:
    """Whether the segment ``(index - 1, index)`` crosses zero.

    Zero counts as non-negative.
    """
    if not 1 <= index < len(values):
        msg = f"Index {index} out of range for series of length {len(values)}"
        raise IndexError(msg)
    return bool((values[index] >= 0) != (values[index - 1] >= 0))


def zero_crossing_segments(values: Sequence[float]) -> list[tuple[int, int]]:
    """All ``(start, end)`` index pairs whose segment crosses zero."""
    return [(i - 1, i) for i in range(1, len(values)) if zero_crossing(values, i)]


def zero_crossing_rate(values: Sequence[float]) -> float:
    """Number of zero crossings per segment."""
    series = as_series(values)
    if series.size == 1:
        return 0.0
    return len(zero_crossing_segments(series)) / (series.size - 1)


class _PeakState(NamedTuple):
    avg: float
    std: float
    # filtered values at the lag positions preceding the current index
    window: tuple[float, ...]
    signal: int
    peaks: tuple[int, ...]


def peak_indices(
    values: Sequence[float],
    lag: int = PEAK_LAG,
    threshold: float = PEAK_THRESHOLD,
    influence: float = PEAK_INFLUENCE,
) -> list[int]:
    """Rising edges found by a smoothed z-score peak detector.

    A point is a signal when it deviates from the rolling mean of the
    preceding filtered values by more than ``PEAK_MIN_DEVIATION`` and by
    more than ``threshold`` rolling standard deviations. Signals damp their
    own contribution to the rolling statistics by ``influence``. Only the
    first index of each positive run is reported.

    Args:
        values: Axis series
        lag: Number of filtered values in the rolling window
        threshold: Z-score a point must exceed to be a signal
        influence: Weight of a signal point in the filtered series

    Returns:
        Ascending list of peak indices
    """
    series = as_series(values)
    if series.size < lag + 2:
        msg = f"Series of length {series.size} is too short, need at least {lag + 2}"
        raise ShortSampleError(msg)

    lead_in = tuple(series[:lag])
    initial = _PeakState(
        avg=mean(lead_in),
        std=stddev(lead_in),
        window=lead_in,
        signal=0,
        peaks=(),
    )

    def step(state: _PeakState, i: int) -> _PeakState:
        value = float(series[i])
        deviation = abs(value - state.avg)

        if deviation > PEAK_MIN_DEVIATION and deviation > threshold * state.std:
            signal = 1 if value > state.avg else -1
            filtered = influence * value + (1 - influence) * state.window[-1]
        else:
            signal = 0
            filtered = value

        peaks = state.peaks
        if signal == 1 and state.signal == 0:
            peaks = (*peaks, i)

        # rolling statistics lag one step behind the newest filtered value
        return _PeakState(
            avg=mean(state.window),
            std=stddev(state.window),
            window=(*state.window[1:], filtered),
            signal=signal,
            peaks=peaks,
        )

    return list(reduce(step, range(lag, series.size), initial).peaks)


def smoothen(values: Sequence[float]) -> list[float]:
    """Exponential smoothing with the first sample as seed."""
    smoothed = []
    previous = values[0] if len(values) else 0.0
    for value in values:
        previous = SMOOTHING_FACTOR * value + (1 - SMOOTHING_FACTOR) * previous
        smoothed.append(float(previous))
    return smoothed
