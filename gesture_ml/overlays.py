"""
Overlay data for recording graphs

Computes, per axis of the smoothed recording, the markers and levels a graph
highlights for each enabled filter.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .config import Filter, parse_filters
from .data_types import XYZData
from .statistics import (
    max_index,
    mean,
    min_index,
    peak_indices,
    root_mean_square,
    smoothen,
    stddev,
    zero_crossing_segments,
)


@dataclass
class AxisOverlay:
    smoothed: list[float]
    max_index: int | None = None
    min_index: int | None = None
    peak_indices: list[int] = field(default_factory=list)
    zero_crossings: list[tuple[int, int]] = field(default_factory=list)
    mean: float | None = None
    # (mean - std, mean + std)
    std_band: tuple[float, float] | None = None
    rms: float | None = None
    fill_under_curve: bool = False


def smoothen_xyz(data: XYZData) -> XYZData:
    return XYZData(x=smoothen(data.x), y=smoothen(data.y), z=smoothen(data.z))


def axis_overlay(values, filters: Iterable[Filter | str]) -> AxisOverlay:
    filters = parse_filters(filters)
    smoothed = smoothen(values)
    overlay = AxisOverlay(smoothed=smoothed)

    if Filter.MAX in filters:
        overlay.max_index = max_index(smoothed)
    if Filter.MIN in filters:
        overlay.min_index = min_index(smoothed)
    if Filter.PEAKS in filters:
        overlay.peak_indices = peak_indices(smoothed)
    if Filter.ZCR in filters:
        overlay.zero_crossings = zero_crossing_segments(smoothed)
    if Filter.MEAN in filters or Filter.STD in filters:
        level = mean(smoothed)
        if Filter.MEAN in filters:
            overlay.mean = level
        if Filter.STD in filters:
            spread = stddev(smoothed, level)
            overlay.std_band = (level - spread, level + spread)
    if Filter.RMS in filters:
        overlay.rms = root_mean_square(smoothed)
    overlay.fill_under_curve = Filter.ACC in filters

    return overlay


def compute_overlays(
    data: XYZData,
    filters: Iterable[Filter | str],
) -> dict[str, AxisOverlay]:
    """Overlay data for each axis of a recording.

    Args:
        data: Triaxial sample
        filters: Filters whose overlays are wanted

    Returns:
        Dictionary keyed by axis name
    """
    data.validate()
    filters = parse_filters(filters)
    return {axis: axis_overlay(values, filters) for axis, values in data.axes().items()}
