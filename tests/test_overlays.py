import pytest

from gesture_ml.config import DEFAULT_FILTERS, Filter
from gesture_ml.errors import EmptyDataError
from gesture_ml.overlays import compute_overlays, smoothen_xyz
from gesture_ml.statistics import smoothen

from .conftest import make_sample


def spiky_sample():
    x = [0.0] * 10 + [8.0] + [0.0] * 9
    y = [1.0, -1.0] * 10
    z = [0.5] * 20
    return make_sample(x, y, z)


def test_smoothen_xyz_matches_axis_smoothing():
    sample = spiky_sample()
    smoothed = smoothen_xyz(sample)
    assert list(smoothed.x) == pytest.approx(smoothen(sample.x))
    assert list(smoothed.y) == pytest.approx(smoothen(sample.y))


def test_overlays_only_for_requested_filters():
    overlays = compute_overlays(spiky_sample(), [Filter.MAX])
    x = overlays["x"]
    assert x.max_index == 10
    assert x.min_index is None
    assert x.mean is None
    assert x.peak_indices == []
    assert x.fill_under_curve is False


def test_overlays_are_computed_on_smoothed_series():
    overlays = compute_overlays(spiky_sample(), DEFAULT_FILTERS)
    x = overlays["x"]
    smoothed = smoothen(spiky_sample().x)

    assert x.smoothed == pytest.approx(smoothed)
    assert x.max_index == 10
    assert x.peak_indices == [10]
    assert x.rms == pytest.approx((sum(v * v for v in smoothed) / len(smoothed)) ** 0.5)
    low, high = x.std_band
    assert low < x.mean < high
    assert x.fill_under_curve is True

    z = overlays["z"]
    assert z.zero_crossings == []
    assert z.std_band == pytest.approx((0.5, 0.5))


def test_zero_crossing_segments_on_smoothed_series():
    y = compute_overlays(spiky_sample(), [Filter.ZCR])["y"]
    smoothed = smoothen(spiky_sample().y)
    expected = [
        (i - 1, i)
        for i in range(1, len(smoothed))
        if (smoothed[i] >= 0) != (smoothed[i - 1] >= 0)
    ]
    assert y.zero_crossings == expected


def test_overlays_reject_empty_axis():
    with pytest.raises(EmptyDataError):
        compute_overlays(make_sample([1.0], [], [1.0]), [Filter.MEAN])
