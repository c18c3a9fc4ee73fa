import numpy as np
import pytest

from gesture_ml.augmentation import add_jitter, augment_action, normal_noise


def test_zero_stddev_offsets_by_mean(gesture_actions):
    action = gesture_actions[0]
    generated = add_jitter(action, repeats=2, mean=0.25, stddev=0.0, random_state=1)

    assert len(generated) == 2 * len(action.recordings)
    for index, recording in enumerate(generated):
        original = action.recordings[index // 2].data
        for axis in ("x", "y", "z"):
            expected = np.asarray(getattr(original, axis)) + 0.25
            assert np.allclose(getattr(recording.data, axis), expected)


def test_generated_ids_and_flags(gesture_actions):
    action = gesture_actions[1]
    generated = add_jitter(action, repeats=3, start_id=500, random_state=0)

    assert [r.id for r in generated] == list(range(500, 500 + 3 * len(action.recordings)))
    assert all(r.is_generated for r in generated)


def test_include_original_appends_originals_last(gesture_actions):
    action = gesture_actions[2]
    generated = add_jitter(action, repeats=1, include_original=True, random_state=0)

    assert len(generated) == 2 * len(action.recordings)
    assert generated[-len(action.recordings):] == action.recordings
    assert not any(r.is_generated for r in generated[-len(action.recordings):])


def test_source_action_is_not_mutated(gesture_actions):
    action = gesture_actions[0]
    before = list(action.recordings)
    add_jitter(action, repeats=2, include_original=True, random_state=0)
    assert action.recordings == before


def test_noise_is_drawn_per_sample_point(gesture_actions):
    recording = add_jitter(gesture_actions[0], stddev=1.0, random_state=3)[0]
    original = gesture_actions[0].recordings[0].data
    offsets = np.asarray(recording.data.x) - np.asarray(original.x)
    assert len(set(np.round(offsets, 12))) == len(offsets)


def test_seeded_jitter_is_reproducible(gesture_actions):
    first = add_jitter(gesture_actions[0], start_id=1, random_state=7)
    second = add_jitter(gesture_actions[0], start_id=1, random_state=7)
    assert first == second


def test_normal_noise_distribution():
    noise = normal_noise(20000, mean=1.0, stddev=2.0, rng=np.random.default_rng(0))
    assert noise.mean() == pytest.approx(1.0, abs=0.1)
    assert noise.std() == pytest.approx(2.0, abs=0.1)
    assert np.all(np.isfinite(noise))


def test_negative_repeats_rejected(gesture_actions):
    with pytest.raises(ValueError):
        add_jitter(gesture_actions[0], repeats=-1)


def test_augment_action_keeps_identity(gesture_actions):
    action = gesture_actions[0]
    augmented = augment_action(action, repeats=1, random_state=0)
    assert augmented.id == action.id
    assert augmented.name == action.name
    assert len(augmented.recordings) == 2 * len(action.recordings)
    assert augmented is not action
