"""
Jitter augmentation: synthetic recordings from Gaussian noise
"""
from __future__ import annotations

import time

import numpy as np

from .data_types import ActionData, Recording, XYZData


def normal_noise(
    size: int,
    mean: float,
    stddev: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw ``size`` independent Normal(mean, stddev) values with Box-Muller.

    Args:
        size: Number of values
        mean: Noise mean
        stddev: Noise standard deviation
        rng: Source of uniform samples

    Returns:
        Array of noise values
    """
    # 1 - U keeps u1 in (0, 1] so the logarithm stays finite
    u1 = 1.0 - rng.random(size)
    u2 = rng.random(size)
    z0 = np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)
    return z0 * stddev + mean


def add_jitter(
    action: ActionData,
    repeats: int = 1,
    mean: float = 0.0,
    stddev: float = 1.0,
    include_original: bool = False,
    random_state: int | None = None,
    start_id: int | None = None,
) -> list[Recording]:
    """Generate noisy copies of every recording of an action.

    Each repeat of each recording yields one new recording whose every
    sample gets independent noise. ``action`` is left unchanged.

    Args:
        action: Action whose recordings are jittered
        repeats: Number of noisy copies per recording
        mean: Noise mean
        stddev: Noise standard deviation
        include_original: Whether to append the original recordings last
        random_state: Seed for the noise generator
        start_id: First id given to a generated recording, defaults to the
            current time in milliseconds

    Returns:
        Generated recordings, followed by the originals when requested
    """
    if repeats < 0:
        msg = f"repeats must be non-negative, got {repeats}"
        raise ValueError(msg)

    rng = np.random.default_rng(random_state)
    next_id = int(time.time() * 1000) if start_id is None else start_id

    recordings = []
    for recording in action.recordings:
        for _ in range(repeats):
            noisy = {
                axis: np.asarray(values, dtype=float)
                + normal_noise(len(values), mean, stddev, rng)
                for axis, values in recording.data.axes().items()
            }
            recordings.append(
                Recording(id=next_id, data=XYZData(**noisy), is_generated=True),
            )
            next_id += 1

    if include_original:
        recordings.extend(action.recordings)

    return recordings


def augment_action(action: ActionData, **jitter_kwargs) -> ActionData:
    """Return a copy of ``action`` whose recordings include jittered copies."""
    jitter_kwargs.setdefault("include_original", True)
    return ActionData(
        id=action.id,
        name=action.name,
        recordings=add_jitter(action, **jitter_kwargs),
    )
