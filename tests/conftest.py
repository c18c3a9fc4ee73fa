import numpy as np
import pytest

from gesture_ml import ActionData, Recording, XYZData


def make_sample(x, y, z):
    return XYZData(x=x, y=y, z=z)


def make_gesture_actions(num_recordings=4, length=20, seed=0):
    """Three well separated gesture classes with a little noise."""
    rng = np.random.default_rng(seed)
    t = np.linspace(0, 2 * np.pi, length)
    zeros = np.zeros(length)

    shapes = {
        "shake": lambda: (1.5 + 0.2 * np.sin(t), zeros, zeros),
        "tilt": lambda: (zeros, -1.5 + 0.2 * np.cos(t), zeros),
        "circle": lambda: (zeros, zeros, 2.0 * np.sin(3 * t)),
    }

    actions = []
    recording_id = 0
    for action_id, (name, shape) in enumerate(shapes.items()):
        recordings = []
        for _ in range(num_recordings):
            x, y, z = shape()
            noise = rng.normal(0.0, 0.05, size=(3, length))
            recordings.append(
                Recording(
                    id=recording_id,
                    data=XYZData(x=x + noise[0], y=y + noise[1], z=z + noise[2]),
                ),
            )
            recording_id += 1
        actions.append(ActionData(id=100 + action_id, name=name, recordings=recordings))
    return actions


@pytest.fixture
def gesture_actions():
    return make_gesture_actions()


@pytest.fixture
def simple_sample():
    return make_sample(
        x=[0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0],
        y=[1.0, -1.0, 1.0, -1.0, 1.0, -1.0, 1.0, -1.0],
        z=[0.5] * 8,
    )
