import torch

from gesture_ml.model import GestureClassifier
from gesture_ml.utils import count_parameters, print_model_info, set_seed


def test_set_seed_makes_torch_reproducible():
    set_seed(3)
    first = torch.rand(4)
    set_seed(3)
    assert torch.equal(first, torch.rand(4))


def test_count_parameters():
    model = GestureClassifier(num_classes=3)
    params = count_parameters(model)
    # batch norm weight+bias, two linear layers
    expected = 2 * 24 + (24 * 16 + 16) + (16 * 3 + 3)
    assert params["total_parameters"] == expected
    assert params["trainable_parameters"] == expected


def test_print_model_info(capsys):
    print_model_info(GestureClassifier(num_classes=2))
    assert "Total parameters" in capsys.readouterr().out
