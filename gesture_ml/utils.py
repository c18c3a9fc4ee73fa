from __future__ import annotations

import random

import numpy as np
import torch


def set_seed(seed: int = 42):
    """Set random seeds for reproducibility.

    Args:
        seed: Random seed value
    """
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)


def count_parameters(model: torch.nn.Module) -> dict[str, int]:
    """Count model parameters."""
    total_params = sum(p.numel() for p in model.parameters())
    trainable_params = sum(p.numel() for p in model.parameters() if p.requires_grad)

    return {
        "total_parameters": total_params,
        "trainable_parameters": trainable_params,
    }


def print_model_info(model: torch.nn.Module):
    """Print model information.

    Args:
        model: PyTorch model
    """
    params = count_parameters(model)

    print("=== Model Information ===")
    print(f"Total parameters: {params['total_parameters']:,}")
    print(f"Trainable parameters: {params['trainable_parameters']:,}")
