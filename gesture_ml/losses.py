"""Categorical cross-entropy over softmax outputs and one-hot targets."""

import torch
from torch import nn


class CategoricalCrossEntropy(nn.Module):
    """Cross-entropy for models whose last layer is already a softmax.

    Probabilities are clipped away from 0 and 1 before taking the log so a
    confident wrong prediction gives a large but finite loss.
    """

    def __init__(self, epsilon=1e-7, reduction="mean"):
        """Initialize loss.

        Args:
            epsilon: Clipping margin for probabilities
            reduction: Reduction method ('mean', 'sum', or 'none')
        """
        super().__init__()
        self.epsilon = epsilon
        self.reduction = reduction

    def forward(self, probabilities, targets):
        """Compute the loss.

        Args:
            probabilities: Predicted class probabilities (batch_size, num_classes)
            targets: One-hot labels (batch_size, num_classes)

        Returns:
            Loss value
        """
        # Rescale so rows sum to one before clipping
        probabilities = probabilities / probabilities.sum(dim=-1, keepdim=True)
        probabilities = probabilities.clamp(self.epsilon, 1.0 - self.epsilon)
        loss = -(targets * torch.log(probabilities)).sum(dim=-1)

        if self.reduction == "mean":
            return loss.mean()
        if self.reduction == "sum":
            return loss.sum()
        return loss
