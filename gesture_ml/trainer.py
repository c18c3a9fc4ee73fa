from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Callable, Iterator, Sequence

from torch import optim
from torch.utils.data import DataLoader
from tqdm import tqdm

from .config import DataWindow, create_ml_settings
from .dataset import FeatureDataset, split_data
from .errors import TrainingFailure, TrainingResult, TrainingSuccess
from .features import prepare_features_by_action
from .losses import CategoricalCrossEntropy
from .model import GestureClassifier, create_model
from .utils import print_model_info, set_seed

if TYPE_CHECKING:
    from .data_types import ActionData

ProgressCallback = Callable[[float], None]


class GestureTrainer:
    """Trainer class for the gesture classifier."""

    def __init__(self, model: GestureClassifier, settings: dict | None = None):
        """Initialize trainer.

        Args:
            model: Freshly created classifier
            settings: Settings from ``create_ml_settings``
        """
        self.settings = settings or create_ml_settings()
        self.model = model

        self.criterion = CategoricalCrossEntropy()
        self.optimizer = optim.SGD(
            self.model.parameters(),
            lr=self.settings["learning_rate"],
        )

        # Training state
        self.current_epoch = 0

        # History tracking
        self.train_losses = []
        self.train_accuracies = []

    def create_data_loader(self, dataset: FeatureDataset) -> DataLoader:
        """Shuffling loader over the whole training set.

        A trailing batch of a single sample is dropped, batch normalization
        needs at least two values per channel in training mode.
        """
        batch_size = self.settings["batch_size"]
        drop_last = len(dataset) > batch_size and len(dataset) % batch_size == 1
        return DataLoader(
            dataset,
            batch_size=batch_size,
            shuffle=True,
            drop_last=drop_last,
        )

    def train_epoch(self, train_loader: DataLoader) -> tuple[float, float]:
        """Train for one epoch.

        Args:
            train_loader: Training data loader

        Returns:
            Tuple of (average_loss, accuracy)
        """
        self.model.train()
        train_loss = 0.0
        train_correct = 0
        train_total = 0

        for batch in train_loader:
            features = batch["features"]  # (batch_size, input_dim)
            labels = batch["label"]  # (batch_size, num_classes)

            self.optimizer.zero_grad()

            outputs = self.model(features)  # (batch_size, num_classes)
            loss = self.criterion(outputs, labels)

            loss.backward()
            self.optimizer.step()

            # Statistics
            train_loss += loss.item()
            predicted = outputs.argmax(dim=1)
            train_total += labels.size(0)
            train_correct += (predicted == labels.argmax(dim=1)).sum().item()

        avg_loss = train_loss / len(train_loader) if len(train_loader) > 0 else 0.0
        accuracy = 100.0 * train_correct / train_total if train_total > 0 else 0.0

        return avg_loss, accuracy

    def iter_epochs(
        self,
        train_loader: DataLoader,
        num_epochs: int,
    ) -> Iterator[tuple[int, float, float]]:
        """Train epoch by epoch, yielding ``(epoch, loss, accuracy)`` after each."""
        if len(train_loader.dataset) == 0:
            msg = "No training samples"
            raise ValueError(msg)

        epoch_pbar = tqdm(
            range(num_epochs),
            desc="Training",
            unit="epoch",
            disable=not self.settings["verbose"],
        )
        for epoch in epoch_pbar:
            self.current_epoch = epoch

            train_loss, train_acc = self.train_epoch(train_loader)

            self.train_losses.append(train_loss)
            self.train_accuracies.append(train_acc)

            epoch_pbar.set_postfix(
                {
                    "Loss": f"{train_loss:.4f}",
                    "Acc": f"{train_acc:.2f}%",
                },
            )
            yield epoch, train_loss, train_acc

    def train(
        self,
        train_loader: DataLoader,
        num_epochs: int,
        on_progress: ProgressCallback | None = None,
    ) -> dict:
        """Main training loop.

        Args:
            train_loader: Training data loader
            num_epochs: Number of epochs to train
            on_progress: Called after every epoch with progress in [0, 1]

        Returns:
            Dictionary with training history
        """
        for epoch, _, _ in self.iter_epochs(train_loader, num_epochs):
            if on_progress is not None:
                on_progress(epoch_progress(epoch, num_epochs))

        return self.history()

    def history(self) -> dict:
        return {
            "train_losses": self.train_losses,
            "train_accuracies": self.train_accuracies,
        }


def epoch_progress(epoch: int, num_epochs: int) -> float:
    """Progress after zero-indexed ``epoch`` of ``num_epochs``."""
    if num_epochs <= 1:
        return 1.0
    return epoch / (num_epochs - 1)


async def train_model(
    actions: Sequence[ActionData],
    data_window: DataWindow,
    settings: dict | None = None,
    on_progress: ProgressCallback | None = None,
    test_fraction: float | None = None,
    random_state: int | None = None,
) -> TrainingResult:
    """Extract features, split, and train a fresh classifier.

    Feature extraction errors are raised. Any error while fitting is
    returned as a ``TrainingFailure``. The coroutine yields to the event
    loop after every epoch; training cannot be cancelled once started.

    Args:
        actions: Gesture classes in label order
        data_window: Window the recordings were captured with
        settings: Settings from ``create_ml_settings``
        on_progress: Called after every epoch with progress in [0, 1]
        test_fraction: Per-class test share, defaults to ``settings["test_fraction"]``
        random_state: Seed for the split, initialization and shuffling

    Returns:
        ``TrainingSuccess`` with the model, and the test split when non-empty,
        or ``TrainingFailure``
    """
    settings = settings or create_ml_settings()
    if test_fraction is None:
        test_fraction = settings["test_fraction"]
    if random_state is not None:
        set_seed(random_state)

    features = prepare_features_by_action(
        actions,
        data_window,
        settings["enabled_filters"],
        normalize_values=settings["normalize_features"],
    )
    split = split_data(features, test_fraction, random_state=random_state)

    num_epochs = settings["num_epochs"]
    try:
        model = create_model(
            actions,
            settings["enabled_filters"],
            normalize_features=settings["normalize_features"],
        )
        trainer = GestureTrainer(model, settings)
        if settings["verbose"]:
            print_model_info(model)
        train_loader = trainer.create_data_loader(
            FeatureDataset(split["train_features"], split["train_labels"]),
        )

        for epoch, _, _ in trainer.iter_epochs(train_loader, num_epochs):
            if on_progress is not None:
                on_progress(epoch_progress(epoch, num_epochs))
            await asyncio.sleep(0)
    except Exception as e:
        if settings["verbose"]:
            print(f"Training failed: {e}")
        return TrainingFailure(detail=e)

    model.eval()

    if not split["test_features"]:
        return TrainingSuccess(model=model, history=trainer.history())

    return TrainingSuccess(
        model=model,
        test_features=split["test_features"],
        test_labels=split["test_labels"],
        history=trainer.history(),
    )


def train_model_sync(*args, **kwargs) -> TrainingResult:
    """Run ``train_model`` to completion outside an event loop."""
    return asyncio.run(train_model(*args, **kwargs))
