"""
Gesture ML

Feature extraction, augmentation, stratified splitting and a baseline
classifier for short triaxial motion recordings grouped into gesture classes.
"""

from .config import (
    AXES,
    DEFAULT_DATA_WINDOW,
    DEFAULT_FILTERS,
    MAX_ACCELERATION,
    DataWindow,
    Filter,
    create_ml_settings,
    load_config,
)

from .data_types import ActionData, Recording, XYZData

from .errors import (
    EmptyDataError,
    GestureMLError,
    PredictionFailure,
    PredictionSuccess,
    ShortSampleError,
    TrainingFailure,
    TrainingSuccess,
)

from .statistics import (
    mean,
    peak_indices,
    root_mean_square,
    smoothen,
    stddev,
    zero_crossing,
)

from .filters import FilterSpec, get_ml_filters

from .features import (
    apply_filter,
    apply_filters,
    features_to_frame,
    get_features_from_action,
    normalize,
    prepare_features_and_labels,
    prepare_features_by_action,
)

from .augmentation import add_jitter, augment_action

from .dataset import FeatureDataset, split_data

from .model import GestureClassifier, create_model

from .trainer import GestureTrainer, train_model, train_model_sync

from .predictor import evaluate_model, predict

from .overlays import compute_overlays, smoothen_xyz

__version__ = "0.1.0"

__all__ = [
    # Configuration
    'AXES',
    'DEFAULT_DATA_WINDOW',
    'DEFAULT_FILTERS',
    'MAX_ACCELERATION',
    'DataWindow',
    'Filter',
    'create_ml_settings',
    'load_config',

    # Data types
    'ActionData',
    'Recording',
    'XYZData',

    # Errors and results
    'EmptyDataError',
    'GestureMLError',
    'PredictionFailure',
    'PredictionSuccess',
    'ShortSampleError',
    'TrainingFailure',
    'TrainingSuccess',

    # Statistics
    'mean',
    'peak_indices',
    'root_mean_square',
    'smoothen',
    'stddev',
    'zero_crossing',

    # Feature extraction
    'FilterSpec',
    'get_ml_filters',
    'apply_filter',
    'apply_filters',
    'features_to_frame',
    'get_features_from_action',
    'normalize',
    'prepare_features_and_labels',
    'prepare_features_by_action',

    # Augmentation and splitting
    'add_jitter',
    'augment_action',
    'FeatureDataset',
    'split_data',

    # Model
    'GestureClassifier',
    'create_model',
    'GestureTrainer',
    'train_model',
    'train_model_sync',
    'evaluate_model',
    'predict',

    # Graph overlays
    'compute_overlays',
    'smoothen_xyz',
]
