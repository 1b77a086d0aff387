"""
Domain Entities Package

Core records and value objects of the demand forecasting domain.
"""

from .accuracy import AccuracySummary
from .demand import (
    DemandRecord,
    FeatureVector,
    compute_accuracy,
    day_of_week,
    ensure_utc,
)
from .errors import (
    DomainError,
    InsufficientDataError,
    InvalidRangeError,
    ModelNotTrainedError,
    ModelTrainingError,
    StationNotFoundError,
)
from .forecast import ExogenousConditions, ForecastPoint
from .forecast_model import ForecastModelHandle
from .health import DependencyStatus, ServiceStatus, SystemHealth
from .station import Station
from .training import (
    ModelStatus,
    TrainingMetrics,
    TrainingResult,
    TrainingResultStatus,
    TrainingState,
    TrainingStatusSnapshot,
)

__all__ = [
    "AccuracySummary",
    "DemandRecord",
    "FeatureVector",
    "compute_accuracy",
    "day_of_week",
    "ensure_utc",
    "DomainError",
    "InsufficientDataError",
    "InvalidRangeError",
    "ModelNotTrainedError",
    "ModelTrainingError",
    "StationNotFoundError",
    "ExogenousConditions",
    "ForecastPoint",
    "ForecastModelHandle",
    "DependencyStatus",
    "ServiceStatus",
    "SystemHealth",
    "Station",
    "ModelStatus",
    "TrainingMetrics",
    "TrainingResult",
    "TrainingResultStatus",
    "TrainingState",
    "TrainingStatusSnapshot",
]
