"""
DTOs Package - Application Layer

Pydantic models exchanged between the application and presentation
layers. All of them serialise with camelCase keys.
"""

from .health_dto import DependencyStatusDTO, SystemHealthDTO
from .performance_dto import ModelPerformanceDTO
from .prediction_dto import ForecastPointDTO, PredictionRequestDTO
from .training_dto import TrainingMetricsDTO, TrainingResultDTO, TrainingStatusDTO

__all__ = [
    "DependencyStatusDTO",
    "SystemHealthDTO",
    "ModelPerformanceDTO",
    "ForecastPointDTO",
    "PredictionRequestDTO",
    "TrainingMetricsDTO",
    "TrainingResultDTO",
    "TrainingStatusDTO",
]
