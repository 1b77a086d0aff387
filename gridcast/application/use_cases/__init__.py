"""
Use Cases Package - Application Layer

Each use case orchestrates one operation exposed by the service.
"""

from .feature_extraction_use_case import FeatureExtractionUseCase
from .health_use_cases import GetHealthStatusUseCase
from .model_performance_use_case import ModelPerformanceUseCase
from .model_prediction_use_case import ModelPredictionUseCase
from .model_training_use_case import ModelTrainingUseCase
from .seed_demand_history_use_case import SeedDemandHistoryUseCase, SeedSummary

__all__ = [
    "FeatureExtractionUseCase",
    "GetHealthStatusUseCase",
    "ModelPerformanceUseCase",
    "ModelPredictionUseCase",
    "ModelTrainingUseCase",
    "SeedDemandHistoryUseCase",
    "SeedSummary",
]
