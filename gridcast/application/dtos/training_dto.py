"""
Application DTOs - Training

Response contracts of the train-model and training-status operations.
"""

from typing import Optional

from pydantic import Field

from gridcast.application.dtos.base import CamelModel
from gridcast.domain.entities.training import (
    TrainingMetrics,
    TrainingResult,
    TrainingResultStatus,
    TrainingStatusSnapshot,
)


class TrainingMetricsDTO(CamelModel):
    """In-sample fit quality."""

    final_loss: Optional[float] = None
    mse: Optional[float] = None
    mae: Optional[float] = None
    r2: Optional[float] = None

    @classmethod
    def from_domain(cls, metrics: TrainingMetrics) -> "TrainingMetricsDTO":
        return cls(
            final_loss=metrics.final_loss,
            mse=metrics.mse,
            mae=metrics.mae,
            r2=metrics.r2,
        )


class TrainingResultDTO(CamelModel):
    """DTO returned when training is requested."""

    status: TrainingResultStatus
    data_points: Optional[int] = Field(
        default=None, description="Number of records the model was fitted on"
    )
    model_type: Optional[str] = Field(default=None, description="Model family")
    metrics: Optional[TrainingMetricsDTO] = None

    @classmethod
    def from_domain(cls, result: TrainingResult) -> "TrainingResultDTO":
        return cls(
            status=result.status,
            data_points=result.data_points,
            model_type=result.model_type,
            metrics=(
                TrainingMetricsDTO.from_domain(result.metrics)
                if result.metrics
                else None
            ),
        )


class TrainingStatusDTO(CamelModel):
    trained: bool
    is_training: bool

    @classmethod
    def from_domain(cls, snapshot: TrainingStatusSnapshot) -> "TrainingStatusDTO":
        return cls(trained=snapshot.trained, is_training=snapshot.is_training)
