"""Application DTOs - Model Performance"""

from gridcast.application.dtos.base import CamelModel
from gridcast.domain.entities.accuracy import AccuracySummary
from gridcast.domain.entities.training import ModelStatus


class ModelPerformanceDTO(CamelModel):
    average_accuracy: float
    total_records: int
    model_status: ModelStatus

    @classmethod
    def from_domain(cls, summary: AccuracySummary) -> "ModelPerformanceDTO":
        return cls(
            average_accuracy=summary.average_accuracy,
            total_records=summary.total_records,
            model_status=summary.model_status,
        )
