"""Domain entity for the historical accuracy rollup."""

from dataclasses import dataclass

from gridcast.domain.entities.training import ModelStatus


@dataclass(frozen=True)
class AccuracySummary:
    average_accuracy: float
    total_records: int
    model_status: ModelStatus
