"""Application Use Case - Model Performance"""

import structlog

from gridcast.application.dtos.performance_dto import ModelPerformanceDTO
from gridcast.domain.entities.forecast_model import ForecastModelHandle
from gridcast.domain.repositories.demand_repository import IDemandRepository
from gridcast.domain.services.accuracy_reporter import summarize_accuracy

logger = structlog.get_logger(__name__)


class ModelPerformanceUseCase:
    """Rolls up the accuracy of stored forecasts against observed demand."""

    def __init__(
        self,
        demand_repository: IDemandRepository,
        model_handle: ForecastModelHandle,
    ):
        self.demand_repository = demand_repository
        self.model_handle = model_handle

    async def execute(self) -> ModelPerformanceDTO:
        records = await self.demand_repository.find_all()
        summary = summarize_accuracy(records, self.model_handle.model_status)

        logger.debug(
            "performance.summarized",
            total_records=summary.total_records,
            average_accuracy=summary.average_accuracy,
        )

        return ModelPerformanceDTO.from_domain(summary)
