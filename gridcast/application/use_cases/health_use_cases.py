"""Use case for the health endpoint."""

from typing import Iterable

from gridcast.application.dtos.health_dto import SystemHealthDTO
from gridcast.domain.entities.forecast_model import ForecastModelHandle
from gridcast.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from gridcast.domain.ports.health_check import IHealthCheckService


class GetHealthStatusUseCase:
    """Combines dependency checks with the state of the forecast model."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        model_handle: ForecastModelHandle,
    ) -> None:
        self._health_check_service = health_check_service
        self._model_handle = model_handle

    async def execute(self) -> SystemHealthDTO:
        dependencies = await self._health_check_service.evaluate()
        snapshot = self._model_handle.status()

        health = SystemHealth(
            status=self._aggregate_status(dependencies),
            model_status=self._model_handle.model_status.value,
            is_training=snapshot.is_training,
            dependencies=list(dependencies),
        )
        return SystemHealthDTO.from_domain(health)

    @staticmethod
    def _aggregate_status(statuses: Iterable[DependencyStatus]) -> ServiceStatus:
        has_unknown = False
        for status in statuses:
            if status.status == ServiceStatus.DOWN:
                return ServiceStatus.DOWN
            if status.status == ServiceStatus.UNKNOWN:
                has_unknown = True
        return ServiceStatus.UNKNOWN if has_unknown else ServiceStatus.UP
