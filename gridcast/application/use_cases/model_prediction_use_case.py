"""
Application Use Case - Model Prediction

Generates hourly demand forecasts for a station from the currently
trained model. The flow is:
  * Snapshot the trained model (fail fast when there is none)
  * Parse and validate the requested range
  * Resolve the station
  * Build the lazy forecast sequence and materialise it off the event loop
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import List, Optional, Union

import structlog

from gridcast.application.dtos.prediction_dto import ForecastPointDTO
from gridcast.domain.entities.demand import ensure_utc
from gridcast.domain.entities.errors import (
    InvalidRangeError,
    ModelNotTrainedError,
    StationNotFoundError,
)
from gridcast.domain.entities.forecast_model import ForecastModelHandle
from gridcast.domain.entities.station import Station
from gridcast.domain.ports.exogenous_source import IExogenousSource
from gridcast.domain.repositories.station_repository import IStationRepository
from gridcast.domain.services.forecast_generator import ForecastSequence

logger = structlog.get_logger(__name__)

RangeBound = Union[datetime, str, None]


class ModelPredictionUseCase:
    """Coordinates forecast generation for a station and time range."""

    def __init__(
        self,
        station_repository: IStationRepository,
        model_handle: ForecastModelHandle,
        exogenous_source: IExogenousSource,
    ):
        self.station_repository = station_repository
        self.model_handle = model_handle
        self.exogenous_source = exogenous_source

    async def execute(
        self, station_id: str, start_date: RangeBound, end_date: RangeBound
    ) -> List[ForecastPointDTO]:
        """Forecast every hour in [start_date, end_date) for the station."""

        sequence = await self.forecast(station_id, start_date, end_date)
        points = await asyncio.to_thread(list, sequence)

        logger.info(
            "prediction.completed",
            station_id=station_id,
            start=sequence.start.isoformat(),
            end=sequence.end.isoformat(),
            points=len(points),
        )

        return [ForecastPointDTO.from_domain(point) for point in points]

    async def forecast(
        self, station_id: str, start_date: RangeBound, end_date: RangeBound
    ) -> ForecastSequence:
        """
        Validate the request and return the lazy forecast sequence.

        An empty or inverted range gives an empty sequence, not an error.

        Raises:
            ModelNotTrainedError: No training has succeeded yet
            InvalidRangeError: A bound is missing or cannot be parsed
            StationNotFoundError: The station does not exist
        """
        regressor = self.model_handle.snapshot()
        if regressor is None:
            logger.warning("prediction.model_not_trained", station_id=station_id)
            raise ModelNotTrainedError()

        start = self._parse_bound("startDate", start_date)
        end = self._parse_bound("endDate", end_date)

        await self._get_station(station_id)

        if end <= start:
            logger.info(
                "prediction.empty_range",
                station_id=station_id,
                start=start.isoformat(),
                end=end.isoformat(),
            )

        return ForecastSequence(
            regressor=regressor,
            station_id=station_id,
            start=start,
            end=end,
            exogenous_source=self.exogenous_source,
        )

    async def _get_station(self, station_id: str) -> Station:
        station = (
            await self.station_repository.find_by_id(station_id) if station_id else None
        )
        if not station:
            logger.warning("prediction.station_not_found", station_id=station_id)
            raise StationNotFoundError(station_id)
        return station

    @staticmethod
    def _parse_bound(name: str, value: RangeBound) -> datetime:
        if value is None or value == "":
            raise InvalidRangeError(f"{name} is required", {"field": name})
        if isinstance(value, datetime):
            return ensure_utc(value)

        text: Optional[str] = value.strip() if isinstance(value, str) else None
        if not text:
            raise InvalidRangeError(f"{name} is required", {"field": name})
        if text.endswith("Z"):
            text = f"{text[:-1]}+00:00"
        try:
            return ensure_utc(datetime.fromisoformat(text))
        except ValueError as e:
            raise InvalidRangeError(
                f"{name} is not a valid ISO8601 timestamp: {value!r}",
                {"field": name, "value": value},
            ) from e
